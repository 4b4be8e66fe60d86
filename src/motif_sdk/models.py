from __future__ import annotations

from collections.abc import Iterator, Sequence
from dataclasses import dataclass, field
from typing import ClassVar

from . import constants as const
from .errors import InvalidAddressError, InvalidNumberError
from .fixed_point import DecimalValue, make_decimal
from .validation import (
    is_sell_on_share_valid,
    normalize_bytes32,
    validate_address,
    validate_bid_shares,
    validate_uri,
)

# Type aliases for ABI tuple values
AbiValue = int | str | bytes | bool | Sequence["AbiValue"]
Number = int | float


def _require_uint(value: object, *, name: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidNumberError(f"{name} must be an int, got {type(value).__name__}")
    if value < 0:
        raise InvalidNumberError(f"{name} must be non-negative, got {value}")
    return value


def _require_int(value: object, *, name: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidNumberError(f"{name} must be an int, got {type(value).__name__}")
    return value


def _parse_role_address(address: str, *, role: str) -> str:
    try:
        return validate_address(address)
    except InvalidAddressError as e:
        raise InvalidAddressError(f"{role} address is invalid: {e}") from e


# ---------------------------------------------------------------------------
# Exchange structs
# ---------------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class BidShares:
    """
    Three-way split of sale proceeds: creator, owner and previous owner.

    The shares must sum to exactly 100% (as 10**18-scaled integers).
    """

    creator: DecimalValue
    owner: DecimalValue
    prev_owner: DecimalValue

    def __post_init__(self) -> None:
        validate_bid_shares(self.creator, self.owner, self.prev_owner)

    @classmethod
    def create(cls, creator: Number, owner: Number, prev_owner: Number) -> BidShares:
        """Build bid shares from real-valued percentages, e.g. `BidShares.create(10, 80, 10)`."""
        return cls(
            creator=make_decimal(creator),
            owner=make_decimal(owner),
            prev_owner=make_decimal(prev_owner),
        )

    def as_abi(self) -> tuple[tuple[int], tuple[int], tuple[int]]:
        # Contract struct order is (prevOwner, creator, owner).
        return (self.prev_owner.as_abi(), self.creator.as_abi(), self.owner.as_abi())

    @staticmethod
    def from_abi(value: Sequence[object]) -> BidShares:
        if len(value) != 3:
            raise ValueError("Expected (prevOwner, creator, owner)")
        prev_owner, creator, owner = value
        return BidShares(
            creator=DecimalValue.from_abi(creator),
            owner=DecimalValue.from_abi(owner),
            prev_owner=DecimalValue.from_abi(prev_owner),
        )


@dataclass(frozen=True, slots=True)
class Ask:
    currency: str
    amount: int

    def __post_init__(self) -> None:
        object.__setattr__(self, "currency", validate_address(self.currency))
        _require_uint(self.amount, name="amount")

    @classmethod
    def create(cls, currency: str, amount: int) -> Ask:
        return cls(currency=currency, amount=amount)

    def as_abi(self) -> tuple[int, str]:
        return (self.amount, self.currency)

    @staticmethod
    def from_abi(value: Sequence[object]) -> Ask:
        if len(value) != 2:
            raise ValueError("Expected (amount, currency)")
        amount, currency = value
        return Ask(currency=str(currency), amount=int(amount))  # type: ignore[call-overload]


@dataclass(frozen=True, slots=True)
class Bid:
    """
    A bid on a token.

    `sell_on_share` is the share of the next sale promised to the bidder as previous
    owner; it must not exceed `100% - creator share` of the target token, which is
    checked against live bid shares by `is_sell_on_share_valid`.
    """

    currency: str
    amount: int
    bidder: str
    recipient: str
    sell_on_share: DecimalValue

    def __post_init__(self) -> None:
        object.__setattr__(
            self, "currency", _parse_role_address(self.currency, role="Currency")
        )
        object.__setattr__(self, "bidder", _parse_role_address(self.bidder, role="Bidder"))
        object.__setattr__(
            self, "recipient", _parse_role_address(self.recipient, role="Recipient")
        )
        _require_uint(self.amount, name="amount")
        if not isinstance(self.sell_on_share, DecimalValue):
            raise InvalidNumberError("sell_on_share must be a DecimalValue")

    @classmethod
    def create(
        cls,
        currency: str,
        amount: int,
        bidder: str,
        recipient: str,
        sell_on_share: Number,
    ) -> Bid:
        return cls(
            currency=currency,
            amount=amount,
            bidder=bidder,
            recipient=recipient,
            sell_on_share=make_decimal(sell_on_share),
        )

    def fits_bid_shares(self, bid_shares: BidShares) -> bool:
        return is_sell_on_share_valid(self.sell_on_share, bid_shares.creator)

    def as_abi(self) -> tuple[int, str, str, str, tuple[int]]:
        return (
            self.amount,
            self.currency,
            self.bidder,
            self.recipient,
            self.sell_on_share.as_abi(),
        )

    @staticmethod
    def from_abi(value: Sequence[object]) -> Bid:
        if len(value) != 5:
            raise ValueError("Expected (amount, currency, bidder, recipient, sellOnShare)")
        amount, currency, bidder, recipient, sell_on_share = value
        return Bid(
            currency=str(currency),
            amount=int(amount),  # type: ignore[call-overload]
            bidder=str(bidder),
            recipient=str(recipient),
            sell_on_share=DecimalValue.from_abi(sell_on_share),
        )


# ---------------------------------------------------------------------------
# Content records
# ---------------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class ContentRecord:
    """
    URIs plus the on-chain hashes committing to what they serve.

    Both URIs must be `https://`; hashes are normalised to 32 raw bytes, so they may
    be given as `0x` hex text or bytes.
    """

    KIND: ClassVar[str] = "content"

    token_uri: str
    metadata_uri: str
    content_hash: bytes
    metadata_hash: bytes

    def __post_init__(self) -> None:
        object.__setattr__(self, "content_hash", normalize_bytes32(self.content_hash))
        object.__setattr__(self, "metadata_hash", normalize_bytes32(self.metadata_hash))
        validate_uri(self.token_uri)
        validate_uri(self.metadata_uri)

    def verification_pairs(self) -> Iterator[tuple[str, bytes]]:
        """Yield each `(uri, expected_hash)` pair that must verify for this record."""
        yield self.token_uri, self.content_hash
        yield self.metadata_uri, self.metadata_hash

    def as_abi(self) -> tuple[AbiValue, ...]:
        return (self.token_uri, self.metadata_uri, self.content_hash, self.metadata_hash)


@dataclass(frozen=True, slots=True)
class ItemData(ContentRecord):
    KIND: ClassVar[str] = "item"


@dataclass(frozen=True, slots=True)
class AvatarData(ContentRecord):
    KIND: ClassVar[str] = "avatar"

    is_default: bool = False

    def as_abi(self) -> tuple[AbiValue, ...]:
        return (*ContentRecord.as_abi(self), bool(self.is_default))


@dataclass(frozen=True, slots=True)
class SpaceData(ContentRecord):
    KIND: ClassVar[str] = "space"

    is_public: bool = False
    lands: tuple[int, ...] = field(default_factory=tuple)
    pin: str = ""

    def __post_init__(self) -> None:
        ContentRecord.__post_init__(self)
        lands = tuple(_require_uint(land, name="land id") for land in self.lands)
        object.__setattr__(self, "lands", lands)

    def as_abi(self) -> tuple[AbiValue, ...]:
        return (
            *ContentRecord.as_abi(self),
            bool(self.is_public),
            list(self.lands),
            self.pin,
        )


@dataclass(frozen=True, slots=True)
class LandData(ContentRecord):
    KIND: ClassVar[str] = "land"

    x_coordinate: int = 0
    y_coordinate: int = 0

    def __post_init__(self) -> None:
        ContentRecord.__post_init__(self)
        _require_int(self.x_coordinate, name="x_coordinate")
        _require_int(self.y_coordinate, name="y_coordinate")

    def as_abi(self) -> tuple[AbiValue, ...]:
        return (*ContentRecord.as_abi(self), self.x_coordinate, self.y_coordinate)


# ---------------------------------------------------------------------------
# EIP-712
# ---------------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class Eip712Domain:
    name: str
    version: str
    chain_id: int
    verifying_contract: str

    @classmethod
    def for_contract(cls, *, chain_id: int, verifying_contract: str) -> Eip712Domain:
        # Local ganache chains sign with chain id 1.
        if chain_id == const.GANACHE_CHAIN_ID:
            chain_id = const.GANACHE_EIP712_CHAIN_ID
        return cls(
            name=const.EIP712_DOMAIN_NAME,
            version=const.EIP712_DOMAIN_VERSION,
            chain_id=chain_id,
            verifying_contract=verifying_contract,
        )

    def as_dict(self) -> dict[str, object]:
        return {
            "name": self.name,
            "version": self.version,
            "chainId": self.chain_id,
            "verifyingContract": self.verifying_contract,
        }


@dataclass(frozen=True, slots=True)
class Eip712Signature:
    deadline: int
    v: int
    r: bytes
    s: bytes

    def __post_init__(self) -> None:
        _require_uint(self.deadline, name="deadline")
        _require_uint(self.v, name="v")
        object.__setattr__(self, "r", normalize_bytes32(self.r))
        object.__setattr__(self, "s", normalize_bytes32(self.s))

    def as_abi(self) -> tuple[int, int, bytes, bytes]:
        return (self.deadline, self.v, self.r, self.s)


# ---------------------------------------------------------------------------
# Listings
# ---------------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class Listing:
    approved: bool
    amount: int
    starts_at: int
    duration: int
    first_bid_time: int
    list_price: int
    list_type: int
    intermediary_fee_percentage: int
    token_owner: str
    bidder: str
    intermediary: str
    list_currency: str

    @property
    def is_native_currency(self) -> bool:
        return self.list_currency == const.ZERO_ADDRESS

    @staticmethod
    def from_abi(value: Sequence[object]) -> Listing:
        if len(value) != 12:
            raise ValueError(f"Expected 12 listing fields, got {len(value)}")
        (
            approved,
            amount,
            starts_at,
            duration,
            first_bid_time,
            list_price,
            list_type,
            fee_percentage,
            token_owner,
            bidder,
            intermediary,
            list_currency,
        ) = value
        return Listing(
            approved=bool(approved),
            amount=int(amount),  # type: ignore[call-overload]
            starts_at=int(starts_at),  # type: ignore[call-overload]
            duration=int(duration),  # type: ignore[call-overload]
            first_bid_time=int(first_bid_time),  # type: ignore[call-overload]
            list_price=int(list_price),  # type: ignore[call-overload]
            list_type=int(list_type),  # type: ignore[call-overload]
            intermediary_fee_percentage=int(fee_percentage),  # type: ignore[call-overload]
            token_owner=str(token_owner),
            bidder=str(bidder),
            intermediary=str(intermediary),
            list_currency=str(list_currency),
        )
