"""
Unit tests for src.motif_sdk.models module.

Tests cover:
- BidShares construction, ABI order and the 100% invariant
- Ask / Bid construction, address canonicalisation and role-prefixed errors
- Content records for every token kind
- EIP-712 domain and signature structs
- Listing decoding
"""

from dataclasses import FrozenInstanceError

import pytest

from motif_sdk import (
    Ask,
    AvatarData,
    Bid,
    BidShares,
    BidShareSumInvalidError,
    ContentRecord,
    DecimalValue,
    Eip712Domain,
    Eip712Signature,
    InsecureUriError,
    InvalidAddressError,
    InvalidHashLengthError,
    InvalidNumberError,
    ItemData,
    LandData,
    Listing,
    SpaceData,
    constants,
    make_decimal,
)
from tests.helpers.factories import (
    BIDDER,
    CONTENT_HASH,
    CONTENT_URI,
    CREATOR,
    METADATA_HASH,
    METADATA_URI,
    SCALE,
    TOKEN_ADDRESS,
    VITALIK,
    VITALIK_LOWER,
    create_avatar_data,
    create_bid_shares,
    create_item_data,
    create_land_data,
    create_space_data,
    listing_abi,
)

# ================================================================
# BidShares Tests
# ================================================================


class TestBidShares:
    """Tests for the creator / owner / previous owner split."""

    def test_create_from_percentages(self) -> None:
        """Test create() converts every share with make_decimal."""
        shares = BidShares.create(creator=15, owner=80, prev_owner=5)
        assert shares.creator == make_decimal(15)
        assert shares.owner == make_decimal(80)
        assert shares.prev_owner == make_decimal(5)

    def test_as_abi_uses_contract_order(self) -> None:
        """Test the struct is encoded as (prevOwner, creator, owner)."""
        assert create_bid_shares().as_abi() == (
            (5 * SCALE,),
            (15 * SCALE,),
            (80 * SCALE,),
        )

    def test_from_abi_reverses_as_abi(self) -> None:
        """Test decoding the contract struct restores the named shares."""
        shares = create_bid_shares()
        assert BidShares.from_abi(shares.as_abi()) == shares

    def test_invalid_sum_raises_on_construction(self) -> None:
        """Test no BidShares exists with a sum other than 100%."""
        with pytest.raises(BidShareSumInvalidError):
            BidShares.create(creator=10, owner=80, prev_owner=5)

    def test_direct_construction_is_validated(self) -> None:
        """Test __post_init__ validates scaled values too."""
        with pytest.raises(BidShareSumInvalidError):
            BidShares(DecimalValue(1), DecimalValue(2), DecimalValue(3))

    def test_is_frozen(self) -> None:
        """Test BidShares is immutable."""
        shares = create_bid_shares()
        with pytest.raises(FrozenInstanceError):
            shares.creator = make_decimal(0)  # type: ignore[misc]

    def test_from_abi_wrong_arity(self) -> None:
        """Test a malformed struct is rejected."""
        with pytest.raises(ValueError):
            BidShares.from_abi(((1,), (2,)))


# ================================================================
# Ask / Bid Tests
# ================================================================


class TestAsk:
    """Tests for Ask."""

    def test_create_canonicalises_currency(self) -> None:
        """Test the currency address is checksummed."""
        ask = Ask.create(VITALIK_LOWER, 100)
        assert ask.currency == VITALIK
        assert ask.amount == 100

    def test_as_abi_order(self) -> None:
        """Test the struct is encoded as (amount, currency)."""
        assert Ask.create(VITALIK, 100).as_abi() == (100, VITALIK)

    def test_from_abi(self) -> None:
        """Test decoding the contract struct."""
        assert Ask.from_abi((100, VITALIK)) == Ask.create(VITALIK, 100)

    def test_invalid_currency(self) -> None:
        """Test an invalid currency raises InvalidAddressError."""
        with pytest.raises(InvalidAddressError):
            Ask.create("0x123", 1)

    @pytest.mark.parametrize("amount", [-1, 1.5, True])
    def test_invalid_amount(self, amount: object) -> None:
        """Test amounts must be non-negative ints."""
        with pytest.raises(InvalidNumberError):
            Ask.create(VITALIK, amount)  # type: ignore[arg-type]


class TestBid:
    """Tests for Bid."""

    def test_create(self) -> None:
        """Test create() validates addresses and converts the sell-on share."""
        bid = Bid.create(VITALIK_LOWER, 100, BIDDER, CREATOR, 10)
        assert bid.currency == VITALIK
        assert bid.bidder == BIDDER
        assert bid.recipient == CREATOR
        assert bid.sell_on_share == make_decimal(10)

    def test_as_abi_order(self) -> None:
        """Test the struct is encoded as (amount, currency, bidder, recipient, (share,))."""
        bid = Bid.create(VITALIK, 100, BIDDER, CREATOR, 10)
        assert bid.as_abi() == (100, VITALIK, BIDDER, CREATOR, (10 * SCALE,))

    def test_from_abi(self) -> None:
        """Test decoding the contract struct."""
        bid = Bid.create(VITALIK, 100, BIDDER, CREATOR, 10)
        assert Bid.from_abi(bid.as_abi()) == bid

    @pytest.mark.parametrize(
        ("field", "prefix"),
        [
            ("currency", "Currency address is invalid"),
            ("bidder", "Bidder address is invalid"),
            ("recipient", "Recipient address is invalid"),
        ],
    )
    def test_invalid_address_is_prefixed_with_role(self, field: str, prefix: str) -> None:
        """Test each address failure names the offending role."""
        kwargs = {
            "currency": VITALIK,
            "amount": 1,
            "bidder": BIDDER,
            "recipient": CREATOR,
            "sell_on_share": 0,
        }
        kwargs[field] = "0xnope"
        with pytest.raises(InvalidAddressError, match=prefix):
            Bid.create(**kwargs)  # type: ignore[arg-type]

    def test_negative_sell_on_share(self) -> None:
        """Test a negative sell-on share is rejected."""
        with pytest.raises(InvalidNumberError):
            Bid.create(VITALIK, 1, BIDDER, CREATOR, -1)

    def test_fits_bid_shares(self) -> None:
        """Test the sell-on share is bounded by 100% minus the creator share."""
        shares = create_bid_shares()  # creator 15%
        assert Bid.create(VITALIK, 1, BIDDER, CREATOR, 85).fits_bid_shares(shares)
        assert not Bid.create(VITALIK, 1, BIDDER, CREATOR, 85.0001).fits_bid_shares(
            shares
        )


# ================================================================
# Content Record Tests
# ================================================================


class TestContentRecords:
    """Tests for ItemData, AvatarData, SpaceData and LandData."""

    def test_item_data_normalises_hex_hashes(self) -> None:
        """Test hex hashes become 32 raw bytes."""
        data = create_item_data()
        assert data.content_hash == CONTENT_HASH
        assert data.metadata_hash == METADATA_HASH

    def test_item_data_as_abi(self) -> None:
        """Test the item struct order."""
        assert create_item_data().as_abi() == (
            CONTENT_URI,
            METADATA_URI,
            CONTENT_HASH,
            METADATA_HASH,
        )

    def test_verification_pairs(self) -> None:
        """Test content is verified before metadata."""
        assert list(create_item_data().verification_pairs()) == [
            (CONTENT_URI, CONTENT_HASH),
            (METADATA_URI, METADATA_HASH),
        ]

    @pytest.mark.parametrize("field", ["token_uri", "metadata_uri"])
    def test_insecure_uris_rejected(self, field: str) -> None:
        """Test both URIs must be https."""
        with pytest.raises(InsecureUriError):
            create_item_data(**{field: "http://example.com"})

    @pytest.mark.parametrize("field", ["content_hash", "metadata_hash"])
    def test_short_hashes_rejected(self, field: str) -> None:
        """Test both hashes must be 32 bytes."""
        with pytest.raises(InvalidHashLengthError):
            create_item_data(**{field: b"\x00" * 31})

    def test_avatar_data(self) -> None:
        """Test the avatar struct appends isDefault."""
        data = create_avatar_data()
        assert isinstance(data, ContentRecord)
        assert data.as_abi()[-1] is True
        plain = AvatarData(CONTENT_URI, METADATA_URI, CONTENT_HASH, METADATA_HASH)
        assert plain.is_default is False

    def test_space_data(self) -> None:
        """Test the space struct appends isPublic, lands and pin."""
        data = create_space_data(lands=[4, 5])
        assert data.lands == (4, 5)
        assert data.as_abi()[4:] == (True, [4, 5], "1234")

    def test_space_data_rejects_negative_land_ids(self) -> None:
        """Test land ids are uint256."""
        with pytest.raises(InvalidNumberError):
            create_space_data(lands=(-1,))

    def test_land_data(self) -> None:
        """Test the land struct appends signed coordinates."""
        data = create_land_data()
        assert data.as_abi()[4:] == (-4, 12)

    def test_land_data_rejects_non_int_coordinates(self) -> None:
        """Test coordinates must be ints."""
        with pytest.raises(InvalidNumberError):
            create_land_data(x_coordinate=1.5)

    def test_kinds(self) -> None:
        """Test each record type names its kind."""
        assert ItemData.KIND == "item"
        assert AvatarData.KIND == "avatar"
        assert SpaceData.KIND == "space"
        assert LandData.KIND == "land"


# ================================================================
# EIP-712 Tests
# ================================================================


class TestEip712:
    """Tests for the EIP-712 domain and signature structs."""

    def test_domain_for_contract(self) -> None:
        """Test the Motif domain name and version."""
        domain = Eip712Domain.for_contract(chain_id=7018, verifying_contract=TOKEN_ADDRESS)
        assert domain.as_dict() == {
            "name": "Motif",
            "version": "1",
            "chainId": 7018,
            "verifyingContract": TOKEN_ADDRESS,
        }

    def test_ganache_chain_id_is_reported_as_1(self) -> None:
        """Test local chain id 50 signs as chain id 1."""
        domain = Eip712Domain.for_contract(
            chain_id=constants.GANACHE_CHAIN_ID, verifying_contract=TOKEN_ADDRESS
        )
        assert domain.chain_id == 1

    def test_signature_as_abi(self) -> None:
        """Test the signature struct order and r/s normalisation."""
        sig = Eip712Signature(deadline=10, v=27, r="0x" + "01" * 32, s=b"\x02" * 32)
        assert sig.as_abi() == (10, 27, b"\x01" * 32, b"\x02" * 32)

    def test_signature_rejects_short_r(self) -> None:
        """Test r must be 32 bytes."""
        with pytest.raises(InvalidHashLengthError):
            Eip712Signature(deadline=10, v=27, r=b"\x01", s=b"\x02" * 32)


# ================================================================
# Listing Tests
# ================================================================


class TestListing:
    """Tests for decoding listing structs."""

    def test_from_abi(self) -> None:
        """Test every field is decoded in contract order."""
        listing = Listing.from_abi(listing_abi())
        assert listing.approved is True
        assert listing.starts_at == 1_700_000_000
        assert listing.duration == 86_400
        assert listing.list_price == 10**18
        assert listing.list_type == 1
        assert listing.intermediary_fee_percentage == 5
        assert listing.token_owner == CREATOR
        assert listing.intermediary == VITALIK
        assert listing.is_native_currency

    def test_erc20_currency(self) -> None:
        """Test listings in a token currency are not native."""
        assert not Listing.from_abi(listing_abi(list_currency=VITALIK)).is_native_currency

    def test_wrong_field_count(self) -> None:
        """Test truncated structs are rejected."""
        with pytest.raises(ValueError, match="12 listing fields"):
            Listing.from_abi(listing_abi()[:-1])
