from __future__ import annotations

import logging
from collections.abc import Sequence

from eth_utils import (
    decode_hex,
    is_0x_prefixed,
    is_address,
    is_checksum_address,
    is_checksum_formatted_address,
    is_hex,
    to_checksum_address,
)

from . import constants as const
from .errors import (
    BidShareSumInvalidError,
    InsecureUriError,
    InvalidAddressError,
    InvalidHashLengthError,
)
from .fixed_point import DecimalValue

logger = logging.getLogger(__name__)

Bytes32Like = str | bytes | bytearray | memoryview | Sequence[int]


def validate_bid_shares(
    creator: DecimalValue, owner: DecimalValue, prev_owner: DecimalValue
) -> None:
    """
    Require creator + owner + prev_owner == 100% exactly, in the 10**18 scaled domain.

    There is no tolerance: fixed-point addition is exact, so any difference is an error.
    Raises `BidShareSumInvalidError` carrying the actual and expected scaled sums.
    """
    total = creator.value + owner.value + prev_owner.value
    if total != const.ONE_HUNDRED_PERCENT:
        raise BidShareSumInvalidError(actual=total, expected=const.ONE_HUNDRED_PERCENT)


def is_sell_on_share_valid(sell_on_share: DecimalValue, creator_share: DecimalValue) -> bool:
    """Return True if a bid's sell-on share fits in what the creator share leaves over."""
    return sell_on_share.value <= const.ONE_HUNDRED_PERCENT - creator_share.value


def validate_address(address: str) -> str:
    """
    Validate an EVM account address and return its EIP-55 checksummed form.

    Lower- or upper-case input is accepted with a warning; mixed-case input must
    carry a correct checksum.
    """
    if not isinstance(address, str) or not is_address(address):
        raise InvalidAddressError(f"{address!r} is not a valid address.")
    if is_checksum_formatted_address(address) and not is_checksum_address(address):
        raise InvalidAddressError(f"{address!r} has an invalid checksum.")

    checksummed = to_checksum_address(address)
    if address != checksummed:
        logger.warning("%s is not checksummed.", address)
    return checksummed


def validate_uri(uri: str) -> None:
    """Require `uri` to begin with the literal scheme `https://`."""
    if not isinstance(uri, str) or not uri.startswith(const.SECURE_URI_SCHEME):
        raise InsecureUriError(f"{uri} must begin with `{const.SECURE_URI_SCHEME}`")


def normalize_bytes32(value: Bytes32Like) -> bytes:
    """
    Normalise a bytes32 value into exactly 32 raw bytes.

    Text must be `0x`-prefixed hex; anything else must already be byte-like
    (or a sequence of ints).
    """
    if isinstance(value, str):
        if not (is_0x_prefixed(value) and is_hex(value)):
            raise InvalidHashLengthError(f"{value} is not a 0x prefixed 32 bytes hex string")
        digits = value[2:]
        if len(digits) != const.BYTES32_SIZE * 2:
            raise InvalidHashLengthError(f"{value} is not a 0x prefixed 32 bytes hex string")
        return decode_hex(value)

    if isinstance(value, (bytes, bytearray, memoryview)):
        raw = bytes(value)
    elif isinstance(value, Sequence):
        try:
            raw = bytes(value)
        except (TypeError, ValueError) as e:
            raise InvalidHashLengthError("value is not a length 32 byte array") from e
    else:
        raise InvalidHashLengthError(
            f"Expected hex text or bytes, got {type(value).__name__}"
        )

    if len(raw) != const.BYTES32_SIZE:
        raise InvalidHashLengthError(
            f"value is not a length 32 byte array (got {len(raw)} bytes)"
        )
    return raw


def validate_bytes32(value: Bytes32Like) -> None:
    """Raise `InvalidHashLengthError` unless `value` is exactly 32 bytes once normalised."""
    normalize_bytes32(value)
