from __future__ import annotations

import hashlib

from eth_utils import decode_hex, is_0x_prefixed, is_hex

HEX_PREFIX = "0x"


def sha256(data: bytes) -> bytes:
    """
    SHA-256 digest.
    """
    h = hashlib.sha256()
    h.update(data)
    return h.digest()


def digest(data: bytes) -> str:
    """
    Content digest used for on-chain content and metadata hashes.

    Returns the SHA-256 of `data` as lower-case hex with a `0x` prefix, e.g.
    `digest(b"")` == "0xe3b0c44298fc1c149afbf4c8996fb92427ae41e4649b934ca495991b7852b855".
    """
    return HEX_PREFIX + sha256(bytes(data)).hex()


def sha256_from_hex_string(data: str) -> str:
    """Digest the bytes encoded by a `0x`-prefixed hex string."""
    if not (isinstance(data, str) and is_0x_prefixed(data) and is_hex(data)):
        raise ValueError(f"{data} is not valid 0x prefixed hex")
    if len(data) % 2:
        raise ValueError(f"{data} has an odd number of hex digits")
    return digest(decode_hex(data))


def strip_hex_prefix(value: str) -> str:
    return value[2:] if value[:2] == HEX_PREFIX else value


def to_hex(data: bytes) -> str:
    """Lower-case `0x` hex for raw bytes."""
    return HEX_PREFIX + bytes(data).hex()
