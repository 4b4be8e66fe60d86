"""
Unit tests for src.motif_sdk.hashing module.

Tests cover:
- SHA-256 digests as raw bytes and 0x hex
- Digesting the bytes behind a hex string
- Hex prefix helpers
"""

import pytest

from motif_sdk import digest, sha256, sha256_from_hex_string, strip_hex_prefix
from motif_sdk.hashing import to_hex

EMPTY_SHA256 = "0xe3b0c44298fc1c149afbf4c8996fb92427ae41e4649b934ca495991b7852b855"
ABC_SHA256 = "0xba7816bf8f01cfea414140de5dae2223b00361a396177a9cb410ff61f20015ad"


class TestDigest:
    """Tests for sha256 and digest."""

    def test_sha256_returns_32_bytes(self) -> None:
        """Test the raw digest length."""
        assert len(sha256(b"anything")) == 32

    def test_known_vectors(self) -> None:
        """Test digests of known inputs."""
        assert digest(b"") == EMPTY_SHA256
        assert digest(b"abc") == ABC_SHA256

    def test_digest_is_lower_case_hex(self) -> None:
        """Test the 0x prefix and lower-case digits."""
        value = digest(b"Motif")
        assert value.startswith("0x")
        assert value == value.lower()
        assert len(value) == 66

    def test_digest_matches_raw_bytes(self) -> None:
        """Test digest is the hex form of sha256."""
        assert digest(b"abc") == to_hex(sha256(b"abc"))

    def test_accepts_bytearray(self) -> None:
        """Test byte-like inputs digest the same as bytes."""
        assert digest(bytearray(b"abc")) == ABC_SHA256

    def test_deterministic_and_bit_sensitive(self) -> None:
        """Test equal inputs digest equally and a one-bit flip changes the digest."""
        data = b"motif content bytes"
        flipped = bytes([data[0] ^ 1]) + data[1:]
        assert digest(data) == digest(data)
        assert digest(flipped) != digest(data)


class TestSha256FromHexString:
    """Tests for digesting hex-encoded bytes."""

    def test_digests_decoded_bytes(self) -> None:
        """Test 0x616263 digests as b'abc'."""
        assert sha256_from_hex_string("0x616263") == ABC_SHA256

    def test_upper_case_hex(self) -> None:
        """Test hex digit case does not matter."""
        assert sha256_from_hex_string("0xDEADBEEF") == sha256_from_hex_string("0xdeadbeef")

    @pytest.mark.parametrize("bad", ["616263", "0xzz", "0x616", "", "hello"])
    def test_rejects_invalid_hex(self, bad: str) -> None:
        """Test missing prefix, bad digits and odd lengths raise ValueError."""
        with pytest.raises(ValueError):
            sha256_from_hex_string(bad)


class TestHexPrefix:
    """Tests for strip_hex_prefix."""

    def test_strips_prefix(self) -> None:
        """Test a leading 0x is removed."""
        assert strip_hex_prefix("0xabcd") == "abcd"

    def test_leaves_unprefixed_input(self) -> None:
        """Test input without 0x is returned unchanged."""
        assert strip_hex_prefix("abcd") == "abcd"

    def test_only_strips_once(self) -> None:
        """Test only the first prefix is removed."""
        assert strip_hex_prefix("0x0xab") == "0xab"
