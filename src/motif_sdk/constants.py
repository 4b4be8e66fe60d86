"""Motif protocol constants shared by the SDK."""

from typing import Final

# ---------------------------------------------------------------------------
# Fixed-point decimal constants
# ---------------------------------------------------------------------------
DECIMAL_PLACES: Final[int] = 18
DECIMAL_SCALE: Final[int] = 10**DECIMAL_PLACES

# Real-world precision kept from float percentages before scaling.
PERCENT_PRECISION_PLACES: Final[int] = 4

ONE_HUNDRED_PERCENT: Final[int] = 100 * DECIMAL_SCALE


# ---------------------------------------------------------------------------
# EVM constants
# ---------------------------------------------------------------------------
BYTES32_SIZE: Final[int] = 32

ZERO_ADDRESS: Final[str] = "0x0000000000000000000000000000000000000000"

# Local ganache chains report chain id 50 but sign EIP-712 payloads with 1.
GANACHE_CHAIN_ID: Final[int] = 50
GANACHE_EIP712_CHAIN_ID: Final[int] = 1

EIP712_DOMAIN_NAME: Final[str] = "Motif"
EIP712_DOMAIN_VERSION: Final[str] = "1"


# ---------------------------------------------------------------------------
# Content verification constants
# ---------------------------------------------------------------------------
SECURE_URI_SCHEME: Final[str] = "https://"

DEFAULT_VERIFY_TIMEOUT: Final[float] = 10.0  # seconds


# ---------------------------------------------------------------------------
# Transaction constants
# ---------------------------------------------------------------------------
DEFAULT_GAS_PADDING_PERCENT: Final[int] = 110
DEFAULT_RECEIPT_TIMEOUT: Final[float] = 120.0  # seconds


# ---------------------------------------------------------------------------
# Metadata constants
# ---------------------------------------------------------------------------
# Version strings look like "<project>-<YYYYMMDD>", e.g. "motif-20210101".
METADATA_VERSION_SEP: Final[str] = "-"
METADATA_SCHEMA_PACKAGE: Final[str] = "motif_sdk.schemas"
