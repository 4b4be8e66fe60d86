# ruff: noqa: RUF022
"""
Motif Python SDK.

Public entrypoints:
- :class:`motif_sdk.contracts.asset.MotifItem` (and `MotifAvatar`, `MotifSpace`, `MotifLand`)
- :class:`motif_sdk.contracts.listing.ItemListing` (and the other listing kinds)
- :class:`motif_sdk.verifier.ContentVerifier`
- :mod:`motif_sdk.metadata` (versioned metadata generate / parse / validate)

Value objects validate on construction: bid shares must sum to exactly 100%,
URIs must be `https://`, hashes must be 32 bytes and addresses valid EVM addresses.
"""

from __future__ import annotations

from . import constants
from .contracts import (
    AvatarListing,
    ContractWrapper,
    ItemListing,
    LandListing,
    MotifAsset,
    MotifAvatar,
    MotifItem,
    MotifLand,
    MotifListing,
    MotifSpace,
    SpaceListing,
    TransactionOptions,
    approve_erc20,
    unwrap_eth,
    wrap_eth,
)
from .deployments import (
    CHAIN_ID_TO_NETWORK,
    DEFAULT_DEPLOYMENTS,
    NetworkDeployment,
    chain_id_to_network_name,
    load_deployments,
)
from .errors import (
    AddressResolutionError,
    BidShareSumInvalidError,
    FetchError,
    InsecureUriError,
    InvalidAddressError,
    InvalidHashLengthError,
    InvalidNumberError,
    MetadataSchemaError,
    MotifSdkError,
    ReadOnlyError,
    UnsupportedChainError,
    UnsupportedVersionError,
)
from .fixed_point import DecimalValue, decimal_one_hundred, make_decimal
from .hashing import digest, sha256, sha256_from_hex_string, strip_hex_prefix
from .metadata import (
    MetadataGenerator,
    MetadataParser,
    MetadataValidator,
    generate_metadata,
    parse_metadata,
    supported_versions,
    validate_metadata,
    validate_version,
)
from .models import (
    Ask,
    AvatarData,
    Bid,
    BidShares,
    ContentRecord,
    Eip712Domain,
    Eip712Signature,
    ItemData,
    LandData,
    Listing,
    SpaceData,
)
from .validation import (
    is_sell_on_share_valid,
    normalize_bytes32,
    validate_address,
    validate_bid_shares,
    validate_bytes32,
    validate_uri,
)
from .verifier import ContentVerifier, fetch_and_verify, verify_content_record

__all__ = [
    # Deployments
    "CHAIN_ID_TO_NETWORK",
    "DEFAULT_DEPLOYMENTS",
    "NetworkDeployment",
    "chain_id_to_network_name",
    "load_deployments",
    # Contract wrappers
    "ContractWrapper",
    "TransactionOptions",
    "MotifAsset",
    "MotifItem",
    "MotifAvatar",
    "MotifSpace",
    "MotifLand",
    "MotifListing",
    "ItemListing",
    "AvatarListing",
    "SpaceListing",
    "LandListing",
    "approve_erc20",
    "wrap_eth",
    "unwrap_eth",
    # Verification
    "ContentVerifier",
    "fetch_and_verify",
    "verify_content_record",
    # Errors
    "MotifSdkError",
    "InvalidNumberError",
    "BidShareSumInvalidError",
    "InvalidAddressError",
    "InsecureUriError",
    "InvalidHashLengthError",
    "FetchError",
    "UnsupportedVersionError",
    "MetadataSchemaError",
    "ReadOnlyError",
    "UnsupportedChainError",
    "AddressResolutionError",
    # Models
    "DecimalValue",
    "BidShares",
    "Ask",
    "Bid",
    "ContentRecord",
    "ItemData",
    "AvatarData",
    "SpaceData",
    "LandData",
    "Eip712Domain",
    "Eip712Signature",
    "Listing",
    "decimal_one_hundred",
    "make_decimal",
    # Constants
    "constants",
    # Hashing
    "digest",
    "sha256",
    "sha256_from_hex_string",
    "strip_hex_prefix",
    # Metadata
    "MetadataGenerator",
    "MetadataParser",
    "MetadataValidator",
    "generate_metadata",
    "parse_metadata",
    "supported_versions",
    "validate_metadata",
    "validate_version",
    # Validation
    "is_sell_on_share_valid",
    "normalize_bytes32",
    "validate_address",
    "validate_bid_shares",
    "validate_bytes32",
    "validate_uri",
]
