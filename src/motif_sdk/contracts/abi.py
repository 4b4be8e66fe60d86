"""
ABI fragments for the Motif token, exchange, listing and ERC-20 contracts.

Only the functions and events this SDK calls are described. Struct layouts follow
the deployed contracts:

- `Decimal.D256`: `(uint256 value)`
- `BidShares`: `(D256 prevOwner, D256 creator, D256 owner)`
- `Ask`: `(uint256 amount, address currency)`
- `Bid`: `(uint256 amount, address currency, address bidder, address recipient, D256 sellOnShare)`
"""

from __future__ import annotations

from typing import Any, Final

AbiEntry = dict[str, Any]


def _param(name: str, type_: str, components: list[AbiEntry] | None = None) -> AbiEntry:
    out: AbiEntry = {"name": name, "type": type_}
    if components is not None:
        out["components"] = components
    return out


def _fn(
    name: str,
    inputs: list[AbiEntry],
    outputs: list[AbiEntry] | None = None,
    *,
    mutability: str = "view",
) -> AbiEntry:
    return {
        "type": "function",
        "name": name,
        "inputs": inputs,
        "outputs": outputs or [],
        "stateMutability": mutability,
    }


def _write(name: str, inputs: list[AbiEntry], *, payable: bool = False) -> AbiEntry:
    return _fn(name, inputs, mutability="payable" if payable else "nonpayable")


def _event(name: str, inputs: list[tuple[str, str, bool]]) -> AbiEntry:
    return {
        "type": "event",
        "name": name,
        "anonymous": False,
        "inputs": [
            {"name": n, "type": t, "indexed": indexed} for n, t, indexed in inputs
        ],
    }


# ---------------------------------------------------------------------------
# Structs
# ---------------------------------------------------------------------------
_TOKEN_ID = _param("tokenId", "uint256")

_D256: Final[list[AbiEntry]] = [_param("value", "uint256")]

_BID_SHARES: Final[list[AbiEntry]] = [
    _param("prevOwner", "tuple", _D256),
    _param("creator", "tuple", _D256),
    _param("owner", "tuple", _D256),
]

_ASK: Final[list[AbiEntry]] = [
    _param("amount", "uint256"),
    _param("currency", "address"),
]

_BID: Final[list[AbiEntry]] = [
    _param("amount", "uint256"),
    _param("currency", "address"),
    _param("bidder", "address"),
    _param("recipient", "address"),
    _param("sellOnShare", "tuple", _D256),
]

_EIP712_SIGNATURE: Final[list[AbiEntry]] = [
    _param("deadline", "uint256"),
    _param("v", "uint8"),
    _param("r", "bytes32"),
    _param("s", "bytes32"),
]

_CONTENT_DATA: Final[list[AbiEntry]] = [
    _param("tokenURI", "string"),
    _param("metadataURI", "string"),
    _param("contentHash", "bytes32"),
    _param("metadataHash", "bytes32"),
]

ITEM_DATA: Final[list[AbiEntry]] = list(_CONTENT_DATA)
AVATAR_DATA: Final[list[AbiEntry]] = [*_CONTENT_DATA, _param("isDefault", "bool")]
SPACE_DATA: Final[list[AbiEntry]] = [
    *_CONTENT_DATA,
    _param("isPublic", "bool"),
    _param("lands", "uint256[]"),
    _param("pin", "string"),
]
LAND_DATA: Final[list[AbiEntry]] = [
    *_CONTENT_DATA,
    _param("xCoordinate", "int256"),
    _param("yCoordinate", "int256"),
]


# ---------------------------------------------------------------------------
# Token contracts
# ---------------------------------------------------------------------------
def token_abi(data_components: list[AbiEntry]) -> list[AbiEntry]:
    """Functions shared by every Motif token contract, with its kind's data struct."""
    data = _param("data", "tuple", data_components)
    bid_shares = _param("bidShares", "tuple", _BID_SHARES)
    sig = _param("sig", "tuple", _EIP712_SIGNATURE)
    return [
        # Motif reads
        _fn("tokenContentHashes", [_TOKEN_ID], [_param("", "bytes32")]),
        _fn("tokenMetadataHashes", [_TOKEN_ID], [_param("", "bytes32")]),
        _fn("tokenURI", [_TOKEN_ID], [_param("", "string")]),
        _fn("tokenMetadataURI", [_TOKEN_ID], [_param("", "string")]),
        _fn("tokenCreators", [_TOKEN_ID], [_param("", "address")]),
        _fn(
            "permitNonces",
            [_param("owner", "address"), _TOKEN_ID],
            [_param("", "uint256")],
        ),
        _fn("mintWithSigNonces", [_param("creator", "address")], [_param("", "uint256")]),
        # Motif writes
        _write("updateTokenURI", [_TOKEN_ID, _param("tokenURI", "string")]),
        _write("updateTokenMetadataURI", [_TOKEN_ID, _param("metadataURI", "string")]),
        _write("mint", [data, bid_shares]),
        _write("mintWithSig", [_param("creator", "address"), data, bid_shares, sig]),
        _write("setAsk", [_TOKEN_ID, _param("ask", "tuple", _ASK)]),
        _write("setBid", [_TOKEN_ID, _param("bid", "tuple", _BID)]),
        _write("removeAsk", [_TOKEN_ID]),
        _write("removeBid", [_TOKEN_ID]),
        _write("acceptBid", [_TOKEN_ID, _param("bid", "tuple", _BID)]),
        _write("permit", [_param("spender", "address"), _TOKEN_ID, sig]),
        _write("revokeApproval", [_TOKEN_ID]),
        _write("burn", [_TOKEN_ID]),
        # ERC-721 reads
        _fn("balanceOf", [_param("owner", "address")], [_param("", "uint256")]),
        _fn("ownerOf", [_TOKEN_ID], [_param("", "address")]),
        _fn(
            "tokenOfOwnerByIndex",
            [_param("owner", "address"), _param("index", "uint256")],
            [_param("", "uint256")],
        ),
        _fn("totalSupply", [], [_param("", "uint256")]),
        _fn("tokenByIndex", [_param("index", "uint256")], [_param("", "uint256")]),
        _fn("getApproved", [_TOKEN_ID], [_param("", "address")]),
        _fn(
            "isApprovedForAll",
            [_param("owner", "address"), _param("operator", "address")],
            [_param("", "bool")],
        ),
        # ERC-721 writes
        _write("approve", [_param("to", "address"), _TOKEN_ID]),
        _write(
            "setApprovalForAll",
            [_param("operator", "address"), _param("approved", "bool")],
        ),
        _write(
            "transferFrom",
            [_param("from", "address"), _param("to", "address"), _TOKEN_ID],
        ),
        _write(
            "safeTransferFrom",
            [_param("from", "address"), _param("to", "address"), _TOKEN_ID],
        ),
    ]


_TOKEN_CONTRACT_ADDRESSES = _fn(
    "tokenContractAddresses", [_TOKEN_ID], [_param("", "address")]
)

ITEM_ABI: Final[list[AbiEntry]] = [
    *token_abi(ITEM_DATA),
    _TOKEN_CONTRACT_ADDRESSES,
    _write(
        "mintMultiple",
        [
            _param("data", "tuple[]", ITEM_DATA),
            _param("bidShares", "tuple[]", _BID_SHARES),
        ],
    ),
]

AVATAR_ABI: Final[list[AbiEntry]] = [
    *token_abi(AVATAR_DATA),
    _TOKEN_CONTRACT_ADDRESSES,
    _fn("tokenDefault", [_TOKEN_ID], [_param("", "bool")]),
    _write("updateTokenDefault", [_TOKEN_ID, _param("isDefault", "bool")]),
]

SPACE_ABI: Final[list[AbiEntry]] = [
    *token_abi(SPACE_DATA),
    _fn("isPublic", [_TOKEN_ID], [_param("", "bool")]),
    _fn("lands", [_TOKEN_ID], [_param("", "uint256[]")]),
]

LAND_ABI: Final[list[AbiEntry]] = [
    *token_abi(LAND_DATA),
    _fn("xCoordinate", [_TOKEN_ID], [_param("", "int256")]),
    _fn("yCoordinate", [_TOKEN_ID], [_param("", "int256")]),
]


# ---------------------------------------------------------------------------
# Exchange contracts (identical interface for every kind)
# ---------------------------------------------------------------------------
EXCHANGE_ABI: Final[list[AbiEntry]] = [
    _fn("bidSharesForToken", [_TOKEN_ID], [_param("", "tuple", _BID_SHARES)]),
    _fn("currentAskForToken", [_TOKEN_ID], [_param("", "tuple", _ASK)]),
    _fn(
        "bidForTokenBidder",
        [_TOKEN_ID, _param("bidder", "address")],
        [_param("", "tuple", _BID)],
    ),
    _fn(
        "isValidBid",
        [_TOKEN_ID, _param("bidAmount", "uint256")],
        [_param("", "bool")],
    ),
]


# ---------------------------------------------------------------------------
# Listing contracts (identical interface for every kind)
# ---------------------------------------------------------------------------
_LISTING_ID = _param("listingId", "uint256")

LISTING_FIELDS: Final[list[AbiEntry]] = [
    _param("approved", "bool"),
    _param("amount", "uint256"),
    _param("startsAt", "uint256"),
    _param("duration", "uint256"),
    _param("firstBidTime", "uint256"),
    _param("listPrice", "uint256"),
    _param("listType", "uint8"),
    _param("intermediaryFeePercentage", "uint8"),
    _param("tokenOwner", "address"),
    _param("bidder", "address"),
    _param("intermediary", "address"),
    _param("listCurrency", "address"),
]

LISTING_ABI: Final[list[AbiEntry]] = [
    _fn("listings", [_LISTING_ID], list(LISTING_FIELDS)),
    _write(
        "createListing",
        [
            _param("tokenId", "uint256"),
            _param("tokenContract", "address"),
            _param("startsAt", "uint256"),
            _param("duration", "uint256"),
            _param("listPrice", "uint256"),
            _param("listType", "uint8"),
            _param("intermediary", "address"),
            _param("intermediaryFeePercentages", "uint8"),
            _param("listCurrency", "address"),
        ],
    ),
    _write("setListingApproval", [_LISTING_ID, _param("approved", "bool")]),
    _write(
        "setListingDropApproval",
        [_LISTING_ID, _param("approved", "bool"), _param("startsAt", "uint256")],
    ),
    _write("setListingListPrice", [_LISTING_ID, _param("listPrice", "uint256")]),
    _write("createBid", [_LISTING_ID, _param("amount", "uint256")], payable=True),
    _write(
        "endFixedPriceListing",
        [_LISTING_ID, _param("amount", "uint256")],
        payable=True,
    ),
    _write("endListing", [_LISTING_ID]),
    _write("cancelListing", [_LISTING_ID]),
    _event(
        "ListingCreated",
        [
            ("listingId", "uint256", True),
            ("tokenId", "uint256", True),
            ("tokenContract", "address", True),
            ("startsAt", "uint256", False),
            ("duration", "uint256", False),
            ("listPrice", "uint256", False),
            ("listType", "uint8", False),
            ("tokenOwner", "address", False),
            ("intermediary", "address", False),
            ("intermediaryFeePercentage", "uint8", False),
            ("listCurrency", "address", False),
        ],
    ),
    _event(
        "ListingBid",
        [
            ("listingId", "uint256", True),
            ("tokenId", "uint256", True),
            ("tokenContract", "address", True),
            ("sender", "address", False),
            ("value", "uint256", False),
            ("firstBid", "bool", False),
            ("extended", "bool", False),
        ],
    ),
    _event(
        "ListingEnded",
        [
            ("listingId", "uint256", True),
            ("tokenId", "uint256", True),
            ("tokenContract", "address", True),
            ("tokenOwner", "address", False),
            ("intermediary", "address", False),
            ("winner", "address", False),
            ("amount", "uint256", False),
            ("intermediaryFee", "uint256", False),
            ("listCurrency", "address", False),
        ],
    ),
    _event(
        "ListingCanceled",
        [
            ("listingId", "uint256", True),
            ("tokenId", "uint256", True),
            ("tokenContract", "address", True),
            ("tokenOwner", "address", False),
        ],
    ),
]

LISTING_EVENT_NAMES: Final[tuple[str, ...]] = tuple(
    entry["name"] for entry in LISTING_ABI if entry["type"] == "event"
)


# ---------------------------------------------------------------------------
# ERC-20 / WETH
# ---------------------------------------------------------------------------
ERC20_ABI: Final[list[AbiEntry]] = [
    _fn(
        "approve",
        [_param("spender", "address"), _param("amount", "uint256")],
        [_param("", "bool")],
        mutability="nonpayable",
    ),
]

WETH_ABI: Final[list[AbiEntry]] = [
    _write("deposit", [], payable=True),
    _write("withdraw", [_param("wad", "uint256")]),
]
