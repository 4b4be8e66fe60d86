"""Wrappers over the Motif token, exchange, listing and ERC-20 contracts (web3)."""

from .asset import MotifAsset, MotifAvatar, MotifItem, MotifLand, MotifSpace
from .base import ContractWrapper, TransactionOptions, send_transaction
from .erc20 import approve_erc20, unwrap_eth, wrap_eth
from .listing import AvatarListing, ItemListing, LandListing, MotifListing, SpaceListing

__all__ = [
    "AvatarListing",
    "ContractWrapper",
    "ItemListing",
    "LandListing",
    "MotifAsset",
    "MotifAvatar",
    "MotifItem",
    "MotifLand",
    "MotifListing",
    "MotifSpace",
    "SpaceListing",
    "TransactionOptions",
    "approve_erc20",
    "send_transaction",
    "unwrap_eth",
    "wrap_eth",
]
