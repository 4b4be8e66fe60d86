from __future__ import annotations

from collections.abc import Mapping
from typing import Any, ClassVar

from eth_account.signers.local import LocalAccount
from eth_utils import is_same_address
from web3 import Web3
from web3.exceptions import MismatchedABI

from ..deployments import (
    DEFAULT_DEPLOYMENTS,
    ContractName,
    NetworkDeployment,
    resolve_deployment,
)
from ..models import Listing
from ..validation import validate_address
from . import abi
from .base import ContractWrapper, TransactionOptions, TxResult


class MotifListing(ContractWrapper):
    """
    Wrapper over a Motif listing (auction / fixed price) contract.

    `token_address` is the default token contract for new listings; like
    `listing_address` it is resolved from `deployments` when omitted.
    """

    LISTING_CONTRACT: ClassVar[ContractName]
    TOKEN_CONTRACT: ClassVar[ContractName]

    def __init__(
        self,
        w3: Web3,
        chain_id: int,
        *,
        listing_address: str | None = None,
        token_address: str | None = None,
        deployments: Mapping[str, NetworkDeployment] = DEFAULT_DEPLOYMENTS,
        account: LocalAccount | None = None,
        options: TransactionOptions | None = None,
    ) -> None:
        if type(self) is MotifListing:
            raise TypeError(
                "MotifListing is abstract; use ItemListing, AvatarListing, "
                "SpaceListing or LandListing"
            )
        super().__init__(w3, chain_id, account=account, options=options)

        if listing_address is None or token_address is None:
            deployment = resolve_deployment(self.chain_id, deployments)
            if listing_address is None:
                listing_address = deployment.address_for(self.LISTING_CONTRACT)
            if token_address is None:
                token_address = deployment.address_for(self.TOKEN_CONTRACT)

        self.listing_address = validate_address(listing_address)
        self.token_address = validate_address(token_address)

        self.listing = self._contract(self.listing_address, abi.LISTING_ABI)

    # ------------------------------------------------------------------
    # Reads
    # ------------------------------------------------------------------

    def fetch_listing(self, listing_id: int) -> Listing:
        return Listing.from_abi(self.listing.functions.listings(listing_id).call())

    def fetch_listing_from_transaction_receipt(
        self, receipt: Mapping[str, Any]
    ) -> Listing | None:
        """
        Return the listing referenced by the first listing event in `receipt`.

        Logs emitted by other contracts are skipped; None if no listing event is found.
        """
        for log in receipt["logs"]:
            if not is_same_address(log["address"], self.listing_address):
                continue
            for name in abi.LISTING_EVENT_NAMES:
                try:
                    event = getattr(self.listing.events, name)().process_log(log)
                except MismatchedABI:
                    continue
                return self.fetch_listing(int(event["args"]["listingId"]))
        return None

    # ------------------------------------------------------------------
    # Writes
    # ------------------------------------------------------------------

    def create_listing(
        self,
        token_id: int,
        starts_at: int,
        duration: int,
        list_price: int,
        list_type: int,
        intermediary: str,
        intermediary_fee_percentage: int,
        list_currency: str,
        token_address: str | None = None,
    ) -> TxResult:
        self._ensure_not_read_only()
        token_contract = (
            validate_address(token_address)
            if token_address is not None
            else self.token_address
        )
        return self._send(
            self.listing.functions.createListing(
                token_id,
                token_contract,
                starts_at,
                duration,
                list_price,
                list_type,
                validate_address(intermediary),
                intermediary_fee_percentage,
                validate_address(list_currency),
            )
        )

    def set_listing_approval(self, listing_id: int, approved: bool) -> TxResult:
        self._ensure_not_read_only()
        return self._send(self.listing.functions.setListingApproval(listing_id, approved))

    def set_listing_drop_approval(
        self, listing_id: int, approved: bool, starts_at: int
    ) -> TxResult:
        self._ensure_not_read_only()
        return self._send(
            self.listing.functions.setListingDropApproval(listing_id, approved, starts_at)
        )

    def set_listing_list_price(self, listing_id: int, list_price: int) -> TxResult:
        self._ensure_not_read_only()
        return self._send(
            self.listing.functions.setListingListPrice(listing_id, list_price)
        )

    def _native_value(self, listing_id: int, amount: int) -> int:
        # Native-currency listings are paid with the transaction value.
        return amount if self.fetch_listing(listing_id).is_native_currency else 0

    def create_bid(self, listing_id: int, amount: int) -> TxResult:
        self._ensure_not_read_only()
        value = self._native_value(listing_id, amount)
        return self._send(self.listing.functions.createBid(listing_id, amount), value=value)

    def end_fixed_price_listing(self, listing_id: int, amount: int) -> TxResult:
        self._ensure_not_read_only()
        value = self._native_value(listing_id, amount)
        return self._send(
            self.listing.functions.endFixedPriceListing(listing_id, amount), value=value
        )

    def end_listing(self, listing_id: int) -> TxResult:
        self._ensure_not_read_only()
        return self._send(self.listing.functions.endListing(listing_id))

    def cancel_listing(self, listing_id: int) -> TxResult:
        self._ensure_not_read_only()
        return self._send(self.listing.functions.cancelListing(listing_id))


class ItemListing(MotifListing):
    LISTING_CONTRACT: ClassVar[ContractName] = "item_listing"
    TOKEN_CONTRACT: ClassVar[ContractName] = "item"


class AvatarListing(MotifListing):
    LISTING_CONTRACT: ClassVar[ContractName] = "avatar_listing"
    TOKEN_CONTRACT: ClassVar[ContractName] = "avatar"


class SpaceListing(MotifListing):
    LISTING_CONTRACT: ClassVar[ContractName] = "space_listing"
    TOKEN_CONTRACT: ClassVar[ContractName] = "space"


class LandListing(MotifListing):
    LISTING_CONTRACT: ClassVar[ContractName] = "land_listing"
    TOKEN_CONTRACT: ClassVar[ContractName] = "land"
