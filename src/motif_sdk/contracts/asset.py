from __future__ import annotations

import asyncio
from collections.abc import Mapping, Sequence
from typing import Any, ClassVar

from eth_account.signers.local import LocalAccount
from web3 import Web3

from .. import constants as const
from ..deployments import (
    DEFAULT_DEPLOYMENTS,
    ContractName,
    NetworkDeployment,
    resolve_deployment,
)
from ..models import (
    Ask,
    AvatarData,
    Bid,
    BidShares,
    ContentRecord,
    Eip712Domain,
    Eip712Signature,
    ItemData,
    LandData,
    SpaceData,
)
from ..validation import validate_address, validate_bid_shares, validate_uri
from ..verifier import ContentVerifier
from . import abi
from .base import ContractWrapper, TransactionOptions, TxResult


class MotifAsset(ContractWrapper):
    """
    Wrapper over one Motif token contract and its exchange contract.

    Pass both `token_address` and `exchange_address`, or neither to resolve them from
    `deployments` by chain id. Use the concrete kinds: `MotifItem`, `MotifAvatar`,
    `MotifSpace`, `MotifLand`.
    """

    TOKEN_CONTRACT: ClassVar[ContractName]
    EXCHANGE_CONTRACT: ClassVar[ContractName]
    TOKEN_ABI: ClassVar[list[dict[str, Any]]]
    RECORD_TYPE: ClassVar[type[ContentRecord]]

    def __init__(
        self,
        w3: Web3,
        chain_id: int,
        *,
        token_address: str | None = None,
        exchange_address: str | None = None,
        deployments: Mapping[str, NetworkDeployment] = DEFAULT_DEPLOYMENTS,
        account: LocalAccount | None = None,
        verifier: ContentVerifier | None = None,
        options: TransactionOptions | None = None,
    ) -> None:
        if type(self) is MotifAsset:
            raise TypeError(
                "MotifAsset is abstract; use MotifItem, MotifAvatar, MotifSpace or MotifLand"
            )
        super().__init__(w3, chain_id, account=account, options=options)

        if (token_address is None) != (exchange_address is None):
            raise ValueError(
                f"{type(self).__name__}: token_address and exchange_address must both be "
                "given or both be omitted"
            )

        if token_address is not None and exchange_address is not None:
            self.token_address = validate_address(token_address)
            self.exchange_address = validate_address(exchange_address)
        else:
            deployment = resolve_deployment(self.chain_id, deployments)
            self.token_address = deployment.address_for(self.TOKEN_CONTRACT)
            self.exchange_address = deployment.address_for(self.EXCHANGE_CONTRACT)

        self.token = self._contract(self.token_address, self.TOKEN_ABI)
        self.exchange = self._contract(self.exchange_address, abi.EXCHANGE_ABI)
        self.verifier = verifier or ContentVerifier()

    # ------------------------------------------------------------------
    # Motif reads
    # ------------------------------------------------------------------

    def fetch_content_hash(self, token_id: int) -> bytes:
        return bytes(self.token.functions.tokenContentHashes(token_id).call())

    def fetch_metadata_hash(self, token_id: int) -> bytes:
        return bytes(self.token.functions.tokenMetadataHashes(token_id).call())

    def fetch_content_uri(self, token_id: int) -> str:
        return str(self.token.functions.tokenURI(token_id).call())

    def fetch_metadata_uri(self, token_id: int) -> str:
        return str(self.token.functions.tokenMetadataURI(token_id).call())

    def fetch_creator(self, token_id: int) -> str:
        return str(self.token.functions.tokenCreators(token_id).call())

    def fetch_current_bid_shares(self, token_id: int) -> BidShares:
        return BidShares.from_abi(self.exchange.functions.bidSharesForToken(token_id).call())

    def fetch_current_ask(self, token_id: int) -> Ask:
        return Ask.from_abi(self.exchange.functions.currentAskForToken(token_id).call())

    def fetch_current_bid_for_bidder(self, token_id: int, bidder: str) -> Bid:
        bidder = validate_address(bidder)
        return Bid.from_abi(
            self.exchange.functions.bidForTokenBidder(token_id, bidder).call()
        )

    def fetch_permit_nonce(self, address: str, token_id: int) -> int:
        return int(
            self.token.functions.permitNonces(validate_address(address), token_id).call()
        )

    def fetch_mint_with_sig_nonce(self, address: str) -> int:
        return int(self.token.functions.mintWithSigNonces(validate_address(address)).call())

    def _record_extras(self, token_id: int) -> dict[str, Any]:
        return {}

    def fetch_content_record(self, token_id: int) -> ContentRecord:
        """Read the URIs and hashes of `token_id` into this kind's content record."""
        return self.RECORD_TYPE(
            token_uri=self.fetch_content_uri(token_id),
            metadata_uri=self.fetch_metadata_uri(token_id),
            content_hash=self.fetch_content_hash(token_id),
            metadata_hash=self.fetch_metadata_hash(token_id),
            **self._record_extras(token_id),
        )

    # ------------------------------------------------------------------
    # Motif writes
    # ------------------------------------------------------------------

    def _check_record(self, data: ContentRecord) -> None:
        if not isinstance(data, self.RECORD_TYPE):
            raise TypeError(
                f"{type(self).__name__} mints {self.RECORD_TYPE.__name__}, "
                f"got {type(data).__name__}"
            )
        validate_uri(data.metadata_uri)
        validate_uri(data.token_uri)

    def update_content_uri(self, token_id: int, token_uri: str) -> TxResult:
        self._ensure_not_read_only()
        validate_uri(token_uri)
        return self._send(self.token.functions.updateTokenURI(token_id, token_uri))

    def update_metadata_uri(self, token_id: int, metadata_uri: str) -> TxResult:
        self._ensure_not_read_only()
        validate_uri(metadata_uri)
        return self._send(
            self.token.functions.updateTokenMetadataURI(token_id, metadata_uri)
        )

    def mint(self, data: ContentRecord, bid_shares: BidShares) -> TxResult:
        """Mint a new token. The gas estimate is padded by `options.gas_padding_percent`."""
        self._ensure_not_read_only()
        self._check_record(data)
        validate_bid_shares(bid_shares.creator, bid_shares.owner, bid_shares.prev_owner)
        return self._send(
            self.token.functions.mint(data.as_abi(), bid_shares.as_abi()), pad_gas=True
        )

    def mint_with_sig(
        self,
        creator: str,
        data: ContentRecord,
        bid_shares: BidShares,
        sig: Eip712Signature,
    ) -> TxResult:
        self._ensure_not_read_only()
        creator = validate_address(creator)
        self._check_record(data)
        validate_bid_shares(bid_shares.creator, bid_shares.owner, bid_shares.prev_owner)
        return self._send(
            self.token.functions.mintWithSig(
                creator, data.as_abi(), bid_shares.as_abi(), sig.as_abi()
            )
        )

    def set_ask(self, token_id: int, ask: Ask) -> TxResult:
        self._ensure_not_read_only()
        return self._send(self.token.functions.setAsk(token_id, ask.as_abi()))

    def set_bid(self, token_id: int, bid: Bid) -> TxResult:
        self._ensure_not_read_only()
        return self._send(self.token.functions.setBid(token_id, bid.as_abi()))

    def remove_ask(self, token_id: int) -> TxResult:
        self._ensure_not_read_only()
        return self._send(self.token.functions.removeAsk(token_id))

    def remove_bid(self, token_id: int) -> TxResult:
        """Remove the sender's bid on `token_id`."""
        self._ensure_not_read_only()
        return self._send(self.token.functions.removeBid(token_id))

    def accept_bid(self, token_id: int, bid: Bid) -> TxResult:
        self._ensure_not_read_only()
        return self._send(self.token.functions.acceptBid(token_id, bid.as_abi()))

    def permit(self, spender: str, token_id: int, sig: Eip712Signature) -> TxResult:
        """Approve `spender` for `token_id` with an EIP-712 signature from the owner."""
        self._ensure_not_read_only()
        spender = validate_address(spender)
        return self._send(self.token.functions.permit(spender, token_id, sig.as_abi()))

    def revoke_approval(self, token_id: int) -> TxResult:
        self._ensure_not_read_only()
        return self._send(self.token.functions.revokeApproval(token_id))

    def burn(self, token_id: int) -> TxResult:
        self._ensure_not_read_only()
        return self._send(self.token.functions.burn(token_id))

    # ------------------------------------------------------------------
    # ERC-721 reads
    # ------------------------------------------------------------------

    def fetch_balance_of(self, owner: str) -> int:
        return int(self.token.functions.balanceOf(validate_address(owner)).call())

    def fetch_owner_of(self, token_id: int) -> str:
        return str(self.token.functions.ownerOf(token_id).call())

    def fetch_token_of_owner_by_index(self, owner: str, index: int) -> int:
        return int(
            self.token.functions.tokenOfOwnerByIndex(validate_address(owner), index).call()
        )

    def fetch_total_supply(self) -> int:
        """Number of minted, non-burned tokens."""
        return int(self.token.functions.totalSupply().call())

    def fetch_token_by_index(self, index: int) -> int:
        return int(self.token.functions.tokenByIndex(index).call())

    def fetch_approved(self, token_id: int) -> str:
        return str(self.token.functions.getApproved(token_id).call())

    def fetch_is_approved_for_all(self, owner: str, operator: str) -> bool:
        return bool(
            self.token.functions.isApprovedForAll(
                validate_address(owner), validate_address(operator)
            ).call()
        )

    # ------------------------------------------------------------------
    # ERC-721 writes
    # ------------------------------------------------------------------

    def approve(self, to: str, token_id: int) -> TxResult:
        self._ensure_not_read_only()
        return self._send(self.token.functions.approve(validate_address(to), token_id))

    def set_approval_for_all(self, operator: str, approved: bool) -> TxResult:
        self._ensure_not_read_only()
        return self._send(
            self.token.functions.setApprovalForAll(validate_address(operator), approved)
        )

    def transfer_from(self, from_address: str, to: str, token_id: int) -> TxResult:
        self._ensure_not_read_only()
        return self._send(
            self.token.functions.transferFrom(
                validate_address(from_address), validate_address(to), token_id
            )
        )

    def safe_transfer_from(self, from_address: str, to: str, token_id: int) -> TxResult:
        """Transfer only if `to` is an EOA or implements the ERC-721 receiver interface."""
        self._ensure_not_read_only()
        return self._send(
            self.token.functions.safeTransferFrom(
                validate_address(from_address), validate_address(to), token_id
            )
        )

    # ------------------------------------------------------------------
    # Miscellaneous
    # ------------------------------------------------------------------

    def eip712_domain(self) -> Eip712Domain:
        return Eip712Domain.for_contract(
            chain_id=self.chain_id, verifying_contract=self.token_address
        )

    def is_valid_bid(self, token_id: int, bid: Bid) -> bool:
        """
        True if the exchange can split `bid.amount` evenly under the token's current
        bid shares and the bid's sell-on share fits beside the creator share.
        """
        is_amount_valid = bool(
            self.exchange.functions.isValidBid(token_id, bid.amount).call()
        )
        if not is_amount_valid:
            return False
        return bid.fits_bid_shares(self.fetch_current_bid_shares(token_id))

    def is_valid_ask(self, token_id: int, ask: Ask) -> bool:
        return bool(self.exchange.functions.isValidBid(token_id, ask.amount).call())

    def is_verified(
        self, token_id: int, timeout: float = const.DEFAULT_VERIFY_TIMEOUT
    ) -> bool:
        """
        Check that the token's URIs serve content matching its on-chain hashes.

        Runs its own event loop; from async code, verify `fetch_content_record(...)`
        with `ContentVerifier.verify_content_record` instead.
        """
        record = self.fetch_content_record(token_id)
        return asyncio.run(self.verifier.verify_content_record(record, timeout=timeout))


class MotifItem(MotifAsset):
    TOKEN_CONTRACT: ClassVar[ContractName] = "item"
    EXCHANGE_CONTRACT: ClassVar[ContractName] = "item_exchange"
    TOKEN_ABI: ClassVar[list[dict[str, Any]]] = abi.ITEM_ABI
    RECORD_TYPE: ClassVar[type[ContentRecord]] = ItemData

    def fetch_token_contract(self, token_id: int) -> str:
        return str(self.token.functions.tokenContractAddresses(token_id).call())

    def mint_multiple(
        self, data: Sequence[ItemData], bid_shares: Sequence[BidShares]
    ) -> TxResult:
        """Mint several items in one transaction; `data[i]` is minted with `bid_shares[i]`."""
        self._ensure_not_read_only()
        if len(data) != len(bid_shares):
            raise ValueError(
                f"mint_multiple needs one BidShares per item: got {len(data)} items "
                f"and {len(bid_shares)} bid shares"
            )
        for record, shares in zip(data, bid_shares):
            self._check_record(record)
            validate_bid_shares(shares.creator, shares.owner, shares.prev_owner)
        return self._send(
            self.token.functions.mintMultiple(
                [record.as_abi() for record in data],
                [shares.as_abi() for shares in bid_shares],
            ),
            pad_gas=True,
        )


class MotifAvatar(MotifAsset):
    TOKEN_CONTRACT: ClassVar[ContractName] = "avatar"
    EXCHANGE_CONTRACT: ClassVar[ContractName] = "avatar_exchange"
    TOKEN_ABI: ClassVar[list[dict[str, Any]]] = abi.AVATAR_ABI
    RECORD_TYPE: ClassVar[type[ContentRecord]] = AvatarData

    def fetch_token_contract(self, token_id: int) -> str:
        return str(self.token.functions.tokenContractAddresses(token_id).call())

    def fetch_is_default(self, token_id: int) -> bool:
        return bool(self.token.functions.tokenDefault(token_id).call())

    def update_is_default(self, token_id: int, is_default: bool) -> TxResult:
        self._ensure_not_read_only()
        return self._send(self.token.functions.updateTokenDefault(token_id, is_default))

    def _record_extras(self, token_id: int) -> dict[str, Any]:
        return {"is_default": self.fetch_is_default(token_id)}


class MotifSpace(MotifAsset):
    TOKEN_CONTRACT: ClassVar[ContractName] = "space"
    EXCHANGE_CONTRACT: ClassVar[ContractName] = "space_exchange"
    TOKEN_ABI: ClassVar[list[dict[str, Any]]] = abi.SPACE_ABI
    RECORD_TYPE: ClassVar[type[ContentRecord]] = SpaceData

    def fetch_is_public(self, token_id: int) -> bool:
        return bool(self.token.functions.isPublic(token_id).call())

    def fetch_lands(self, token_id: int) -> tuple[int, ...]:
        return tuple(int(land) for land in self.token.functions.lands(token_id).call())

    def _record_extras(self, token_id: int) -> dict[str, Any]:
        # The pin is write-only on chain.
        return {
            "is_public": self.fetch_is_public(token_id),
            "lands": self.fetch_lands(token_id),
        }


class MotifLand(MotifAsset):
    TOKEN_CONTRACT: ClassVar[ContractName] = "land"
    EXCHANGE_CONTRACT: ClassVar[ContractName] = "land_exchange"
    TOKEN_ABI: ClassVar[list[dict[str, Any]]] = abi.LAND_ABI
    RECORD_TYPE: ClassVar[type[ContentRecord]] = LandData

    def fetch_x_coordinate(self, token_id: int) -> int:
        return int(self.token.functions.xCoordinate(token_id).call())

    def fetch_y_coordinate(self, token_id: int) -> int:
        return int(self.token.functions.yCoordinate(token_id).call())

    def _record_extras(self, token_id: int) -> dict[str, Any]:
        return {
            "x_coordinate": self.fetch_x_coordinate(token_id),
            "y_coordinate": self.fetch_y_coordinate(token_id),
        }
