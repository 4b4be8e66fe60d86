from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any

from eth_account.signers.local import LocalAccount
from hexbytes import HexBytes
from web3 import Web3
from web3.contract import Contract
from web3.contract.contract import ContractFunction
from web3.types import TxParams, TxReceipt

from .. import constants as const
from ..errors import ReadOnlyError

logger = logging.getLogger(__name__)

TxResult = HexBytes | TxReceipt


@dataclass(frozen=True, slots=True)
class TransactionOptions:
    """
    Controls how write transactions are built and submitted.

    - `gas_padding_percent` scales the node's gas estimate for writes that pad gas
      (mints); 110 means estimate * 1.10.
    - `wait_for_receipt` makes writes block until mined and return the receipt
      instead of the transaction hash.
    """

    gas_padding_percent: int = const.DEFAULT_GAS_PADDING_PERCENT
    wait_for_receipt: bool = False
    receipt_timeout: float = const.DEFAULT_RECEIPT_TIMEOUT

    def __post_init__(self) -> None:
        if self.gas_padding_percent < 100:
            raise ValueError("gas_padding_percent must be >= 100")
        if self.receipt_timeout <= 0:
            raise ValueError("receipt_timeout must be > 0")


def send_transaction(
    w3: Web3,
    account: LocalAccount,
    fn: ContractFunction,
    *,
    value: int = 0,
    pad_gas: bool = False,
    options: TransactionOptions | None = None,
) -> TxResult:
    """
    Build, sign with `account` and submit a contract call.

    Returns the transaction hash, or the receipt when `options.wait_for_receipt` is set.
    """
    opt = options or TransactionOptions()

    params: TxParams = {"from": account.address}
    if value:
        params["value"] = value
    if pad_gas:
        estimate = fn.estimate_gas(params)
        params["gas"] = estimate * opt.gas_padding_percent // 100

    params["nonce"] = w3.eth.get_transaction_count(account.address, "pending")
    tx = fn.build_transaction(params)
    signed = account.sign_transaction(tx)
    tx_hash = w3.eth.send_raw_transaction(signed.raw_transaction)
    logger.debug(
        "Submitted %s from %s (value=%d): %s",
        getattr(fn, "fn_name", fn),
        account.address,
        value,
        HexBytes(tx_hash).hex(),
    )

    if opt.wait_for_receipt:
        return w3.eth.wait_for_transaction_receipt(tx_hash, timeout=opt.receipt_timeout)
    return tx_hash


class ContractWrapper:
    """
    Common plumbing for SDK wrappers over web3 contracts.

    Without an `account` the wrapper is read-only and every write raises
    `ReadOnlyError` before touching the chain.
    """

    def __init__(
        self,
        w3: Web3,
        chain_id: int,
        *,
        account: LocalAccount | None = None,
        options: TransactionOptions | None = None,
    ) -> None:
        self.w3 = w3
        self.chain_id = int(chain_id)
        self.account = account
        self.options = options or TransactionOptions()

    @property
    def read_only(self) -> bool:
        return self.account is None

    def _ensure_not_read_only(self) -> LocalAccount:
        if self.account is None:
            raise ReadOnlyError(
                f"{type(self).__name__} is read-only: contract methods that require "
                "a signer need an account"
            )
        return self.account

    def _contract(self, address: str, abi: list[dict[str, Any]]) -> Contract:
        return self.w3.eth.contract(address=address, abi=abi)  # type: ignore[call-overload]

    def _send(
        self, fn: ContractFunction, *, value: int = 0, pad_gas: bool = False
    ) -> TxResult:
        account = self._ensure_not_read_only()
        return send_transaction(
            self.w3, account, fn, value=value, pad_gas=pad_gas, options=self.options
        )
