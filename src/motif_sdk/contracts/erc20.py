"""ERC-20 allowance and WETH wrap / unwrap helpers."""

from __future__ import annotations

from eth_account.signers.local import LocalAccount
from web3 import Web3

from ..validation import validate_address
from . import abi
from .base import TransactionOptions, TxResult, send_transaction


def approve_erc20(
    w3: Web3,
    account: LocalAccount,
    erc20_address: str,
    spender: str,
    amount: int,
    *,
    options: TransactionOptions | None = None,
) -> TxResult:
    """Allow `spender` to move up to `amount` of `account`'s tokens."""
    if amount < 0:
        raise ValueError("amount must be >= 0")
    erc20 = w3.eth.contract(address=validate_address(erc20_address), abi=abi.ERC20_ABI)
    fn = erc20.functions.approve(validate_address(spender), amount)
    return send_transaction(w3, account, fn, options=options)


def wrap_eth(
    w3: Web3,
    account: LocalAccount,
    weth_address: str,
    amount: int,
    *,
    options: TransactionOptions | None = None,
) -> TxResult:
    if amount <= 0:
        raise ValueError("amount must be > 0")
    weth = w3.eth.contract(address=validate_address(weth_address), abi=abi.WETH_ABI)
    return send_transaction(
        w3, account, weth.functions.deposit(), value=amount, options=options
    )


def unwrap_eth(
    w3: Web3,
    account: LocalAccount,
    weth_address: str,
    amount: int,
    *,
    options: TransactionOptions | None = None,
) -> TxResult:
    if amount <= 0:
        raise ValueError("amount must be > 0")
    weth = w3.eth.contract(address=validate_address(weth_address), abi=abi.WETH_ABI)
    return send_transaction(w3, account, weth.functions.withdraw(amount), options=options)
