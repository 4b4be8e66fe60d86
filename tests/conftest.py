from unittest.mock import Mock

import pytest

from tests.helpers.factories import (
    EXCHANGE_ADDRESS,
    TOKEN_ADDRESS,
    create_mock_account,
    create_mock_web3,
)


@pytest.fixture
def w3() -> Mock:
    """Mock Web3 instance with one Mock contract per address."""
    return create_mock_web3()


@pytest.fixture
def account() -> Mock:
    """Mock LocalAccount that signs anything."""
    return create_mock_account()


@pytest.fixture
def token_contract(w3: Mock) -> Mock:
    return w3.eth.contract(address=TOKEN_ADDRESS, abi=[])


@pytest.fixture
def exchange_contract(w3: Mock) -> Mock:
    return w3.eth.contract(address=EXCHANGE_ADDRESS, abi=[])
