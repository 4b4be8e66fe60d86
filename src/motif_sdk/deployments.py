from __future__ import annotations

import json
from collections.abc import Mapping
from dataclasses import dataclass, fields
from os import PathLike
from pathlib import Path
from types import MappingProxyType
from typing import Final, Literal

from .errors import AddressResolutionError, UnsupportedChainError
from .validation import validate_address

# ---------------------------------------------------------------------------
# Networks
# ---------------------------------------------------------------------------
CHAIN_ID_TO_NETWORK: Final[Mapping[int, str]] = MappingProxyType(
    {
        1: "mainnet",
        3: "ropsten",
        56: "binance",
        137: "polygon",
        7018: "motif",
        7019: "motifTestnet",
    }
)

ContractName = Literal[
    "item",
    "item_exchange",
    "item_listing",
    "avatar",
    "avatar_exchange",
    "avatar_listing",
    "space",
    "space_exchange",
    "space_listing",
    "land",
    "land_exchange",
    "land_listing",
    "weth",
]

# Keys used by the published address files, e.g. `addresses/7018.json`.
_ADDRESS_FILE_KEYS: Final[Mapping[str, str]] = MappingProxyType(
    {
        "item": "item",
        "itemExchange": "item_exchange",
        "itemListing": "item_listing",
        "avatar": "avatar",
        "avatarExchange": "avatar_exchange",
        "avatarListing": "avatar_listing",
        "space": "space",
        "spaceExchange": "space_exchange",
        "spaceListing": "space_listing",
        "land": "land",
        "landExchange": "land_exchange",
        "landListing": "land_listing",
        "weth": "weth",
    }
)


def chain_id_to_network_name(chain_id: int) -> str:
    """Map an EVM chain id to the Motif network name used to key deployments."""
    try:
        return CHAIN_ID_TO_NETWORK[chain_id]
    except KeyError:
        raise UnsupportedChainError(f"Chain id {chain_id} not supported.") from None


@dataclass(frozen=True, slots=True)
class NetworkDeployment:
    """
    Contract addresses of one Motif network.

    Deployments change as contracts are upgraded, so this stays data-only: callers
    can load fresh address files with `load_deployments` and pass them to wrappers.
    """

    network: str
    chain_id: int
    item: str | None = None
    item_exchange: str | None = None
    item_listing: str | None = None
    avatar: str | None = None
    avatar_exchange: str | None = None
    avatar_listing: str | None = None
    space: str | None = None
    space_exchange: str | None = None
    space_listing: str | None = None
    land: str | None = None
    land_exchange: str | None = None
    land_listing: str | None = None
    weth: str | None = None

    def __post_init__(self) -> None:
        expected = CHAIN_ID_TO_NETWORK.get(self.chain_id)
        if expected is not None and expected != self.network:
            raise ValueError(
                f"Chain id {self.chain_id} belongs to network {expected!r}, "
                f"not {self.network!r}"
            )
        for f in fields(self):
            if f.name in ("network", "chain_id"):
                continue
            value = getattr(self, f.name)
            if value is not None:
                object.__setattr__(self, f.name, validate_address(value))

    def address_for(self, contract: ContractName) -> str:
        address = getattr(self, contract, None)
        if address is None:
            raise AddressResolutionError(
                f"No {contract} address deployed on network {self.network!r}"
            )
        return str(address)

    @classmethod
    def from_address_file(
        cls, network: str, chain_id: int, mapping: Mapping[str, str]
    ) -> NetworkDeployment:
        """
        Build a deployment from a published address file (camelCase keys).

        Unknown keys are ignored, e.g. `{"item": "0x...", "itemExchange": "0x..."}`.
        """
        kwargs = {
            _ADDRESS_FILE_KEYS[key]: value
            for key, value in mapping.items()
            if key in _ADDRESS_FILE_KEYS and value
        }
        return cls(network=network, chain_id=chain_id, **kwargs)


def load_deployments(path: str | PathLike[str]) -> Mapping[str, NetworkDeployment]:
    """
    Load `{network: {camelCaseKey: address}}` JSON into deployments keyed by network.

    Network names must be known (see `CHAIN_ID_TO_NETWORK`).
    """
    raw = json.loads(Path(path).read_text(encoding="utf-8"))
    if not isinstance(raw, dict):
        raise ValueError(f"{path}: expected a JSON object keyed by network name")

    by_network = {name: chain_id for chain_id, name in CHAIN_ID_TO_NETWORK.items()}
    out: dict[str, NetworkDeployment] = {}
    for network, mapping in raw.items():
        if network not in by_network:
            raise UnsupportedChainError(f"Unknown network {network!r} in {path}")
        if not isinstance(mapping, dict):
            raise ValueError(f"{path}: addresses for {network!r} must be an object")
        out[network] = NetworkDeployment.from_address_file(
            network, by_network[network], mapping
        )
    return MappingProxyType(out)


# Published addresses are not bundled; every network starts empty and wrappers
# raise `AddressResolutionError` until explicit addresses or deployments are given.
DEFAULT_DEPLOYMENTS: Final[Mapping[str, NetworkDeployment]] = MappingProxyType(
    {
        name: NetworkDeployment(network=name, chain_id=chain_id)
        for chain_id, name in CHAIN_ID_TO_NETWORK.items()
    }
)


def resolve_deployment(
    chain_id: int, deployments: Mapping[str, NetworkDeployment]
) -> NetworkDeployment:
    """Select the deployment for `chain_id`'s network from `deployments`."""
    network = chain_id_to_network_name(chain_id)
    deployment = deployments.get(network)
    if deployment is None:
        raise AddressResolutionError(f"No deployment configured for network {network!r}")
    return deployment
