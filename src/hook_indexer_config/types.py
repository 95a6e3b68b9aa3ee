"""Data types and dataclasses for hook-indexer-config library."""

import copy
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Dict, List, Mapping, Optional


@dataclass(frozen=True)
class ResolvedContract:
    """Address and first block of a deployed contract."""

    address: str  # Checksummed address
    start_height: int  # Block the deployment transaction was mined in


@dataclass(frozen=True)
class NetworkConfig:
    """Connection parameters for one network."""

    chain_id: int
    rpc_url: str
    disable_cache: bool = True


@dataclass(frozen=True)
class ContractSpec:
    """Builder input describing one logical contract."""

    name: str  # e.g., "CsmmHook"
    network: str  # Key into the networks mapping
    resolved: ResolvedContract
    abi: Optional[List[Dict[str, Any]]]  # Passed through unmodified
    pinned_start_block: Optional[int] = None  # Overrides resolved.start_height

    __hash__ = None  # type: ignore[assignment]


@dataclass(frozen=True)
class ContractNetworkEntry:
    """Where a contract lives on a single network."""

    address: str
    start_block: int


@dataclass(frozen=True)
class ContractConfig:
    """Per-network placement and ABI of a logical contract."""

    network: Mapping[str, ContractNetworkEntry]
    abi: List[Dict[str, Any]]

    __hash__ = None  # type: ignore[assignment]


@dataclass(frozen=True)
class IndexingConfiguration:
    """
    Configuration handed to the indexing runtime at startup.

    Mappings are read-only views; build a new value instead of mutating one.
    """

    networks: Mapping[str, NetworkConfig]
    contracts: Mapping[str, ContractConfig]

    # Holds read-only mappings, which are unhashable
    __hash__ = None  # type: ignore[assignment]

    def __post_init__(self) -> None:
        object.__setattr__(self, "networks", MappingProxyType(dict(self.networks)))
        object.__setattr__(self, "contracts", MappingProxyType(dict(self.contracts)))

    def to_dict(self) -> Dict[str, Any]:
        """
        Render the configuration in the runtime's field naming.

        ABIs are deep-copied so the result can be changed freely.

        Returns:
            Plain nested dictionaries with networks and contracts keyed by name
        """
        return {
            "networks": {
                name: {
                    "chainId": network.chain_id,
                    "transport": network.rpc_url,
                    "disableCache": network.disable_cache,
                }
                for name, network in self.networks.items()
            },
            "contracts": {
                name: {
                    "network": {
                        network_name: {
                            "address": entry.address,
                            "startBlock": entry.start_block,
                        }
                        for network_name, entry in contract.network.items()
                    },
                    "abi": copy.deepcopy(contract.abi),
                }
                for name, contract in self.contracts.items()
            },
        }
