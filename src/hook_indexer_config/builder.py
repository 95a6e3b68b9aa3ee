"""Main API for hook-indexer-config library."""

import logging
import os
from pathlib import Path
from types import MappingProxyType
from typing import Any, Dict, Iterable, Mapping, Optional, Union

from .constants import (
    CONTRACT_ABIS,
    DEFAULT_NETWORK,
    HOOK_DEPLOY_SCRIPT,
    NETWORK_CONFIG,
    PINNED_START_BLOCK,
    PINNED_START_BLOCK_ENV,
    POOL_MANAGER_ADDRESS,
    POOL_MANAGER_START_BLOCK,
)
from .exceptions import ConfigurationError
from .parsers import load_abi, normalize_address, resolve_deployment_file
from .paths import get_abi_path, get_broadcast_path
from .rpc import verify_network
from .types import (
    ContractConfig,
    ContractNetworkEntry,
    ContractSpec,
    IndexingConfiguration,
    NetworkConfig,
    ResolvedContract,
)

logger = logging.getLogger(__name__)

_UNSET: Any = object()


def _start_block(spec: ContractSpec) -> int:
    """Pinned height overrides computed height."""
    if spec.pinned_start_block is None:
        return spec.resolved.start_height

    if spec.pinned_start_block != spec.resolved.start_height:
        logger.warning(
            "%s start block pinned to %d (deployment mined at %d)",
            spec.name,
            spec.pinned_start_block,
            spec.resolved.start_height,
        )
    return spec.pinned_start_block


def build_indexing_config(
    networks: Mapping[str, NetworkConfig],
    contracts: Iterable[ContractSpec],
) -> IndexingConfiguration:
    """
    Assemble the indexing configuration.

    Performs no network calls and only checks structure: addresses and
    heights are taken as resolved, ABIs are passed through unmodified.

    Args:
        networks: Network name -> connection parameters
        contracts: One spec per logical contract

    Returns:
        Immutable IndexingConfiguration

    Raises:
        ConfigurationError: If no networks are given, a contract references
            an unknown network, a contract has no ABI, or a contract name
            is repeated
    """
    if not networks:
        raise ConfigurationError("At least one network is required", field="networks")

    contract_configs: Dict[str, ContractConfig] = {}
    for spec in contracts:
        if spec.network not in networks:
            raise ConfigurationError(
                f"Contract '{spec.name}' references unknown network '{spec.network}'",
                field=f"contracts.{spec.name}.network",
            )

        if spec.abi is None:
            raise ConfigurationError(
                f"Contract '{spec.name}' has no ABI",
                field=f"contracts.{spec.name}.abi",
            )

        if spec.name in contract_configs:
            raise ConfigurationError(
                f"Contract '{spec.name}' is defined more than once",
                field=f"contracts.{spec.name}",
            )

        entry = ContractNetworkEntry(
            address=spec.resolved.address,
            start_block=_start_block(spec),
        )
        contract_configs[spec.name] = ContractConfig(
            network=MappingProxyType({spec.network: entry}),
            abi=spec.abi,
        )

    config = IndexingConfiguration(networks=networks, contracts=contract_configs)
    logger.info(
        "Built indexing configuration: %d network(s), contracts %s",
        len(config.networks),
        ", ".join(config.contracts) or "none",
    )
    return config


def _pinned_start_block_from_env() -> Optional[int]:
    """
    Read the pinned start block from the environment.

    Unset means the default pin; an empty value or "none" disables pinning.
    """
    raw = os.environ.get(PINNED_START_BLOCK_ENV)
    if raw is None:
        return PINNED_START_BLOCK

    raw = raw.strip()
    if raw == "" or raw.lower() == "none":
        return None

    try:
        value = int(raw, 0)
    except ValueError:
        raise ConfigurationError(
            f"${PINNED_START_BLOCK_ENV} must be an integer, got {raw!r}",
            field=PINNED_START_BLOCK_ENV,
        ) from None

    if value < 0:
        raise ConfigurationError(
            f"${PINNED_START_BLOCK_ENV} must not be negative, got {value}",
            field=PINNED_START_BLOCK_ENV,
        )
    return value


def load_indexing_config(
    project_root: Optional[Union[Path, str]] = None,
    rpc_url: Optional[str] = None,
    pinned_start_block: Optional[int] = _UNSET,
    verify_chain: bool = False,
) -> IndexingConfiguration:
    """
    Build the Unichain PoolManager / CsmmHook indexing configuration.

    The hook address and deployment block come from the latest broadcast of
    01_DeployHook.s.sol; the PoolManager is the canonical v4 singleton.

    Args:
        project_root: Directory holding broadcast/ and abis/ (defaults to cwd)
        rpc_url: RPC endpoint (defaults to $UNICHAIN_RPC_URL, then localhost)
        pinned_start_block: Start block for both contracts; None indexes from
            each contract's deployment block (defaults to
            $INDEXER_PINNED_START_BLOCK, then PINNED_START_BLOCK)
        verify_chain: Check each endpoint's chain ID before returning

    Returns:
        Immutable IndexingConfiguration

    Raises:
        ArtifactNotFoundError: If the broadcast record or an ABI is missing
        MissingDeploymentDataError: If the broadcast record is incomplete
        InvalidAddressError: If a contract address is malformed
        MalformedHeightError: If the deployment block is malformed
        ConfigurationError: If the configuration cannot be assembled
    """
    network_config = NETWORK_CONFIG[DEFAULT_NETWORK]

    # Get RPC URL from environment if not provided
    if rpc_url is None:
        rpc_url = os.environ.get(
            network_config["default_rpc_env"], network_config["default_rpc_url"]
        )

    if pinned_start_block is _UNSET:
        pinned_start_block = _pinned_start_block_from_env()

    networks = {
        DEFAULT_NETWORK: NetworkConfig(
            chain_id=network_config["chain_id"],
            rpc_url=rpc_url,
            disable_cache=network_config["disable_cache"],
        )
    }

    hook = resolve_deployment_file(
        get_broadcast_path(HOOK_DEPLOY_SCRIPT, network_config["chain_id"], project_root)
    )
    pool_manager = ResolvedContract(
        address=normalize_address(POOL_MANAGER_ADDRESS),
        start_height=POOL_MANAGER_START_BLOCK,
    )

    contracts = [
        ContractSpec(
            name=name,
            network=DEFAULT_NETWORK,
            resolved=resolved,
            abi=load_abi(get_abi_path(CONTRACT_ABIS[name], project_root)),
            pinned_start_block=pinned_start_block,
        )
        for name, resolved in (("PoolManager", pool_manager), ("CsmmHook", hook))
    ]

    config = build_indexing_config(networks, contracts)

    if verify_chain:
        for name, network in config.networks.items():
            verify_network(name, network)

    return config
