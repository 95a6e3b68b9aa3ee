"""RPC preflight checks for hook-indexer-config library."""

import logging

import requests

from .exceptions import ConfigurationError
from .types import NetworkConfig

logger = logging.getLogger(__name__)


def fetch_chain_id(rpc_url: str, timeout: float = 30) -> int:
    """
    Ask an RPC endpoint which chain it serves.

    Args:
        rpc_url: RPC endpoint URL
        timeout: Request timeout in seconds

    Returns:
        Chain ID reported by eth_chainId

    Raises:
        ValueError: If RPC returns an error or a response without a chain ID
        RuntimeError: If network error occurs
    """
    try:
        response = requests.post(
            rpc_url,
            json={
                "jsonrpc": "2.0",
                "method": "eth_chainId",
                "params": [],
                "id": 1,
            },
            timeout=timeout,
        )

        # Check for HTTP errors
        if response.status_code != 200:
            raise RuntimeError(f"RPC request failed with status {response.status_code}")

        result = response.json()
        if not isinstance(result, dict):
            raise ValueError(f"RPC response is not an object: {result!r}")

        # Check for RPC errors
        if "error" in result:
            raise ValueError(f"RPC error: {result['error']}")

        chain_id = result.get("result")
        if not isinstance(chain_id, str):
            raise ValueError(f"RPC response has no chain ID: {result!r}")

        try:
            return int(chain_id, 16)
        except ValueError:
            raise ValueError(f"Malformed chain ID in RPC response: {chain_id!r}") from None

    except requests.RequestException as e:
        raise RuntimeError(f"Network error during RPC call: {e}") from e


def verify_network(name: str, network: NetworkConfig) -> None:
    """
    Check that a network's endpoint serves the configured chain.

    Args:
        name: Network name, used in error messages
        network: Network parameters to check

    Raises:
        ConfigurationError: If the endpoint reports a different chain ID
        RuntimeError: If the endpoint cannot be reached
    """
    chain_id = fetch_chain_id(network.rpc_url)
    if chain_id != network.chain_id:
        raise ConfigurationError(
            f"Network '{name}' expects chain {network.chain_id} but "
            f"{network.rpc_url} serves chain {chain_id}",
            field="chainId",
        )
    logger.info("Network '%s' endpoint verified (chain %d)", name, chain_id)
