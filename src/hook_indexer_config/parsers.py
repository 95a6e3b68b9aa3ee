"""Deployment artifact parsers for hook-indexer-config library."""

import json
import logging
import re
from pathlib import Path
from typing import Any, Dict, List, Mapping, Union

from web3 import Web3

from .exceptions import (
    ArtifactNotFoundError,
    ConfigurationError,
    InvalidAddressError,
    MalformedHeightError,
    MissingDeploymentDataError,
)
from .types import ResolvedContract

logger = logging.getLogger(__name__)

_HEX_QUANTITY = re.compile(r"0[xX][0-9a-fA-F]+")
_HEX_ADDRESS = re.compile(r"0x[0-9a-fA-F]{40}")


def normalize_address(raw: Any) -> str:
    """
    Convert an address to EIP-55 checksummed form.

    Args:
        raw: Address string, any case, with 0x prefix

    Returns:
        Checksummed address

    Raises:
        InvalidAddressError: If the value is not "0x" followed by 40 hex
            characters. Letter case is not checked, the result is re-checksummed.
    """
    if not isinstance(raw, str) or not _HEX_ADDRESS.fullmatch(raw):
        raise InvalidAddressError(f"Invalid contract address: {raw!r}", field="contractAddress")
    return Web3.to_checksum_address(raw)


def decode_block_number(raw: Union[str, int]) -> int:
    """
    Decode a block number as written in a transaction receipt.

    Args:
        raw: Hex quantity string (e.g. "0x1a8d965") or a non-negative int

    Returns:
        Block number as an integer

    Raises:
        MalformedHeightError: If the value is not valid hex or is negative
    """
    # bool is an int subclass, reject it explicitly
    if isinstance(raw, bool):
        raise MalformedHeightError(f"Malformed block number: {raw!r}", field="blockNumber")

    if isinstance(raw, int):
        if raw < 0:
            raise MalformedHeightError(f"Negative block number: {raw}", field="blockNumber")
        return raw

    if not isinstance(raw, str) or not _HEX_QUANTITY.fullmatch(raw):
        raise MalformedHeightError(f"Malformed block number: {raw!r}", field="blockNumber")

    return int(raw, 16)


def _first_record(artifact: Mapping[str, Any], key: str) -> Mapping[str, Any]:
    records = artifact.get(key)
    if not isinstance(records, list) or not records:
        raise MissingDeploymentDataError(
            f"Deployment artifact has no {key}", field=key
        )

    record = records[0]
    if not isinstance(record, Mapping):
        raise MissingDeploymentDataError(
            f"Deployment artifact {key}[0] is not an object", field=f"{key}[0]"
        )
    return record


def parse_contract_address(artifact: Mapping[str, Any]) -> str:
    """
    Extract the created contract's address from a broadcast record.

    Args:
        artifact: Broadcast record with a `transactions` array

    Returns:
        Checksummed address of transactions[0].contractAddress

    Raises:
        MissingDeploymentDataError: If there is no first transaction or it
            carries no contractAddress
        InvalidAddressError: If the address is malformed
    """
    transaction = _first_record(artifact, "transactions")

    address = transaction.get("contractAddress")
    if not address:
        raise MissingDeploymentDataError(
            "First transaction in deployment artifact has no contractAddress",
            field="transactions[0].contractAddress",
        )

    return normalize_address(address)


def parse_block_number(artifact: Mapping[str, Any]) -> int:
    """
    Extract the block the deployment was mined in.

    Args:
        artifact: Broadcast record with a `receipts` array

    Returns:
        Decoded receipts[0].blockNumber

    Raises:
        MissingDeploymentDataError: If there is no first receipt or it
            carries no blockNumber
        MalformedHeightError: If the block number is not valid hex
    """
    receipt = _first_record(artifact, "receipts")

    block_number = receipt.get("blockNumber")
    if block_number is None or block_number == "":
        raise MissingDeploymentDataError(
            "First receipt in deployment artifact has no blockNumber",
            field="receipts[0].blockNumber",
        )

    return decode_block_number(block_number)


def resolve_deployment(artifact: Mapping[str, Any]) -> ResolvedContract:
    """
    Resolve address and start height from a broadcast record.

    transactions[0] and receipts[0] are assumed to belong to the same
    deployment; the record is not cross-checked.
    """
    return ResolvedContract(
        address=parse_contract_address(artifact),
        start_height=parse_block_number(artifact),
    )


def load_broadcast(file_path: Path) -> Dict[str, Any]:
    """
    Load a Foundry broadcast JSON file.

    Args:
        file_path: Path to broadcast/{script}/{chain_id}/run-latest.json

    Returns:
        Parsed broadcast record

    Raises:
        ArtifactNotFoundError: If the file does not exist
        MissingDeploymentDataError: If the document is not a JSON object
    """
    file_path = Path(file_path)
    if not file_path.exists():
        raise ArtifactNotFoundError(f"Deployment artifact not found at {file_path}")

    with open(file_path) as f:
        data = json.load(f)

    if not isinstance(data, dict):
        raise MissingDeploymentDataError(
            f"Deployment artifact is not a JSON object: {file_path}"
        )
    return data


def resolve_deployment_file(file_path: Path) -> ResolvedContract:
    """Load a broadcast file and resolve its deployment."""
    resolved = resolve_deployment(load_broadcast(file_path))
    logger.debug(
        "Resolved %s at block %d from %s",
        resolved.address,
        resolved.start_height,
        file_path,
    )
    return resolved


def load_abi(file_path: Path) -> List[Dict[str, Any]]:
    """
    Load a contract ABI.

    Accepts a bare ABI array or a compiler artifact with an "abi" key
    (Foundry out/ or hardhat format). Entries are not inspected.

    Args:
        file_path: Path to the ABI JSON document

    Returns:
        ABI list as found in the document

    Raises:
        ArtifactNotFoundError: If the file does not exist
        ConfigurationError: If the document holds no ABI array
    """
    file_path = Path(file_path)
    if not file_path.exists():
        raise ArtifactNotFoundError(f"ABI not found at {file_path}")

    with open(file_path) as f:
        data = json.load(f)

    if isinstance(data, dict):
        data = data.get("abi")

    if not isinstance(data, list):
        raise ConfigurationError(f"No ABI array in {file_path}", field="abi")
    return data
