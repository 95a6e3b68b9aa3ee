"""Shared pytest fixtures for hook-indexer-config tests."""

import json
from pathlib import Path
from typing import Any, Dict, List

import pytest

from hook_indexer_config.constants import PINNED_START_BLOCK_ENV
from hook_indexer_config.types import NetworkConfig, ResolvedContract


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep the caller's environment out of configuration tests."""
    monkeypatch.delenv("UNICHAIN_RPC_URL", raising=False)
    monkeypatch.delenv(PINNED_START_BLOCK_ENV, raising=False)


@pytest.fixture
def fixtures_dir() -> Path:
    """Return the path to the fixtures directory."""
    return Path(__file__).parent / "fixtures"


@pytest.fixture
def project_root(fixtures_dir: Path) -> Path:
    """Return a project root holding broadcast/ and abis/."""
    return fixtures_dir / "project"


@pytest.fixture
def hook_broadcast_path(project_root: Path) -> Path:
    """Return path to the sample hook broadcast record."""
    return project_root / "broadcast" / "01_DeployHook.s.sol" / "130" / "run-latest.json"


@pytest.fixture
def hook_broadcast(hook_broadcast_path: Path) -> Dict[str, Any]:
    """Load and return the sample hook broadcast record."""
    with open(hook_broadcast_path) as f:
        return json.load(f)


@pytest.fixture
def pool_manager_artifact() -> Dict[str, Any]:
    """Minimal broadcast record for the PoolManager deployment."""
    return {
        "transactions": [{"contractAddress": "0x1f98400000000000000000000000000000000004"}],
        "receipts": [{"blockNumber": "0x1a91a25"}],
    }


@pytest.fixture
def sample_abi() -> List[Dict[str, Any]]:
    """Small ABI with one event."""
    return [
        {
            "type": "event",
            "name": "Swap",
            "anonymous": False,
            "inputs": [{"name": "id", "type": "bytes32", "indexed": True}],
        }
    ]


@pytest.fixture
def unichain() -> NetworkConfig:
    """Local Unichain fork network."""
    return NetworkConfig(chain_id=130, rpc_url="http://127.0.0.1:8545", disable_cache=True)


@pytest.fixture
def pool_manager() -> ResolvedContract:
    """Resolved PoolManager deployment."""
    return ResolvedContract(
        address="0x1F98400000000000000000000000000000000004", start_height=27859493
    )


@pytest.fixture
def temp_project(tmp_path: Path, project_root: Path) -> Path:
    """Create a writable copy of the sample project."""
    for source in project_root.rglob("*.json"):
        target = tmp_path / source.relative_to(project_root)
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(source.read_text())
    return tmp_path
