"""Path management utilities for hook-indexer-config library."""

from pathlib import Path
from typing import Optional, Union


def get_default_project_root() -> Path:
    """
    Get default project root (current working directory).

    Returns:
        Path to the directory holding broadcast/ and abis/
    """
    return Path.cwd()


def _resolve_root(project_root: Optional[Union[Path, str]]) -> Path:
    if project_root is None:
        return get_default_project_root()
    return Path(project_root).absolute()


def get_broadcast_path(
    script: str,
    chain_id: int,
    project_root: Optional[Union[Path, str]] = None,
    run: str = "run-latest.json",
) -> Path:
    """
    Get path of a Foundry broadcast record.

    Args:
        script: Script file name, e.g. "01_DeployHook.s.sol"
        chain_id: Chain the script was broadcast to
        project_root: Custom project root (defaults to cwd)
        run: Run file name (defaults to the latest run)

    Returns:
        Path to broadcast/{script}/{chain_id}/{run}
    """
    return _resolve_root(project_root) / "broadcast" / script / str(chain_id) / run


def get_abi_path(name: str, project_root: Optional[Union[Path, str]] = None) -> Path:
    """
    Get path of an ABI document.

    Args:
        name: ABI file stem, e.g. "AsyncSwap"
        project_root: Custom project root (defaults to cwd)

    Returns:
        Path to abis/{name}.json
    """
    return _resolve_root(project_root) / "abis" / f"{name}.json"
