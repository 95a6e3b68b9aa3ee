"""
hook-indexer-config: indexing configuration for the Unichain async-swap hook
"""

from importlib.metadata import PackageNotFoundError, version

from .builder import build_indexing_config, load_indexing_config
from .exceptions import (
    ArtifactNotFoundError,
    ConfigurationError,
    IndexerConfigError,
    InvalidAddressError,
    MalformedHeightError,
    MissingDeploymentDataError,
)
from .parsers import resolve_deployment, resolve_deployment_file
from .types import (
    ContractConfig,
    ContractNetworkEntry,
    ContractSpec,
    IndexingConfiguration,
    NetworkConfig,
    ResolvedContract,
)

try:
    __version__ = version("hook-indexer-config")
except PackageNotFoundError:
    __version__ = None

__all__ = [
    "build_indexing_config",
    "load_indexing_config",
    "resolve_deployment",
    "resolve_deployment_file",
    "ContractConfig",
    "ContractNetworkEntry",
    "ContractSpec",
    "IndexingConfiguration",
    "NetworkConfig",
    "ResolvedContract",
    "IndexerConfigError",
    "ArtifactNotFoundError",
    "MissingDeploymentDataError",
    "InvalidAddressError",
    "MalformedHeightError",
    "ConfigurationError",
]
