"""Custom exception classes for hook-indexer-config library."""

from typing import Optional


class IndexerConfigError(Exception):
    """Base exception for indexer configuration errors."""

    def __init__(self, message: str = "", field: Optional[str] = None):
        super().__init__(message)
        self.field = field


class ArtifactNotFoundError(IndexerConfigError, FileNotFoundError):
    """Raised when a broadcast artifact or ABI file is not found."""

    pass


class MissingDeploymentDataError(IndexerConfigError, ValueError):
    """Raised when a broadcast record lacks a transaction, receipt, or required field."""

    pass


class InvalidAddressError(IndexerConfigError, ValueError):
    """Raised when a contract address is not a well-formed 20-byte hex address."""

    pass


class MalformedHeightError(IndexerConfigError, ValueError):
    """Raised when a block number cannot be decoded from hex."""

    pass


class ConfigurationError(IndexerConfigError, ValueError):
    """Raised when the indexing configuration cannot be assembled."""

    pass
