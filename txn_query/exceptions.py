"""Custom exception hierarchy for txn-query."""


class TxnQueryError(Exception):
    """Base exception for all txn-query errors."""


class LoadError(TxnQueryError):
    """Raised when a transaction dataset cannot be read or parsed."""


class InvalidArgumentError(TxnQueryError):
    """Raised when a query is called with a missing or unusable argument."""


class ConfigurationError(TxnQueryError):
    """Raised when configuration is invalid or missing."""


class SinkError(TxnQueryError):
    """Raised when a sink operation fails."""
