"""Custom exception hierarchy for kv-facade."""

from __future__ import annotations


class KVFacadeError(Exception):
    """Base exception for all kv-facade errors."""


class StoreOperationError(KVFacadeError):
    """Raised when an underlying key-value store call fails.

    Wraps the client library error together with the failing operation
    and key so explicit-result callers can inspect what went wrong.
    """

    def __init__(self, operation: str, key: str, cause: Exception) -> None:
        """Record the failing operation, key and underlying error."""
        super().__init__(f"{operation} {key!r} failed: {cause}")
        self.operation = operation
        self.key = key
        self.cause = cause
