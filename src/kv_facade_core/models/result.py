"""Explicit success/failure result for key-value store operations."""

from __future__ import annotations

from dataclasses import dataclass

from kv_facade_core.exceptions import StoreOperationError


@dataclass(frozen=True, slots=True)
class StoreResult:
    """Outcome of a single store call.

    ``value`` is only meaningful for reads; it stays ``None`` for writes,
    deletes, failures and absent keys alike. Check ``ok`` (or call
    ``unwrap``) to tell an absent key from a failed lookup.
    """

    ok: bool
    value: str | None = None
    error: StoreOperationError | None = None

    @classmethod
    def success(cls, value: str | None = None) -> StoreResult:
        """Build a successful result."""
        return cls(ok=True, value=value)

    @classmethod
    def failure(cls, error: StoreOperationError) -> StoreResult:
        """Build a failed result carrying the wrapped error."""
        return cls(ok=False, error=error)

    def unwrap(self) -> str | None:
        """Return the value, or raise the recorded error."""
        if self.error is not None:
            raise self.error
        return self.value
