"""Abstract key-value store interface."""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class KeyValueStore(Protocol):
    """Fail-soft key-value accessor. Implementations can be swapped."""

    def is_alive(self) -> bool:
        """Return whether the store connection is currently up."""
        ...

    async def get(self, key: str) -> str | None:
        """Retrieve a value by key, or None if absent or on failure."""
        ...

    async def set(self, key: str, value: str, duration_seconds: int) -> None:
        """Store a value that expires after ``duration_seconds``."""
        ...

    async def delete(self, key: str) -> None:
        """Delete a key."""
        ...
