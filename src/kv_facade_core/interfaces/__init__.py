"""Public interface re-exports for kv_facade_core."""

from kv_facade_core.interfaces.store import KeyValueStore

__all__ = [
    "KeyValueStore",
]
