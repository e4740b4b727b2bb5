"""Observability: structured logging."""

from kv_facade_core.observability.logging import (
    bind_log_context,
    clear_log_context,
    configure_logging,
)

__all__ = [
    "bind_log_context",
    "clear_log_context",
    "configure_logging",
]
