"""Process-wide shared Redis facade.

Importing this module creates the one connection handle for the process.
redis-py opens sockets lazily, so no I/O happens until the first command.
``redis_facade`` starts disconnected with no heartbeat running: call
``await redis_facade.connect()`` once at startup so ``is_alive()`` tracks
the connection, and ``await redis_facade.close()`` at shutdown.
"""

from __future__ import annotations

import functools

from redis.asyncio import Redis

from kv_facade_core.config.settings import Settings
from kv_facade_infra.cache.connection_monitor import ConnectionMonitor
from kv_facade_infra.cache.redis_facade import RedisFacade


def build_redis_facade(settings: Settings) -> RedisFacade:
    """Create a facade and its client from settings."""
    client = Redis.from_url(settings.redis_url, decode_responses=True)
    monitor = ConnectionMonitor(
        client,
        interval_seconds=settings.heartbeat_interval_seconds,
        timeout_seconds=settings.heartbeat_timeout_seconds,
        enabled=settings.heartbeat_enabled,
    )
    return RedisFacade(client, monitor=monitor)


@functools.cache
def get_redis_facade() -> RedisFacade:
    """Return the process-wide facade, creating it on first call."""
    return build_redis_facade(Settings())


redis_facade = get_redis_facade()
