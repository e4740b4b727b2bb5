"""Fail-soft Redis facade: get/set/delete that log failures instead of raising."""

from __future__ import annotations

import structlog
from redis.asyncio import Redis
from redis.exceptions import ConnectionError as RedisConnectionError
from redis.exceptions import RedisError
from redis.exceptions import TimeoutError as RedisTimeoutError

from kv_facade_core.exceptions import StoreOperationError
from kv_facade_core.models.result import StoreResult
from kv_facade_infra.cache.connection_monitor import CLIENT_ERROR_EVENT, ConnectionMonitor

logger = structlog.get_logger()

GET_ERROR_EVENT = "Error getting key from Redis:"
SET_ERROR_EVENT = "Error setting key in Redis:"
DELETE_ERROR_EVENT = "Error deleting key from Redis:"

_TRANSPORT_ERRORS = (RedisConnectionError, RedisTimeoutError)


class RedisFacade:
    """Key-value accessor over one Redis handle with fail-soft semantics.

    ``get``, ``set`` and ``delete`` never raise on store failures: the
    error is logged and a default is returned, so an absent key, a lost
    write and an unreachable server all look the same to the caller.
    Callers that need to tell them apart use the ``try_*`` variants,
    which return a :class:`StoreResult`.
    """

    def __init__(
        self,
        redis: Redis,  # type: ignore[type-arg]
        monitor: ConnectionMonitor | None = None,
    ) -> None:
        """Initialize with a redis-py asyncio client."""
        self._redis = redis
        self._monitor = monitor or ConnectionMonitor(redis)

    @property
    def monitor(self) -> ConnectionMonitor:
        """The connection state tracker for this handle."""
        return self._monitor

    def is_alive(self) -> bool:
        """Return True if the handle is currently observed as connected."""
        return self._monitor.connected

    async def connect(self, *, heartbeat: bool = True) -> bool:
        """Ping the server once and optionally start the heartbeat.

        Never raises; an unreachable server is logged and reported as False.
        """
        try:
            await self._redis.ping()
        except RedisError as e:
            # the monitor only reports connected -> disconnected transitions
            if not self._monitor.connected:
                logger.error(CLIENT_ERROR_EVENT, error=repr(e))
            self._monitor.mark_disconnected(e)
        else:
            self._monitor.mark_connected()
        if heartbeat:
            await self._monitor.start()
        return self._monitor.connected

    async def close(self) -> None:
        """Stop the heartbeat and close the client."""
        await self._monitor.stop()
        await self._redis.aclose()  # type: ignore[attr-defined]

    # --- Explicit-result operations ---

    async def try_get(self, key: str) -> StoreResult:
        """Look up ``key``, reporting failure instead of hiding it."""
        try:
            value = await self._redis.get(key)
        except RedisError as e:
            return self._failed(GET_ERROR_EVENT, "get", key, e)
        self._monitor.mark_connected()
        if value is None:
            return StoreResult.success(None)
        if isinstance(value, bytes):
            return StoreResult.success(value.decode("utf-8"))
        return StoreResult.success(str(value))

    async def try_set(self, key: str, value: str, duration_seconds: int) -> StoreResult:
        """Store ``value`` under ``key`` with an EX expiration."""
        try:
            await self._redis.set(name=key, value=value, ex=duration_seconds)
        except RedisError as e:
            return self._failed(SET_ERROR_EVENT, "set", key, e)
        self._monitor.mark_connected()
        return StoreResult.success()

    async def try_delete(self, key: str) -> StoreResult:
        """Remove ``key``. Deleting a missing key succeeds."""
        try:
            await self._redis.delete(key)
        except RedisError as e:
            return self._failed(DELETE_ERROR_EVENT, "delete", key, e)
        self._monitor.mark_connected()
        return StoreResult.success()

    # --- Fail-soft operations ---

    async def get(self, key: str) -> str | None:
        """Retrieve a value by key; None when absent or on failure."""
        result = await self.try_get(key)
        return result.value

    async def set(self, key: str, value: str, duration_seconds: int) -> None:
        """Store a value with expiration; failures are logged and dropped."""
        await self.try_set(key, value, duration_seconds)

    async def delete(self, key: str) -> None:
        """Delete a key; failures are logged and dropped."""
        await self.try_delete(key)

    def _failed(self, event: str, operation: str, key: str, error: RedisError) -> StoreResult:
        """Log a failed store call and wrap it in a failed result."""
        logger.error(event, key=key, error=repr(error))
        if isinstance(error, _TRANSPORT_ERRORS):
            self._monitor.mark_disconnected(error)
        return StoreResult.failure(StoreOperationError(operation, key, error))
