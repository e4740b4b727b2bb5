"""Connection state tracking for a shared Redis handle.

redis-py's asyncio client has no "connected" flag and no error event; a
dead socket is only noticed when a command is sent. The monitor keeps
the observable state instead: operations report their outcome, and a
background heartbeat pings the server so a severed connection shows up
without waiting for the next get/set/delete.
"""

from __future__ import annotations

import asyncio
import contextlib

import structlog
from redis.asyncio import Redis
from redis.exceptions import RedisError

logger = structlog.get_logger()

CLIENT_ERROR_EVENT = "Redis Client Error:"


class ConnectionMonitor:
    """Tracks whether the Redis handle is connected or disconnected."""

    def __init__(
        self,
        redis: Redis,  # type: ignore[type-arg]
        interval_seconds: float = 1.0,
        timeout_seconds: float = 1.0,
        *,
        enabled: bool = True,
    ) -> None:
        """Initialize with the client to ping and heartbeat timings."""
        self._redis = redis
        self._enabled = enabled
        self._interval = interval_seconds
        self._timeout = timeout_seconds
        self._connected = False
        self._task: asyncio.Task[None] | None = None

    @property
    def connected(self) -> bool:
        """Last observed connection state."""
        return self._connected

    @property
    def running(self) -> bool:
        """Whether the heartbeat task is active."""
        return self._task is not None and not self._task.done()

    def mark_connected(self) -> None:
        """Record a successful round trip to the server."""
        if not self._connected:
            logger.info("redis_connected")
        self._connected = True

    def mark_disconnected(self, error: BaseException) -> None:
        """Record a transport failure, logging it on the transition."""
        if self._connected:
            logger.error(CLIENT_ERROR_EVENT, error=repr(error))
        else:
            logger.debug("redis_still_disconnected", error=repr(error))
        self._connected = False

    async def check(self) -> bool:
        """Ping the server once and update the state from the outcome."""
        try:
            await asyncio.wait_for(self._redis.ping(), timeout=self._timeout)
        except (RedisError, OSError, TimeoutError) as e:
            self.mark_disconnected(e)
        else:
            self.mark_connected()
        return self._connected

    async def start(self) -> None:
        """Start the heartbeat task (idempotent; no-op when disabled)."""
        if self.running or not self._enabled:
            return
        self._task = asyncio.create_task(self._heartbeat_loop(), name="redis-heartbeat")
        logger.debug("redis_heartbeat_started", interval=self._interval)

    async def stop(self) -> None:
        """Cancel the heartbeat task and wait for it to finish."""
        if self._task is None:
            return
        self._task.cancel()
        with contextlib.suppress(asyncio.CancelledError):
            await self._task
        self._task = None
        logger.debug("redis_heartbeat_stopped")

    async def _heartbeat_loop(self) -> None:
        """Ping forever, one interval apart.

        An unexpected error ends the heartbeat; it is logged and the state
        drops to disconnected so is_alive() does not report a stale True.
        """
        while True:
            await asyncio.sleep(self._interval)
            try:
                await self.check()
            except Exception:
                logger.exception("redis_heartbeat_crashed")
                self._connected = False
                return
