"""Shared pytest fixtures for unit tests."""

from __future__ import annotations

import logging
from collections.abc import Generator
from unittest.mock import MagicMock

import pytest
import structlog

from kv_facade_infra.cache.connection_monitor import ConnectionMonitor
from kv_facade_infra.cache.redis_facade import RedisFacade
from tests.mocks.mock_redis import make_mock_redis
from tests.mocks.mock_settings import make_settings


@pytest.fixture
def mock_settings() -> MagicMock:
    """Return a MagicMock Settings with sensible defaults."""
    return make_settings()


@pytest.fixture
def mock_redis() -> MagicMock:
    """Return a mock redis.asyncio.Redis client."""
    return make_mock_redis()


@pytest.fixture
def facade(mock_redis: MagicMock) -> RedisFacade:
    """Return a RedisFacade over the mock client with a fast heartbeat."""
    monitor = ConnectionMonitor(mock_redis, interval_seconds=0.01, timeout_seconds=0.5)
    return RedisFacade(mock_redis, monitor=monitor)


@pytest.fixture(autouse=True)
def _reset_logging() -> Generator[None, None, None]:
    """Restore root logger handlers and structlog config after each test.

    configure_logging() replaces root handlers; stale StreamHandlers would
    write to pytest-captured streams that are closed during teardown.
    """
    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    yield
    root.handlers = original_handlers
    root.level = original_level
    structlog.contextvars.clear_contextvars()
    structlog.reset_defaults()
