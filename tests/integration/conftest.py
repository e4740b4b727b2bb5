"""Integration test fixtures against a real Redis on localhost:6379/1."""

from __future__ import annotations

from collections.abc import AsyncGenerator

import pytest
import pytest_asyncio
from redis.asyncio import Redis

from kv_facade_infra.cache.redis_facade import RedisFacade
from kv_facade_infra.cache.shared import build_redis_facade
from tests.integration.services import redis_up
from tests.mocks.mock_settings import make_real_settings

TEST_REDIS_URL = "redis://localhost:6379/1"


@pytest_asyncio.fixture
async def redis_client() -> AsyncGenerator[Redis, None]:  # type: ignore[type-arg]
    """Function-scoped Redis client on test DB 1, flushed before and after."""
    if not redis_up:
        pytest.skip("Redis not available")

    client = Redis.from_url(TEST_REDIS_URL, decode_responses=True)
    await client.flushdb()
    yield client
    await client.flushdb()
    await client.aclose()


@pytest_asyncio.fixture
async def live_facade(redis_client: Redis) -> AsyncGenerator[RedisFacade, None]:  # type: ignore[type-arg]
    """A connected facade with its own handle and a fast heartbeat."""
    facade = build_redis_facade(make_real_settings())
    await facade.connect()
    yield facade
    await facade.close()
