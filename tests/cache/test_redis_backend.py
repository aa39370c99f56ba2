"""
Tests for RedisBackend and the cache factory.
"""
from unittest.mock import AsyncMock, MagicMock

import pytest
from redis.exceptions import RedisError

from shiro_biz.cache.backends.memory import MemoryBackend
from shiro_biz.cache.backends.redis import RedisBackend
from shiro_biz.cache.factory import get_cache_backend
from shiro_biz.core.exceptions import CacheException


@pytest.fixture
def redis_client():
    client = MagicMock()
    client.get = AsyncMock(return_value=None)
    client.setex = AsyncMock(return_value=True)
    client.delete = AsyncMock(return_value=1)
    client.exists = AsyncMock(return_value=1)
    return client


@pytest.fixture
def backend(redis_client):
    return RedisBackend(redis_client=redis_client, key_prefix="test:", default_ttl=120)


@pytest.mark.asyncio
async def test_get_deserializes_json(backend, redis_client):
    redis_client.get.return_value = b'"AbCd"'

    assert await backend.get("captcha") == "AbCd"
    redis_client.get.assert_awaited_once_with("test:captcha")


@pytest.mark.asyncio
async def test_get_missing_returns_default(backend):
    assert await backend.get("captcha", "none") == "none"


@pytest.mark.asyncio
async def test_get_error_returns_default(backend, redis_client):
    redis_client.get.side_effect = RedisError("down")

    assert await backend.get("captcha") is None


@pytest.mark.asyncio
async def test_set_uses_prefix_and_default_ttl(backend, redis_client):
    assert await backend.set("date", 1700000000000) is True

    redis_client.setex.assert_awaited_once_with("test:date", 120, "1700000000000")


@pytest.mark.asyncio
async def test_set_with_explicit_ttl(backend, redis_client):
    await backend.set("captcha", None, ttl=30)

    redis_client.setex.assert_awaited_once_with("test:captcha", 30, "null")


@pytest.mark.asyncio
async def test_set_error_returns_false(backend, redis_client):
    redis_client.setex.side_effect = RedisError("down")

    assert await backend.set("captcha", "AbCd") is False


@pytest.mark.asyncio
async def test_delete_and_exists(backend, redis_client):
    assert await backend.delete("captcha") is True
    assert await backend.exists("captcha") is True

    redis_client.exists.return_value = 0
    assert await backend.exists("captcha") is False


def test_factory_builds_memory_backend():
    assert isinstance(get_cache_backend("memory", cleanup_interval=0), MemoryBackend)


def test_factory_falls_back_to_memory_for_unknown_backend():
    assert isinstance(get_cache_backend("memcached", cleanup_interval=0), MemoryBackend)


def test_factory_builds_redis_backend(redis_client):
    backend = get_cache_backend("redis", redis_client=redis_client)

    assert isinstance(backend, RedisBackend)
    assert backend.client is redis_client


def test_factory_falls_back_when_redis_url_is_invalid():
    backend = get_cache_backend(
        "redis", redis_url="not-a-url", cleanup_interval=0
    )

    assert isinstance(backend, MemoryBackend)


def test_factory_raises_when_fallback_disabled():
    with pytest.raises(CacheException) as exc_info:
        get_cache_backend("redis", redis_url="not-a-url", fallback=False)

    assert isinstance(exc_info.value.__cause__, ValueError)


def test_factory_rejects_unknown_backend_when_fallback_disabled():
    with pytest.raises(CacheException):
        get_cache_backend("memcached", fallback=False)
