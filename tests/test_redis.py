"""Redis pool lifecycle tests. No server needed: from_url is swapped out."""

import pytest
from redis.exceptions import ConnectionError as RedisConnectionError

from zenith.db import redis as redis_pool


class UnreachableRedis:
    def __init__(self):
        self.closed = False

    async def ping(self):
        raise RedisConnectionError("connection refused")

    async def aclose(self):
        self.closed = True


class ReachableRedis(UnreachableRedis):
    async def ping(self):
        return True


@pytest.mark.asyncio
async def test_failed_ping_closes_client(monkeypatch):
    client = UnreachableRedis()
    monkeypatch.setattr(redis_pool.aioredis, "from_url", lambda *a, **kw: client)

    with pytest.raises(RedisConnectionError):
        await redis_pool.init_redis()

    assert client.closed is True
    with pytest.raises(RuntimeError):
        redis_pool.get_redis()


@pytest.mark.asyncio
async def test_init_then_close(monkeypatch):
    client = ReachableRedis()
    monkeypatch.setattr(redis_pool.aioredis, "from_url", lambda *a, **kw: client)

    assert await redis_pool.init_redis() is client
    assert redis_pool.get_redis() is client

    await redis_pool.close_redis()
    assert client.closed is True
    with pytest.raises(RuntimeError):
        redis_pool.get_redis()
