"""Unit tests for RedisCacheStore against a fake client."""

import json
from unittest.mock import AsyncMock

from mediahub.infrastructure.cache import RedisCacheStore
from mediahub.infrastructure.cache.redis_cache_store import _escape_glob


class FakeRedis:
    """Subset of ``redis.asyncio.Redis`` used by the store."""

    def __init__(self, keys=()):
        self.get = AsyncMock(return_value=None)
        self.setex = AsyncMock()
        self.delete = AsyncMock()
        self.aclose = AsyncMock()
        self.keys = list(keys)
        self.scan_calls = []

    async def scan_iter(self, match=None, count=None):
        self.scan_calls.append((match, count))
        for key in self.keys:
            yield key


class TestRedisCacheStore:
    """Tests for the Redis cache backend."""

    async def test_set_writes_json_with_ttl(self):
        client = FakeRedis()
        store = RedisCacheStore(client)

        await store.set("k", {"title": "Ünïcode"}, 300)

        client.setex.assert_awaited_once_with("k", 300, '{"title": "Ünïcode"}')

    async def test_get_decodes_json(self):
        client = FakeRedis()
        client.get.return_value = json.dumps({"a": 1})
        store = RedisCacheStore(client)

        assert await store.get("k") == {"a": 1}

    async def test_get_miss(self):
        store = RedisCacheStore(FakeRedis())

        assert await store.get("k") is None

    async def test_delete(self):
        client = FakeRedis()
        store = RedisCacheStore(client)

        await store.delete("k")

        client.delete.assert_awaited_once_with("k")

    async def test_list_keys_uses_scan_with_escaped_pattern(self):
        client = FakeRedis(keys=["youtube-search:a", "youtube-search:b"])
        store = RedisCacheStore(client, scan_count=100)

        keys = [k async for k in store.list_keys_by_prefix("youtube-")]

        assert keys == ["youtube-search:a", "youtube-search:b"]
        assert client.scan_calls == [("youtube-*", 100)]

    async def test_close(self):
        client = FakeRedis()
        store = RedisCacheStore(client)

        await store.close()

        client.aclose.assert_awaited_once()


class TestEscapeGlob:
    """Tests for glob metacharacter escaping."""

    def test_plain_prefix_unchanged(self):
        assert _escape_glob("search:") == "search:"

    def test_metacharacters_are_escaped(self):
        assert _escape_glob("a*b?[c]") == "a\\*b\\?\\[c\\]"

    def test_backslash_is_escaped_first(self):
        assert _escape_glob("a\\*") == "a\\\\\\*"
