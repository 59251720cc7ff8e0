"""Unit tests for SearchCache."""

from mediahub.application.services import SearchCache
from mediahub.application.services.search_cache import SEARCH_PREFIXES
from mediahub.domain.search import Feature, build_cache_key
from mediahub.infrastructure.cache import InMemoryCacheStore


class FlakyDeleteStore(InMemoryCacheStore):
    """Store whose deletes fail after the first one succeeds."""

    def __init__(self):
        super().__init__()
        self.deletes = 0

    async def delete(self, key: str) -> None:
        self.deletes += 1
        if self.deletes > 1:
            raise ConnectionError("cache down")
        await super().delete(key)


class TestSearchCacheReadWrite:
    """Tests for lookup and store."""

    async def test_store_then_lookup(self, search_cache):
        await search_cache.store("search:q:", [{"title": "A"}], 60)

        assert await search_cache.lookup("search:q:") == [{"title": "A"}]

    async def test_missing_key_is_a_miss(self, search_cache):
        assert await search_cache.lookup("search:nothing:") is None

    async def test_non_positive_ttl_is_not_stored(self, search_cache, memory_store):
        await search_cache.store("search:q:", [1], 0)

        assert len(memory_store) == 0

    async def test_read_failure_is_a_miss(self, broken_cache):
        assert await broken_cache.lookup("search:q:") is None

    async def test_write_failure_is_swallowed(self, broken_cache, broken_store):
        await broken_cache.store("search:q:", [1], 60)

        assert broken_store.calls == 1


class TestSearchCacheClearing:
    """Tests for prefix and query based clearing."""

    async def test_clear_prefix_removes_only_prefixed_keys(
        self, search_cache, memory_store
    ):
        await memory_store.set("youtube-search:a:", {}, 60)
        await memory_store.set("youtube-search:b:", {}, 60)
        await memory_store.set("search:a:", [], 60)

        deleted = await search_cache.clear_prefix("youtube-")

        assert deleted == 2
        assert await memory_store.get("search:a:") == []

    async def test_clear_matching_query(self, search_cache, memory_store):
        matrix = build_cache_key(Feature.GENERIC, "matrix", ["x=1"])
        matrix_netdisk = build_cache_key(Feature.NETDISK, "matrix", [])
        other = build_cache_key(Feature.GENERIC, "matrix reloaded", ["x=1"])
        for key in (matrix, matrix_netdisk, other):
            await memory_store.set(key, [1], 60)

        deleted = await search_cache.clear_matching_query("matrix")

        assert deleted == 2
        assert await memory_store.get(other) == [1]

    async def test_clear_all_search_leaves_foreign_keys(
        self, search_cache, memory_store
    ):
        for prefix in SEARCH_PREFIXES:
            await memory_store.set(f"{prefix}q:", [1], 60)
        await memory_store.set("unrelated", [1], 60)

        deleted = await search_cache.clear_all_search()

        assert deleted == len(SEARCH_PREFIXES)
        assert await memory_store.get("unrelated") == [1]

    async def test_clear_failure_reports_zero(self, broken_cache):
        assert await broken_cache.clear_prefix("youtube-") == 0

    async def test_partial_clear_failure_reports_deleted_so_far(self):
        store = FlakyDeleteStore()
        await store.set("youtube-search:a", 1, 60)
        await store.set("youtube-search:b", 2, 60)

        deleted = await SearchCache(store).clear_prefix("youtube-")

        assert deleted == 1
        assert len(store) == 1
