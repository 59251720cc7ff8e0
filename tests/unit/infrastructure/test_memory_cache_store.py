"""Unit tests for InMemoryCacheStore."""

from mediahub.infrastructure.cache import InMemoryCacheStore


class FakeClock:
    def __init__(self):
        self.now = 1000.0

    def __call__(self) -> float:
        return self.now


class TestInMemoryCacheStore:
    """Tests for the in-process cache backend."""

    def setup_method(self):
        self.clock = FakeClock()
        self.store = InMemoryCacheStore(clock=self.clock)

    async def test_set_then_get(self):
        await self.store.set("k", {"a": [1, 2]}, 60)

        assert await self.store.get("k") == {"a": [1, 2]}

    async def test_missing_key(self):
        assert await self.store.get("nope") is None

    async def test_entry_expires_after_ttl(self):
        await self.store.set("k", "v", 60)

        self.clock.now += 59
        assert await self.store.get("k") == "v"
        self.clock.now += 1
        assert await self.store.get("k") is None
        assert len(self.store) == 0

    async def test_reads_return_independent_copies(self):
        await self.store.set("k", {"items": []}, 60)

        first = await self.store.get("k")
        first["items"].append("mutated")

        assert await self.store.get("k") == {"items": []}

    async def test_overwrite_resets_ttl(self):
        await self.store.set("k", "old", 10)
        self.clock.now += 5
        await self.store.set("k", "new", 10)
        self.clock.now += 8

        assert await self.store.get("k") == "new"

    async def test_delete_is_idempotent(self):
        await self.store.set("k", "v", 60)

        await self.store.delete("k")
        await self.store.delete("k")

        assert await self.store.get("k") is None

    async def test_list_keys_by_prefix_skips_expired(self):
        await self.store.set("search:a", 1, 10)
        await self.store.set("search:b", 2, 100)
        await self.store.set("netdisk-search:a", 3, 100)
        self.clock.now += 50

        keys = [k async for k in self.store.list_keys_by_prefix("search:")]

        assert keys == ["search:b"]

    async def test_close_drops_everything(self):
        await self.store.set("k", "v", 60)

        await self.store.close()

        assert len(self.store) == 0

    async def test_unread_expired_entries_are_purged_on_write(self):
        for i in range(1000):
            await self.store.set(f"search:{i}", i, 60)
            self.clock.now += 120

        assert len(self.store) == 1

    async def test_listing_purges_expired_entries(self):
        await self.store.set("search:a", 1, 10)
        await self.store.set("youtube-search:a", 2, 10)
        await self.store.set("search:b", 3, 100)
        self.clock.now += 50

        keys = [k async for k in self.store.list_keys_by_prefix("netdisk-")]

        assert keys == []
        assert len(self.store) == 1
