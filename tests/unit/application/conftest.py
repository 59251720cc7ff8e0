"""Fixtures for application service tests."""

from typing import Any, AsyncIterator

import pytest

from mediahub.application.ports import CacheStore
from mediahub.application.services import SearchCache
from mediahub.infrastructure.cache import InMemoryCacheStore


class BrokenCacheStore(CacheStore):
    """Cache store whose every operation fails."""

    def __init__(self):
        self.calls = 0

    async def get(self, key: str) -> Any | None:
        self.calls += 1
        raise ConnectionError("cache down")

    async def set(self, key: str, value: Any, ttl_seconds: int) -> None:
        self.calls += 1
        raise ConnectionError("cache down")

    async def delete(self, key: str) -> None:
        self.calls += 1
        raise ConnectionError("cache down")

    async def list_keys_by_prefix(self, prefix: str) -> AsyncIterator[str]:
        self.calls += 1
        raise ConnectionError("cache down")
        yield  # pragma: no cover

    async def close(self) -> None:
        return None


@pytest.fixture
def memory_store() -> InMemoryCacheStore:
    return InMemoryCacheStore()


@pytest.fixture
def search_cache(memory_store) -> SearchCache:
    return SearchCache(memory_store)


@pytest.fixture
def broken_store() -> BrokenCacheStore:
    return BrokenCacheStore()


@pytest.fixture
def broken_cache(broken_store) -> SearchCache:
    return SearchCache(broken_store)
