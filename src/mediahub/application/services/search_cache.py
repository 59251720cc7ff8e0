"""Fault-tolerant cache access for the search features.

A cache failure must never change what a caller sees: reads that fail are
misses and writes that fail are dropped. Both are logged.
"""

import logging
from typing import Any, Iterable

from mediahub.application.ports import CacheStore
from mediahub.domain.search import Feature, cache_key_prefix, key_matches_query

logger = logging.getLogger(__name__)

NETDISK_TTL_SECONDS = 30 * 60
YOUTUBE_TTL_SECONDS = 60 * 60
YOUTUBE_FALLBACK_TTL_SECONDS = 5 * 60

SEARCH_PREFIXES: tuple[str, ...] = tuple(cache_key_prefix(f) for f in Feature)


class SearchCache:
    """Wraps a ``CacheStore`` with the swallow-and-log error policy."""

    def __init__(self, store: CacheStore):
        self._store = store

    @property
    def store(self) -> CacheStore:
        return self._store

    async def lookup(self, key: str) -> Any | None:
        try:
            payload = await self._store.get(key)
        except Exception as e:
            logger.warning("Cache read failed for %s: %s", key, e)
            return None

        if payload is None:
            logger.debug("Cache miss: %s", key)
        else:
            logger.debug("Cache hit: %s", key)
        return payload

    async def store(self, key: str, payload: Any, ttl_seconds: int) -> None:
        if ttl_seconds <= 0:
            return
        try:
            await self._store.set(key, payload, ttl_seconds)
            logger.debug("Cached %s for %ds", key, ttl_seconds)
        except Exception as e:
            logger.warning("Cache write failed for %s: %s", key, e)

    async def clear_prefix(self, prefix: str) -> int:
        """Delete every key starting with ``prefix`` and return the count."""
        return await self._clear(prefix, lambda _key: True)

    async def clear_matching_query(
        self,
        query: str,
        prefixes: Iterable[str] = SEARCH_PREFIXES,
    ) -> int:
        """Delete the search entries that were built for ``query``."""
        deleted = 0
        for prefix in prefixes:
            deleted += await self._clear(
                prefix,
                lambda key: key_matches_query(key, query),
            )
        return deleted

    async def clear_all_search(self) -> int:
        deleted = 0
        for prefix in SEARCH_PREFIXES:
            deleted += await self.clear_prefix(prefix)
        logger.info("Cleared %d search cache entries", deleted)
        return deleted

    async def _clear(self, prefix: str, predicate) -> int:
        deleted = 0
        try:
            keys = [k async for k in self._store.list_keys_by_prefix(prefix)]
            for key in keys:
                if predicate(key):
                    await self._store.delete(key)
                    deleted += 1
        except Exception as e:
            logger.warning("Cache clear failed for prefix %s: %s", prefix, e)
        return deleted
