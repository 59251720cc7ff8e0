"""Administrative cache and configuration maintenance."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from mediahub.application.dtos import CacheClearResult
from mediahub.application.services.search_cache import SEARCH_PREFIXES

if TYPE_CHECKING:
    from mediahub.application.ports import ConfigProvider
    from mediahub.application.services.search_cache import SearchCache
    from mediahub.domain.config import AdminConfig

logger = logging.getLogger(__name__)

YOUTUBE_CACHE_PREFIX = "youtube-"


class CacheAdminService:
    """Cache clearing and config reload, restricted to administrators."""

    def __init__(self, cache: SearchCache, config_provider: ConfigProvider):
        self._cache = cache
        self._config_provider = config_provider

    async def clear_youtube(self) -> CacheClearResult:
        deleted = await self._cache.clear_prefix(YOUTUBE_CACHE_PREFIX)
        logger.info("Cleared %d YouTube cache entries", deleted)
        return CacheClearResult(deleted=deleted, prefixes=(YOUTUBE_CACHE_PREFIX,))

    async def clear_search(self, query: str | None = None) -> CacheClearResult:
        """Clear every search cache, or only the entries built for ``query``."""
        if query:
            deleted = await self._cache.clear_matching_query(query)
            logger.info("Cleared %d search cache entries for '%s'", deleted, query)
        else:
            deleted = await self._cache.clear_all_search()
        return CacheClearResult(deleted=deleted, prefixes=SEARCH_PREFIXES, query=query)

    async def reload_config(self) -> tuple[AdminConfig, int]:
        """Reload the admin config and drop every cached derivation of it."""
        config = await self._config_provider.reload()
        deleted = await self._cache.clear_all_search()
        logger.info(
            "Admin config reloaded (%d sources), %d cache entries invalidated",
            len(config.sources),
            deleted,
        )
        return config, deleted
