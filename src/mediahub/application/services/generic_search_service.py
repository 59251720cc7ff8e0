"""Generic multi-source video search."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Sequence

from mediahub.application.dtos import GenericSearchResult
from mediahub.domain.search import (
    DEFAULT_BLOCKED_CATEGORIES,
    Feature,
    ResultRecord,
    SourceDescriptor,
    build_cache_key,
    discriminator,
    filter_blocked_categories,
    filter_relevant,
)

if TYPE_CHECKING:
    from mediahub.application.ports import ConfigProvider, VideoSourcePort
    from mediahub.application.services.search_aggregator import SearchAggregator
    from mediahub.application.services.search_cache import SearchCache
    from mediahub.domain.config import AdminConfig
    from mediahub.domain.user import User

logger = logging.getLogger(__name__)


class GenericSearchService:
    """
    Fan a query out to every source the caller may use.

    Pipeline: source selection, cache lookup, aggregation, relevance filter,
    content filter, cache store. Empty outcomes are never cached so a
    temporarily failing source does not pin an empty answer.
    """

    def __init__(
        self,
        config_provider: ConfigProvider,
        cache: SearchCache,
        source_client: VideoSourcePort,
        aggregator: SearchAggregator,
        source_timeout_seconds: float = 20.0,
        blocklist: Sequence[str] = DEFAULT_BLOCKED_CATEGORIES,
    ):
        self._config_provider = config_provider
        self._cache = cache
        self._source_client = source_client
        self._aggregator = aggregator
        self._source_timeout = source_timeout_seconds
        self._blocklist = blocklist

    async def search(self, query: str, user: User | None = None) -> GenericSearchResult:
        """Search all sources available to ``user``.

        ``user`` is ``None`` for the owner and in single-password mode, both
        of which may use every enabled source.
        """
        config = await self._config_provider.get_config()
        cache_time = config.site.cache_time_seconds

        if not query:
            return GenericSearchResult(results=[], cache_time_seconds=cache_time)

        sources = self.available_sources(config, user)
        max_pages = config.site.search_max_pages
        filter_enabled = not config.site.disable_content_filter

        key = build_cache_key(
            Feature.GENERIC,
            query,
            [
                discriminator("sources", [s.key for s in sources]),
                discriminator("content_filter", filter_enabled),
                discriminator("max_pages", max_pages),
            ],
        )
        cached = await self._cache.lookup(key)
        if isinstance(cached, list):
            logger.info("Search cache hit for '%s' (%d results)", query, len(cached))
            return GenericSearchResult(
                results=cached,
                cache_time_seconds=cache_time,
                from_cache=True,
            )

        async def fetch(source: SourceDescriptor, q: str) -> list[ResultRecord]:
            return await self._source_client.search(source, q, max_pages)

        records = await self._aggregator.aggregate(query, sources, fetch)
        records = filter_relevant(records, query)
        if filter_enabled:
            records = filter_blocked_categories(records, self._blocklist)

        logger.info(
            "Search '%s' over %d sources returned %d results",
            query,
            len(sources),
            len(records),
        )

        if not records:
            return GenericSearchResult(results=[])

        await self._cache.store(key, records, cache_time)
        return GenericSearchResult(results=records, cache_time_seconds=cache_time)

    def available_sources(
        self,
        config: AdminConfig,
        user: User | None,
    ) -> list[SourceDescriptor]:
        """Enabled sources, narrowed by the user's source or tag restrictions.

        Explicit ``enabled_apis`` take precedence over tags; tags contribute
        the union of their sources. No restriction means every source.
        """
        sources = [
            s.to_descriptor(self._source_timeout)
            for s in config.sources
            if not s.disabled
        ]
        if user is None:
            return sources

        allowed: set[str] = set(user.enabled_apis)
        if not allowed and user.tags:
            allowed = config.user.apis_for_tags(user.tags)
        if not allowed:
            return sources

        return [s for s in sources if s.key in allowed]
