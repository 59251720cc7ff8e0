"""Cloud-storage resource search."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from mediahub.application.services.search_cache import NETDISK_TTL_SECONDS
from mediahub.domain.search import (
    Feature,
    build_cache_key,
    discriminator,
    filter_merged_by_type,
)
from mediahub.domain.shared import (
    ErrorCode,
    FeatureDisabledError,
    UpstreamError,
    ValidationError,
    utc_now_iso,
)

if TYPE_CHECKING:
    from mediahub.application.ports import ConfigProvider, NetDiskSearchPort
    from mediahub.application.services.search_cache import SearchCache

logger = logging.getLogger(__name__)

UPSTREAM_SUGGESTION = (
    "Check that the NetDisk search service is running or contact the administrator"
)


class NetDiskSearchService:
    """Search cloud-storage share links through a single upstream service."""

    def __init__(
        self,
        config_provider: ConfigProvider,
        cache: SearchCache,
        client: NetDiskSearchPort,
    ):
        self._config_provider = config_provider
        self._cache = cache
        self._client = client

    async def search(self, query: str | None) -> dict[str, Any]:
        """Return ``{"success": True, "data": {...}}`` for ``query``.

        Raises
        ------
        ValidationError
            If the query is empty
        FeatureDisabledError
            If the feature is off or has no upstream URL (checked before the
            cache so disabling takes effect immediately)
        UpstreamError
            If the upstream times out, fails or answers with an error
        """
        if not query:
            raise ValidationError("Search query cannot be empty", ErrorCode.EMPTY_QUERY)

        config = (await self._config_provider.get_config()).netdisk
        if not config.enabled:
            raise FeatureDisabledError("NetDisk search is not enabled")
        if not config.pansou_url:
            raise FeatureDisabledError(
                "NetDisk search service URL is not configured",
                ErrorCode.FEATURE_NOT_CONFIGURED,
            )

        cloud_types = list(config.enabled_cloud_types)
        key = build_cache_key(
            Feature.NETDISK,
            query,
            [
                discriminator("enabled", config.enabled),
                discriminator("cloud_types", cloud_types),
            ],
        )

        cached = await self._cache.lookup(key)
        if isinstance(cached, dict):
            logger.info("NetDisk cache hit for '%s'", query)
            return {
                **cached,
                "fromCache": True,
                "cacheSource": "cache",
                "cacheTimestamp": utc_now_iso(),
            }

        try:
            data = await self._client.search(
                config.pansou_url,
                query,
                cloud_types,
                config.timeout_seconds,
            )
        except UpstreamError as e:
            logger.warning("NetDisk search for '%s' failed: %s", query, e.message)
            e.suggestion = e.suggestion or UPSTREAM_SUGGESTION
            raise

        filtered = filter_merged_by_type(data, query)
        body = filtered if isinstance(filtered, dict) else {}
        response = {
            "success": True,
            "data": {
                **body,
                "source": "pansou",
                "query": query,
                "timestamp": utc_now_iso(),
            },
        }

        await self._cache.store(key, response, NETDISK_TTL_SECONDS)
        logger.info(
            "NetDisk search '%s' returned %s results",
            query,
            response["data"].get("total", 0),
        )
        return response
