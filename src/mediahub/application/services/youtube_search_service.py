"""YouTube video search with demo and fallback modes."""

from __future__ import annotations

import copy
import logging
import random
from typing import TYPE_CHECKING, Any

from mediahub.application.services.search_cache import (
    YOUTUBE_FALLBACK_TTL_SECONDS,
    YOUTUBE_TTL_SECONDS,
)
from mediahub.application.services.youtube_catalogue import (
    DEMO_VIDEOS,
    FILTER_KEYWORDS,
    QUERY_KEYWORDS,
)
from mediahub.domain.search import (
    YOUTUBE_FIELDS,
    Feature,
    build_cache_key,
    discriminator,
    filter_relevant,
)
from mediahub.domain.shared import (
    ErrorCode,
    FeatureDisabledError,
    UpstreamError,
    UpstreamRejectedError,
    UpstreamStatusError,
    ValidationError,
    utc_now_iso,
)

if TYPE_CHECKING:
    from mediahub.application.ports import ConfigProvider, YouTubeSearchPort
    from mediahub.application.services.search_cache import SearchCache
    from mediahub.domain.config import YouTubeConfig

logger = logging.getLogger(__name__)

DEFAULT_MAX_RESULTS = 25
MAX_RESULTS_LIMIT = 50
FALLBACK_LIMIT = 10

DEMO_MODE_WARNING = "Demo mode is enabled, showing sample data"
NO_API_KEY_WARNING = (
    "No YouTube API key is configured, showing sample data. "
    "Configure an API key in the admin settings to get real results"
)


class YouTubeSearchService:
    """
    Search YouTube, or serve the built-in catalogue.

    Modes:
    - demo: demo enabled or no API key; catalogue results, never calls out
    - live: YouTube Data API; non-2xx answers become a client error
    - fallback: live call failed at the network level; catalogue results
      cached briefly under the request key
    """

    def __init__(
        self,
        config_provider: ConfigProvider,
        cache: SearchCache,
        client: YouTubeSearchPort,
        rng: random.Random | None = None,
    ):
        self._config_provider = config_provider
        self._cache = cache
        self._client = client
        self._rng = rng or random.Random()

    async def search(
        self,
        query: str | None,
        content_type: str = "all",
        order: str = "relevance",
        max_results: int | None = None,
    ) -> dict[str, Any]:
        if not query:
            raise ValidationError("Search query cannot be empty", ErrorCode.EMPTY_QUERY)

        config = (await self._config_provider.get_config()).youtube
        if not config.enabled:
            raise FeatureDisabledError("YouTube search is not enabled")

        requested = max_results or config.max_results or DEFAULT_MAX_RESULTS
        limit = min(requested, MAX_RESULTS_LIMIT)
        key = self._cache_key(config, query, content_type, order, limit)

        cached = await self._cache.lookup(key)
        if isinstance(cached, dict):
            logger.info("YouTube cache hit for '%s'", query)
            return {
                **cached,
                "fromCache": True,
                "cacheSource": "cache",
                "cacheTimestamp": utc_now_iso(),
            }

        if config.enable_demo or not config.api_key:
            response = self._demo_response(config, query, content_type, limit)
            await self._cache.store(key, response, YOUTUBE_TTL_SECONDS)
            return response

        regions = config.enabled_regions
        region_code = regions[0] if len(regions) == 1 else None
        try:
            data = await self._client.search(
                config.api_key,
                self._enrich_query(query.strip(), content_type),
                limit,
                order,
                region_code,
            )
        except UpstreamStatusError as e:
            payload = e.details.get("payload")
            message = describe_rejection(e.status_code, payload)
            logger.warning("YouTube API rejected search for '%s': %s", query, message)
            details = {"status": e.status_code}
            raise UpstreamRejectedError(message, details=details) from e
        except UpstreamError as e:
            logger.warning("YouTube search for '%s' failed: %s", query, e)
            response = self._fallback_response(query)
            await self._cache.store(key, response, YOUTUBE_FALLBACK_TTL_SECONDS)
            return response

        items = data.get("items") or []
        videos = filter_relevant(items, query, YOUTUBE_FIELDS, year_field=None)
        response = {
            "success": True,
            "videos": videos,
            "total": len(videos),
            "query": query,
            "source": "youtube",
        }
        await self._cache.store(key, response, YOUTUBE_TTL_SECONDS)
        logger.info("YouTube search '%s' returned %d videos", query, len(videos))
        return response

    def _cache_key(
        self,
        config: YouTubeConfig,
        query: str,
        content_type: str,
        order: str,
        limit: int,
    ) -> str:
        return build_cache_key(
            Feature.YOUTUBE,
            query,
            [
                discriminator("enabled", config.enabled),
                discriminator("demo", config.enable_demo),
                discriminator("max_results", limit),
                discriminator("content_type", content_type),
                discriminator("order", order),
                discriminator("regions", config.enabled_regions),
                discriminator("categories", config.enabled_categories),
                discriminator("api_key", bool(config.api_key)),
            ],
        )

    def _enrich_query(self, query: str, content_type: str) -> str:
        keywords = QUERY_KEYWORDS.get(content_type)
        if not keywords:
            return query
        return f"{query} {self._rng.choice(keywords)}"

    def _demo_response(
        self,
        config: YouTubeConfig,
        query: str,
        content_type: str,
        limit: int,
    ) -> dict[str, Any]:
        videos = [copy.deepcopy(v) for v in DEMO_VIDEOS]
        needle = query.strip().lower()

        if needle:
            for video in videos:
                snippet = video["snippet"]
                related = (
                    needle in snippet["title"].lower()
                    or needle in snippet["channelTitle"].lower()
                )
                if not related:
                    snippet["title"] = f"{query} - {snippet['title']}"
            videos = filter_relevant(videos, query, YOUTUBE_FIELDS, year_field=None)

        keywords = FILTER_KEYWORDS.get(content_type)
        if keywords:
            videos = [v for v in videos if _mentions_any(v["snippet"], keywords)]

        videos = videos[:limit]
        return {
            "success": True,
            "videos": videos,
            "total": len(videos),
            "query": query,
            "source": "demo",
            "warning": DEMO_MODE_WARNING if config.enable_demo else NO_API_KEY_WARNING,
        }

    def _fallback_response(self, query: str) -> dict[str, Any]:
        videos = []
        for video in DEMO_VIDEOS[:FALLBACK_LIMIT]:
            video = copy.deepcopy(video)
            video["snippet"]["title"] = f"{query} - {video['snippet']['title']}"
            videos.append(video)
        return {
            "success": True,
            "videos": videos,
            "total": len(videos),
            "query": query,
            "source": "fallback",
        }


def _mentions_any(snippet: dict[str, Any], keywords: tuple[str, ...]) -> bool:
    haystacks = (
        snippet.get("title", "").lower(),
        snippet.get("description", "").lower(),
        snippet.get("channelTitle", "").lower(),
    )
    return any(k in h for k in keywords for h in haystacks)


def describe_rejection(status_code: int, payload: Any) -> str:  # NOQA: PLR0911
    """Turn a non-2xx YouTube API answer into an operator-facing message."""
    error = payload.get("error") if isinstance(payload, dict) else None
    error = error if isinstance(error, dict) else {}
    message = error.get("message") or ""
    errors = error.get("errors") or []
    reason = errors[0].get("reason") if errors and isinstance(errors[0], dict) else None

    if status_code == 400:
        if reason == "keyInvalid" or "API key not valid" in message:
            return "YouTube API key is invalid, check the admin configuration"
        if reason == "badRequest":
            if "API key" in message:
                return "YouTube API key is malformed, reconfigure it"
            return f"YouTube API request parameters are invalid: {message}"
        return f"YouTube API request error: {message or 'Bad Request'}"

    if status_code == 403:
        if reason == "quotaExceeded" or "quota" in message:
            return "YouTube API quota exceeded, try again later"
        if "not been used" in message or "disabled" in message:
            return "YouTube Data API v3 is not enabled for this project"
        if "blocked" in message or "restricted" in message:
            return "YouTube API key access is restricted, check the key restrictions"
        return "YouTube API access denied, check the API key permissions"

    if status_code == 401:
        return "YouTube API authentication failed, check the API key"

    return f"YouTube API request failed ({status_code}), check the API key"
