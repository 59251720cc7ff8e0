"""Cache store selection."""

import logging

from mediahub.application.ports import CacheStore
from mediahub.infrastructure.cache.memory_cache_store import InMemoryCacheStore
from mediahub.infrastructure.cache.redis_cache_store import RedisCacheStore
from mediahub_config.settings import Settings

logger = logging.getLogger(__name__)


def create_cache_store(settings: Settings) -> CacheStore:
    """Pick the cache backend for ``settings.storage_type``."""
    if settings.storage_type == "redis":
        return RedisCacheStore.from_url(settings.redis_url)

    logger.info("Using in-process cache (storage_type=%s)", settings.storage_type)
    return InMemoryCacheStore()
