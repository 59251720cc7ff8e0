"""Cache store adapters."""

from mediahub.infrastructure.cache.factory import create_cache_store
from mediahub.infrastructure.cache.memory_cache_store import InMemoryCacheStore
from mediahub.infrastructure.cache.redis_cache_store import RedisCacheStore

__all__ = ["InMemoryCacheStore", "RedisCacheStore", "create_cache_store"]
