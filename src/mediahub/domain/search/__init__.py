"""Search domain: value objects, cache keys, relevance and content policy."""

from mediahub.domain.search.cache_keys import (
    build_cache_key,
    cache_key_prefix,
    discriminator,
    key_matches_query,
)
from mediahub.domain.search.content_policy import (
    DEFAULT_BLOCKED_CATEGORIES,
    filter_blocked_categories,
    is_blocked,
)
from mediahub.domain.search.relevance import (
    GENERIC_FIELDS,
    NETDISK_FIELDS,
    YOUTUBE_FIELDS,
    filter_merged_by_type,
    filter_relevant,
    is_relevant,
)
from mediahub.domain.search.value_objects import (
    Feature,
    ResultRecord,
    SourceDescriptor,
)

__all__ = [
    "DEFAULT_BLOCKED_CATEGORIES",
    "GENERIC_FIELDS",
    "NETDISK_FIELDS",
    "YOUTUBE_FIELDS",
    "Feature",
    "ResultRecord",
    "SourceDescriptor",
    "build_cache_key",
    "cache_key_prefix",
    "discriminator",
    "filter_blocked_categories",
    "filter_merged_by_type",
    "filter_relevant",
    "is_blocked",
    "is_relevant",
    "key_matches_query",
]
