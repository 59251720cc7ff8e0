"""Application services."""

from mediahub.application.services.authentication_service import (
    AuthenticationService,
)
from mediahub.application.services.cache_admin_service import CacheAdminService
from mediahub.application.services.generic_search_service import (
    GenericSearchService,
)
from mediahub.application.services.netdisk_search_service import (
    NetDiskSearchService,
)
from mediahub.application.services.search_aggregator import SearchAggregator
from mediahub.application.services.search_cache import SearchCache
from mediahub.application.services.youtube_search_service import (
    YouTubeSearchService,
)

__all__ = [
    "AuthenticationService",
    "CacheAdminService",
    "GenericSearchService",
    "NetDiskSearchService",
    "SearchAggregator",
    "SearchCache",
    "YouTubeSearchService",
]
