"""Application ports implemented by the infrastructure layer."""

from mediahub.application.ports.cache_store import CacheStore
from mediahub.application.ports.config_provider import ConfigProvider
from mediahub.application.ports.search_clients import (
    NetDiskSearchPort,
    VideoSourcePort,
    YouTubeSearchPort,
)

__all__ = [
    "CacheStore",
    "ConfigProvider",
    "NetDiskSearchPort",
    "VideoSourcePort",
    "YouTubeSearchPort",
]
