"""Admin configuration models."""

from mediahub.domain.config.admin_config import (
    DEFAULT_CLOUD_TYPES,
    AdminConfig,
    NetDiskConfig,
    SiteConfig,
    SourceConfig,
    UserConfig,
    UserTag,
    YouTubeConfig,
)

__all__ = [
    "DEFAULT_CLOUD_TYPES",
    "AdminConfig",
    "NetDiskConfig",
    "SiteConfig",
    "SourceConfig",
    "UserConfig",
    "UserTag",
    "YouTubeConfig",
]
