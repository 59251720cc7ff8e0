"""Admin config providers."""

from mediahub.infrastructure.config.file_config_provider import (
    ConfigLoadError,
    FileConfigProvider,
)

__all__ = ["ConfigLoadError", "FileConfigProvider"]
