"""Admin configuration port."""

from abc import ABC, abstractmethod

from mediahub.domain.config import AdminConfig


class ConfigProvider(ABC):
    """Serves the current admin configuration.

    The configuration is loaded once and only changes through ``reload``.
    """

    @abstractmethod
    async def get_config(self) -> AdminConfig:
        """Return the current admin configuration."""

    @abstractmethod
    async def reload(self) -> AdminConfig:
        """Re-read the configuration from its source and return it."""
