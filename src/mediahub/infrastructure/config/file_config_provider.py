"""Admin config loaded from a JSON file."""

import json
import logging
from pathlib import Path

from pydantic import ValidationError as PydanticValidationError

from mediahub.application.ports import ConfigProvider
from mediahub.domain.config import AdminConfig

logger = logging.getLogger(__name__)


class ConfigLoadError(Exception):
    """Raised when the admin config file exists but cannot be used."""

    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        super().__init__(f"Cannot load admin config {path}: {reason}")


class FileConfigProvider(ConfigProvider):
    """Serve the admin config from ``path``.

    A missing file yields the default configuration (every feature off, no
    sources). The file is read once and only re-read by ``reload``.
    """

    def __init__(self, path: Path):
        self._path = path
        self._config: AdminConfig | None = None

    @property
    def path(self) -> Path:
        return self._path

    async def get_config(self) -> AdminConfig:
        if self._config is None:
            self._config = self._load()
        return self._config

    async def reload(self) -> AdminConfig:
        self._config = self._load()
        return self._config

    def _load(self) -> AdminConfig:
        if not self._path.exists():
            logger.warning("Admin config %s not found, using defaults", self._path)
            return AdminConfig()

        try:
            raw = json.loads(self._path.read_text(encoding="utf-8"))
            config = AdminConfig.model_validate(raw)
        except (OSError, ValueError, PydanticValidationError) as e:
            raise ConfigLoadError(self._path, str(e)) from e

        logger.info(
            "Loaded admin config from %s (%d sources)",
            self._path,
            len(config.sources),
        )
        return config
