"""Application settings loaded from environment variables.

Configuration file discovery (in priority order):
1. OS environment variables (always highest priority)
2. MEDIAHUB_ENV_FILE environment variable (absolute path to .env file)
3. config/.env.dev - local development
4. config/.env - production/Docker

Uses pydantic-settings for automatic type coercion and validation.
"""

from __future__ import annotations

import os
from functools import lru_cache
from pathlib import Path
from typing import Any, Literal

from pydantic import SecretStr, computed_field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


def _find_project_root() -> Path:
    """Find the project root directory."""
    current = Path(__file__).resolve().parent

    for parent in [current, *current.parents]:
        if (parent / "config").is_dir():
            return parent
        if (parent / ".git").is_dir():
            return parent
        if parent == Path("/app"):
            return parent

    return Path(__file__).resolve().parents[2]


def get_config_dir() -> Path:
    """Get the config directory path (for the admin config.json, etc.)."""
    return _find_project_root() / "config"


def _resolve_env_file_path() -> Path | None:
    """Resolve the .env file path.

    Priority:
    1. MEDIAHUB_ENV_FILE env var (full path)
    2. config/.env.dev (local development)
    3. config/.env (production)
    """
    env_file_path = os.environ.get("MEDIAHUB_ENV_FILE")
    if env_file_path:
        path = Path(env_file_path)
        if not path.is_absolute():
            path = _find_project_root() / path
        if path.exists():
            return path

    config_dir = get_config_dir()

    dev_env = config_dir / ".env.dev"
    if dev_env.exists():
        return dev_env

    prod_env = config_dir / ".env"
    if prod_env.exists():
        return prod_env

    return None


class Settings(BaseSettings):
    """Process-level configuration loaded from environment variables.

    Values are loaded from:
    1. OS environment variables (highest priority)
    2. .env file (config/.env.dev or config/.env)
    3. Default values

    These values are read once at process start. Runtime feature toggles
    (sources, NetDisk, YouTube, registration) live in the admin config file
    and are served by a ConfigProvider instead.
    """

    model_config = SettingsConfigDict(
        env_file=_resolve_env_file_path(),
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Application
    app_name: str = "MediaHub"

    # Owner account. The password doubles as the cookie signing secret.
    admin_username: str = ""
    admin_password: SecretStr | None = None

    # Storage
    # "memory": single-password login, in-process cache
    # "redis": account login, Redis cache
    # "database": account login, in-process cache
    storage_type: Literal["memory", "redis", "database"] = "memory"
    redis_url: str = "redis://localhost:6379/0"
    database_url: str = "sqlite+aiosqlite:///./data/mediahub.db"

    # Admin config (sources, NetDisk, YouTube, user tags)
    config_file: str = ""

    # API (API_ prefix)
    api_host: str = "0.0.0.0"
    api_port: int = 3000
    api_debug: bool = False
    api_cors_origins: str = ""  # Empty = no CORS allowed (secure default)
    api_cookie_secure: bool = False
    api_cookie_max_age_days: int = 7

    @field_validator("api_cors_origins", mode="before")
    @classmethod
    def _validate_cors_origins(cls, v: Any) -> str:
        """Ensure cors_origins is stored as comma-separated string."""
        if isinstance(v, list):
            return ",".join(v)
        return str(v) if v else ""

    # Search
    search_timeout_seconds: float = 20.0

    # Logging
    log_level: str = "INFO"

    @computed_field  # type: ignore[prop-decorator]
    @property
    def cors_origins(self) -> list[str]:
        """Parse CORS origins from comma-separated string."""
        return [o.strip() for o in self.api_cors_origins.split(",") if o.strip()]

    @property
    def password_only_mode(self) -> bool:
        """True when login checks a single shared password without accounts."""
        return self.storage_type == "memory"

    @property
    def admin_password_value(self) -> str:
        if self.admin_password is None:
            return ""
        return self.admin_password.get_secret_value()

    @property
    def resolved_config_file(self) -> Path:
        """Admin config path, defaulting to config/config.json."""
        if self.config_file:
            path = Path(self.config_file)
            if not path.is_absolute():
                path = _find_project_root() / path
            return path
        return get_config_dir() / "config.json"


@lru_cache()
def get_settings() -> Settings:
    """Return cached application settings."""
    return Settings()


def clear_settings_cache() -> None:
    """Clear the settings cache (useful for tests)."""
    get_settings.cache_clear()
