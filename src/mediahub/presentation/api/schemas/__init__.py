"""Pydantic schemas for API requests and responses."""

from mediahub.presentation.api.schemas.admin import (
    CacheClearRequest,
    CacheClearResponse,
    ConfigReloadResponse,
    YouTubeCacheClearResponse,
)
from mediahub.presentation.api.schemas.auth import (
    LoginRequest,
    OkResponse,
    PasswordChangeStatusResponse,
    RegisterRequest,
)

__all__ = [
    "CacheClearRequest",
    "CacheClearResponse",
    "ConfigReloadResponse",
    "LoginRequest",
    "OkResponse",
    "PasswordChangeStatusResponse",
    "RegisterRequest",
    "YouTubeCacheClearResponse",
]
