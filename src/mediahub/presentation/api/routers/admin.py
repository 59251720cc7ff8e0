"""Admin router for cache maintenance and config reload."""

import logging

from fastapi import APIRouter

from mediahub.domain.shared import ValidationError
from mediahub.infrastructure.config import ConfigLoadError
from mediahub.presentation.api.dependencies import AdminSession, CacheAdmin
from mediahub.presentation.api.schemas.admin import (
    CacheClearRequest,
    CacheClearResponse,
    ConfigReloadResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/admin")


@router.post(
    "/cache/clear",
    summary="Clear search caches",
    responses={
        200: {"description": "Caches cleared"},
        403: {"description": "Admin access required"},
    },
)
async def clear_search_cache(
    admin: AdminSession,
    service: CacheAdmin,
    request: CacheClearRequest | None = None,
) -> CacheClearResponse:
    """Clear every search cache, or only the entries built for one query."""
    query = request.query.strip() if request and request.query else None
    result = await service.clear_search(query or None)
    logger.info("Search caches cleared by %s (%d keys)", admin.username, result.deleted)
    return CacheClearResponse(
        deleted=result.deleted,
        prefixes=list(result.prefixes),
        query=result.query,
    )


@router.post(
    "/config/reload",
    summary="Reload the admin config file",
    responses={
        200: {"description": "Config reloaded, search caches invalidated"},
        403: {"description": "Admin access required"},
    },
)
async def reload_config(
    admin: AdminSession,
    service: CacheAdmin,
) -> ConfigReloadResponse:
    """
    Re-read the admin config.

    Every search cache entry derives from the config, so all of them are
    dropped together with the old config.
    """
    try:
        config, deleted = await service.reload_config()
    except ConfigLoadError as e:
        # The previous config stays active
        raise ValidationError(str(e)) from e
    logger.info("Admin config reloaded by %s", admin.username)
    return ConfigReloadResponse(
        sources=len(config.sources),
        netdisk_enabled=config.netdisk.enabled,
        youtube_enabled=config.youtube.enabled,
        cache_entries_cleared=deleted,
    )
