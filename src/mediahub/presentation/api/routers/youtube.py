"""YouTube search router."""

import logging

from fastapi import APIRouter, Query

from mediahub.presentation.api.dependencies import (
    AdminSession,
    CacheAdmin,
    CurrentSession,
    YouTubeSearch,
)
from mediahub.presentation.api.schemas.admin import YouTubeCacheClearResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/youtube")


@router.get(
    "/search",
    summary="Search YouTube videos",
    responses={
        200: {"description": "Videos from YouTube, the demo set or the fallback"},
        400: {"description": "Empty query, feature disabled or API key rejected"},
        401: {"description": "No valid session"},
    },
)
async def youtube_search(
    _session: CurrentSession,
    service: YouTubeSearch,
    q: str = Query(default="", description="Search text"),
    content_type: str = Query(default="all", alias="contentType"),
    order: str = Query(default="relevance"),
    max_results: int | None = Query(default=None, alias="maxResults", ge=1),
) -> dict:
    return await service.search(
        q,
        content_type=content_type,
        order=order,
        max_results=max_results,
    )


@router.post(
    "/clear-cache",
    summary="Drop every cached YouTube response",
    responses={
        200: {"description": "Cache cleared"},
        401: {"description": "No valid session"},
        403: {"description": "Admin access required"},
    },
)
async def clear_youtube_cache(
    admin: AdminSession,
    service: CacheAdmin,
) -> YouTubeCacheClearResponse:
    result = await service.clear_youtube()
    logger.info("YouTube cache cleared by %s", admin.username)
    return YouTubeCacheClearResponse(
        message="YouTube cache cleared",
        deleted=result.deleted,
    )
