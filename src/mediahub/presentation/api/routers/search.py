"""Generic multi-source search router."""

import logging

from fastapi import APIRouter, Query, Response

from mediahub.presentation.api.dependencies import (
    CurrentSession,
    GenericSearch,
    SearchUser,
)

logger = logging.getLogger(__name__)

router = APIRouter()


def _set_cache_headers(response: Response, seconds: int) -> None:
    response.headers["Cache-Control"] = (
        f"public, max-age={seconds}, s-maxage={seconds}"
    )
    response.headers["CDN-Cache-Control"] = f"public, s-maxage={seconds}"
    response.headers["Vercel-CDN-Cache-Control"] = f"public, s-maxage={seconds}"
    response.headers["Netlify-Vary"] = "query"


@router.get(
    "/search",
    summary="Search every configured video source",
    responses={
        200: {"description": "Results, possibly empty"},
        401: {"description": "No valid session"},
    },
)
async def search(
    response: Response,
    _session: CurrentSession,
    user: SearchUser,
    service: GenericSearch,
    q: str = Query(default="", description="Search text"),
) -> dict:
    """
    Aggregate results from all sources the caller may use.

    Individual source failures only shrink the result list. Non-empty
    results (and the empty answer to an empty query) carry HTTP cache
    headers; empty results are never cacheable.
    """
    result = await service.search(q, user)
    if result.cacheable:
        _set_cache_headers(response, result.cache_time_seconds)
    return {"results": result.results}
