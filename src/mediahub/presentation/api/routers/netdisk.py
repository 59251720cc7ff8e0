"""Cloud-storage (NetDisk) search router."""

from fastapi import APIRouter, Query

from mediahub.presentation.api.dependencies import CurrentSession, NetDiskSearch

router = APIRouter(prefix="/netdisk")


@router.get(
    "/search",
    summary="Search cloud-storage share links",
    responses={
        200: {"description": "Merged results grouped by cloud type"},
        400: {"description": "Empty query or feature disabled"},
        401: {"description": "No valid session"},
        500: {"description": "Upstream search service failed"},
    },
)
async def netdisk_search(
    _session: CurrentSession,
    service: NetDiskSearch,
    q: str = Query(default="", description="Search text"),
) -> dict:
    return await service.search(q)
