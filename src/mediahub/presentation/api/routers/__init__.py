from mediahub.presentation.api.routers.admin import router as admin_router
from mediahub.presentation.api.routers.auth import router as auth_router
from mediahub.presentation.api.routers.netdisk import router as netdisk_router
from mediahub.presentation.api.routers.search import router as search_router
from mediahub.presentation.api.routers.youtube import router as youtube_router

__all__ = [
    "admin_router",
    "auth_router",
    "netdisk_router",
    "search_router",
    "youtube_router",
]
