"""FastAPI application factory.

Creates and configures the FastAPI application with all routers,
middleware, and exception handlers.

All endpoints live under ``/api``; the health check stays at ``/health``.
"""

import logging
import sys
from contextlib import asynccontextmanager
from functools import lru_cache
from typing import AsyncGenerator

from fastapi import APIRouter, FastAPI
from fastapi.middleware.cors import CORSMiddleware

from mediahub import __version__
from mediahub.infrastructure.persistence.sqlalchemy.database import create_tables
from mediahub.presentation.api.dependencies import (
    get_cache_store,
    get_config_provider,
    get_engine,
    get_pansou_client,
    get_video_source_client,
    get_youtube_client,
)
from mediahub.presentation.api.exception_handlers import setup_exception_handlers
from mediahub.presentation.api.routers import (
    admin_router,
    auth_router,
    netdisk_router,
    search_router,
    youtube_router,
)
from mediahub_config.settings import Settings, get_settings


@lru_cache(maxsize=1)
def _configure_logging() -> None:
    """Configure application logging.

    Sets up logging for the mediahub packages with:
    - Console output with timestamps and module names
    - Configurable log level for our modules (from settings)
    - WARNING level for noisy third-party libraries
    """
    settings = get_settings()
    log_level = getattr(logging, settings.log_level.upper(), logging.INFO)

    logging.basicConfig(
        level=log_level,
        format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stdout,
        force=True,  # Override any existing config
    )

    for name in ("mediahub", "mediahub_auth", "mediahub_config"):
        logging.getLogger(name).setLevel(log_level)

    # Quiet down noisy third-party loggers
    for name in ("httpx", "httpcore", "sqlalchemy.engine", "aiosqlite", "redis"):
        logging.getLogger(name).setLevel(logging.WARNING)


logger = logging.getLogger(__name__)

API_PREFIX = "/api"


@asynccontextmanager
async def lifespan(_: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan manager."""
    settings = get_settings()
    logger.info(
        "Starting %s v%s (storage=%s)",
        settings.app_name,
        __version__,
        settings.storage_type,
    )

    if not settings.password_only_mode:
        await create_tables(get_engine())

    config = await get_config_provider().get_config()
    logger.info(
        "Admin config: %d sources, netdisk=%s, youtube=%s",
        len(config.sources),
        config.netdisk.enabled,
        config.youtube.enabled,
    )
    yield

    logger.info("Shutting down %s...", settings.app_name)
    await get_video_source_client().close()
    await get_pansou_client().close()
    await get_youtube_client().close()
    await get_cache_store().close()
    if not settings.password_only_mode:
        await get_engine().dispose()
        logger.info("Database connections closed")


def create_api_router() -> APIRouter:
    api_router = APIRouter()
    api_router.include_router(auth_router, tags=["Authentication"])
    api_router.include_router(search_router, tags=["Search"])
    api_router.include_router(netdisk_router, tags=["NetDisk"])
    api_router.include_router(youtube_router, tags=["YouTube"])
    api_router.include_router(admin_router, tags=["Admin"])
    return api_router


def create_app(settings: Settings | None = None) -> FastAPI:
    """Create and configure the FastAPI application.

    Parameters
    ----------
    settings
        Optional settings override for testing.

    Returns
    -------
    Configured FastAPI application instance.
    """
    # Configure logging on first app creation (not on module import)
    _configure_logging()

    if settings is None:
        settings = get_settings()

    app = FastAPI(
        title=f"{settings.app_name} API",
        description="Aggregated video, cloud-storage and YouTube search.",
        version=__version__,
        docs_url="/docs" if settings.api_debug else None,
        redoc_url="/redoc" if settings.api_debug else None,
        openapi_url="/openapi.json" if settings.api_debug else None,
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    setup_exception_handlers(app)

    app.include_router(create_api_router(), prefix=API_PREFIX)

    @app.get("/health", tags=["Health"])
    async def health_check() -> dict:
        """Health check endpoint for load balancers and monitoring."""
        return {"status": "healthy", "version": __version__}

    return app
