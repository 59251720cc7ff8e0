"""FastAPI dependency injection for the MediaHub API.

Provides dependencies for:
- Database sessions (account modes only)
- Cache store, admin config and upstream clients (process singletons)
- Authentication (session from the ``auth`` cookie)
- Application service instances
"""

import logging
from functools import lru_cache
from typing import Annotated, AsyncGenerator

from fastapi import Cookie, Depends, Request
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from mediahub.application.ports import CacheStore, ConfigProvider
from mediahub.application.services import (
    AuthenticationService,
    CacheAdminService,
    GenericSearchService,
    NetDiskSearchService,
    SearchAggregator,
    SearchCache,
    YouTubeSearchService,
)
from mediahub.domain.shared import AuthenticationRequiredError, PermissionDeniedError
from mediahub.domain.user import User, UserRepository
from mediahub.infrastructure.cache import create_cache_store
from mediahub.infrastructure.config import FileConfigProvider
from mediahub.infrastructure.integration import (
    PanSouClient,
    VideoSourceClient,
    YouTubeClient,
)
from mediahub.infrastructure.persistence.sqlalchemy.database import (
    create_engine,
    create_session_maker,
)
from mediahub.infrastructure.persistence.sqlalchemy.repositories import (
    UserRepositorySQLAlchemy,
)
from mediahub_auth import (
    AuthConfig,
    AuthCookie,
    CookieAuthService,
    InvalidSessionError,
    PasswordHashingService,
    SessionRole,
)
from mediahub_config.settings import Settings, get_settings

logger = logging.getLogger(__name__)

AUTH_COOKIE = "auth"

SettingsDep = Annotated[Settings, Depends(get_settings)]


# -----------------------------------------------------------------------------
# Database Engine & Session (Singleton)
# -----------------------------------------------------------------------------


@lru_cache(maxsize=1)
def get_engine() -> AsyncEngine:
    """
    Get the shared async database engine (singleton).

    Returns
    -------
    AsyncEngine instance
    """
    return create_engine(get_settings().database_url)


@lru_cache(maxsize=1)
def get_session_maker() -> async_sessionmaker[AsyncSession]:
    return create_session_maker(get_engine())


async def get_db_session(
    settings: SettingsDep,
) -> AsyncGenerator[AsyncSession | None, None]:
    """
    Database session dependency.

    Yields ``None`` in single-password mode, which has no user accounts and
    never touches the database.
    """
    if settings.password_only_mode:
        yield None
        return
    async with get_session_maker()() as session:
        yield session


DBSession = Annotated[AsyncSession | None, Depends(get_db_session)]


async def get_user_repository(
    session: DBSession,
    settings: SettingsDep,
) -> UserRepository | None:
    if session is None or settings.password_only_mode:
        return None
    return UserRepositorySQLAlchemy(session)


UserRepo = Annotated[UserRepository | None, Depends(get_user_repository)]


# -----------------------------------------------------------------------------
# Process Singletons
# -----------------------------------------------------------------------------


@lru_cache(maxsize=1)
def get_cache_store() -> CacheStore:
    return create_cache_store(get_settings())


def get_search_cache(
    store: Annotated[CacheStore, Depends(get_cache_store)],
) -> SearchCache:
    return SearchCache(store)


@lru_cache(maxsize=1)
def get_config_provider() -> ConfigProvider:
    """Admin config provider, read from the config file on first use."""
    return FileConfigProvider(get_settings().resolved_config_file)


@lru_cache(maxsize=1)
def get_video_source_client() -> VideoSourceClient:
    return VideoSourceClient(timeout=get_settings().search_timeout_seconds)


@lru_cache(maxsize=1)
def get_pansou_client() -> PanSouClient:
    return PanSouClient()


@lru_cache(maxsize=1)
def get_youtube_client() -> YouTubeClient:
    return YouTubeClient()


Cache = Annotated[SearchCache, Depends(get_search_cache)]
ConfigProviderDep = Annotated[ConfigProvider, Depends(get_config_provider)]


# -----------------------------------------------------------------------------
# Authentication Services
# -----------------------------------------------------------------------------


def get_cookie_service(settings: SettingsDep) -> CookieAuthService:
    """Cookie service bound to the owner credentials loaded at startup."""
    return CookieAuthService(
        AuthConfig(
            admin_username=settings.admin_username,
            admin_password=settings.admin_password_value,
            password_only_mode=settings.password_only_mode,
        ),
    )


def get_password_service() -> PasswordHashingService:
    """Get password hashing service."""
    return PasswordHashingService()


CookieService = Annotated[CookieAuthService, Depends(get_cookie_service)]


async def get_authentication_service(
    cookie_service: CookieService,
    config_provider: ConfigProviderDep,
    user_repository: UserRepo,
    password_service: PasswordHashingService = Depends(get_password_service),
) -> AuthenticationService:
    return AuthenticationService(
        cookie_service=cookie_service,
        password_service=password_service,
        config_provider=config_provider,
        user_repository=user_repository,
    )


AuthService = Annotated[AuthenticationService, Depends(get_authentication_service)]


# -----------------------------------------------------------------------------
# Current Session (cookie authentication)
# -----------------------------------------------------------------------------


async def get_current_session(
    cookie_service: CookieService,
    auth: Annotated[str | None, Cookie(alias=AUTH_COOKIE)] = None,
) -> AuthCookie:
    """
    FastAPI dependency returning the validated ``auth`` cookie.

    Raises
    ------
    AuthenticationRequiredError
        401 if the cookie is missing, malformed or its signature is wrong
    """
    try:
        return cookie_service.authenticate(auth)
    except InvalidSessionError as e:
        raise AuthenticationRequiredError() from e


CurrentSession = Annotated[AuthCookie, Depends(get_current_session)]


async def require_admin(session: CurrentSession) -> AuthCookie:
    """Require the owner or an admin account.

    Anonymous single-password sessions are treated as unauthenticated.
    """
    if not session.username:
        raise AuthenticationRequiredError()
    if not session.is_admin:
        raise PermissionDeniedError()
    return session


AdminSession = Annotated[AuthCookie, Depends(require_admin)]


async def get_search_user(
    session: CurrentSession,
    user_repository: UserRepo,
) -> User | None:
    """Stored account behind the session, used for source restrictions.

    The owner and single-password sessions have no stored account.
    """
    if (
        user_repository is None
        or not session.username
        or session.role == SessionRole.OWNER
    ):
        return None
    return await user_repository.find_by_username(session.username)


SearchUser = Annotated[User | None, Depends(get_search_user)]


def get_client_ip(request: Request) -> str | None:
    """Client address, honouring the usual reverse proxy headers."""
    forwarded = request.headers.get("x-forwarded-for")
    if forwarded:
        first_hop = forwarded.split(",")[0].strip()
        if first_hop:
            return first_hop
    for header in ("x-real-ip", "cf-connecting-ip"):
        value = request.headers.get(header)
        if value:
            return value.strip()
    return request.client.host if request.client else None


ClientIP = Annotated[str | None, Depends(get_client_ip)]


# -----------------------------------------------------------------------------
# Application Services
# -----------------------------------------------------------------------------


def get_generic_search_service(
    config_provider: ConfigProviderDep,
    cache: Cache,
    settings: SettingsDep,
    source_client: Annotated[VideoSourceClient, Depends(get_video_source_client)],
) -> GenericSearchService:
    timeout = settings.search_timeout_seconds
    return GenericSearchService(
        config_provider=config_provider,
        cache=cache,
        source_client=source_client,
        aggregator=SearchAggregator(default_timeout_seconds=timeout),
        source_timeout_seconds=timeout,
    )


def get_netdisk_search_service(
    config_provider: ConfigProviderDep,
    cache: Cache,
    client: Annotated[PanSouClient, Depends(get_pansou_client)],
) -> NetDiskSearchService:
    return NetDiskSearchService(config_provider, cache, client)


def get_youtube_search_service(
    config_provider: ConfigProviderDep,
    cache: Cache,
    client: Annotated[YouTubeClient, Depends(get_youtube_client)],
) -> YouTubeSearchService:
    return YouTubeSearchService(config_provider, cache, client)


def get_cache_admin_service(
    config_provider: ConfigProviderDep,
    cache: Cache,
) -> CacheAdminService:
    return CacheAdminService(cache, config_provider)


GenericSearch = Annotated[GenericSearchService, Depends(get_generic_search_service)]
NetDiskSearch = Annotated[NetDiskSearchService, Depends(get_netdisk_search_service)]
YouTubeSearch = Annotated[YouTubeSearchService, Depends(get_youtube_search_service)]
CacheAdmin = Annotated[CacheAdminService, Depends(get_cache_admin_service)]
