"""Pytest fixtures for API integration tests.

The app runs against a temporary SQLite file, an in-process cache and
fake upstream clients. Tests are synchronous and drive the app through
``TestClient``, which owns its own event loop; the database is prepared in
a separate loop and the engine uses ``NullPool`` so no connection crosses
loops.
"""

import asyncio

import pytest
from fastapi.testclient import TestClient
from pydantic import SecretStr
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import NullPool

from mediahub.application.ports import (
    NetDiskSearchPort,
    VideoSourcePort,
    YouTubeSearchPort,
)
from mediahub.domain.config import (
    AdminConfig,
    NetDiskConfig,
    SiteConfig,
    SourceConfig,
    YouTubeConfig,
)
from mediahub.infrastructure.cache import InMemoryCacheStore
from mediahub.infrastructure.persistence.sqlalchemy.database import create_tables
from mediahub.infrastructure.persistence.sqlalchemy.models import UserModel
from mediahub.presentation.api.app import create_app
from mediahub.presentation.api.dependencies import (
    get_cache_store,
    get_config_provider,
    get_db_session,
    get_pansou_client,
    get_password_service,
    get_video_source_client,
    get_youtube_client,
)
from mediahub_auth import PasswordHashingService
from mediahub_config.settings import Settings, get_settings

from tests.shared.fakes import StaticConfigProvider

OWNER = "owner"
OWNER_PASSWORD = "owner-secret-123"
SHARED_PASSWORD = "letmein"
CACHE_TIME = 600


class FakeVideoSource(VideoSourcePort):
    def __init__(self):
        self.calls = 0

    async def search(self, source, query, max_pages):
        self.calls += 1
        return [
            {
                "id": "1",
                "title": "The Matrix",
                "type_name": "Movie",
                "source": source.key,
                "episodes": ["http://cdn/1.m3u8"],
            },
            {"id": "2", "title": "Inception", "type_name": "Movie"},
        ]


class FakeNetDisk(NetDiskSearchPort):
    def __init__(self):
        self.error = None

    async def search(self, base_url, query, cloud_types, timeout_seconds):
        if self.error is not None:
            raise self.error
        return {
            "total": 1,
            "merged_by_type": {"quark": [{"url": "u", "note": f"{query} 4K"}]},
        }


class FakeYouTube(YouTubeSearchPort):
    async def search(self, api_key, query, max_results, order, region_code=None):
        return {"items": []}


def admin_config() -> AdminConfig:
    return AdminConfig(
        site=SiteConfig(cache_time_seconds=CACHE_TIME),
        sources=[SourceConfig(key="a", name="Source A", api="http://a.example")],
        netdisk=NetDiskConfig(enabled=True, pansou_url="http://pansou:8888"),
        youtube=YouTubeConfig(enabled=True, enable_demo=True),
    )


def run(coro):
    """Run ``coro`` in a fresh event loop (outside the TestClient's loop)."""
    loop = asyncio.new_event_loop()
    try:
        return loop.run_until_complete(coro)
    finally:
        loop.close()


@pytest.fixture
def api_settings() -> Settings:
    """Account mode with an owner and a database."""
    return Settings(
        _env_file=None,
        storage_type="database",
        admin_username=OWNER,
        admin_password=SecretStr(OWNER_PASSWORD),
        api_debug=True,
        api_cookie_secure=False,
    )


@pytest.fixture
def async_engine(tmp_path):
    engine = create_async_engine(
        f"sqlite+aiosqlite:///{tmp_path / 'api.db'}",
        poolclass=NullPool,
    )
    run(create_tables(engine))
    yield engine
    run(engine.dispose())


@pytest.fixture
def session_maker(async_engine):
    return async_sessionmaker(async_engine, class_=AsyncSession, expire_on_commit=False)


@pytest.fixture
def load_user_model(session_maker):
    """Read a stored user row outside the app."""

    def load(username: str) -> UserModel:
        async def _load():
            async with session_maker() as session:
                stmt = select(UserModel).where(UserModel.username == username)
                return (await session.execute(stmt)).scalar_one()

        return run(_load())

    return load


@pytest.fixture
def cache_store() -> InMemoryCacheStore:
    return InMemoryCacheStore()


@pytest.fixture
def config_provider() -> StaticConfigProvider:
    return StaticConfigProvider(admin_config())


@pytest.fixture
def video_source() -> FakeVideoSource:
    return FakeVideoSource()


@pytest.fixture
def netdisk() -> FakeNetDisk:
    return FakeNetDisk()


def _build_app(settings, cache_store, config_provider, video_source, netdisk):
    app = create_app(settings=settings)
    app.dependency_overrides[get_settings] = lambda: settings
    app.dependency_overrides[get_cache_store] = lambda: cache_store
    app.dependency_overrides[get_config_provider] = lambda: config_provider
    app.dependency_overrides[get_video_source_client] = lambda: video_source
    app.dependency_overrides[get_pansou_client] = lambda: netdisk
    app.dependency_overrides[get_youtube_client] = FakeYouTube
    app.dependency_overrides[get_password_service] = lambda: (
        PasswordHashingService(rounds=4)
    )
    return app


@pytest.fixture
def test_client(  # NOQA: PLR0913
    api_settings,
    session_maker,
    cache_store,
    config_provider,
    video_source,
    netdisk,
):
    """Account-mode client backed by the temporary database."""
    app = _build_app(api_settings, cache_store, config_provider, video_source, netdisk)

    async def override_get_db_session():
        async with session_maker() as session:
            yield session

    app.dependency_overrides[get_db_session] = override_get_db_session
    return TestClient(app)


@pytest.fixture
def password_only_client(cache_store, config_provider, video_source, netdisk):
    """Single shared password mode, no database."""
    settings = Settings(
        _env_file=None,
        storage_type="memory",
        admin_password=SecretStr(SHARED_PASSWORD),
    )
    app = _build_app(settings, cache_store, config_provider, video_source, netdisk)
    return TestClient(app)


@pytest.fixture
def owner_client(test_client):
    response = test_client.post(
        "/api/login",
        json={"username": OWNER, "password": OWNER_PASSWORD},
    )
    assert response.status_code == 200, response.text
    return test_client


@pytest.fixture
def user_client(test_client):
    response = test_client.post(
        "/api/register",
        json={
            "username": "alice",
            "password": "secret1",
            "confirmPassword": "secret1",
        },
    )
    assert response.status_code == 200, response.text
    return test_client
