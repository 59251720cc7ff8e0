"""Fixtures for persistence tests against a temporary SQLite file."""

import pytest

from mediahub.infrastructure.persistence.sqlalchemy.database import (
    create_engine,
    create_session_maker,
    create_tables,
)


@pytest.fixture
async def engine(tmp_path):
    engine = create_engine(f"sqlite+aiosqlite:///{tmp_path / 'data' / 'test.db'}")
    await create_tables(engine)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_maker(engine):
    return create_session_maker(engine)


@pytest.fixture
async def session(session_maker):
    async with session_maker() as session:
        yield session
