"""Integration tests for UserRepositorySQLAlchemy."""

import pytest

from mediahub.domain.user import User, UsernameAlreadyExistsError, UserRole
from mediahub.infrastructure.persistence.sqlalchemy.repositories import (
    UserRepositorySQLAlchemy,
)

pytestmark = pytest.mark.integration


class TestUserRepository:
    """Tests for storing and loading users."""

    async def test_add_and_find(self, session):
        repo = UserRepositorySQLAlchemy(session)
        user = User.create("alice", "hash", register_ip="10.0.0.1")

        await repo.add(user)
        await session.commit()
        found = await repo.find_by_username("alice")

        assert found == user
        assert found.role == UserRole.USER
        assert found.register_ip == "10.0.0.1"
        assert found.banned is False
        assert found.enabled_apis == []

    async def test_find_missing(self, session):
        repo = UserRepositorySQLAlchemy(session)

        assert await repo.find_by_username("ghost") is None

    async def test_exists_and_count(self, session):
        repo = UserRepositorySQLAlchemy(session)
        await repo.add(User.create("alice", "hash"))
        await repo.add(User.create("bob", "hash"))
        await session.commit()

        assert await repo.exists_by_username("alice") is True
        assert await repo.exists_by_username("carol") is False
        assert await repo.count() == 2

    async def test_save_updates_existing_row(self, session_maker):
        async with session_maker() as session:
            repo = UserRepositorySQLAlchemy(session)
            user = User.create("alice", "hash")
            await repo.add(user)
            await session.commit()

            user.record_login("10.0.0.9")
            await repo.save(user)
            await session.commit()

        async with session_maker() as session:
            found = await UserRepositorySQLAlchemy(session).find_by_username("alice")

        assert found.last_login_ip == "10.0.0.9"
        assert found.last_login_at is not None

    async def test_restrictions_round_trip(self, session):
        repo = UserRepositorySQLAlchemy(session)
        await repo.add(
            User(
                "alice",
                "hash",
                role="admin",
                banned=True,
                enabled_apis=["a", "b"],
                tags=["vip"],
                disable_password_change=True,
            ),
        )
        await session.commit()

        found = await repo.find_by_username("alice")

        assert found.is_admin is True
        assert found.banned is True
        assert found.enabled_apis == ["a", "b"]
        assert found.tags == ["vip"]
        assert found.disable_password_change is True

    async def test_duplicate_username(self, session):
        repo = UserRepositorySQLAlchemy(session)
        await repo.add(User.create("alice", "hash"))
        await session.commit()

        with pytest.raises(UsernameAlreadyExistsError):
            await repo.add(User.create("alice", "other"))
        await session.rollback()

    async def test_concurrent_registration_only_one_wins(self, session_maker):
        """Both sessions see the name as free; the later insert fails."""
        async with session_maker() as first, session_maker() as second:
            first_repo = UserRepositorySQLAlchemy(first)
            second_repo = UserRepositorySQLAlchemy(second)

            assert await first_repo.exists_by_username("alice") is False
            assert await second_repo.exists_by_username("alice") is False
            await first.commit()
            await second.commit()

            await first_repo.add(User.create("alice", "first"))
            await first.commit()

            with pytest.raises(UsernameAlreadyExistsError):
                await second_repo.add(User.create("alice", "second"))
            await second.rollback()

        async with session_maker() as session:
            repo = UserRepositorySQLAlchemy(session)
            found = await repo.find_by_username("alice")
            assert found.password_hash == "first"
            assert await repo.count() == 1
