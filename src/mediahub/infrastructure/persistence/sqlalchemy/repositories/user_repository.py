"""SQLAlchemy implementation of UserRepository."""

import logging

from sqlalchemy import func, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from mediahub.domain.user import User, UsernameAlreadyExistsError, UserRepository
from mediahub.infrastructure.persistence.sqlalchemy.models import UserModel

logger = logging.getLogger(__name__)


class UserRepositorySQLAlchemy(UserRepository):
    """SQLAlchemy implementation of the UserRepository interface.

    Writes are flushed, not committed; the caller owns the transaction.
    """

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def find_by_username(self, username: str) -> User | None:
        model = await self._find_model(username)
        if model is None:
            return None
        return self._map_to_domain(model)

    async def exists_by_username(self, username: str) -> bool:
        stmt = select(func.count()).select_from(UserModel).where(
            UserModel.username == username,
        )
        result = await self._session.execute(stmt)
        return result.scalar_one() > 0

    async def add(self, user: User) -> None:
        self._session.add(self._map_to_model(user))
        try:
            await self._session.flush()
        except IntegrityError as e:
            if "UNIQUE constraint failed" in str(e) or "unique" in str(e).lower():
                raise UsernameAlreadyExistsError(user.username) from e
            raise
        logger.info("Created user: %s", user.username)

    async def save(self, user: User) -> None:
        model = await self._find_model(user.username)
        if model is None:
            await self.add(user)
            return
        self._update_model(model, user)
        await self._session.flush()
        logger.debug("Updated user: %s", user.username)

    async def count(self) -> int:
        stmt = select(func.count()).select_from(UserModel)
        result = await self._session.execute(stmt)
        return result.scalar_one()

    async def _find_model(self, username: str) -> UserModel | None:
        stmt = select(UserModel).where(UserModel.username == username)
        result = await self._session.execute(stmt)
        return result.scalar_one_or_none()

    def _map_to_domain(self, model: UserModel) -> User:
        return User(
            id=model.id,
            username=model.username,
            password_hash=model.password_hash,
            role=model.role,
            banned=model.banned,
            enabled_apis=model.enabled_apis or [],
            tags=model.tags or [],
            disable_password_change=model.disable_password_change,
            register_ip=model.register_ip,
            register_user_agent=model.register_user_agent,
            last_login_at=model.last_login_at,
            last_login_ip=model.last_login_ip,
            created_at=model.created_at,
            updated_at=model.updated_at,
        )

    def _map_to_model(self, user: User) -> UserModel:
        return UserModel(
            id=user.id,
            username=user.username,
            password_hash=user.password_hash,
            role=user.role.value,
            banned=user.banned,
            enabled_apis=user.enabled_apis,
            tags=user.tags,
            disable_password_change=user.disable_password_change,
            register_ip=user.register_ip,
            register_user_agent=user.register_user_agent,
            last_login_at=user.last_login_at,
            last_login_ip=user.last_login_ip,
            created_at=user.created_at,
            updated_at=user.updated_at,
        )

    def _update_model(self, model: UserModel, user: User) -> None:
        model.password_hash = user.password_hash
        model.role = user.role.value
        model.banned = user.banned
        model.enabled_apis = user.enabled_apis
        model.tags = user.tags
        model.disable_password_change = user.disable_password_change
        model.last_login_at = user.last_login_at
        model.last_login_ip = user.last_login_ip
        model.updated_at = user.updated_at
