"""User aggregate for registered accounts."""

from datetime import datetime
from typing import Iterable, Union
from uuid import UUID, uuid4

from mediahub.domain.shared.time import utc_now
from mediahub.domain.user.value_objects import UserRole


class User:
    """
    User aggregate root.

    Holds the account's credentials hash and the per-user restrictions the
    search features honour: the ban flag, explicitly enabled sources and tags
    whose enabled sources are unioned in.
    """

    def __init__(
        self,
        username: str,
        password_hash: str,
        role: Union[str, UserRole] = UserRole.USER,
        banned: bool = False,
        enabled_apis: Iterable[str] | None = None,
        tags: Iterable[str] | None = None,
        disable_password_change: bool = False,
        register_ip: str | None = None,
        register_user_agent: str | None = None,
        last_login_at: datetime | None = None,
        last_login_ip: str | None = None,
        id: UUID | None = None,
        created_at: datetime | None = None,
        updated_at: datetime | None = None,
    ):
        self._id = id or uuid4()
        self._username = username
        self._password_hash = password_hash
        self._role = role if isinstance(role, UserRole) else UserRole(role)
        self._banned = banned
        self._enabled_apis = list(enabled_apis or [])
        self._tags = list(tags or [])
        self._disable_password_change = disable_password_change
        self._register_ip = register_ip
        self._register_user_agent = register_user_agent
        self._last_login_at = last_login_at
        self._last_login_ip = last_login_ip
        self._created_at = created_at or utc_now()
        self._updated_at = updated_at or utc_now()

    @property
    def id(self) -> UUID:
        return self._id

    @property
    def username(self) -> str:
        return self._username

    @property
    def password_hash(self) -> str:
        return self._password_hash

    @property
    def role(self) -> UserRole:
        return self._role

    @property
    def is_admin(self) -> bool:
        return self._role == UserRole.ADMIN

    @property
    def banned(self) -> bool:
        return self._banned

    @property
    def enabled_apis(self) -> list[str]:
        return list(self._enabled_apis)

    @property
    def tags(self) -> list[str]:
        return list(self._tags)

    @property
    def disable_password_change(self) -> bool:
        return self._disable_password_change

    @property
    def register_ip(self) -> str | None:
        return self._register_ip

    @property
    def register_user_agent(self) -> str | None:
        return self._register_user_agent

    @property
    def last_login_at(self) -> datetime | None:
        return self._last_login_at

    @property
    def last_login_ip(self) -> str | None:
        return self._last_login_ip

    @property
    def created_at(self) -> datetime:
        return self._created_at

    @property
    def updated_at(self) -> datetime:
        return self._updated_at

    def record_login(self, ip: str | None) -> None:
        self._last_login_at = utc_now()
        self._last_login_ip = ip
        self._updated_at = self._last_login_at

    @classmethod
    def create(
        cls,
        username: str,
        password_hash: str,
        register_ip: str | None = None,
        register_user_agent: str | None = None,
    ) -> "User":
        return cls(
            username=username,
            password_hash=password_hash,
            register_ip=register_ip,
            register_user_agent=register_user_agent,
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, User):
            return NotImplemented
        return self._id == other._id

    def __hash__(self) -> int:
        return hash(self._id)

    def __repr__(self) -> str:
        return f"User(id={self._id}, username={self._username})"
