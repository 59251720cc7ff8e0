"""SQLAlchemy model for the User aggregate."""

from datetime import datetime
from uuid import UUID

from sqlalchemy import JSON, Boolean, DateTime, String, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from mediahub.infrastructure.persistence.sqlalchemy.models.base import (
    Base,
    TimestampMixin,
)


class UserModel(Base, TimestampMixin):
    """Registered accounts. ``username`` carries the uniqueness guarantee."""

    __tablename__ = "users"

    id: Mapped[UUID] = mapped_column(Uuid, primary_key=True)
    username: Mapped[str] = mapped_column(
        String(20),
        unique=True,
        nullable=False,
        index=True,
    )
    password_hash: Mapped[str] = mapped_column(String(255), nullable=False)
    role: Mapped[str] = mapped_column(String(20), default="user", nullable=False)
    banned: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)
    enabled_apis: Mapped[list[str]] = mapped_column(JSON, default=list, nullable=False)
    tags: Mapped[list[str]] = mapped_column(JSON, default=list, nullable=False)
    disable_password_change: Mapped[bool] = mapped_column(
        Boolean,
        default=False,
        nullable=False,
    )
    register_ip: Mapped[str | None] = mapped_column(String(64), nullable=True)
    register_user_agent: Mapped[str | None] = mapped_column(
        String(512),
        nullable=True,
    )
    last_login_at: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True),
        nullable=True,
    )
    last_login_ip: Mapped[str | None] = mapped_column(String(64), nullable=True)

    def __repr__(self) -> str:
        return f"<UserModel(id={self.id}, username={self.username}, role={self.role})>"
