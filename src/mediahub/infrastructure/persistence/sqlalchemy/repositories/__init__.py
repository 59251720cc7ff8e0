"""SQLAlchemy repository implementations."""

from .user_repository import UserRepositorySQLAlchemy

__all__ = ["UserRepositorySQLAlchemy"]
