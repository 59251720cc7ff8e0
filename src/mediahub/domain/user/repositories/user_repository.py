"""User repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from mediahub.domain.user.aggregates.user import User


class UserRepository(ABC):
    """Repository interface for User aggregates."""

    @abstractmethod
    async def find_by_username(self, username: str) -> Optional[User]:
        """Find a user by username."""

    @abstractmethod
    async def exists_by_username(self, username: str) -> bool:
        """Check if a user exists with the given username."""

    @abstractmethod
    async def add(self, user: User) -> None:
        """Insert a new user.

        Raises
        ------
        UsernameAlreadyExistsError
            If the username is taken, including when a concurrent insert won
        """

    @abstractmethod
    async def save(self, user: User) -> None:
        """Update an existing user."""

    @abstractmethod
    async def count(self) -> int:
        """Count total users."""
