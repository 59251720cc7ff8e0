"""User domain - registered accounts and their search restrictions.

Design notes:
- The owner account is configured through the environment, never stored
- Usernames are unique; the database constraint is the final arbiter
- Repository interface defined here, implementation in infrastructure
"""

from mediahub.domain.user.aggregates import User
from mediahub.domain.user.exceptions import UsernameAlreadyExistsError
from mediahub.domain.user.repositories import UserRepository
from mediahub.domain.user.value_objects import UserRole

__all__ = [
    "User",
    "UserRepository",
    "UserRole",
    "UsernameAlreadyExistsError",
]
