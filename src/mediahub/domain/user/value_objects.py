from enum import Enum


class UserRole(str, Enum):
    """Roles a stored account can hold. The owner lives in the environment."""

    USER = "user"
    ADMIN = "admin"
