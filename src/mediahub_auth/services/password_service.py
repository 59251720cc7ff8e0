"""Password hashing service (bcrypt)."""

import bcrypt

from mediahub_auth.exceptions import WeakPasswordError


class PasswordHashingService:
    """Hash and verify user passwords with bcrypt.

    Parameters
    ----------
    rounds
        bcrypt cost factor. Tests use a low value for speed.
    """

    MIN_LENGTH = 6
    MAX_LENGTH = 72  # bcrypt only looks at the first 72 bytes

    def __init__(self, rounds: int = 12):
        self._rounds = rounds

    def validate_strength(self, password: str) -> None:
        if not password:
            msg = "Password cannot be empty"
            raise WeakPasswordError(msg)
        if len(password) < self.MIN_LENGTH:
            msg = f"Password must be at least {self.MIN_LENGTH} characters"
            raise WeakPasswordError(msg)
        if len(password.encode("utf-8")) > self.MAX_LENGTH:
            msg = f"Password cannot exceed {self.MAX_LENGTH} bytes"
            raise WeakPasswordError(msg)

    def hash(self, password: str) -> str:
        self.validate_strength(password)
        salt = bcrypt.gensalt(rounds=self._rounds)
        return bcrypt.hashpw(password.encode("utf-8"), salt).decode("utf-8")

    def verify(self, password: str, password_hash: str) -> bool:
        if not password or not password_hash:
            return False
        try:
            return bcrypt.checkpw(
                password.encode("utf-8"),
                password_hash.encode("utf-8"),
            )
        except ValueError:
            # Malformed hash
            return False
