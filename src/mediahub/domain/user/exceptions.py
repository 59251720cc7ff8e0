"""User domain exceptions."""


class UsernameAlreadyExistsError(Exception):
    """Username already registered."""

    def __init__(self, username: str) -> None:
        self.username = username
        super().__init__(f"Username already registered: {username}")

