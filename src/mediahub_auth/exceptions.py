"""Authentication exceptions.

These exceptions are raised by the mediahub_auth package and are
translated to HTTP responses by the presentation layer.
"""


class AuthError(Exception):
    """Base exception for all authentication errors."""

    def __init__(self, message: str = "Authentication error"):
        self.message = message
        super().__init__(self.message)


class InvalidSessionError(AuthError):
    """Raised when an auth cookie is missing, malformed, or badly signed."""

    def __init__(self, message: str = "Invalid or missing session"):
        super().__init__(message)


class WeakPasswordError(AuthError):
    """Raised when a password doesn't meet length requirements."""

    def __init__(self, message: str = "Password does not meet requirements"):
        super().__init__(message)

