"""Shared domain exceptions and error codes.

This module defines the base exception hierarchy and error codes for the
entire domain layer. All domain exceptions should inherit from DomainException
to enable centralized exception handling in the presentation layer.
"""

from enum import Enum
from typing import Any


class ErrorCode(str, Enum):
    """Stable error codes for API clients.

    These codes are part of the public API contract. Should not be changed.
    """

    # Validation Errors (400)
    VALIDATION_ERROR = "VALIDATION_ERROR"
    EMPTY_QUERY = "EMPTY_QUERY"
    INVALID_USERNAME = "INVALID_USERNAME"
    PASSWORD_MISMATCH = "PASSWORD_MISMATCH"
    WEAK_PASSWORD = "WEAK_PASSWORD"
    FEATURE_DISABLED = "FEATURE_DISABLED"
    FEATURE_NOT_CONFIGURED = "FEATURE_NOT_CONFIGURED"
    UNSUPPORTED_OPERATION = "UNSUPPORTED_OPERATION"

    # Auth Errors (401/403)
    UNAUTHORIZED = "UNAUTHORIZED"
    INVALID_CREDENTIALS = "INVALID_CREDENTIALS"
    USER_BANNED = "USER_BANNED"
    FORBIDDEN = "FORBIDDEN"
    REGISTRATION_DISABLED = "REGISTRATION_DISABLED"

    # Conflict Errors
    USERNAME_TAKEN = "USERNAME_TAKEN"

    # Upstream Errors
    UPSTREAM_TIMEOUT = "UPSTREAM_TIMEOUT"
    UPSTREAM_STATUS = "UPSTREAM_STATUS"
    UPSTREAM_UNREACHABLE = "UPSTREAM_UNREACHABLE"
    UPSTREAM_REJECTED = "UPSTREAM_REJECTED"

    # General Errors
    INTERNAL_ERROR = "INTERNAL_ERROR"


class DomainException(Exception):  # NOQA: N818
    """Base exception for all domain-related errors.

    Attributes
    ----------
    message
        Human-readable error message (safe for end users)
    code
        Stable error code for programmatic handling
    details
        Optional additional context (logged but not exposed to users)
    """

    def __init__(
        self,
        message: str,
        code: ErrorCode = ErrorCode.INTERNAL_ERROR,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.details = details or {}

    def __str__(self) -> str:
        return self.message

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}("
            f"message={self.message!r}, "
            f"code={self.code.value!r}, "
            f"details={self.details!r})"
        )


class ValidationError(DomainException):
    """Raised when input validation fails."""

    def __init__(
        self,
        message: str,
        code: ErrorCode = ErrorCode.VALIDATION_ERROR,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, code, details)


class FeatureDisabledError(ValidationError):
    """Raised when a feature-gated endpoint is switched off or unconfigured."""

    def __init__(
        self,
        message: str,
        code: ErrorCode = ErrorCode.FEATURE_DISABLED,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, code, details)


class AuthenticationRequiredError(DomainException):
    """Raised when a request carries no valid session."""

    def __init__(
        self,
        message: str = "Unauthorized",
        code: ErrorCode = ErrorCode.UNAUTHORIZED,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, code, details)


class PermissionDeniedError(DomainException):
    """Raised when the session lacks the required role."""

    def __init__(
        self,
        message: str = "Forbidden",
        code: ErrorCode = ErrorCode.FORBIDDEN,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, code, details)


class ConflictError(DomainException):
    """Raised when an operation conflicts with existing state."""

    def __init__(
        self,
        message: str,
        code: ErrorCode = ErrorCode.USERNAME_TAKEN,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, code, details)


class UpstreamError(DomainException):
    """Raised when a single-upstream feature cannot reach its provider.

    Attributes
    ----------
    suggestion
        Optional operator hint shown next to the error message
    """

    def __init__(
        self,
        message: str,
        code: ErrorCode = ErrorCode.UPSTREAM_UNREACHABLE,
        details: dict[str, Any] | None = None,
        suggestion: str | None = None,
    ) -> None:
        super().__init__(message, code, details)
        self.suggestion = suggestion


class UpstreamTimeoutError(UpstreamError):
    """The upstream did not answer within the configured timeout."""

    def __init__(
        self,
        message: str,
        details: dict[str, Any] | None = None,
        suggestion: str | None = None,
    ) -> None:
        super().__init__(message, ErrorCode.UPSTREAM_TIMEOUT, details, suggestion)


class UpstreamStatusError(UpstreamError):
    """The upstream answered with a non-2xx status."""

    def __init__(
        self,
        message: str,
        status_code: int,
        details: dict[str, Any] | None = None,
        suggestion: str | None = None,
    ) -> None:
        self.status_code = status_code
        super().__init__(message, ErrorCode.UPSTREAM_STATUS, details, suggestion)


class UpstreamConnectionError(UpstreamError):
    """The upstream could not be reached at the network level."""

    def __init__(
        self,
        message: str,
        details: dict[str, Any] | None = None,
        suggestion: str | None = None,
    ) -> None:
        super().__init__(message, ErrorCode.UPSTREAM_UNREACHABLE, details, suggestion)


class UpstreamRejectedError(ValidationError):
    """The upstream refused the request because of our configuration.

    Unlike the other upstream failures this is reported as a client-side
    problem: the operator has to fix the API key or quota.
    """

    def __init__(
        self,
        message: str,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, ErrorCode.UPSTREAM_REJECTED, details)
