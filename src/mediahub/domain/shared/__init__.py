"""Shared domain building blocks."""

from mediahub.domain.shared.exceptions import (
    AuthenticationRequiredError,
    ConflictError,
    DomainException,
    ErrorCode,
    FeatureDisabledError,
    PermissionDeniedError,
    UpstreamConnectionError,
    UpstreamError,
    UpstreamRejectedError,
    UpstreamStatusError,
    UpstreamTimeoutError,
    ValidationError,
)
from mediahub.domain.shared.time import utc_now, utc_now_iso

__all__ = [
    "AuthenticationRequiredError",
    "ConflictError",
    "DomainException",
    "ErrorCode",
    "FeatureDisabledError",
    "PermissionDeniedError",
    "UpstreamConnectionError",
    "UpstreamError",
    "UpstreamRejectedError",
    "UpstreamStatusError",
    "UpstreamTimeoutError",
    "ValidationError",
    "utc_now",
    "utc_now_iso",
]
