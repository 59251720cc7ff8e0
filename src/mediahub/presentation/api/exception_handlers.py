"""Centralized exception handlers for the FastAPI application.

Domain exceptions are mapped to HTTP responses with a consistent error
format.

Error Response Format:
    {
        "error": "Human-readable error message",
        "code": "MACHINE_READABLE_ERROR_CODE"
    }

Single-upstream failures additionally carry ``"success": false`` and, when
known, an operator ``"suggestion"``.

Usage:
    from mediahub.presentation.api.exception_handlers import (
        setup_exception_handlers,
    )

    app = FastAPI()
    setup_exception_handlers(app)
"""

import logging
from typing import Any

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from mediahub.domain.shared.exceptions import (
    AuthenticationRequiredError,
    ConflictError,
    DomainException,
    ErrorCode,
    FeatureDisabledError,
    PermissionDeniedError,
    UpstreamError,
    UpstreamRejectedError,
    ValidationError,
)

logger = logging.getLogger(__name__)

NO_STORE_HEADERS = {
    "Cache-Control": "no-store, no-cache, must-revalidate",
    "CDN-Cache-Control": "no-store",
    "Vercel-CDN-Cache-Control": "no-store",
}


# =============================================================================
# Error Code to HTTP Status Mapping
# =============================================================================

ERROR_CODE_TO_STATUS: dict[ErrorCode, int] = {
    # 400 Bad Request - validation errors
    ErrorCode.VALIDATION_ERROR: status.HTTP_400_BAD_REQUEST,
    ErrorCode.EMPTY_QUERY: status.HTTP_400_BAD_REQUEST,
    ErrorCode.INVALID_USERNAME: status.HTTP_400_BAD_REQUEST,
    ErrorCode.PASSWORD_MISMATCH: status.HTTP_400_BAD_REQUEST,
    ErrorCode.WEAK_PASSWORD: status.HTTP_400_BAD_REQUEST,
    ErrorCode.FEATURE_DISABLED: status.HTTP_400_BAD_REQUEST,
    ErrorCode.FEATURE_NOT_CONFIGURED: status.HTTP_400_BAD_REQUEST,
    ErrorCode.UNSUPPORTED_OPERATION: status.HTTP_400_BAD_REQUEST,
    # Registration reports a taken name as a plain validation failure
    ErrorCode.USERNAME_TAKEN: status.HTTP_400_BAD_REQUEST,
    # 401 Unauthorized
    ErrorCode.UNAUTHORIZED: status.HTTP_401_UNAUTHORIZED,
    ErrorCode.INVALID_CREDENTIALS: status.HTTP_401_UNAUTHORIZED,
    ErrorCode.USER_BANNED: status.HTTP_401_UNAUTHORIZED,
    # 403 Forbidden
    ErrorCode.FORBIDDEN: status.HTTP_403_FORBIDDEN,
    ErrorCode.REGISTRATION_DISABLED: status.HTTP_403_FORBIDDEN,
    # Upstream rejected our request (bad key, quota): operator must act
    ErrorCode.UPSTREAM_REJECTED: status.HTTP_400_BAD_REQUEST,
    # 500 Internal Server Error - upstream unusable
    ErrorCode.UPSTREAM_TIMEOUT: status.HTTP_500_INTERNAL_SERVER_ERROR,
    ErrorCode.UPSTREAM_STATUS: status.HTTP_500_INTERNAL_SERVER_ERROR,
    ErrorCode.UPSTREAM_UNREACHABLE: status.HTTP_500_INTERNAL_SERVER_ERROR,
    ErrorCode.INTERNAL_ERROR: status.HTTP_500_INTERNAL_SERVER_ERROR,
}


def _get_status_for_exception(exc: DomainException) -> int:  # NOQA: PLR0911
    """Determine HTTP status code for a domain exception.

    Uses the error code mapping, with fallback based on exception type.
    """
    if exc.code in ERROR_CODE_TO_STATUS:
        return ERROR_CODE_TO_STATUS[exc.code]

    if isinstance(exc, AuthenticationRequiredError):
        return status.HTTP_401_UNAUTHORIZED
    if isinstance(exc, PermissionDeniedError):
        return status.HTTP_403_FORBIDDEN
    if isinstance(exc, UpstreamError):
        return status.HTTP_500_INTERNAL_SERVER_ERROR
    if isinstance(exc, (ValidationError, ConflictError)):
        return status.HTTP_400_BAD_REQUEST

    return status.HTTP_400_BAD_REQUEST


def _create_error_response(
    status_code: int,
    message: str,
    code: str,
    extra: dict[str, Any] | None = None,
    headers: dict[str, str] | None = None,
) -> JSONResponse:
    """Create a standardized error response."""
    content: dict[str, Any] = {"error": message, "code": code}
    if extra:
        content.update(extra)
    return JSONResponse(status_code=status_code, content=content, headers=headers)


def _extra_for(exc: DomainException) -> dict[str, Any] | None:
    if isinstance(exc, UpstreamError):
        return {"success": False, "suggestion": exc.suggestion}
    if isinstance(exc, UpstreamRejectedError):
        return {"success": False}
    return None


def setup_exception_handlers(app: FastAPI) -> None:
    """Register all exception handlers on the FastAPI application.

    Parameters
    ----------
    app
        The FastAPI application instance
    """

    @app.exception_handler(DomainException)
    async def domain_exception_handler(
        request: Request,
        exc: DomainException,
    ) -> JSONResponse:
        """Handle all domain exceptions with structured response."""
        status_code = _get_status_for_exception(exc)

        log = logger.warning if isinstance(exc, UpstreamError) else logger.info
        log(
            "Domain exception on %s %s: %s (code=%s, details=%s)",
            request.method,
            request.url.path,
            exc.message,
            exc.code.value,
            exc.details,
        )

        headers = NO_STORE_HEADERS if isinstance(exc, FeatureDisabledError) else None
        return _create_error_response(
            status_code=status_code,
            message=exc.message,
            code=exc.code.value,
            extra=_extra_for(exc),
            headers=headers,
        )

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(
        request: Request,
        exc: RequestValidationError,
    ) -> JSONResponse:
        """Malformed bodies and query parameters are plain 400s."""
        errors = exc.errors()
        first = errors[0] if errors else {}
        location = ".".join(str(p) for p in first.get("loc", ()) if p != "body")
        message = first.get("msg", "Invalid request")
        if location:
            message = f"{location}: {message}"

        logger.info(
            "Request validation failed on %s %s: %s",
            request.method,
            request.url.path,
            message,
        )
        return _create_error_response(
            status_code=status.HTTP_400_BAD_REQUEST,
            message=message,
            code=ErrorCode.VALIDATION_ERROR.value,
        )

    @app.exception_handler(Exception)
    async def global_exception_handler(
        request: Request,
        exc: Exception,
    ) -> JSONResponse:
        """Catch-all for anything the handlers above did not claim."""
        logger.exception(
            "Unhandled exception on %s %s: %s",
            request.method,
            request.url.path,
            exc,
        )
        return _create_error_response(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            message="An internal error occurred",
            code=ErrorCode.INTERNAL_ERROR.value,
        )
