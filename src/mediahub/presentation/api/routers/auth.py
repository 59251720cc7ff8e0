"""Authentication router for login, logout and registration."""

import logging
from typing import Annotated

from fastapi import APIRouter, Cookie, Request, Response, status
from sqlalchemy.exc import IntegrityError

from mediahub.domain.shared import ConflictError
from mediahub.presentation.api.dependencies import (
    AUTH_COOKIE,
    AuthService,
    ClientIP,
    DBSession,
    SettingsDep,
)
from mediahub.presentation.api.schemas.auth import (
    LoginRequest,
    OkResponse,
    PasswordChangeStatusResponse,
    RegisterRequest,
)
from mediahub_auth import AuthCookie
from mediahub_config.settings import Settings

logger = logging.getLogger(__name__)

router = APIRouter()


def _set_auth_cookie(
    response: Response,
    cookie: AuthCookie,
    settings: Settings,
) -> None:
    """Write the session cookie.

    The cookie is readable from JavaScript; the frontend reads the role
    from it.
    """
    response.set_cookie(
        key=AUTH_COOKIE,
        value=cookie.encode(),
        max_age=settings.api_cookie_max_age_days * 24 * 60 * 60,
        path="/",
        samesite="lax",
        httponly=False,
        secure=settings.api_cookie_secure,
    )


def _clear_auth_cookie(response: Response) -> None:
    response.delete_cookie(key=AUTH_COOKIE, path="/")


@router.post(
    "/login",
    summary="Log in",
    response_model_exclude_none=True,
    responses={
        200: {"description": "Login successful, auth cookie set"},
        400: {"description": "Missing username or password"},
        401: {"description": "Invalid credentials or banned user"},
    },
)
async def login(
    request: LoginRequest,
    response: Response,
    auth_service: AuthService,
    session: DBSession,
    settings: SettingsDep,
    client_ip: ClientIP,
) -> OkResponse:
    """
    Authenticate and set the ``auth`` cookie.

    In single-password mode without a configured password there is nothing
    to log in to; the cookie is cleared and the call succeeds.
    """
    try:
        cookie = await auth_service.login(
            username=request.username,
            password=request.password,
            client_ip=client_ip,
        )
        if session is not None:
            await session.commit()
    except Exception:
        if session is not None:
            await session.rollback()
        raise

    if cookie is None:
        _clear_auth_cookie(response)
    else:
        _set_auth_cookie(response, cookie, settings)
    return OkResponse()


@router.post(
    "/logout",
    summary="Log out",
    response_model_exclude_none=True,
)
async def logout(response: Response) -> OkResponse:
    """Clear the ``auth`` cookie. Sessions are stateless, nothing else to do."""
    _clear_auth_cookie(response)
    return OkResponse()


@router.post(
    "/register",
    summary="Register a new user",
    response_model_exclude_none=True,
    responses={
        200: {"description": "User registered and logged in"},
        400: {"description": "Invalid input or username taken"},
        403: {"description": "Registration disabled"},
    },
)
async def register(
    request: RegisterRequest,
    http_request: Request,
    response: Response,
    auth_service: AuthService,
    session: DBSession,
    settings: SettingsDep,
    client_ip: ClientIP,
) -> OkResponse:
    try:
        cookie = await auth_service.register(
            username=request.username,
            password=request.password,
            confirm_password=request.confirm_password,
            client_ip=client_ip,
            user_agent=http_request.headers.get("user-agent"),
        )
        if session is not None:
            await session.commit()
    except IntegrityError as e:
        # Lost a race against a concurrent registration of the same name
        if session is not None:
            await session.rollback()
        raise ConflictError("Username is already registered") from e
    except Exception:
        if session is not None:
            await session.rollback()
        raise

    _set_auth_cookie(response, cookie, settings)
    return OkResponse(message="Registration successful, you are now logged in")


@router.get(
    "/user/password-change-status",
    summary="Whether the caller may change their password",
    status_code=status.HTTP_200_OK,
)
async def password_change_status(
    auth_service: AuthService,
    auth: Annotated[str | None, Cookie(alias=AUTH_COOKIE)] = None,
) -> PasswordChangeStatusResponse:
    disabled = await auth_service.password_change_disabled(auth)
    return PasswordChangeStatusResponse(disabled=disabled)
