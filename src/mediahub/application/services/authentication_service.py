"""Authentication service for login and registration."""

from __future__ import annotations

import logging
import re
from typing import TYPE_CHECKING

from mediahub.domain.shared import (
    AuthenticationRequiredError,
    ConflictError,
    ErrorCode,
    PermissionDeniedError,
    ValidationError,
)
from mediahub.domain.user import User, UsernameAlreadyExistsError
from mediahub_auth import (
    AuthCookie,
    CookieAuthService,
    InvalidSessionError,
    PasswordHashingService,
    SessionRole,
    WeakPasswordError,
)

if TYPE_CHECKING:
    from mediahub.application.ports import ConfigProvider
    from mediahub.domain.user import UserRepository

logger = logging.getLogger(__name__)

USERNAME_PATTERN = re.compile(r"^[a-zA-Z0-9_]{3,20}$")

INVALID_LOGIN_MESSAGE = "Incorrect username or password"


class AuthenticationService:
    """
    Application service for cookie based authentication.

    Orchestrates mediahub_auth (cookie signing, password hashing) with the
    user domain to provide:
    - Login, in single-password mode or account mode
    - Registration with automatic login
    - Per-user password change status

    A returned ``AuthCookie`` is what the presentation layer writes into the
    ``auth`` cookie; ``None`` from ``login`` means the cookie is cleared.
    """

    def __init__(
        self,
        cookie_service: CookieAuthService,
        password_service: PasswordHashingService,
        config_provider: ConfigProvider,
        user_repository: UserRepository | None = None,
    ):
        self._cookies = cookie_service
        self._passwords = password_service
        self._config_provider = config_provider
        self._user_repo = user_repository

    @property
    def _auth_config(self):
        return self._cookies.config

    def _require_repository(self) -> UserRepository:
        if self._user_repo is None:
            msg = "User accounts are not available in single-password mode"
            raise ValidationError(msg, ErrorCode.UNSUPPORTED_OPERATION)
        return self._user_repo

    async def login(
        self,
        username: str | None,
        password: str | None,
        client_ip: str | None = None,
    ) -> AuthCookie | None:
        if self._auth_config.password_only_mode:
            return self._login_shared_password(password)

        if not username:
            raise ValidationError("Username cannot be empty")
        if not password:
            raise ValidationError("Password cannot be empty")

        if self._cookies.is_owner_credentials(username, password):
            logger.info("Owner logged in from %s", client_ip)
            return self._cookies.issue(username, SessionRole.OWNER)
        if username == self._auth_config.admin_username:
            raise AuthenticationRequiredError(
                INVALID_LOGIN_MESSAGE,
                ErrorCode.INVALID_CREDENTIALS,
            )

        repo = self._require_repository()
        user = await repo.find_by_username(username)
        if user is not None and user.banned:
            logger.warning("Banned user %s attempted to log in", username)
            raise AuthenticationRequiredError("User is banned", ErrorCode.USER_BANNED)

        if user is None or not self._passwords.verify(password, user.password_hash):
            raise AuthenticationRequiredError(
                INVALID_LOGIN_MESSAGE,
                ErrorCode.INVALID_CREDENTIALS,
            )

        user.record_login(client_ip)
        await repo.save(user)

        logger.info("User logged in: %s", username)
        return self._cookies.issue(username, SessionRole(user.role.value))

    def _login_shared_password(self, password: str | None) -> AuthCookie | None:
        if not self._auth_config.has_password:
            # Open instance, nothing to log in to
            return None
        if not isinstance(password, str):
            raise ValidationError("Password cannot be empty")
        if not self._cookies.check_shared_password(password):
            raise AuthenticationRequiredError(
                "Incorrect password",
                ErrorCode.INVALID_CREDENTIALS,
            )
        return self._cookies.issue(role=SessionRole.USER, password=password)

    async def register(  # NOQA: PLR0913
        self,
        username: str | None,
        password: str | None,
        confirm_password: str | None,
        client_ip: str | None = None,
        user_agent: str | None = None,
    ) -> AuthCookie:
        """Create an account and return the cookie that logs it in.

        Checks run in a fixed order so that the first failing rule decides
        the error message.
        """
        if self._auth_config.password_only_mode:
            raise ValidationError(
                "Registration is not supported in single-password mode",
                ErrorCode.UNSUPPORTED_OPERATION,
            )

        config = await self._config_provider.get_config()
        if not config.user.allow_register:
            raise PermissionDeniedError(
                "Registration has been disabled by the administrator",
                ErrorCode.REGISTRATION_DISABLED,
            )

        if not username or not username.strip():
            raise ValidationError("Username cannot be empty")
        if not password:
            raise ValidationError("Password cannot be empty")
        if password != confirm_password:
            raise ValidationError("Passwords do not match", ErrorCode.PASSWORD_MISMATCH)

        try:
            self._passwords.validate_strength(password)
        except WeakPasswordError as e:
            raise ValidationError(e.message, ErrorCode.WEAK_PASSWORD) from e

        if username == self._auth_config.admin_username:
            raise ConflictError("Username is already taken")
        if not USERNAME_PATTERN.match(username):
            raise ValidationError(
                "Username must be 3-20 letters, digits or underscores",
                ErrorCode.INVALID_USERNAME,
            )

        repo = self._require_repository()
        if await repo.exists_by_username(username):
            raise ConflictError("Username is already registered")

        user = User.create(
            username=username,
            password_hash=self._passwords.hash(password),
            register_ip=client_ip,
            register_user_agent=user_agent,
        )
        try:
            await repo.add(user)
        except UsernameAlreadyExistsError as e:
            raise ConflictError("Username is already registered") from e

        logger.info("User registered: %s", username)
        return self._cookies.issue(username, SessionRole.USER)

    async def password_change_disabled(self, raw_cookie: str | None) -> bool:
        """Whether the caller may not change their password.

        Callers without a valid named session are reported as disabled.
        """
        try:
            cookie = self._cookies.authenticate(raw_cookie)
        except InvalidSessionError:
            return True
        if not cookie.username:
            return True
        if cookie.role == SessionRole.OWNER or self._user_repo is None:
            return False

        user = await self._user_repo.find_by_username(cookie.username)
        return bool(user and user.disable_password_change)
