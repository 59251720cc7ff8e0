"""Signed session cookie service.

Issues and validates the ``auth`` cookie. Sessions are stateless bearer
tokens: a cookie is valid while its signature matches, there is no
server-side revocation list and the embedded timestamp is advisory only.
"""

from __future__ import annotations

import hmac
import logging
import time
from dataclasses import dataclass

from mediahub_auth.exceptions import InvalidSessionError
from mediahub_auth.schemas import AuthCookie, SessionRole
from mediahub_auth.services.signature_service import SignatureService

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AuthConfig:
    """Immutable owner credentials, built once at process start.

    Attributes
    ----------
    admin_username
        Reserved owner account name
    admin_password
        Owner password; also the HMAC secret for cookie signatures
    password_only_mode
        Single shared password login without user accounts
    """

    admin_username: str = ""
    admin_password: str = ""
    password_only_mode: bool = False

    @property
    def has_password(self) -> bool:
        return bool(self.admin_password)


class CookieAuthService:
    """Create and validate auth cookies against an AuthConfig."""

    def __init__(self, config: AuthConfig):
        self._config = config
        self._signer = (
            SignatureService(config.admin_password) if config.has_password else None
        )

    @property
    def config(self) -> AuthConfig:
        return self._config

    def is_owner_credentials(self, username: str, password: str) -> bool:
        if not self._config.admin_username or not self._config.has_password:
            return False
        return username == self._config.admin_username and hmac.compare_digest(
            password,
            self._config.admin_password,
        )

    def check_shared_password(self, password: str) -> bool:
        if not self._config.has_password:
            return False
        return hmac.compare_digest(password, self._config.admin_password)

    def issue(
        self,
        username: str | None = None,
        role: SessionRole = SessionRole.USER,
        password: str | None = None,
    ) -> AuthCookie:
        """Build a cookie payload.

        The signature and timestamp are only attached when both a username
        and a signing secret are available.
        """
        if username and self._signer is not None:
            return AuthCookie(
                role=role,
                username=username,
                password=password,
                signature=self._signer.sign(username),
                timestamp=int(time.time() * 1000),
            )
        return AuthCookie(role=role, password=password)

    def authenticate(self, raw_cookie: str | None) -> AuthCookie:
        """Validate a raw cookie value and return its payload.

        Raises
        ------
        InvalidSessionError
            If the cookie is missing, malformed, or its credentials don't match
        """
        if self._config.password_only_mode and not self._config.has_password:
            # Open instance: nothing to check against
            return AuthCookie(role=SessionRole.USER)

        cookie = AuthCookie.decode(raw_cookie)
        if cookie is None:
            raise InvalidSessionError

        if self._config.password_only_mode:
            if cookie.password is None or not self.check_shared_password(
                cookie.password
            ):
                raise InvalidSessionError
            return cookie

        if not cookie.username or self._signer is None:
            raise InvalidSessionError
        if not self._signer.verify(cookie.username, cookie.signature):
            logger.warning("Rejected cookie with bad signature for %s", cookie.username)
            raise InvalidSessionError
        return cookie
