"""MediaHub Auth - session cookie and password infrastructure.

This package is independent of the search domain. It handles:
- Password hashing (bcrypt)
- HMAC-SHA256 signing of the session cookie
- Encoding/decoding of the ``auth`` cookie payload

Architecture:
    mediahub_auth/
    ├── services/           # Pure logic (hashing, signing, cookies)
    ├── schemas.py          # Cookie payload
    └── exceptions.py       # Auth exceptions

Usage:
    from mediahub_auth import AuthConfig, CookieAuthService, SessionRole

    service = CookieAuthService(AuthConfig(admin_username="owner",
                                           admin_password="secret"))
    cookie = service.issue("owner", SessionRole.OWNER)
    service.authenticate(cookie.encode())
"""

from mediahub_auth.exceptions import (
    AuthError,
    InvalidSessionError,
    WeakPasswordError,
)
from mediahub_auth.schemas import AuthCookie, SessionRole
from mediahub_auth.services import (
    AuthConfig,
    CookieAuthService,
    PasswordHashingService,
    SignatureService,
)

__all__ = [
    # Services
    "AuthConfig",
    "CookieAuthService",
    "PasswordHashingService",
    "SignatureService",
    # Schemas
    "AuthCookie",
    "SessionRole",
    # Exceptions
    "AuthError",
    "InvalidSessionError",
    "WeakPasswordError",
]
