"""Authentication services.

Provides password hashing, HMAC signatures and session cookies.
"""

from mediahub_auth.services.cookie_auth_service import AuthConfig, CookieAuthService
from mediahub_auth.services.password_service import PasswordHashingService
from mediahub_auth.services.signature_service import SignatureService

__all__ = [
    "AuthConfig",
    "CookieAuthService",
    "PasswordHashingService",
    "SignatureService",
]
