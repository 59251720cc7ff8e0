"""Auth cookie payload.

The cookie value is URL-encoded compact JSON so browser code can read it
with ``JSON.parse(decodeURIComponent(value))``.
"""

from __future__ import annotations

import json
from dataclasses import asdict, dataclass
from enum import Enum
from typing import Any
from urllib.parse import quote, unquote


class SessionRole(str, Enum):
    OWNER = "owner"
    ADMIN = "admin"
    USER = "user"


@dataclass(frozen=True)
class AuthCookie:
    """Decoded content of the ``auth`` cookie."""

    role: SessionRole = SessionRole.USER
    username: str | None = None
    password: str | None = None
    signature: str | None = None
    timestamp: int | None = None

    @property
    def is_admin(self) -> bool:
        return self.role in (SessionRole.OWNER, SessionRole.ADMIN)

    def to_dict(self) -> dict[str, Any]:
        data = {k: v for k, v in asdict(self).items() if v is not None}
        data["role"] = self.role.value
        return data

    def encode(self) -> str:
        return quote(json.dumps(self.to_dict(), separators=(",", ":")), safe="")

    @classmethod
    def decode(cls, raw: str | None) -> AuthCookie | None:
        """Parse a raw cookie value; malformed input yields None."""
        if not raw:
            return None
        try:
            data = json.loads(unquote(raw))
        except ValueError:
            return None
        if not isinstance(data, dict):
            return None

        try:
            role = SessionRole(data.get("role") or SessionRole.USER.value)
        except ValueError:
            return None

        timestamp = data.get("timestamp")
        return cls(
            role=role,
            username=_str_or_none(data.get("username")),
            password=_str_or_none(data.get("password")),
            signature=_str_or_none(data.get("signature")),
            timestamp=timestamp if isinstance(timestamp, int) else None,
        )


def _str_or_none(value: Any) -> str | None:
    return value if isinstance(value, str) and value else None
