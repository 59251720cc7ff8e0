"""Time utilities for the domain layer."""

from datetime import datetime, timezone


def utc_now() -> datetime:
    """Return current UTC datetime (timezone-aware)."""
    return datetime.now(tz=timezone.utc)


def utc_now_iso() -> str:
    """Return current UTC time as an ISO-8601 string with ``Z`` suffix."""
    return utc_now().isoformat(timespec="milliseconds").replace("+00:00", "Z")
