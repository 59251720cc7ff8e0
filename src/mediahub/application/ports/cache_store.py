"""Cache store port.

Every backend implements the whole port, including prefix enumeration, so
callers never inspect which backend they were given.
"""

from abc import ABC, abstractmethod
from typing import Any, AsyncIterator


class CacheStore(ABC):
    """Key/value store with per-entry TTL holding JSON-serialisable payloads."""

    @abstractmethod
    async def get(self, key: str) -> Any | None:
        """Return the payload stored under ``key`` or ``None`` on miss/expiry."""

    @abstractmethod
    async def set(self, key: str, value: Any, ttl_seconds: int) -> None:
        """Store ``value`` under ``key``, overwriting any previous entry."""

    @abstractmethod
    async def delete(self, key: str) -> None:
        """Remove ``key``; deleting a missing key is not an error."""

    @abstractmethod
    def list_keys_by_prefix(self, prefix: str) -> AsyncIterator[str]:
        """Yield every live key starting with ``prefix``."""

    @abstractmethod
    async def close(self) -> None:
        """Release backend resources."""
