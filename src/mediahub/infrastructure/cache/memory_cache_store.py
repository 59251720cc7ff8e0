"""In-process cache store."""

import json
import math
import time
from typing import Any, AsyncIterator, Callable

from mediahub.application.ports import CacheStore


class InMemoryCacheStore(CacheStore):
    """Dict backed store.

    Payloads are kept as JSON text so every read returns an independent copy
    equal to what was written. Expired entries are dropped on read, and all
    of them are swept on write or listing once the earliest expiry has
    passed, so keys that are never read again do not accumulate.
    """

    def __init__(self, clock: Callable[[], float] = time.monotonic):
        self._clock = clock
        self._entries: dict[str, tuple[float, str]] = {}
        self._next_expiry = math.inf

    async def get(self, key: str) -> Any | None:
        entry = self._entries.get(key)
        if entry is None:
            return None
        expires_at, text = entry
        if self._clock() >= expires_at:
            self._entries.pop(key, None)
            return None
        return json.loads(text)

    async def set(self, key: str, value: Any, ttl_seconds: int) -> None:
        text = json.dumps(value, ensure_ascii=False)
        now = self._clock()
        self._purge_expired(now)
        expires_at = now + ttl_seconds
        self._entries[key] = (expires_at, text)
        self._next_expiry = min(self._next_expiry, expires_at)

    async def delete(self, key: str) -> None:
        self._entries.pop(key, None)

    async def list_keys_by_prefix(self, prefix: str) -> AsyncIterator[str]:
        now = self._clock()
        self._purge_expired(now)
        for key, (expires_at, _) in list(self._entries.items()):
            if key.startswith(prefix) and now < expires_at:
                yield key

    async def close(self) -> None:
        self._entries.clear()
        self._next_expiry = math.inf

    def _purge_expired(self, now: float) -> None:
        if now < self._next_expiry:
            return
        self._entries = {
            key: entry for key, entry in self._entries.items() if now < entry[0]
        }
        self._next_expiry = min(
            (expires_at for expires_at, _ in self._entries.values()),
            default=math.inf,
        )

    def __len__(self) -> int:
        return len(self._entries)
