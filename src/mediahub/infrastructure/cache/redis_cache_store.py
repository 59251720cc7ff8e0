"""Redis backed cache store."""

import json
import logging
from typing import Any, AsyncIterator

import redis.asyncio as redis

from mediahub.application.ports import CacheStore

logger = logging.getLogger(__name__)


class RedisCacheStore(CacheStore):
    """Store payloads as JSON strings with ``SETEX``; enumerate with ``SCAN``."""

    def __init__(self, client: redis.Redis, scan_count: int = 500):
        self._client = client
        self._scan_count = scan_count

    @classmethod
    def from_url(cls, url: str) -> "RedisCacheStore":
        logger.info("Using Redis cache at %s", url)
        return cls(redis.from_url(url, decode_responses=True))

    async def get(self, key: str) -> Any | None:
        value = await self._client.get(key)
        if value is None:
            return None
        return json.loads(value)

    async def set(self, key: str, value: Any, ttl_seconds: int) -> None:
        payload = json.dumps(value, ensure_ascii=False)
        await self._client.setex(key, ttl_seconds, payload)

    async def delete(self, key: str) -> None:
        await self._client.delete(key)

    async def list_keys_by_prefix(self, prefix: str) -> AsyncIterator[str]:
        pattern = _escape_glob(prefix) + "*"
        async for key in self._client.scan_iter(match=pattern, count=self._scan_count):
            yield key

    async def close(self) -> None:
        await self._client.aclose()


def _escape_glob(value: str) -> str:
    for char in ("\\", "*", "?", "[", "]"):
        value = value.replace(char, "\\" + char)
    return value
