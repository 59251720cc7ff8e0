"""Parallel fan-out over the configured video sources."""

import asyncio
import logging
from typing import Awaitable, Callable, Sequence

from mediahub.domain.search import ResultRecord, SourceDescriptor

logger = logging.getLogger(__name__)

SourceFetcher = Callable[[SourceDescriptor, str], Awaitable[list[ResultRecord]]]


class SearchAggregator:
    """Query every enabled source concurrently and concatenate the results.

    Each source gets its own timeout. A source that fails or times out is
    cancelled and contributes nothing; the others are unaffected. The output
    follows the configured source order, not completion order.
    """

    def __init__(self, default_timeout_seconds: float = 20.0):
        self._default_timeout = default_timeout_seconds

    async def aggregate(
        self,
        query: str,
        sources: Sequence[SourceDescriptor],
        fetch: SourceFetcher,
    ) -> list[ResultRecord]:
        enabled = [s for s in sources if s.enabled]
        if not enabled:
            return []

        batches = await asyncio.gather(
            *(self._fetch_one(source, query, fetch) for source in enabled),
        )
        return [record for batch in batches for record in batch]

    async def _fetch_one(
        self,
        source: SourceDescriptor,
        query: str,
        fetch: SourceFetcher,
    ) -> list[ResultRecord]:
        timeout = source.timeout_seconds or self._default_timeout
        try:
            records = await asyncio.wait_for(fetch(source, query), timeout=timeout)
        except asyncio.TimeoutError:
            logger.warning("Source %s timed out after %.1fs", source.name, timeout)
            return []
        except Exception as e:
            logger.warning("Source %s failed: %s", source.name, e)
            return []

        return list(records or [])
