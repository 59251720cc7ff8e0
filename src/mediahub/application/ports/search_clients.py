"""Ports for the upstream search providers.

Implementations raise the ``Upstream*`` domain errors for transport and
status failures so that services can decide between propagating and
falling back.
"""

from abc import ABC, abstractmethod
from typing import Any, Sequence

from mediahub.domain.search import ResultRecord, SourceDescriptor


class VideoSourcePort(ABC):
    """A generic video source API (one of many, queried in parallel)."""

    @abstractmethod
    async def search(
        self,
        source: SourceDescriptor,
        query: str,
        max_pages: int,
    ) -> list[ResultRecord]:
        """Return normalised result records for ``query`` from ``source``."""


class NetDiskSearchPort(ABC):
    """Cloud-storage resource search backend."""

    @abstractmethod
    async def search(
        self,
        base_url: str,
        query: str,
        cloud_types: Sequence[str],
        timeout_seconds: float,
    ) -> dict[str, Any]:
        """Return the backend's ``data`` object for ``query``."""


class YouTubeSearchPort(ABC):
    """YouTube Data API video search."""

    @abstractmethod
    async def search(
        self,
        api_key: str,
        query: str,
        max_results: int,
        order: str,
        region_code: str | None = None,
    ) -> dict[str, Any]:
        """Return the decoded API response body."""
