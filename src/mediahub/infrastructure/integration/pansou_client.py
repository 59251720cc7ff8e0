"""HTTP client for the PanSou cloud-storage search service."""

from __future__ import annotations

import logging
from typing import Any, Sequence

import httpx

from mediahub.application.ports import NetDiskSearchPort
from mediahub.domain.shared import (
    UpstreamConnectionError,
    UpstreamError,
    UpstreamStatusError,
    UpstreamTimeoutError,
)

logger = logging.getLogger(__name__)

USER_AGENT = "MediaHub/1.0"


class PanSouClient(NetDiskSearchPort):
    """POST ``{base_url}/api/search`` with merged-by-type results."""

    def __init__(self, http_client: httpx.AsyncClient | None = None):
        self._client = http_client

    async def _get_client(self) -> httpx.AsyncClient:
        if self._client is None:
            self._client = httpx.AsyncClient()
        return self._client

    async def close(self) -> None:
        if self._client is not None:
            await self._client.aclose()
            self._client = None

    async def search(
        self,
        base_url: str,
        query: str,
        cloud_types: Sequence[str],
        timeout_seconds: float,
    ) -> dict[str, Any]:
        body = {"kw": query, "res": "merge", "cloud_types": list(cloud_types)}
        url = f"{base_url.rstrip('/')}/api/search"

        client = await self._get_client()
        try:
            response = await client.post(
                url,
                json=body,
                headers={"User-Agent": USER_AGENT},
                timeout=timeout_seconds,
            )
            response.raise_for_status()
            payload = response.json()
        except httpx.TimeoutException as e:
            raise UpstreamTimeoutError("NetDisk search request timed out") from e
        except httpx.HTTPStatusError as e:
            status = e.response.status_code
            msg = (
                "NetDisk search failed: upstream responded "
                f"{status} {e.response.reason_phrase}"
            )
            raise UpstreamStatusError(msg, status) from e
        except httpx.RequestError as e:
            msg = f"NetDisk search failed: {e}"
            raise UpstreamConnectionError(msg) from e
        except ValueError as e:
            raise UpstreamError("NetDisk search failed: invalid response") from e

        data = payload.get("data") if isinstance(payload, dict) else None
        if not isinstance(data, dict):
            logger.warning("PanSou response for '%s' carried no data object", query)
            return {}
        return data
