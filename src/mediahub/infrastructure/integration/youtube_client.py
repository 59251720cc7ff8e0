"""HTTP client for the YouTube Data API v3 search endpoint."""

from __future__ import annotations

from typing import Any

import httpx

from mediahub.application.ports import YouTubeSearchPort
from mediahub.domain.shared import (
    UpstreamConnectionError,
    UpstreamError,
    UpstreamStatusError,
    UpstreamTimeoutError,
)

YOUTUBE_API_BASE = "https://www.googleapis.com/youtube/v3"


class YouTubeClient(YouTubeSearchPort):
    """Thin wrapper over ``GET /search``.

    Non-2xx answers raise ``UpstreamStatusError`` whose ``details["payload"]``
    holds the decoded error body (or ``{}``) for cause analysis.
    """

    def __init__(
        self,
        base_url: str = YOUTUBE_API_BASE,
        timeout: float = 15.0,
        http_client: httpx.AsyncClient | None = None,
    ):
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout
        self._client = http_client

    async def _get_client(self) -> httpx.AsyncClient:
        if self._client is None:
            self._client = httpx.AsyncClient(timeout=self._timeout)
        return self._client

    async def close(self) -> None:
        if self._client is not None:
            await self._client.aclose()
            self._client = None

    async def search(
        self,
        api_key: str,
        query: str,
        max_results: int,
        order: str,
        region_code: str | None = None,
    ) -> dict[str, Any]:
        params: dict[str, Any] = {
            "key": api_key,
            "q": query,
            "part": "snippet",
            "type": "video",
            "maxResults": max_results,
            "order": order,
        }
        if region_code:
            params["regionCode"] = region_code

        client = await self._get_client()
        try:
            response = await client.get(f"{self._base_url}/search", params=params)
        except httpx.TimeoutException as e:
            raise UpstreamTimeoutError("YouTube API request timed out") from e
        except httpx.RequestError as e:
            raise UpstreamConnectionError(f"YouTube API unreachable: {e}") from e

        if response.is_error:
            raise UpstreamStatusError(
                f"YouTube API responded {response.status_code}",
                response.status_code,
                details={"payload": _json_or_empty(response)},
            )

        try:
            payload = response.json()
        except ValueError as e:
            raise UpstreamError("YouTube API returned invalid JSON") from e
        return payload if isinstance(payload, dict) else {}


def _json_or_empty(response: httpx.Response) -> Any:
    try:
        return response.json()
    except ValueError:
        return {}
