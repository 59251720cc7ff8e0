"""HTTP client for Apple-CMS style video source APIs."""

from __future__ import annotations

import asyncio
import logging
import re
from typing import Any

import httpx

from mediahub.application.ports import VideoSourcePort
from mediahub.domain.search import ResultRecord, SourceDescriptor
from mediahub.domain.shared import (
    UpstreamConnectionError,
    UpstreamError,
    UpstreamStatusError,
    UpstreamTimeoutError,
)

logger = logging.getLogger(__name__)

DEFAULT_HEADERS = {
    "User-Agent": (
        "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
        "(KHTML, like Gecko) Chrome/122.0.0.0 Safari/537.36"
    ),
    "Accept": "application/json",
}

GROUP_SEPARATOR = "$$$"
EPISODE_SEPARATOR = "#"
_TAG_RE = re.compile(r"<[^>]+>")
_YEAR_RE = re.compile(r"\d{4}")


class VideoSourceClient(VideoSourcePort):
    """Query one source's ``?ac=videolist&wd=`` search endpoint.

    The first page decides how many more pages exist; the remaining pages
    (up to ``max_pages``) are fetched concurrently. A failing extra page is
    skipped, a failing first page fails the whole source.
    """

    def __init__(
        self,
        timeout: float = 20.0,
        http_client: httpx.AsyncClient | None = None,
    ):
        self._timeout = timeout
        self._client = http_client

    async def _get_client(self) -> httpx.AsyncClient:
        if self._client is None:
            self._client = httpx.AsyncClient(
                timeout=self._timeout,
                headers=DEFAULT_HEADERS,
                follow_redirects=True,
            )
        return self._client

    async def close(self) -> None:
        if self._client is not None:
            await self._client.aclose()
            self._client = None

    async def search(
        self,
        source: SourceDescriptor,
        query: str,
        max_pages: int,
    ) -> list[ResultRecord]:
        first = await self._fetch_page(source, query, 1)
        records = self._map_items(first.get("list"), source)

        try:
            page_count = int(first.get("pagecount") or 1)
        except (TypeError, ValueError):
            page_count = 1

        extra_pages = range(2, min(page_count, max_pages) + 1)
        if extra_pages:
            pages = await asyncio.gather(
                *(self._fetch_page(source, query, page) for page in extra_pages),
                return_exceptions=True,
            )
            for page, payload in zip(extra_pages, pages):
                if isinstance(payload, Exception):
                    logger.warning(
                        "Source %s page %d failed: %s",
                        source.name,
                        page,
                        payload,
                    )
                    continue
                records.extend(self._map_items(payload.get("list"), source))

        return records

    async def _fetch_page(
        self,
        source: SourceDescriptor,
        query: str,
        page: int,
    ) -> dict[str, Any]:
        params: dict[str, Any] = {"ac": "videolist", "wd": query}
        if page > 1:
            params["pg"] = page

        client = await self._get_client()
        try:
            response = await client.get(source.endpoint, params=params)
            response.raise_for_status()
            payload = response.json()
        except httpx.TimeoutException as e:
            msg = f"{source.name} timed out"
            raise UpstreamTimeoutError(msg, details={"page": page}) from e
        except httpx.HTTPStatusError as e:
            status = e.response.status_code
            msg = f"{source.name} responded {status}"
            raise UpstreamStatusError(msg, status, details={"page": page}) from e
        except httpx.RequestError as e:
            msg = f"{source.name} unreachable: {e}"
            raise UpstreamConnectionError(msg, details={"page": page}) from e
        except ValueError as e:
            msg = f"{source.name} returned invalid JSON"
            raise UpstreamError(msg, details={"page": page}) from e

        if not isinstance(payload, dict):
            msg = f"{source.name} returned an unexpected payload"
            raise UpstreamError(msg, details={"page": page})
        return payload

    def _map_items(self, items: Any, source: SourceDescriptor) -> list[ResultRecord]:
        if not isinstance(items, list):
            return []
        records = []
        for item in items:
            if not isinstance(item, dict):
                continue
            record = map_item(item, source)
            if record["episodes"]:
                records.append(record)
        return records


def parse_play_url(play_url: Any) -> tuple[list[str], list[str]]:
    """Extract ``(urls, titles)`` of m3u8 episodes from ``vod_play_url``.

    The field holds ``$$$``-separated player groups, each a ``#``-separated
    list of ``name$url`` entries. The group with the most m3u8 entries wins.
    """
    if not isinstance(play_url, str) or not play_url:
        return [], []

    best_urls: list[str] = []
    best_titles: list[str] = []
    for group in play_url.split(GROUP_SEPARATOR):
        urls: list[str] = []
        titles: list[str] = []
        for index, entry in enumerate(group.split(EPISODE_SEPARATOR), start=1):
            name, sep, url = entry.partition("$")
            if not sep:
                name, url = str(index), entry
            url = url.strip()
            if url.endswith(".m3u8"):
                urls.append(url)
                titles.append(name.strip() or str(index))
        if len(urls) > len(best_urls):
            best_urls, best_titles = urls, titles
    return best_urls, best_titles


def clean_html(text: Any) -> str:
    if not isinstance(text, str):
        return ""
    return _TAG_RE.sub("", text).replace("&nbsp;", " ").strip()


def map_item(item: dict[str, Any], source: SourceDescriptor) -> ResultRecord:
    episodes, titles = parse_play_url(item.get("vod_play_url"))
    year_match = _YEAR_RE.search(str(item.get("vod_year") or ""))
    return {
        "id": str(item.get("vod_id", "")),
        "title": str(item.get("vod_name") or "").strip(),
        "poster": item.get("vod_pic") or "",
        "episodes": episodes,
        "episodes_titles": titles,
        "source": source.key,
        "source_name": source.name,
        "class": item.get("vod_class") or "",
        "year": year_match.group(0) if year_match else "unknown",
        "desc": clean_html(item.get("vod_content")),
        "type_name": item.get("type_name") or "",
        "douban_id": item.get("vod_douban_id") or 0,
    }
