"""Unit tests for PanSouClient using httpx.MockTransport."""

import json

import httpx
import pytest

from mediahub.domain.shared import (
    UpstreamConnectionError,
    UpstreamError,
    UpstreamStatusError,
    UpstreamTimeoutError,
)
from mediahub.infrastructure.integration import PanSouClient
from mediahub.infrastructure.integration.pansou_client import USER_AGENT


def _client(handler) -> PanSouClient:
    transport = httpx.MockTransport(handler)
    return PanSouClient(http_client=httpx.AsyncClient(transport=transport))


class TestPanSouClient:
    """Tests for the NetDisk search upstream client."""

    async def test_posts_merge_request(self):
        seen = []

        def handler(request):
            seen.append(request)
            return httpx.Response(200, json={"data": {"total": 0}})

        data = await _client(handler).search(
            "http://pansou:8888/",
            "planet",
            ["baidu", "quark"],
            5,
        )

        request = seen[0]
        assert data == {"total": 0}
        assert request.method == "POST"
        assert str(request.url) == "http://pansou:8888/api/search"
        assert request.headers["User-Agent"] == USER_AGENT
        assert json.loads(request.content) == {
            "kw": "planet",
            "res": "merge",
            "cloud_types": ["baidu", "quark"],
        }

    async def test_missing_data_object_gives_empty_dict(self):
        client = _client(lambda request: httpx.Response(200, json={"code": 0}))

        assert await client.search("http://pansou", "planet", [], 5) == {}

    async def test_status_error_message(self):
        client = _client(lambda request: httpx.Response(502))

        with pytest.raises(UpstreamStatusError) as exc_info:
            await client.search("http://pansou", "planet", [], 5)

        assert exc_info.value.message == (
            "NetDisk search failed: upstream responded 502 Bad Gateway"
        )
        assert exc_info.value.status_code == 502

    async def test_timeout(self):
        def handler(request):
            raise httpx.ReadTimeout("slow", request=request)

        with pytest.raises(UpstreamTimeoutError):
            await _client(handler).search("http://pansou", "planet", [], 5)

    async def test_unreachable(self):
        def handler(request):
            raise httpx.ConnectError("refused", request=request)

        with pytest.raises(UpstreamConnectionError):
            await _client(handler).search("http://pansou", "planet", [], 5)

    async def test_invalid_json(self):
        client = _client(lambda request: httpx.Response(200, text="<html>"))

        with pytest.raises(UpstreamError) as exc_info:
            await client.search("http://pansou", "planet", [], 5)

        assert "invalid response" in exc_info.value.message

    async def test_close_releases_client(self):
        client = _client(lambda request: httpx.Response(200, json={}))

        await client.close()
        await client.close()
