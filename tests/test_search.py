"""Tests for the YouTube Data API search stage."""
from __future__ import annotations

import asyncio

import httpx
import pytest

from src.errors import NoMatchFound
from src.resolver.search import YouTubeSearch

SEARCH_URL = "https://www.googleapis.com/youtube/v3/search"


def _search(handler, api_key: str | None = "test-key") -> YouTubeSearch:
    client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
    return YouTubeSearch(client, api_key=api_key, search_url=SEARCH_URL, user_agent="ua-test")


class TestYouTubeSearch:
    def test_returns_watch_url_of_top_result(self):
        seen: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(
                200, json={"items": [{"id": {"kind": "youtube#video", "videoId": "dQw4w9WgXcQ"}}]}
            )

        url = asyncio.run(_search(handler).top_video("never gonna give you up"))

        assert url == "https://www.youtube.com/watch?v=dQw4w9WgXcQ"
        params = seen[0].url.params
        assert params["maxResults"] == "1"
        assert params["type"] == "video"
        assert params["q"] == "never gonna give you up"
        assert params["key"] == "test-key"
        assert seen[0].headers["user-agent"] == "ua-test"

    def test_zero_results(self):
        def handler(request):
            return httpx.Response(200, json={"items": []})

        with pytest.raises(NoMatchFound):
            asyncio.run(_search(handler).top_video("zzzz"))

    def test_quota_error(self):
        def handler(request):
            return httpx.Response(403, json={"error": {"code": 403, "message": "quotaExceeded"}})

        with pytest.raises(NoMatchFound):
            asyncio.run(_search(handler).top_video("song"))

    def test_network_error(self):
        def handler(request):
            raise httpx.ConnectTimeout("timed out", request=request)

        with pytest.raises(NoMatchFound):
            asyncio.run(_search(handler).top_video("song"))

    @pytest.mark.parametrize(
        "body",
        [b"not json", b"[]", b'{"items": [{"id": "abc"}]}', b'{"items": [{"id": {}}]}'],
    )
    def test_malformed_body(self, body):
        def handler(request):
            return httpx.Response(200, content=body)

        with pytest.raises(NoMatchFound):
            asyncio.run(_search(handler).top_video("song"))

    def test_missing_api_key_skips_request(self):
        seen = []

        def handler(request):
            seen.append(request)
            return httpx.Response(200, json={})

        with pytest.raises(NoMatchFound):
            asyncio.run(_search(handler, api_key=None).top_video("song"))
        assert seen == []
