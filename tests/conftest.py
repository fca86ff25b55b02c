"""Shared fixtures for the skill backend tests."""
from __future__ import annotations

import httpx
import pytest

from src.settings import Settings


@pytest.fixture
def settings() -> Settings:
    return Settings(
        _env_file=None,
        youtube_api_key="test-key",
        proxy_base_url="https://skill.example.com/",
        log_level="WARNING",
    )


@pytest.fixture
def upstream_calls() -> list[httpx.Request]:
    return []


@pytest.fixture
def upstream_client(upstream_calls):
    """AsyncClient whose transport serves a short M4A body and records requests."""

    def handler(request: httpx.Request) -> httpx.Response:
        upstream_calls.append(request)
        if request.url.host == "down.example":
            raise httpx.ConnectError("connection refused", request=request)
        if request.url.path.endswith("/gone.m4a"):
            return httpx.Response(403, text="Forbidden")
        if request.url.path.endswith("/untyped"):
            return httpx.Response(200, content=b"\x00\x01\x02")
        if "range" in request.headers:
            return httpx.Response(
                206,
                content=b"abc",
                headers={
                    "content-type": "audio/mp4",
                    "content-range": "bytes 0-2/9",
                    "accept-ranges": "bytes",
                },
            )
        return httpx.Response(
            200, content=b"abcdefghi", headers={"content-type": "audio/x-m4a"}
        )

    return httpx.AsyncClient(transport=httpx.MockTransport(handler))
