from __future__ import annotations

import logging
from collections.abc import AsyncIterator
from dataclasses import dataclass, field

import httpx

from src.errors import MissingParameter, UpstreamRelayFailure

logger = logging.getLogger(__name__)

_FORWARDED_HEADERS = ("content-length", "content-range", "accept-ranges")


@dataclass
class RelayedStream:
    status_code: int
    media_type: str
    body: AsyncIterator[bytes]
    headers: dict[str, str] = field(default_factory=dict)


class StreamRelay:
    """Re-serves an upstream audio URL through this server.

    The upstream response is opened before anything is sent back, so
    connection errors and error statuses can still become a 502. After
    that the body is passed through chunk by chunk.
    """

    def __init__(
        self,
        client: httpx.AsyncClient,
        default_mime_type: str = "audio/mp4",
        chunk_size: int = 65536,
        user_agent: str | None = None,
    ) -> None:
        self._client = client
        self._default_mime_type = default_mime_type
        self._chunk_size = chunk_size
        self._user_agent = user_agent

    async def open(
        self, upstream_url: str | None, range_header: str | None = None
    ) -> RelayedStream:
        if not upstream_url:
            raise MissingParameter("Missing 'url' parameter")

        headers = {"Accept": "*/*"}
        if self._user_agent:
            headers["User-Agent"] = self._user_agent
        if range_header:
            headers["Range"] = range_header

        try:
            request = self._client.build_request("GET", upstream_url, headers=headers)
            upstream = await self._client.send(request, stream=True)
        except (httpx.HTTPError, httpx.InvalidURL) as exc:
            logger.error("Relay could not reach upstream %s: %s", _host(upstream_url), exc)
            raise UpstreamRelayFailure(str(exc)) from exc

        if upstream.status_code >= 400:
            await upstream.aclose()
            logger.error(
                "Relay upstream %s answered HTTP %s",
                _host(upstream_url),
                upstream.status_code,
            )
            raise UpstreamRelayFailure(f"upstream status {upstream.status_code}")

        response_headers = {"Cache-Control": "no-cache"}
        # aiter_bytes decodes content-encoding, so the upstream length would be wrong
        encoded = "content-encoding" in upstream.headers
        for name in _FORWARDED_HEADERS:
            if name == "content-length" and encoded:
                continue
            if name in upstream.headers:
                response_headers[name] = upstream.headers[name]

        return RelayedStream(
            status_code=206 if upstream.status_code == 206 else 200,
            media_type=upstream.headers.get("content-type") or self._default_mime_type,
            body=self._iter_body(upstream),
            headers=response_headers,
        )

    async def _iter_body(self, upstream: httpx.Response) -> AsyncIterator[bytes]:
        total = 0
        try:
            async for chunk in upstream.aiter_bytes(chunk_size=self._chunk_size):
                total += len(chunk)
                yield chunk
        except httpx.HTTPError as exc:
            # headers are already sent, the player sees a short body
            logger.warning("Upstream read error after %d bytes: %s", total, exc)
        finally:
            await upstream.aclose()
            logger.debug("Relay finished: %d bytes", total)


def _host(url: str) -> str:
    try:
        return httpx.URL(url).host or url[:80]
    except httpx.InvalidURL:
        return url[:80]
