from __future__ import annotations

import logging
from typing import Any

import httpx

from src.errors import NoMatchFound

logger = logging.getLogger(__name__)

WATCH_URL = "https://www.youtube.com/watch?v={video_id}"


class YouTubeSearch:
    """Top-result lookup against the YouTube Data API v3 ``search`` endpoint."""

    def __init__(
        self,
        client: httpx.AsyncClient,
        api_key: str | None,
        search_url: str,
        user_agent: str,
    ) -> None:
        self._client = client
        self._api_key = api_key
        self._search_url = search_url
        self._user_agent = user_agent

    async def top_video(self, query: str) -> str:
        if not self._api_key:
            raise NoMatchFound("YouTube API key is not configured")

        params = {
            "part": "snippet",
            "type": "video",
            "maxResults": 1,
            "q": query,
            "key": self._api_key,
        }
        try:
            response = await self._client.get(
                self._search_url,
                params=params,
                headers={"User-Agent": self._user_agent},
            )
            response.raise_for_status()
            data: Any = response.json()
        except httpx.HTTPStatusError as exc:
            # quota and key errors come back as 4xx with a JSON error body
            logger.warning(
                "YouTube search for %r failed with HTTP %s: %s",
                query,
                exc.response.status_code,
                exc.response.text[:300],
            )
            raise NoMatchFound(f"search failed for {query!r}") from exc
        except (httpx.HTTPError, ValueError) as exc:
            logger.warning("YouTube search for %r failed: %s", query, exc)
            raise NoMatchFound(f"search failed for {query!r}") from exc

        video_id = _first_video_id(data)
        if video_id is None:
            raise NoMatchFound(f"no video found for {query!r}")

        return WATCH_URL.format(video_id=video_id)


def _first_video_id(data: Any) -> str | None:
    if not isinstance(data, dict):
        return None
    items = data.get("items")
    if not isinstance(items, list) or not items:
        return None
    first = items[0]
    if not isinstance(first, dict) or not isinstance(first.get("id"), dict):
        return None
    video_id = first["id"].get("videoId")
    return video_id if isinstance(video_id, str) and video_id else None
