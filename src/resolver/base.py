from __future__ import annotations

from typing import Protocol

from src.models.media import VideoInfo


class VideoSearch(Protocol):
    async def top_video(self, query: str) -> str:
        """Return the watch URL of the best match or raise NoMatchFound."""
        ...


class AudioExtractor(Protocol):
    id: str

    async def extract(self, video_url: str) -> VideoInfo:
        """Return every rendition of the video or raise ExtractionError."""
        ...
