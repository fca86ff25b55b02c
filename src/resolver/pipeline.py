from __future__ import annotations

import logging

from src.errors import ResolutionError
from src.models.media import CandidateStream
from src.resolver.base import AudioExtractor, VideoSearch
from src.resolver.selection import select_audio_rendition

logger = logging.getLogger(__name__)


class MediaResolver:
    """Search for a video, then pick its best M4A audio rendition.

    Failures are returned rather than raised: the caller gets either a
    CandidateStream or the ResolutionError describing which stage failed.
    """

    def __init__(self, search: VideoSearch, extractor: AudioExtractor) -> None:
        self._search = search
        self._extractor = extractor

    async def resolve(self, query: str) -> CandidateStream | ResolutionError:
        try:
            video_url = await self._search.top_video(query)
            info = await self._extractor.extract(video_url)
            rendition = select_audio_rendition(info.renditions)
        except ResolutionError as exc:
            logger.warning(
                "Resolution of %r failed at %s stage: %s", query, exc.stage, exc
            )
            return exc

        logger.info(
            "Resolved %r -> %s via %s (%s, %s kbps, format %s)",
            query,
            info.title or video_url,
            self._extractor.id,
            rendition.acodec,
            rendition.bitrate,
            rendition.format_id,
        )
        return CandidateStream(
            source_url=video_url,
            audio_url=rendition.url,
            bitrate=rendition.bitrate,
            container=rendition.ext or "m4a",
            codec=rendition.acodec or "",
            title=info.title,
        )
