from __future__ import annotations

from collections.abc import Iterable

from src.errors import NoCompatibleAudioFormat
from src.models.media import Rendition


def compatible_renditions(renditions: Iterable[Rendition]) -> list[Rendition]:
    return [r for r in renditions if r.url and r.has_audio and r.is_m4a]


def select_audio_rendition(renditions: Iterable[Rendition]) -> Rendition:
    candidates = compatible_renditions(renditions)
    if not candidates:
        raise NoCompatibleAudioFormat("no audio/mp4 rendition with an audio track")

    # max() keeps the first of equal keys, so ties go to provider order
    return max(candidates, key=lambda r: r.bitrate)
