from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class Rendition:
    url: str
    acodec: str | None
    ext: str | None
    mime_type: str | None
    abr: float | None
    format_id: str | None = None

    @classmethod
    def from_format(cls, fmt: dict[str, Any]) -> "Rendition":
        abr = fmt.get("abr")
        return cls(
            url=fmt.get("url") or "",
            acodec=fmt.get("acodec"),
            ext=fmt.get("ext"),
            # yt-dlp has no mime field of its own, some extractors pass one through
            mime_type=fmt.get("mimeType") or fmt.get("mime_type"),
            abr=float(abr) if isinstance(abr, (int, float)) else None,
            format_id=fmt.get("format_id"),
        )

    @property
    def has_audio(self) -> bool:
        return bool(self.acodec) and self.acodec != "none"

    @property
    def is_m4a(self) -> bool:
        if self.ext == "m4a":
            return True
        return bool(self.mime_type) and "audio/mp4" in self.mime_type

    @property
    def bitrate(self) -> float:
        return self.abr or 0.0


@dataclass(frozen=True)
class VideoInfo:
    source_url: str
    title: str
    renditions: list[Rendition]


@dataclass(frozen=True)
class CandidateStream:
    source_url: str
    audio_url: str
    bitrate: float
    container: str
    codec: str
    title: str = ""
