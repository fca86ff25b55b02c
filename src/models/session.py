from __future__ import annotations

from dataclasses import dataclass


@dataclass
class PlaybackSession:
    """What the audio player currently has loaded.

    ``token`` and ``stream_url`` are either both set or both empty.
    ``offset_ms`` is only echoed back on resume, it never advances.
    """

    token: str = ""
    stream_url: str = ""
    offset_ms: int = 0
    query: str = ""

    @property
    def loaded(self) -> bool:
        return bool(self.token and self.stream_url)
