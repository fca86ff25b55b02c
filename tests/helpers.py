"""Fakes and request builders used across the tests."""
from __future__ import annotations

import asyncio
from typing import Any

from src.errors import ResolutionError
from src.models.media import CandidateStream, Rendition


class FakeResolver:
    """Stands in for MediaResolver; hands out queued results in order."""

    def __init__(self, *results: CandidateStream | ResolutionError) -> None:
        self.results = list(results)
        self.queries: list[str] = []
        self.gates: dict[str, asyncio.Event] = {}

    async def resolve(self, query: str) -> CandidateStream | ResolutionError:
        self.queries.append(query)
        result = self.results.pop(0)
        gate = self.gates.get(query)
        if gate is not None:
            await gate.wait()
        return result


def candidate(audio_url: str = "https://x/a.m4a", bitrate: float = 128.0) -> CandidateStream:
    return CandidateStream(
        source_url="https://www.youtube.com/watch?v=abc123",
        audio_url=audio_url,
        bitrate=bitrate,
        container="m4a",
        codec="mp4a.40.2",
        title="Some Song (Official Audio)",
    )


def rendition(
    abr: float | None,
    url: str | None = None,
    acodec: str | None = "mp4a.40.2",
    ext: str | None = "m4a",
    mime_type: str | None = None,
) -> Rendition:
    return Rendition(
        url=url or f"https://media.example/{abr}.m4a",
        acodec=acodec,
        ext=ext,
        mime_type=mime_type,
        abr=abr,
    )


def launch_request() -> dict[str, Any]:
    return {"version": "1.0", "request": {"type": "LaunchRequest", "requestId": "r-1"}}


def intent_request(name: str, **slots: str) -> dict[str, Any]:
    return {
        "version": "1.0",
        "request": {
            "type": "IntentRequest",
            "requestId": "r-2",
            "intent": {
                "name": name,
                "slots": {key: {"name": key, "value": value} for key, value in slots.items()},
            },
        },
    }
