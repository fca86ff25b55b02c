from __future__ import annotations

import asyncio
import logging
import uuid
from dataclasses import replace
from typing import Callable

from src.models.session import PlaybackSession

logger = logging.getLogger(__name__)


def new_token() -> str:
    return str(uuid.uuid4())


class PlaybackState:
    """Owner of the process-wide PlaybackSession.

    Every read and write goes through the lock, and callers only ever get
    copies. Loading a track is two-phase: ``reserve()`` before resolving,
    ``load()`` afterwards. A load whose ticket is older than the last
    committed one is dropped, so a slow resolution cannot overwrite a newer
    track.
    """

    def __init__(self, token_factory: Callable[[], str] = new_token) -> None:
        self._lock = asyncio.Lock()
        self._current = PlaybackSession()
        self._token_factory = token_factory
        self._issued = 0
        self._committed = 0

    async def reserve(self) -> int:
        async with self._lock:
            self._issued += 1
            return self._issued

    async def load(
        self, ticket: int, stream_url: str, query: str
    ) -> PlaybackSession | None:
        if not stream_url:
            raise ValueError("stream_url must not be empty")

        async with self._lock:
            if ticket < self._committed:
                logger.info(
                    "Dropping stale track for %r (ticket %d < %d)",
                    query,
                    ticket,
                    self._committed,
                )
                return None

            token = self._token_factory()
            while token == self._current.token:
                token = self._token_factory()

            self._committed = ticket
            self._current = PlaybackSession(
                token=token, stream_url=stream_url, offset_ms=0, query=query
            )
            return replace(self._current)

    async def get(self) -> PlaybackSession:
        async with self._lock:
            return replace(self._current)
