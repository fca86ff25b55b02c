from __future__ import annotations

import asyncio
import json
import logging
from typing import Any

import yt_dlp
from yt_dlp.utils import YoutubeDLError

from src.errors import ExtractionError
from src.models.media import Rendition, VideoInfo
from src.settings import ExtractorSettings

logger = logging.getLogger(__name__)


class YtDlpLibraryExtractor:
    """Runs yt-dlp in-process, in a worker thread."""

    id = "library"

    def __init__(self, settings: ExtractorSettings) -> None:
        self._settings = settings

    async def extract(self, video_url: str) -> VideoInfo:
        info = await asyncio.to_thread(self._extract_sync, video_url)
        return video_info_from_dict(video_url, info)

    def _extract_sync(self, video_url: str) -> Any:
        opts: dict[str, Any] = {
            "quiet": True,
            "no_warnings": True,
            "skip_download": True,
            "noplaylist": True,
            "http_headers": {"User-Agent": self._settings.user_agent},
        }
        if self._settings.cookies_file is not None:
            opts["cookiefile"] = str(self._settings.cookies_file)

        try:
            with yt_dlp.YoutubeDL(opts) as ydl:
                return ydl.extract_info(video_url, download=False)
        except (YoutubeDLError, OSError) as exc:
            logger.warning("yt-dlp extraction failed for %s: %s", video_url, exc)
            raise ExtractionError(str(exc)) from exc


class YtDlpCommandExtractor:
    """Runs the yt-dlp executable and parses its JSON dump."""

    id = "command"

    def __init__(self, settings: ExtractorSettings) -> None:
        self._settings = settings

    def command(self, video_url: str) -> list[str]:
        args = [
            self._settings.binary,
            "--dump-single-json",
            "--no-warnings",
            "--skip-download",
            "--no-playlist",
            "--user-agent",
            self._settings.user_agent,
        ]
        if self._settings.cookies_file is not None:
            args += ["--cookies", str(self._settings.cookies_file)]
        args.append(video_url)
        return args

    async def extract(self, video_url: str) -> VideoInfo:
        try:
            proc = await asyncio.create_subprocess_exec(
                *self.command(video_url),
                stdout=asyncio.subprocess.PIPE,
                stderr=asyncio.subprocess.PIPE,
            )
            stdout, stderr = await proc.communicate()
        except OSError as exc:
            logger.warning("Could not run %s: %s", self._settings.binary, exc)
            raise ExtractionError(str(exc)) from exc

        if proc.returncode != 0:
            message = stderr.decode("utf-8", errors="replace").strip()
            logger.warning(
                "%s exited with %s for %s: %s",
                self._settings.binary,
                proc.returncode,
                video_url,
                message[-500:],
            )
            raise ExtractionError(message or f"exit status {proc.returncode}")

        try:
            info = json.loads(stdout)
        except ValueError as exc:
            raise ExtractionError("yt-dlp printed invalid JSON") from exc

        return video_info_from_dict(video_url, info)


def video_info_from_dict(video_url: str, info: Any) -> VideoInfo:
    if not isinstance(info, dict):
        raise ExtractionError(f"no metadata returned for {video_url}")

    formats = info.get("formats") or []
    if not isinstance(formats, list):
        raise ExtractionError(f"unexpected formats list for {video_url}")

    renditions = [Rendition.from_format(f) for f in formats if isinstance(f, dict)]
    return VideoInfo(
        source_url=video_url,
        title=info.get("title") or "",
        renditions=renditions,
    )


def build_extractor(
    settings: ExtractorSettings,
) -> YtDlpLibraryExtractor | YtDlpCommandExtractor:
    if settings.backend == "command":
        return YtDlpCommandExtractor(settings)
    return YtDlpLibraryExtractor(settings)
