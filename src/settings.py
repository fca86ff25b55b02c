from __future__ import annotations

from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


DEFAULT_USER_AGENT = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) "
    "AppleWebKit/537.36 (KHTML, like Gecko) "
    "Chrome/131.0.0.0 Safari/537.36"
)


class ExtractorSettings(BaseModel):
    backend: Literal["library", "command"] = "library"
    binary: str = "yt-dlp"
    cookies_file: Path | None = None
    user_agent: str = DEFAULT_USER_AGENT


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="TUBESKILL_",
        env_file=".env",
        case_sensitive=False,
        env_ignore_empty=True,
        extra="ignore",
    )

    skill_name: str = "YouTube Player"

    # YouTube Data API v3
    youtube_api_key: str | None = None
    search_url: str = "https://www.googleapis.com/youtube/v3/search"

    # Public base URL the voice platform uses to reach /proxy
    proxy_base_url: str = "http://localhost:3000"

    user_agent: str = DEFAULT_USER_AGENT
    http_timeout: float = Field(default=15.0, gt=0)

    default_mime_type: str = "audio/mp4"
    chunk_size: int = 65536

    # Extraction (flat env vars with prefix)
    extractor: Literal["library", "command"] = "library"
    ytdlp_binary: str = "yt-dlp"
    cookies_file: Path | None = None

    log_level: str = "INFO"

    @field_validator("proxy_base_url")
    @classmethod
    def _strip_trailing_slash(cls, value: str) -> str:
        return value.rstrip("/")

    def extractor_settings(self) -> ExtractorSettings:
        return ExtractorSettings(
            backend=self.extractor,
            binary=self.ytdlp_binary,
            cookies_file=self.cookies_file,
            user_agent=self.user_agent,
        )
