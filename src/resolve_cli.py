from __future__ import annotations

import argparse
import asyncio

import httpx

from src.errors import ResolutionError
from src.resolver import MediaResolver, YouTubeSearch, build_extractor
from src.settings import Settings
from src.skill.responses import proxy_url


async def _amain() -> int:
    settings = Settings()

    parser = argparse.ArgumentParser(
        prog="python -m src.resolve_cli",
        description=(
            "Run the search + extraction pipeline for a query and print the "
            "audio rendition the skill would play."
        ),
    )
    parser.add_argument("query", help="Song to look for, as it would be spoken")
    parser.add_argument(
        "--extractor",
        choices=["library", "command"],
        default=settings.extractor,
        help="yt-dlp backend (or env TUBESKILL_EXTRACTOR)",
    )
    parser.add_argument(
        "--api-key",
        default=settings.youtube_api_key,
        help="YouTube Data API key (or env TUBESKILL_YOUTUBE_API_KEY)",
    )
    args = parser.parse_args()

    if not args.api_key:
        raise SystemExit("Missing --api-key (or env TUBESKILL_YOUTUBE_API_KEY)")

    extractor_settings = settings.extractor_settings().model_copy(
        update={"backend": args.extractor}
    )

    async with httpx.AsyncClient(timeout=settings.http_timeout) as client:
        search = YouTubeSearch(
            client,
            api_key=args.api_key,
            search_url=settings.search_url,
            user_agent=settings.user_agent,
        )
        resolver = MediaResolver(search, build_extractor(extractor_settings))
        result = await resolver.resolve(args.query)

    if isinstance(result, ResolutionError):
        print(f"{type(result).__name__} ({result.stage} stage): {result}")
        return 1

    print(f"Video:     {result.source_url}")
    print(f"Title:     {result.title}")
    print(f"Rendition: {result.container} / {result.codec} @ {result.bitrate:g} kbps")
    print(f"Audio URL: {result.audio_url}")
    print(f"Relay URL: {proxy_url(settings.proxy_base_url, result.audio_url)}")
    return 0


def main() -> None:
    raise SystemExit(asyncio.run(_amain()))


if __name__ == "__main__":
    main()
