from __future__ import annotations

import logging
from contextlib import asynccontextmanager

import httpx
from fastapi import FastAPI

from src.api.routes import router
from src.resolver import MediaResolver, YouTubeSearch, build_extractor
from src.services.playback import PlaybackState
from src.settings import Settings
from src.skill.router import IntentRouter
from src.streaming.relay import StreamRelay

logger = logging.getLogger(__name__)


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


@asynccontextmanager
async def lifespan(fastapi_app: FastAPI):
    client: httpx.AsyncClient = fastapi_app.state.http_client
    settings: Settings = fastapi_app.state.settings

    logger.info(
        "Skill backend ready, relay links point at %s/proxy", settings.proxy_base_url
    )
    try:
        yield
    finally:
        await client.aclose()


def create_app(
    settings: Settings | None = None,
    *,
    http_client: httpx.AsyncClient | None = None,
    resolver: MediaResolver | None = None,
) -> FastAPI:
    settings = settings or Settings()
    configure_logging(settings.log_level)

    client = http_client or httpx.AsyncClient(
        timeout=settings.http_timeout, follow_redirects=True
    )

    if resolver is None:
        search = YouTubeSearch(
            client,
            api_key=settings.youtube_api_key,
            search_url=settings.search_url,
            user_agent=settings.user_agent,
        )
        resolver = MediaResolver(search, build_extractor(settings.extractor_settings()))
        if not settings.youtube_api_key:
            logger.warning("TUBESKILL_YOUTUBE_API_KEY is not set, every search will fail")

    app = FastAPI(title=settings.skill_name, lifespan=lifespan)

    app.state.settings = settings
    app.state.http_client = client
    app.state.playback = PlaybackState()
    app.state.relay = StreamRelay(
        client,
        default_mime_type=settings.default_mime_type,
        chunk_size=settings.chunk_size,
        user_agent=settings.user_agent,
    )
    app.state.intent_router = IntentRouter(
        resolver=resolver,
        playback=app.state.playback,
        proxy_base_url=settings.proxy_base_url,
        skill_name=settings.skill_name,
    )

    app.include_router(router)
    return app


application = create_app()
