from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse, PlainTextResponse, Response
from starlette.responses import StreamingResponse

from src.errors import RelayError

router = APIRouter()


@router.get("/health")
async def health() -> dict[str, str]:
    return {"status": "ok"}


@router.post("/alexa")
async def alexa(request: Request) -> JSONResponse:
    skill = request.app.state.intent_router

    payload: Any
    try:
        payload = await request.json()
    except ValueError:
        # answered with an apology by the router, not a 4xx
        payload = None

    return JSONResponse(content=await skill.handle(payload))


@router.get("/proxy")
async def proxy(request: Request, url: str | None = None) -> Response:
    relay = request.app.state.relay

    try:
        relayed = await relay.open(url, range_header=request.headers.get("range"))
    except RelayError as exc:
        return PlainTextResponse(str(exc), status_code=exc.status_code)

    return StreamingResponse(
        relayed.body,
        status_code=relayed.status_code,
        media_type=relayed.media_type,
        headers=relayed.headers,
    )
