from __future__ import annotations

from urllib.parse import quote

from src.models.alexa import (
    AudioItem,
    Card,
    Directive,
    OutputSpeech,
    ResponseBody,
    SkillResponse,
    Stream,
)
from src.models.session import PlaybackSession


def proxy_url(proxy_base_url: str, upstream_url: str) -> str:
    return f"{proxy_base_url.rstrip('/')}/proxy?url={quote(upstream_url, safe='')}"


def speak(text: str, end_session: bool = False) -> SkillResponse:
    return SkillResponse(
        response=ResponseBody(
            output_speech=OutputSpeech(text=text), should_end_session=end_session
        )
    )


def play(
    session: PlaybackSession,
    url: str,
    text: str,
    card_title: str | None = None,
) -> SkillResponse:
    directive = Directive(
        type="AudioPlayer.Play",
        play_behavior="REPLACE_ALL",
        audio_item=AudioItem(
            stream=Stream(
                token=session.token,
                url=url,
                offset_in_milliseconds=session.offset_ms,
            )
        ),
    )
    card = Card(title=card_title, content=text) if card_title else None
    return SkillResponse(
        response=ResponseBody(
            output_speech=OutputSpeech(text=text),
            card=card,
            directives=[directive],
            should_end_session=True,
        )
    )


def stop(text: str) -> SkillResponse:
    return SkillResponse(
        response=ResponseBody(
            output_speech=OutputSpeech(text=text),
            directives=[Directive(type="AudioPlayer.Stop")],
            should_end_session=True,
        )
    )


def acknowledge() -> SkillResponse:
    """Empty response for events that must not speak or change playback."""
    return SkillResponse(response=ResponseBody())
