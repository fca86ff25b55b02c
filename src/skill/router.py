from __future__ import annotations

import logging
from enum import Enum
from typing import Any, Awaitable, Callable

from pydantic import ValidationError

from src.errors import MalformedEvent, NoMatchFound, ResolutionError
from src.models.alexa import Intent, SkillRequest, SkillResponse
from src.resolver.pipeline import MediaResolver
from src.services.playback import PlaybackState
from src.skill import responses, speech

logger = logging.getLogger(__name__)

QUERY_SLOT = "videoQuery"


class EventKind(Enum):
    LAUNCH = "launch"
    INTENT = "intent"
    SESSION_ENDED = "session_ended"
    PLAYBACK = "playback"
    UNKNOWN = "unknown"


class IntentKind(Enum):
    PLAY = "play"
    CHANGE_SONG = "change_song"
    PAUSE = "pause"
    RESUME = "resume"
    CANCEL = "cancel"
    HELP = "help"
    UNKNOWN = "unknown"


INTENT_NAMES: dict[str, IntentKind] = {
    "PlayYouTubeIntent": IntentKind.PLAY,
    "ChangeSongIntent": IntentKind.CHANGE_SONG,
    "AMAZON.PauseIntent": IntentKind.PAUSE,
    "AMAZON.StopIntent": IntentKind.PAUSE,
    "AMAZON.ResumeIntent": IntentKind.RESUME,
    "AMAZON.CancelIntent": IntentKind.CANCEL,
    "AMAZON.HelpIntent": IntentKind.HELP,
}


# replies to these must not carry outputSpeech
PLATFORM_EVENT_PREFIXES = ("AudioPlayer.", "PlaybackController.", "System.")


def classify_event(request_type: str) -> EventKind:
    if request_type == "LaunchRequest":
        return EventKind.LAUNCH
    if request_type == "IntentRequest":
        return EventKind.INTENT
    if request_type == "SessionEndedRequest":
        return EventKind.SESSION_ENDED
    if request_type.startswith(PLATFORM_EVENT_PREFIXES):
        return EventKind.PLAYBACK
    return EventKind.UNKNOWN


def classify_intent(name: str) -> IntentKind:
    return INTENT_NAMES.get(name, IntentKind.UNKNOWN)


IntentHandler = Callable[[Intent], Awaitable[SkillResponse]]


class IntentRouter:
    """Turns one skill request into one skill response.

    The only state kept between requests is the PlaybackState. ``handle``
    never raises: anything unexpected becomes an apology with the session
    closed, so the platform always receives valid response JSON.
    """

    def __init__(
        self,
        resolver: MediaResolver,
        playback: PlaybackState,
        proxy_base_url: str,
        skill_name: str,
    ) -> None:
        self._resolver = resolver
        self._playback = playback
        self._proxy_base_url = proxy_base_url
        self._skill_name = skill_name

        self._intent_handlers: dict[IntentKind, IntentHandler] = {
            IntentKind.PLAY: self._play,
            IntentKind.CHANGE_SONG: self._change_song,
            IntentKind.PAUSE: self._pause,
            IntentKind.RESUME: self._resume,
            IntentKind.CANCEL: self._cancel,
            IntentKind.HELP: self._help,
            IntentKind.UNKNOWN: self._unknown,
        }

    async def handle(self, payload: Any) -> dict[str, Any]:
        try:
            response = await self._dispatch(payload)
        except MalformedEvent as exc:
            logger.warning("Malformed skill request: %s", exc)
            response = responses.speak(speech.SOMETHING_WENT_WRONG, end_session=True)
        except Exception:
            logger.exception("Error while handling skill request")
            response = responses.speak(speech.INTERNAL_ERROR, end_session=True)
        return response.to_json()

    async def _dispatch(self, payload: Any) -> SkillResponse:
        try:
            request = SkillRequest.model_validate(payload).request
        except ValidationError as exc:
            raise MalformedEvent(f"invalid request envelope: {exc.error_count()} errors") from exc

        event = classify_event(request.type)
        logger.info("Skill event %s (%s)", request.type, event.value)

        if event is EventKind.LAUNCH:
            return responses.speak(speech.WELCOME.format(skill_name=self._skill_name))

        if event is EventKind.INTENT:
            if request.intent is None:
                raise MalformedEvent("IntentRequest without an intent")
            kind = classify_intent(request.intent.name)
            logger.info("Intent %s -> %s", request.intent.name, kind.value)
            return await self._intent_handlers[kind](request.intent)

        if event in (EventKind.SESSION_ENDED, EventKind.PLAYBACK):
            return responses.acknowledge()

        raise MalformedEvent(f"unsupported request type {request.type!r}")

    async def _play(self, intent: Intent) -> SkillResponse:
        query = intent.slot_value(QUERY_SLOT)
        if query is None:
            return responses.speak(speech.ASK_FOR_SONG)

        ticket = await self._playback.reserve()
        result = await self._resolver.resolve(query)

        if isinstance(result, NoMatchFound):
            return responses.speak(speech.NOT_FOUND)
        if isinstance(result, ResolutionError):
            return responses.speak(speech.NO_AUDIO)

        session = await self._playback.load(ticket, result.audio_url, query)
        if session is None:
            return responses.speak(speech.SUPERSEDED, end_session=True)

        text = speech.PLAYING.format(query=query)
        return responses.play(
            session,
            responses.proxy_url(self._proxy_base_url, session.stream_url),
            text,
            card_title=self._skill_name,
        )

    async def _change_song(self, intent: Intent) -> SkillResponse:
        return responses.speak(speech.CHANGE_SONG)

    async def _pause(self, intent: Intent) -> SkillResponse:
        return responses.stop(speech.PAUSING)

    async def _resume(self, intent: Intent) -> SkillResponse:
        session = await self._playback.get()
        if not session.loaded:
            return responses.speak(speech.NOTHING_TO_RESUME)

        return responses.play(
            session,
            responses.proxy_url(self._proxy_base_url, session.stream_url),
            speech.RESUMING.format(query=session.query),
        )

    async def _cancel(self, intent: Intent) -> SkillResponse:
        return responses.stop(speech.FAREWELL.format(skill_name=self._skill_name))

    async def _help(self, intent: Intent) -> SkillResponse:
        return responses.speak(speech.HELP)

    async def _unknown(self, intent: Intent) -> SkillResponse:
        return responses.speak(speech.NOT_UNDERSTOOD)
