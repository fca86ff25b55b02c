from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class _CamelModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, extra="ignore"
    )


# Inbound


class Slot(_CamelModel):
    name: str | None = None
    value: str | None = None


class Intent(_CamelModel):
    name: str
    slots: dict[str, Slot] = {}

    def slot_value(self, name: str) -> str | None:
        slot = self.slots.get(name)
        if slot is None or slot.value is None:
            return None
        value = slot.value.strip()
        return value or None


class RequestBody(_CamelModel):
    type: str
    request_id: str | None = None
    intent: Intent | None = None


class SkillRequest(_CamelModel):
    version: str | None = None
    request: RequestBody


# Outbound


class OutputSpeech(_CamelModel):
    type: Literal["PlainText"] = "PlainText"
    text: str


class Card(_CamelModel):
    type: Literal["Simple"] = "Simple"
    title: str
    content: str


class Stream(_CamelModel):
    token: str
    url: str
    offset_in_milliseconds: int = 0


class AudioItem(_CamelModel):
    stream: Stream


class Directive(_CamelModel):
    type: Literal["AudioPlayer.Play", "AudioPlayer.Stop"]
    play_behavior: Literal["REPLACE_ALL"] | None = None
    audio_item: AudioItem | None = None


class ResponseBody(_CamelModel):
    output_speech: OutputSpeech | None = None
    card: Card | None = None
    directives: list[Directive] | None = None
    should_end_session: bool | None = None


class SkillResponse(_CamelModel):
    version: str = "1.0"
    response: ResponseBody

    def to_json(self) -> dict[str, Any]:
        return self.model_dump(by_alias=True, exclude_none=True)
