"""
Media Stream WebSocket messages.

See https://www.twilio.com/docs/voice/media-streams/websocket-messages
"""

from __future__ import annotations

from enum import Enum
from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, ValidationError
from pydantic.alias_generators import to_camel

from twiliokit.errors import DeserializationError


class StreamMessage(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )

    def to_json(self) -> str:
        return self.model_dump_json(by_alias=True, exclude_none=True)


class Track(str, Enum):
    INBOUND = "inbound"
    OUTBOUND = "outbound"


class MediaFormat(StreamMessage):
    encoding: str
    sample_rate: int
    channels: int


class StartMetadata(StreamMessage):
    stream_sid: str
    account_sid: str
    call_sid: str
    tracks: list[Track]
    media_format: MediaFormat
    custom_parameters: dict[str, str] = Field(default_factory=dict)


class Media(StreamMessage):
    payload: str
    track: Track | None = None
    chunk: str | None = None
    timestamp: str | None = None


class Mark(StreamMessage):
    name: str


class Stop(StreamMessage):
    account_sid: str
    call_sid: str


class Dtmf(StreamMessage):
    digit: str
    track: str


class ConnectedMessage(StreamMessage):
    event: Literal["connected"] = "connected"
    protocol: str
    version: str


class StartMessage(StreamMessage):
    event: Literal["start"] = "start"
    sequence_number: str
    stream_sid: str
    start: StartMetadata


class MediaMessage(StreamMessage):
    event: Literal["media"] = "media"
    stream_sid: str
    media: Media
    sequence_number: str | None = None

    @classmethod
    def outbound(cls, stream_sid: str, payload: str) -> MediaMessage:
        """Audio to play back on the call; ``payload`` is base64 mulaw/8000."""
        return cls(stream_sid=stream_sid, media=Media(payload=payload))


class MarkMessage(StreamMessage):
    event: Literal["mark"] = "mark"
    stream_sid: str
    mark: Mark
    sequence_number: str | None = None

    @classmethod
    def outbound(cls, stream_sid: str, name: str) -> MarkMessage:
        return cls(stream_sid=stream_sid, mark=Mark(name=name))


class StopMessage(StreamMessage):
    event: Literal["stop"] = "stop"
    stream_sid: str
    sequence_number: str
    stop: Stop


class DtmfMessage(StreamMessage):
    event: Literal["dtmf"] = "dtmf"
    stream_sid: str
    sequence_number: str
    dtmf: Dtmf


class ClearMessage(StreamMessage):
    """Tells Twilio to drop buffered outbound audio."""

    event: Literal["clear"] = "clear"
    stream_sid: str

    @classmethod
    def for_stream(cls, stream_sid: str) -> ClearMessage:
        return cls(stream_sid=stream_sid)


InboundMessage = Annotated[
    Union[
        ConnectedMessage,
        StartMessage,
        MediaMessage,
        MarkMessage,
        StopMessage,
        DtmfMessage,
    ],
    Field(discriminator="event"),
]

_inbound_adapter: TypeAdapter[InboundMessage] = TypeAdapter(InboundMessage)


def parse_stream_message(raw: str | bytes) -> InboundMessage:
    """Parse one WebSocket text frame sent by Twilio."""
    try:
        return _inbound_adapter.validate_json(raw)
    except ValidationError as e:
        text = raw.decode("utf-8", errors="replace") if isinstance(raw, bytes) else raw
        raise DeserializationError(
            f"invalid media stream message: {e.error_count()} error(s)",
            body=text,
        ) from e
