"""
Media Stream resource endpoints.

See https://www.twilio.com/docs/voice/api/stream-resource
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any

from pydantic import Field

from twiliokit.endpoints.base import (
    API_VERSION_PREFIX,
    FormBody,
    FormItems,
    HttpMethod,
    ResourceModel,
    TwilioEndpoint,
)

STREAMS_PATH = API_VERSION_PREFIX + "/Accounts/{account_sid}/Calls/{call_sid}/Streams.json"
STREAM_PATH = (
    API_VERSION_PREFIX + "/Accounts/{account_sid}/Calls/{call_sid}/Streams/{stream_sid}.json"
)


class StreamStatus(str, Enum):
    IN_PROGRESS = "in-progress"
    STOPPED = "stopped"


class StreamTrack(str, Enum):
    INBOUND = "inbound_track"
    OUTBOUND = "outbound_track"
    BOTH = "both_tracks"


class StreamResponse(ResourceModel):
    sid: str
    account_sid: str
    call_sid: str
    status: StreamStatus
    uri: str
    name: str | None = None
    date_updated: str | None = None


class CreateStreamBody(FormBody):
    """Body for starting a unidirectional Media Stream on a live call.

    ``parameters`` are custom key/value pairs relayed to the WebSocket
    server in the ``start`` message.
    """

    url: str
    name: str | None = None
    track: StreamTrack | None = None
    status_callback: str | None = None
    status_callback_method: str | None = None
    parameters: dict[str, str] | None = Field(default=None, alias="Parameter")

    def encode_field(self, name: str, key: str, value: Any) -> FormItems:
        if name == "parameters":
            form: FormItems = []
            for index, (param_name, param_value) in enumerate(value.items(), start=1):
                form.append((f"Parameter{index}.Name", param_name))
                form.append((f"Parameter{index}.Value", param_value))
            return form
        return super().encode_field(name, key, value)


@dataclass(frozen=True)
class CreateStream(TwilioEndpoint[StreamResponse]):
    account_sid: str
    call_sid: str
    body: CreateStreamBody

    PATH = STREAMS_PATH
    METHOD = HttpMethod.POST
    RESPONSE_MODEL = StreamResponse

    def path_params(self) -> dict[str, str]:
        return {"account_sid": self.account_sid, "call_sid": self.call_sid}

    def form_body(self) -> FormItems:
        return self.body.to_form()


@dataclass(frozen=True)
class StopStream(TwilioEndpoint[StreamResponse]):
    """Stop a live stream by moving it to ``stopped``."""

    account_sid: str
    call_sid: str
    stream_sid: str

    PATH = STREAM_PATH
    METHOD = HttpMethod.POST
    RESPONSE_MODEL = StreamResponse

    def path_params(self) -> dict[str, str]:
        return {
            "account_sid": self.account_sid,
            "call_sid": self.call_sid,
            "stream_sid": self.stream_sid,
        }

    def form_body(self) -> FormItems:
        return [("Status", StreamStatus.STOPPED.value)]
