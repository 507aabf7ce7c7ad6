"""
Call resource endpoints.

See https://www.twilio.com/docs/voice/api/call-resource
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any

from pydantic import Field, model_validator

from twiliokit.endpoints.base import (
    API_VERSION_PREFIX,
    FormBody,
    FormItems,
    HttpMethod,
    Page,
    ResourceModel,
    TwilioEndpoint,
)
from twiliokit.query import ListQuery

CALLS_PATH = API_VERSION_PREFIX + "/Accounts/{account_sid}/Calls.json"
CALL_PATH = API_VERSION_PREFIX + "/Accounts/{account_sid}/Calls/{call_sid}.json"


class CallStatus(str, Enum):
    """Call status values."""

    QUEUED = "queued"
    RINGING = "ringing"
    IN_PROGRESS = "in-progress"
    CANCELED = "canceled"
    COMPLETED = "completed"
    FAILED = "failed"
    BUSY = "busy"
    NO_ANSWER = "no-answer"


class StatusCallbackEvent(str, Enum):
    """Call progress events delivered to ``StatusCallback``."""

    INITIATED = "initiated"
    RINGING = "ringing"
    ANSWERED = "answered"
    COMPLETED = "completed"


class RecordingTrack(str, Enum):
    INBOUND = "inbound"
    OUTBOUND = "outbound"
    BOTH = "both"


class CallResponse(ResourceModel):
    """Call resource as returned by the API."""

    sid: str
    account_sid: str
    to: str
    from_: str = Field(alias="from")
    uri: str

    status: CallStatus | None = None
    date_created: str | None = None
    date_updated: str | None = None
    start_time: str | None = None
    end_time: str | None = None
    duration: str | None = None
    price: str | None = None
    price_unit: str | None = None
    direction: str | None = None
    answered_by: str | None = None
    api_version: str | None = None
    to_formatted: str | None = None
    from_formatted: str | None = None
    forwarded_from: str | None = None
    caller_name: str | None = None
    parent_call_sid: str | None = None
    phone_number_sid: str | None = None
    queue_time: str | None = None
    trunk_sid: str | None = None
    group_sid: str | None = None
    annotation: str | None = None
    subresource_uris: dict[str, Any] | None = None


class CallPage(Page):
    calls: list[CallResponse] = Field(default_factory=list)


_STATUS_CALLBACK_EVENT_FLAGS: dict[str, StatusCallbackEvent] = {
    "status_callback_event_initiated": StatusCallbackEvent.INITIATED,
    "status_callback_event_ringing": StatusCallbackEvent.RINGING,
    "status_callback_event_answered": StatusCallbackEvent.ANSWERED,
    "status_callback_event_completed": StatusCallbackEvent.COMPLETED,
}

_INSTRUCTION_SOURCES = ("url", "twiml", "application_sid")


class CreateCallBody(FormBody):
    """Body for creating an outbound call.

    ``to`` and ``from_`` are required, plus exactly one source of call
    instructions: ``url`` (a webhook returning TwiML), inline ``twiml`` or an
    ``application_sid``. Everything else is optional and omitted unless set.
    """

    to: str
    from_: str = Field(alias="From")

    url: str | None = None
    twiml: str | None = None
    application_sid: str | None = None

    method: str | None = None
    fallback_url: str | None = None
    fallback_method: str | None = None

    status_callback: str | None = None
    status_callback_method: str | None = None
    # Each flag set to True adds one StatusCallbackEvent entry
    status_callback_event_initiated: bool | None = None
    status_callback_event_ringing: bool | None = None
    status_callback_event_answered: bool | None = None
    status_callback_event_completed: bool | None = None

    send_digits: str | None = None
    timeout: int | None = None
    time_limit: int | None = None

    record: bool | None = None
    recording_channels: str | None = None
    recording_status_callback: str | None = None
    recording_status_callback_method: str | None = None
    recording_status_callback_event: list[str] | None = None
    recording_track: RecordingTrack | None = None
    trim: str | None = None

    sip_auth_username: str | None = None
    sip_auth_password: str | None = None

    machine_detection: str | None = None
    machine_detection_timeout: int | None = None
    machine_detection_speech_threshold: int | None = None
    machine_detection_speech_end_threshold: int | None = None
    machine_detection_silence_timeout: int | None = None
    async_amd: bool | None = None
    async_amd_status_callback: str | None = None
    async_amd_status_callback_method: str | None = None

    caller_id: str | None = None
    byoc: str | None = None
    call_reason: str | None = None
    call_token: str | None = None

    @model_validator(mode="after")
    def check_instruction_source(self) -> CreateCallBody:
        given = [name for name in _INSTRUCTION_SOURCES if getattr(self, name) is not None]
        if len(given) != 1:
            raise ValueError(
                "exactly one of url, twiml or application_sid is required, "
                f"got {given or 'none'}"
            )
        return self

    @classmethod
    def new(cls, to: str, from_: str, url: str) -> CreateCallBody:
        return cls(to=to, from_=from_, url=url)

    @classmethod
    def with_twiml(cls, to: str, from_: str, twiml: str) -> CreateCallBody:
        return cls(to=to, from_=from_, twiml=twiml)

    @classmethod
    def with_application(cls, to: str, from_: str, application_sid: str) -> CreateCallBody:
        return cls(to=to, from_=from_, application_sid=application_sid)

    def encode_field(self, name: str, key: str, value: Any) -> FormItems:
        event = _STATUS_CALLBACK_EVENT_FLAGS.get(name)
        if event is not None:
            return [("StatusCallbackEvent", event.value)] if value else []
        return super().encode_field(name, key, value)


class UpdateCallBody(FormBody):
    """Body for modifying a live call. Every field is optional."""

    url: str | None = None
    method: str | None = None
    twiml: str | None = None
    status: CallStatus | None = None
    fallback_url: str | None = None
    fallback_method: str | None = None
    status_callback: str | None = None
    status_callback_method: str | None = None
    time_limit: int | None = None


@dataclass(frozen=True)
class CreateCall(TwilioEndpoint[CallResponse]):
    account_sid: str
    body: CreateCallBody

    PATH = CALLS_PATH
    METHOD = HttpMethod.POST
    RESPONSE_MODEL = CallResponse

    def path_params(self) -> dict[str, str]:
        return {"account_sid": self.account_sid}

    def form_body(self) -> FormItems:
        return self.body.to_form()


@dataclass(frozen=True)
class FetchCall(TwilioEndpoint[CallResponse]):
    account_sid: str
    call_sid: str

    PATH = CALL_PATH
    RESPONSE_MODEL = CallResponse

    def path_params(self) -> dict[str, str]:
        return {"account_sid": self.account_sid, "call_sid": self.call_sid}


@dataclass(frozen=True)
class ListCalls(TwilioEndpoint[CallPage]):
    account_sid: str
    query: ListQuery | None = None

    PATH = CALLS_PATH
    RESPONSE_MODEL = CallPage

    def path_params(self) -> dict[str, str]:
        return {"account_sid": self.account_sid}

    def query_params(self) -> FormItems | None:
        return self.query.params if self.query is not None else None


@dataclass(frozen=True)
class UpdateCall(TwilioEndpoint[CallResponse]):
    account_sid: str
    call_sid: str
    body: UpdateCallBody

    PATH = CALL_PATH
    METHOD = HttpMethod.POST
    RESPONSE_MODEL = CallResponse

    def path_params(self) -> dict[str, str]:
        return {"account_sid": self.account_sid, "call_sid": self.call_sid}

    def form_body(self) -> FormItems:
        return self.body.to_form()


@dataclass(frozen=True)
class DeleteCall(TwilioEndpoint[None]):
    account_sid: str
    call_sid: str

    PATH = CALL_PATH
    METHOD = HttpMethod.DELETE

    def path_params(self) -> dict[str, str]:
        return {"account_sid": self.account_sid, "call_sid": self.call_sid}
