"""
Request parameters Twilio sends to application webhooks.

These models only parse the form payload; they do not verify the request
signature.

See https://www.twilio.com/docs/voice/twiml#twilios-request-to-your-application
"""

from __future__ import annotations

from collections.abc import Mapping
from enum import Enum
from typing import Any, TypeVar

from pydantic import BaseModel, ConfigDict, Field, ValidationError
from pydantic.alias_generators import to_pascal

from twiliokit.endpoints.calls import CallStatus
from twiliokit.errors import DeserializationError

ParamsT = TypeVar("ParamsT", bound="WebhookParams")


class WebhookParams(BaseModel):
    """Base for PascalCase form payloads. Unknown keys are kept as extras."""

    model_config = ConfigDict(
        alias_generator=to_pascal,
        populate_by_name=True,
        extra="allow",
    )

    @classmethod
    def from_form(cls: type[ParamsT], payload: Mapping[str, Any]) -> ParamsT:
        try:
            return cls.model_validate(dict(payload))
        except ValidationError as e:
            raise DeserializationError(
                f"{cls.__name__}: invalid webhook payload: {e.error_count()} error(s)",
                body=str(dict(payload)),
            ) from e

    @property
    def extra(self) -> dict[str, Any]:
        return dict(self.model_extra or {})

    def get_extra(self, key: str) -> Any | None:
        return self.extra.get(key)


class CallRequestParams(WebhookParams):
    """Parameters of a voice webhook request (``Url``/``StatusCallback``)."""

    call_sid: str
    account_sid: str
    from_: str = Field(alias="From")
    to: str
    call_status: CallStatus
    api_version: str
    direction: str
    forwarded_from: str | None = None
    caller_name: str | None = None
    parent_call_sid: str | None = None
    call_token: str | None = None
    from_city: str | None = None
    from_state: str | None = None
    from_zip: str | None = None
    from_country: str | None = None
    to_city: str | None = None
    to_state: str | None = None
    to_zip: str | None = None
    to_country: str | None = None

    def is_no_answer(self) -> bool:
        return self.call_status == CallStatus.NO_ANSWER


class ConferenceEvent(str, Enum):
    CONFERENCE_END = "conference-end"
    CONFERENCE_START = "conference-start"
    PARTICIPANT_LEAVE = "participant-leave"
    PARTICIPANT_JOIN = "participant-join"
    PARTICIPANT_MUTE = "participant-mute"
    PARTICIPANT_UNMUTE = "participant-unmute"
    PARTICIPANT_HOLD = "participant-hold"
    PARTICIPANT_UNHOLD = "participant-unhold"
    PARTICIPANT_MODIFY = "participant-modify"
    PARTICIPANT_SPEECH_START = "participant-speech-start"
    PARTICIPANT_SPEECH_STOP = "participant-speech-stop"
    ANNOUNCEMENT_END = "announcement-end"
    ANNOUNCEMENT_FAIL = "announcement-fail"


class ConferenceRequestParams(WebhookParams):
    """Conference ``statusCallback`` parameters."""

    conference_sid: str
    friendly_name: str
    account_sid: str
    sequence_number: int
    timestamp: str
    status_callback_event: ConferenceEvent | None = None
    call_sid: str | None = None
    muted: bool | None = None
    hold: bool | None = None
    coaching: bool | None = None
    end_conference_on_exit: bool | None = None
    start_conference_on_enter: bool | None = None
    call_sid_ending_conference: str | None = None
    participant_label_ending_conference: str | None = None
    reason: str | None = None
    reason_announcement_failed: str | None = None
    announce_url: str | None = None
    participant_call_status: str | None = None
    event_name: str | None = None
    recording_url: str | None = None
    duration: int | None = None
    recording_file_size: int | None = None

    def is_conference_end(self) -> bool:
        return self.status_callback_event == ConferenceEvent.CONFERENCE_END


class AnsweredBy(str, Enum):
    MACHINE_START = "machine_start"
    HUMAN = "human"
    FAX = "fax"
    UNKNOWN = "unknown"
    MACHINE_END_BEEP = "machine_end_beep"
    MACHINE_END_SILENCE = "machine_end_silence"
    MACHINE_END_OTHER = "machine_end_other"


class AmdRequestParams(WebhookParams):
    """Answering machine detection callback parameters."""

    call_sid: str
    account_sid: str
    answered_by: AnsweredBy
    machine_detection_duration: int | None = None

    def is_human(self) -> bool:
        return self.answered_by == AnsweredBy.HUMAN
