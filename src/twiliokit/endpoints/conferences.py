"""
Conference and conference participant endpoints.

See https://www.twilio.com/docs/voice/api/conference-resource
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from pydantic import Field

from twiliokit.endpoints.base import (
    API_VERSION_PREFIX,
    FormBody,
    FormItems,
    HttpMethod,
    Page,
    ResourceModel,
    TwilioEndpoint,
)
from twiliokit.endpoints.calls import RecordingTrack
from twiliokit.query import ListQuery

CONFERENCES_PATH = API_VERSION_PREFIX + "/Accounts/{account_sid}/Conferences.json"
CONFERENCE_PATH = API_VERSION_PREFIX + "/Accounts/{account_sid}/Conferences/{conference_sid}.json"
PARTICIPANTS_PATH = (
    API_VERSION_PREFIX + "/Accounts/{account_sid}/Conferences/{conference_sid}/Participants.json"
)
PARTICIPANT_PATH = (
    API_VERSION_PREFIX
    + "/Accounts/{account_sid}/Conferences/{conference_sid}/Participants/{call_sid}.json"
)


class ConferenceResponse(ResourceModel):
    sid: str
    account_sid: str
    status: str
    uri: str
    friendly_name: str | None = None
    region: str | None = None
    api_version: str | None = None
    date_created: str | None = None
    date_updated: str | None = None
    reason_conference_ended: str | None = None
    call_sid_ending_conference: str | None = None
    subresource_uris: dict[str, Any] | None = None


class ConferencePage(Page):
    conferences: list[ConferenceResponse] = Field(default_factory=list)


class ParticipantResponse(ResourceModel):
    account_sid: str
    conference_sid: str
    call_sid: str
    uri: str
    label: str | None = None
    status: str | None = None
    muted: bool | None = None
    hold: bool | None = None
    coaching: bool | None = None
    call_sid_to_coach: str | None = None
    start_conference_on_enter: bool | None = None
    end_conference_on_exit: bool | None = None
    queue_time: str | None = None
    date_created: str | None = None
    date_updated: str | None = None


class ParticipantPage(Page):
    participants: list[ParticipantResponse] = Field(default_factory=list)


class UpdateConferenceBody(FormBody):
    status: str | None = None
    announce_url: str | None = None
    announce_method: str | None = None


_SPACE_JOINED_EVENTS = {
    "status_callback_event",
    "conference_status_callback_event",
    "recording_status_callback_event",
    "conference_recording_status_callback_event",
}


class CreateParticipantBody(FormBody):
    """Body for dialing a new participant into a conference.

    Event list fields are sent as a single space-separated value.
    """

    from_: str = Field(alias="From")
    to: str

    label: str | None = None
    status_callback: str | None = None
    status_callback_method: str | None = None
    status_callback_event: list[str] | None = None
    timeout: int | None = None
    time_limit: int | None = None
    caller_id: str | None = None
    call_reason: str | None = None
    call_token: str | None = None

    record: bool | None = None
    trim: str | None = None
    recording_channels: str | None = None
    recording_track: RecordingTrack | None = None
    recording_status_callback: str | None = None
    recording_status_callback_method: str | None = None
    recording_status_callback_event: list[str] | None = None

    muted: bool | None = None
    beep: str | None = None
    coaching: bool | None = None
    call_sid_to_coach: str | None = None
    early_media: bool | None = None
    wait_url: str | None = None
    wait_method: str | None = None
    start_conference_on_enter: bool | None = None
    end_conference_on_exit: bool | None = None
    max_participants: int | None = None
    jitter_buffer_size: str | None = None
    region: str | None = None

    conference_record: str | None = None
    conference_trim: str | None = None
    conference_status_callback: str | None = None
    conference_status_callback_method: str | None = None
    conference_status_callback_event: list[str] | None = None
    conference_recording_status_callback: str | None = None
    conference_recording_status_callback_method: str | None = None
    conference_recording_status_callback_event: list[str] | None = None

    sip_auth_username: str | None = None
    sip_auth_password: str | None = None
    byoc: str | None = None

    machine_detection: str | None = None
    machine_detection_timeout: int | None = None
    machine_detection_speech_threshold: int | None = None
    machine_detection_speech_end_threshold: int | None = None
    machine_detection_silence_timeout: int | None = None
    amd_status_callback: str | None = None
    amd_status_callback_method: str | None = None

    @classmethod
    def new(cls, from_: str, to: str) -> CreateParticipantBody:
        return cls(from_=from_, to=to)

    def encode_field(self, name: str, key: str, value: Any) -> FormItems:
        if name in _SPACE_JOINED_EVENTS:
            return [(key, " ".join(value))] if value else []
        return super().encode_field(name, key, value)


class UpdateParticipantBody(FormBody):
    muted: bool | None = None
    hold: bool | None = None
    hold_url: str | None = None
    hold_method: str | None = None
    announce_url: str | None = None
    announce_method: str | None = None
    wait_url: str | None = None
    wait_method: str | None = None
    beep_on_exit: bool | None = None
    end_conference_on_exit: bool | None = None
    coaching: bool | None = None
    call_sid_to_coach: str | None = None


@dataclass(frozen=True)
class FetchConference(TwilioEndpoint[ConferenceResponse]):
    account_sid: str
    conference_sid: str

    PATH = CONFERENCE_PATH
    RESPONSE_MODEL = ConferenceResponse

    def path_params(self) -> dict[str, str]:
        return {"account_sid": self.account_sid, "conference_sid": self.conference_sid}


@dataclass(frozen=True)
class ListConferences(TwilioEndpoint[ConferencePage]):
    account_sid: str
    query: ListQuery | None = None

    PATH = CONFERENCES_PATH
    RESPONSE_MODEL = ConferencePage

    def path_params(self) -> dict[str, str]:
        return {"account_sid": self.account_sid}

    def query_params(self) -> FormItems | None:
        return self.query.params if self.query is not None else None


@dataclass(frozen=True)
class UpdateConference(TwilioEndpoint[ConferenceResponse]):
    account_sid: str
    conference_sid: str
    body: UpdateConferenceBody

    PATH = CONFERENCE_PATH
    METHOD = HttpMethod.POST
    RESPONSE_MODEL = ConferenceResponse

    def path_params(self) -> dict[str, str]:
        return {"account_sid": self.account_sid, "conference_sid": self.conference_sid}

    def form_body(self) -> FormItems:
        return self.body.to_form()


@dataclass(frozen=True)
class CreateParticipant(TwilioEndpoint[ParticipantResponse]):
    account_sid: str
    conference_sid: str
    body: CreateParticipantBody

    PATH = PARTICIPANTS_PATH
    METHOD = HttpMethod.POST
    RESPONSE_MODEL = ParticipantResponse

    def path_params(self) -> dict[str, str]:
        return {"account_sid": self.account_sid, "conference_sid": self.conference_sid}

    def form_body(self) -> FormItems:
        return self.body.to_form()


@dataclass(frozen=True)
class FetchParticipant(TwilioEndpoint[ParticipantResponse]):
    account_sid: str
    conference_sid: str
    call_sid: str

    PATH = PARTICIPANT_PATH
    RESPONSE_MODEL = ParticipantResponse

    def path_params(self) -> dict[str, str]:
        return {
            "account_sid": self.account_sid,
            "conference_sid": self.conference_sid,
            "call_sid": self.call_sid,
        }


@dataclass(frozen=True)
class ListParticipants(TwilioEndpoint[ParticipantPage]):
    account_sid: str
    conference_sid: str
    query: ListQuery | None = None

    PATH = PARTICIPANTS_PATH
    RESPONSE_MODEL = ParticipantPage

    def path_params(self) -> dict[str, str]:
        return {"account_sid": self.account_sid, "conference_sid": self.conference_sid}

    def query_params(self) -> FormItems | None:
        return self.query.params if self.query is not None else None


@dataclass(frozen=True)
class UpdateParticipant(TwilioEndpoint[ParticipantResponse]):
    account_sid: str
    conference_sid: str
    call_sid: str
    body: UpdateParticipantBody

    PATH = PARTICIPANT_PATH
    METHOD = HttpMethod.POST
    RESPONSE_MODEL = ParticipantResponse

    def path_params(self) -> dict[str, str]:
        return {
            "account_sid": self.account_sid,
            "conference_sid": self.conference_sid,
            "call_sid": self.call_sid,
        }

    def form_body(self) -> FormItems:
        return self.body.to_form()


@dataclass(frozen=True)
class DeleteParticipant(TwilioEndpoint[None]):
    """Remove a participant (hangs up their call leg)."""

    account_sid: str
    conference_sid: str
    call_sid: str

    PATH = PARTICIPANT_PATH
    METHOD = HttpMethod.DELETE

    def path_params(self) -> dict[str, str]:
        return {
            "account_sid": self.account_sid,
            "conference_sid": self.conference_sid,
            "call_sid": self.call_sid,
        }
