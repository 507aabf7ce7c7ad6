"""
Application endpoints.

See https://www.twilio.com/docs/usage/api/applications
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

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
from twiliokit.query import ListQuery

APPLICATIONS_PATH = API_VERSION_PREFIX + "/Accounts/{account_sid}/Applications.json"
APPLICATION_PATH = API_VERSION_PREFIX + "/Accounts/{account_sid}/Applications/{application_sid}.json"


class ApiVersion(str, Enum):
    V2010_04_01 = "2010-04-01"
    V2008_08_01 = "2008-08-01"


class ApplicationResponse(ResourceModel):
    sid: str
    account_sid: str
    uri: str
    api_version: ApiVersion | None = None
    friendly_name: str | None = None
    date_created: str | None = None
    date_updated: str | None = None
    voice_url: str | None = None
    voice_method: str | None = None
    voice_fallback_url: str | None = None
    voice_fallback_method: str | None = None
    voice_caller_id_lookup: bool | None = None
    status_callback: str | None = None
    status_callback_method: str | None = None
    sms_url: str | None = None
    sms_method: str | None = None
    sms_fallback_url: str | None = None
    sms_fallback_method: str | None = None
    sms_status_callback: str | None = None
    message_status_callback: str | None = None
    public_application_connect_enabled: bool | None = None


class ApplicationPage(Page):
    applications: list[ApplicationResponse] = Field(default_factory=list)


class ApplicationBody(FormBody):
    """Body shared by create and update. Every field is optional."""

    friendly_name: str | None = None
    api_version: ApiVersion | None = None
    voice_url: str | None = None
    voice_method: str | None = None
    voice_fallback_url: str | None = None
    voice_fallback_method: str | None = None
    voice_caller_id_lookup: bool | None = None
    status_callback: str | None = None
    status_callback_method: str | None = None
    sms_url: str | None = None
    sms_method: str | None = None
    sms_fallback_url: str | None = None
    sms_fallback_method: str | None = None
    message_status_callback: str | None = None
    public_application_connect_enabled: bool | None = None


@dataclass(frozen=True)
class CreateApplication(TwilioEndpoint[ApplicationResponse]):
    account_sid: str
    body: ApplicationBody

    PATH = APPLICATIONS_PATH
    METHOD = HttpMethod.POST
    RESPONSE_MODEL = ApplicationResponse

    def path_params(self) -> dict[str, str]:
        return {"account_sid": self.account_sid}

    def form_body(self) -> FormItems:
        return self.body.to_form()


@dataclass(frozen=True)
class FetchApplication(TwilioEndpoint[ApplicationResponse]):
    account_sid: str
    application_sid: str

    PATH = APPLICATION_PATH
    RESPONSE_MODEL = ApplicationResponse

    def path_params(self) -> dict[str, str]:
        return {"account_sid": self.account_sid, "application_sid": self.application_sid}


@dataclass(frozen=True)
class ListApplications(TwilioEndpoint[ApplicationPage]):
    account_sid: str
    query: ListQuery | None = None

    PATH = APPLICATIONS_PATH
    RESPONSE_MODEL = ApplicationPage

    def path_params(self) -> dict[str, str]:
        return {"account_sid": self.account_sid}

    def query_params(self) -> FormItems | None:
        return self.query.params if self.query is not None else None


@dataclass(frozen=True)
class UpdateApplication(TwilioEndpoint[ApplicationResponse]):
    account_sid: str
    application_sid: str
    body: ApplicationBody

    PATH = APPLICATION_PATH
    METHOD = HttpMethod.POST
    RESPONSE_MODEL = ApplicationResponse

    def path_params(self) -> dict[str, str]:
        return {"account_sid": self.account_sid, "application_sid": self.application_sid}

    def form_body(self) -> FormItems:
        return self.body.to_form()


@dataclass(frozen=True)
class DeleteApplication(TwilioEndpoint[None]):
    account_sid: str
    application_sid: str

    PATH = APPLICATION_PATH
    METHOD = HttpMethod.DELETE

    def path_params(self) -> dict[str, str]:
        return {"account_sid": self.account_sid, "application_sid": self.application_sid}
