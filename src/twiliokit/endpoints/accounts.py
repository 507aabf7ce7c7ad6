"""
Account endpoints.

See https://www.twilio.com/docs/iam/api/account
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

ACCOUNTS_PATH = API_VERSION_PREFIX + "/Accounts.json"
ACCOUNT_PATH = API_VERSION_PREFIX + "/Accounts/{account_sid}.json"


class AccountStatus(str, Enum):
    ACTIVE = "active"
    SUSPENDED = "suspended"
    CLOSED = "closed"


class AccountType(str, Enum):
    TRIAL = "Trial"
    FULL = "Full"


class AccountResponse(ResourceModel):
    sid: str
    friendly_name: str
    status: AccountStatus
    owner_account_sid: str | None = None
    type: AccountType | None = None
    auth_token: str | None = Field(default=None, repr=False)
    date_created: str | None = None
    date_updated: str | None = None
    uri: str | None = None


class AccountPage(Page):
    accounts: list[AccountResponse] = Field(default_factory=list)


class CreateAccountBody(FormBody):
    friendly_name: str | None = None


class UpdateAccountBody(FormBody):
    friendly_name: str | None = None
    status: AccountStatus | None = None


@dataclass(frozen=True)
class CreateAccount(TwilioEndpoint[AccountResponse]):
    """Create a subaccount under the authenticated account."""

    body: CreateAccountBody

    PATH = ACCOUNTS_PATH
    METHOD = HttpMethod.POST
    RESPONSE_MODEL = AccountResponse

    def form_body(self) -> FormItems:
        return self.body.to_form()


@dataclass(frozen=True)
class FetchAccount(TwilioEndpoint[AccountResponse]):
    account_sid: str

    PATH = ACCOUNT_PATH
    RESPONSE_MODEL = AccountResponse

    def path_params(self) -> dict[str, str]:
        return {"account_sid": self.account_sid}


@dataclass(frozen=True)
class ListAccounts(TwilioEndpoint[AccountPage]):
    query: ListQuery | None = None

    PATH = ACCOUNTS_PATH
    RESPONSE_MODEL = AccountPage

    def query_params(self) -> FormItems | None:
        return self.query.params if self.query is not None else None


@dataclass(frozen=True)
class UpdateAccount(TwilioEndpoint[AccountResponse]):
    account_sid: str
    body: UpdateAccountBody

    PATH = ACCOUNT_PATH
    METHOD = HttpMethod.POST
    RESPONSE_MODEL = AccountResponse

    def path_params(self) -> dict[str, str]:
        return {"account_sid": self.account_sid}

    def form_body(self) -> FormItems:
        return self.body.to_form()
