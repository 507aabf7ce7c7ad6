"""
Pytest configuration and fixtures.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

import httpx
import pytest

from twiliokit.client import TwilioClient
from twiliokit.config import TwilioSettings

TEST_ACCOUNT_SID = "AC_TEST_ACCOUNT_SID"
TEST_AUTH_TOKEN = "test_auth_token_12345"

Handler = Callable[[httpx.Request], httpx.Response]


@pytest.fixture(autouse=True)
def clean_twilio_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep the developer's TWILIO_* variables out of the tests."""
    for name in (
        "TWILIO_ACCOUNT_SID",
        "TWILIO_AUTH_TOKEN",
        "TWILIO_PHONE_NUMBER",
        "TWILIO_API_KEY",
        "TWILIO_API_KEY_SECRET",
        "TWILIO_BASE_URL",
        "TWILIO_TIMEOUT_SECONDS",
        "TWILIO_LOG_LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def twilio_settings() -> TwilioSettings:
    return TwilioSettings(
        account_sid=TEST_ACCOUNT_SID,
        auth_token=TEST_AUTH_TOKEN,
        phone_number="+14155550000",
        base_url="https://api.twilio.test",
        timeout_seconds=5.0,
    )


@pytest.fixture
def call_payload() -> dict[str, Any]:
    """Call resource JSON as returned by the API."""
    return {
        "sid": "CA_TEST_CALL_SID_123",
        "account_sid": TEST_ACCOUNT_SID,
        "to": "+15551234567",
        "from": "+15557654321",
        "status": "queued",
        "direction": "outbound-api",
        "api_version": "2010-04-01",
        "date_created": "Mon, 15 Jan 2024 10:30:00 +0000",
        "uri": f"/2010-04-01/Accounts/{TEST_ACCOUNT_SID}/Calls/CA_TEST_CALL_SID_123.json",
        "subresource_uris": {"notifications": "/notifications.json"},
        "some_future_field": "ignored",
    }


@pytest.fixture
def make_client(
    twilio_settings: TwilioSettings,
) -> Callable[[Handler], TwilioClient]:
    """Build a client whose transport is served by ``handler``."""

    def _make(handler: Handler) -> TwilioClient:
        http_client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
        return TwilioClient.from_settings(twilio_settings, http_client=http_client)

    return _make
