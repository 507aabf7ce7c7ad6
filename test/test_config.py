"""
Tests for client configuration.
"""

import pytest

from twiliokit.config import DEFAULT_BASE_URL, TwilioSettings, get_settings
from twiliokit.errors import ConfigurationError


class TestTwilioSettings:
    def test_default_values(self) -> None:
        # BaseSettings may be overridden by environment; validate declared defaults.
        assert TwilioSettings.model_fields["base_url"].default == DEFAULT_BASE_URL
        assert TwilioSettings.model_fields["timeout_seconds"].default == 30.0
        assert TwilioSettings.model_fields["phone_number"].default is None

    def test_reads_prefixed_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("TWILIO_ACCOUNT_SID", "AC_ENV")
        monkeypatch.setenv("TWILIO_AUTH_TOKEN", "env_token")
        monkeypatch.setenv("TWILIO_PHONE_NUMBER", "+14155550000")
        monkeypatch.setenv("TWILIO_TIMEOUT_SECONDS", "12.5")

        settings = get_settings()

        assert settings.account_sid == "AC_ENV"
        assert settings.auth_token == "env_token"
        assert settings.phone_number == "+14155550000"
        assert settings.timeout_seconds == 12.5

    def test_custom_values(self) -> None:
        settings = TwilioSettings(
            account_sid="AC_TEST",
            auth_token="test_token",
            api_key="SK_TEST",
            api_key_secret="secret",
            base_url="https://api.example.com",
        )

        assert settings.api_key == "SK_TEST"
        assert settings.api_key_secret == "secret"
        assert settings.base_url == "https://api.example.com"

    def test_settings_are_immutable(self) -> None:
        settings = TwilioSettings(account_sid="AC_TEST", auth_token="token")

        with pytest.raises(Exception):
            settings.account_sid = "AC_OTHER"  # type: ignore[misc]

    def test_timeout_must_be_positive(self) -> None:
        with pytest.raises(ValueError):
            TwilioSettings(timeout_seconds=0)

    def test_api_url_joins_paths(self) -> None:
        settings = TwilioSettings(base_url="https://api.example.com/")

        assert settings.api_url("/2010-04-01/Accounts.json") == (
            "https://api.example.com/2010-04-01/Accounts.json"
        )
        assert settings.api_url("2010-04-01/Accounts.json") == (
            "https://api.example.com/2010-04-01/Accounts.json"
        )


class TestRequireCredentials:
    def test_passes_when_both_present(self) -> None:
        TwilioSettings(account_sid="AC_TEST", auth_token="token").require_credentials()

    def test_missing_account_sid(self) -> None:
        settings = TwilioSettings(account_sid="", auth_token="token")

        with pytest.raises(ConfigurationError) as exc_info:
            settings.require_credentials()

        assert exc_info.value.variable == "TWILIO_ACCOUNT_SID"
        assert "TWILIO_ACCOUNT_SID" in str(exc_info.value)

    def test_missing_auth_token(self) -> None:
        settings = TwilioSettings(account_sid="AC_TEST", auth_token="")

        with pytest.raises(ConfigurationError) as exc_info:
            settings.require_credentials()

        assert exc_info.value.variable == "TWILIO_AUTH_TOKEN"

    def test_whitespace_counts_as_empty(self) -> None:
        settings = TwilioSettings(account_sid="   ", auth_token="token")

        with pytest.raises(ConfigurationError):
            settings.require_credentials()

    def test_account_sid_checked_first(self) -> None:
        settings = TwilioSettings(account_sid="", auth_token="")

        with pytest.raises(ConfigurationError) as exc_info:
            settings.require_credentials()

        assert exc_info.value.variable == "TWILIO_ACCOUNT_SID"
