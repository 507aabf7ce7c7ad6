"""
Client configuration.

Credentials and transport options are loaded from the environment
(``TWILIO_*``) or a ``.env`` file via Pydantic Settings. The client never
reads raw ``os.getenv("TWILIO_*")`` itself.
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from twiliokit.errors import ConfigurationError

DEFAULT_BASE_URL = "https://api.twilio.com"


class TwilioSettings(BaseSettings):
    """Twilio REST configuration from environment."""

    model_config = SettingsConfigDict(
        env_prefix="TWILIO_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        frozen=True,
    )

    # Credentials
    account_sid: str = Field(default="")
    auth_token: str = Field(default="")

    # Optional API key pair; used for basic auth instead of the auth token
    api_key: str | None = Field(default=None)
    api_key_secret: str | None = Field(default=None)

    # Default caller number for convenience helpers
    phone_number: str | None = Field(default=None)

    base_url: str = Field(default=DEFAULT_BASE_URL)
    timeout_seconds: float = Field(default=30.0, gt=0, le=300)
    log_level: str = Field(default="INFO")

    def require_credentials(self) -> None:
        """Raise ConfigurationError if the account SID or auth token is blank."""
        if not self.account_sid.strip():
            raise ConfigurationError(variable="TWILIO_ACCOUNT_SID")
        if not self.auth_token.strip():
            raise ConfigurationError(variable="TWILIO_AUTH_TOKEN")

    def api_url(self, path: str) -> str:
        base = self.base_url.rstrip("/")
        return f"{base}/{path.lstrip('/')}"


def get_settings() -> TwilioSettings:
    return TwilioSettings()
