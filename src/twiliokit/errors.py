"""
Exception hierarchy for the Twilio client.

Every failure surfaces to the immediate caller as one of these; nothing is
retried or swallowed inside the library.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict


class ApiErrorPayload(BaseModel):
    """Error document returned by the Twilio REST API.

    ``message`` is required so that JSON error bodies from proxies or load
    balancers are not mistaken for a Twilio error document.
    """

    model_config = ConfigDict(extra="ignore")

    message: str
    code: int | None = None
    more_info: str | None = None
    status: int | None = None


class TwilioError(Exception):
    """Base exception for Twilio client errors."""

    def __init__(
        self,
        message: str,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        return self.message


class ConfigurationError(TwilioError):
    """A required environment-sourced credential is missing or empty."""

    def __init__(self, variable: str, message: str | None = None) -> None:
        super().__init__(message or f"{variable} not set", details={"variable": variable})
        self.variable = variable


class TransportError(TwilioError):
    """The request failed before any response was received."""


class ApiError(TwilioError):
    """The API answered with a non-success status."""

    def __init__(
        self,
        status_code: int,
        error: ApiErrorPayload | None = None,
        message: str | None = None,
    ) -> None:
        text = message or (error.message if error is not None else "") or "Twilio API error"
        super().__init__(
            f"API error ({status_code}): {text}",
            details={"status_code": status_code, "code": error.code if error else None},
        )
        self.status_code = status_code
        self.error = error

    @property
    def code(self) -> int | None:
        return self.error.code if self.error is not None else None


class DeserializationError(TwilioError):
    """A response body does not match the expected shape."""

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        body: str = "",
    ) -> None:
        super().__init__(message, details={"status_code": status_code})
        self.status_code = status_code
        self.body = body


class InvalidPathParameterError(TwilioError, ValueError):
    """An endpoint was built with an empty identifier."""


class TwimlError(TwilioError, ValueError):
    """Base error for TwiML document construction."""


class InvalidWebSocketUrlError(TwimlError):
    """Stream URL is not a valid ``wss://`` URL."""


class InvalidCallbackUrlError(TwimlError):
    """Status callback is not an absolute URL."""
