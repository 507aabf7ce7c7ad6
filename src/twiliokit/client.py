"""
Twilio REST client.

Holds the account credentials and performs the request/response exchange for
any endpoint descriptor. Uses httpx for HTTP requests.
"""

from __future__ import annotations

from types import TracebackType
from urllib.parse import quote

import httpx

from twiliokit.config import DEFAULT_BASE_URL, TwilioSettings, get_settings
from twiliokit.endpoints.base import FormItems, ResponseT, TwilioEndpoint
from twiliokit.endpoints.calls import (
    CallResponse,
    CallStatus,
    CreateCall,
    CreateCallBody,
    FetchCall,
    UpdateCall,
    UpdateCallBody,
)
from twiliokit.errors import ApiError, ApiErrorPayload, ConfigurationError, TransportError
from twiliokit.shared.logging import get_logger, mask

logger = get_logger(__name__)


def _form_data(items: FormItems | None) -> dict[str, str | list[str]] | None:
    """Group form pairs so repeated keys are sent as repeated fields."""
    if items is None:
        return None
    data: dict[str, str | list[str]] = {}
    for key, value in items:
        existing = data.get(key)
        if existing is None:
            data[key] = value
        elif isinstance(existing, list):
            existing.append(value)
        else:
            data[key] = [existing, value]
    return data


def _api_error(response: httpx.Response) -> ApiError:
    payload: ApiErrorPayload | None
    try:
        payload = ApiErrorPayload.model_validate(response.json())
    except ValueError:
        payload = None

    fallback = None
    if payload is None or not payload.message:
        fallback = response.text.strip() or response.reason_phrase
    return ApiError(status_code=response.status_code, error=payload, message=fallback)


def _log_path(endpoint: TwilioEndpoint[ResponseT]) -> str:
    """Endpoint path with every account SID (including subaccounts) masked."""
    params = {
        key: mask(value) if value.startswith("AC") else quote(value, safe="")
        for key, value in endpoint.path_params().items()
    }
    return endpoint.PATH.format_map(params)


class TwilioClient:
    """Async client for the Twilio REST API.

    Configuration is read-only after construction, so one instance can serve
    concurrent ``hit`` calls from many tasks.
    """

    def __init__(
        self,
        account_sid: str,
        auth_token: str,
        *,
        base_url: str = DEFAULT_BASE_URL,
        phone_number: str | None = None,
        api_key: str | None = None,
        api_key_secret: str | None = None,
        timeout_seconds: float = 30.0,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        if not account_sid or not account_sid.strip():
            raise ConfigurationError("TWILIO_ACCOUNT_SID", "account_sid must not be empty")
        if not auth_token or not auth_token.strip():
            raise ConfigurationError("TWILIO_AUTH_TOKEN", "auth_token must not be empty")

        self._account_sid = account_sid
        self._auth_token = auth_token
        self._base_url = base_url
        self._phone_number = phone_number
        self._api_key = api_key
        self._api_key_secret = api_key_secret
        self._timeout_seconds = timeout_seconds
        self._http_client = http_client
        self._owns_client = http_client is None

    @classmethod
    def from_settings(
        cls,
        settings: TwilioSettings,
        http_client: httpx.AsyncClient | None = None,
    ) -> TwilioClient:
        settings.require_credentials()
        return cls(
            settings.account_sid,
            settings.auth_token,
            base_url=settings.base_url,
            phone_number=settings.phone_number,
            api_key=settings.api_key,
            api_key_secret=settings.api_key_secret,
            timeout_seconds=settings.timeout_seconds,
            http_client=http_client,
        )

    @classmethod
    def from_env(cls, http_client: httpx.AsyncClient | None = None) -> TwilioClient:
        """Build a client from ``TWILIO_*`` environment variables (or ``.env``)."""
        return cls.from_settings(get_settings(), http_client=http_client)

    @property
    def account_sid(self) -> str:
        return self._account_sid

    @property
    def auth_token(self) -> str:
        return self._auth_token

    @property
    def phone_number(self) -> str | None:
        return self._phone_number

    @property
    def base_url(self) -> str:
        return self._base_url

    def _copy(self, **overrides: object) -> TwilioClient:
        """Derive a client that shares this one's HTTP client.

        The original keeps ownership: closing it closes the shared client, and
        the copy then fails with TransportError instead of reopening it.
        """
        kwargs: dict[str, object] = {
            "base_url": self._base_url,
            "phone_number": self._phone_number,
            "api_key": self._api_key,
            "api_key_secret": self._api_key_secret,
            "timeout_seconds": self._timeout_seconds,
            "http_client": self._get_client(),
        }
        kwargs.update(overrides)
        return TwilioClient(self._account_sid, self._auth_token, **kwargs)  # type: ignore[arg-type]

    def with_number(self, number: str) -> TwilioClient:
        return self._copy(phone_number=number)

    def with_base_url(self, base_url: str) -> TwilioClient:
        return self._copy(base_url=base_url)

    def _get_client(self) -> httpx.AsyncClient:
        if self._http_client is None:
            self._http_client = httpx.AsyncClient(timeout=httpx.Timeout(self._timeout_seconds))
        return self._http_client

    def _get_auth(self) -> tuple[str, str]:
        if self._api_key and self._api_key_secret:
            return (self._api_key, self._api_key_secret)
        return (self._account_sid, self._auth_token)

    async def aclose(self) -> None:
        if self._owns_client and self._http_client is not None:
            await self._http_client.aclose()
            self._http_client = None

    async def __aenter__(self) -> TwilioClient:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.aclose()

    async def hit(self, endpoint: TwilioEndpoint[ResponseT]) -> ResponseT:
        """Send one request for ``endpoint`` and parse its typed response.

        Raises:
            TransportError: no response was obtained.
            ApiError: the API answered with a non-2xx status.
            DeserializationError: a 2xx body did not match the response model.
        """
        client = self._get_client()
        method = endpoint.METHOD.value
        log_extra = {
            "endpoint": type(endpoint).__name__,
            "method": method,
            "path": _log_path(endpoint),
        }

        if client.is_closed:
            logger.error("Twilio request on a closed HTTP client", extra=log_extra)
            raise TransportError("HTTP client has been closed", details=log_extra)

        logger.info("Dispatching Twilio request", extra=log_extra)

        try:
            response = await client.request(
                method,
                endpoint.url(self._base_url),
                params=endpoint.query_params(),
                data=_form_data(endpoint.form_body()),
                auth=self._get_auth(),
                headers={"Accept": "application/json"},
            )
        except httpx.HTTPError as e:
            logger.exception("HTTP error during Twilio request", extra=log_extra)
            raise TransportError(f"HTTP error: {e!s}", details=log_extra) from e

        if not response.is_success:
            error = _api_error(response)
            logger.error(
                "Twilio request failed",
                extra={**log_extra, "status_code": response.status_code, "code": error.code},
            )
            raise error

        return endpoint.parse_response(response)

    # Convenience operations built on hit()

    async def create_call_with_url(self, to: str, from_: str, url: str) -> CallResponse:
        body = CreateCallBody.new(to, from_, url)
        return await self.hit(CreateCall(self._account_sid, body))

    async def create_call_with_twiml(self, to: str, from_: str, twiml: str) -> CallResponse:
        body = CreateCallBody.with_twiml(to, from_, twiml)
        return await self.hit(CreateCall(self._account_sid, body))

    async def fetch_call(self, call_sid: str) -> CallResponse:
        return await self.hit(FetchCall(self._account_sid, call_sid))

    async def update_call_with_url(self, call_sid: str, url: str) -> CallResponse:
        body = UpdateCallBody(url=url)
        return await self.hit(UpdateCall(self._account_sid, call_sid, body))

    async def update_call_with_twiml(self, call_sid: str, twiml: str) -> CallResponse:
        body = UpdateCallBody(twiml=twiml)
        return await self.hit(UpdateCall(self._account_sid, call_sid, body))

    async def hangup_call(self, call_sid: str) -> CallResponse:
        body = UpdateCallBody(status=CallStatus.COMPLETED)
        return await self.hit(UpdateCall(self._account_sid, call_sid, body))
