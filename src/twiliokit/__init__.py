"""
twiliokit: typed async client for the Twilio voice REST API.

    client = TwilioClient.from_env()
    body = CreateCallBody.new(to, from_, url)
    call = await client.hit(CreateCall(client.account_sid, body))
"""

from twiliokit.client import TwilioClient
from twiliokit.config import TwilioSettings, get_settings
from twiliokit.endpoints.base import FormBody, HttpMethod, TwilioEndpoint
from twiliokit.endpoints.calls import (
    CallResponse,
    CallStatus,
    CreateCall,
    CreateCallBody,
    FetchCall,
    ListCalls,
    UpdateCall,
    UpdateCallBody,
)
from twiliokit.errors import (
    ApiError,
    ConfigurationError,
    DeserializationError,
    TransportError,
    TwilioError,
)
from twiliokit.query import ListQuery

__all__ = [
    "ApiError",
    "CallResponse",
    "CallStatus",
    "ConfigurationError",
    "CreateCall",
    "CreateCallBody",
    "DeserializationError",
    "FetchCall",
    "FormBody",
    "HttpMethod",
    "ListCalls",
    "ListQuery",
    "TransportError",
    "TwilioClient",
    "TwilioEndpoint",
    "TwilioError",
    "TwilioSettings",
    "UpdateCall",
    "UpdateCallBody",
    "get_settings",
]
