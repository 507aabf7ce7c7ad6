"""
Typed endpoint descriptors.

An endpoint pairs a resource path, an HTTP method and a request body with the
model its response is parsed into. The client dispatches any descriptor
without knowing which resource it addresses.
"""

from __future__ import annotations

from abc import ABC
from enum import Enum
from typing import Any, ClassVar, Generic, TypeVar
from urllib.parse import quote

import httpx
from pydantic import BaseModel, ConfigDict, ValidationError
from pydantic.alias_generators import to_pascal

from twiliokit.errors import DeserializationError, InvalidPathParameterError

API_VERSION_PREFIX = "/2010-04-01"

ResponseT = TypeVar("ResponseT")

FormItems = list[tuple[str, str]]


class HttpMethod(str, Enum):
    """HTTP methods used by the REST API."""

    GET = "GET"
    POST = "POST"
    DELETE = "DELETE"


def encode_value(value: Any) -> str:
    """Encode a scalar the way the API expects it in a form or query string."""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, Enum):
        return str(value.value)
    return str(value)


class FormBody(BaseModel):
    """Base class for form-encoded request bodies.

    Optional fields default to ``None``, which means "unset": they are left
    out of the request entirely rather than sent as empty values. The API
    treats an absent flag differently from an empty one.
    """

    model_config = ConfigDict(
        alias_generator=to_pascal,
        populate_by_name=True,
        extra="forbid",
    )

    def encode_field(self, name: str, key: str, value: Any) -> FormItems:
        """Encode one set field. Subclasses override for non-scalar fields."""
        if isinstance(value, (list, tuple)):
            return [(key, encode_value(item)) for item in value]
        return [(key, encode_value(value))]

    def to_form(self) -> FormItems:
        form: FormItems = []
        for name, field in type(self).model_fields.items():
            value = getattr(self, name)
            if value is None:
                continue
            form.extend(self.encode_field(name, field.alias or name, value))
        return form

    def emitted_fields(self) -> set[str]:
        return {key for key, _ in self.to_form()}


class ResourceModel(BaseModel):
    """Base class for parsed API resources. Unknown keys are ignored."""

    model_config = ConfigDict(extra="ignore", populate_by_name=True)


class Page(ResourceModel):
    """Metadata shared by every list response (a single page)."""

    page: int | None = None
    page_size: int | None = None
    uri: str | None = None
    first_page_uri: str | None = None
    next_page_uri: str | None = None
    previous_page_uri: str | None = None
    start: int | None = None
    end: int | None = None


class TwilioEndpoint(ABC, Generic[ResponseT]):
    """A single API action bound to its path parameters and body.

    Concrete endpoints are frozen dataclasses that set ``PATH``, ``METHOD``
    and ``RESPONSE_MODEL`` and override whichever of ``path_params``,
    ``query_params`` and ``form_body`` they need.
    """

    PATH: ClassVar[str]
    METHOD: ClassVar[HttpMethod] = HttpMethod.GET
    RESPONSE_MODEL: ClassVar[type[BaseModel] | None] = None

    def __post_init__(self) -> None:
        self.path()

    def path_params(self) -> dict[str, str]:
        return {}

    def query_params(self) -> FormItems | None:
        return None

    def form_body(self) -> FormItems | None:
        return None

    def path(self) -> str:
        params = self.path_params()
        for key, value in params.items():
            if not value:
                raise InvalidPathParameterError(
                    f"{type(self).__name__}: {key} must not be empty",
                    details={"parameter": key},
                )
        return self.PATH.format_map({k: quote(v, safe="") for k, v in params.items()})

    def url(self, base_url: str) -> str:
        return f"{base_url.rstrip('/')}{self.path()}"

    def parse_response(self, response: httpx.Response) -> ResponseT:
        """Deserialize a successful response into ``RESPONSE_MODEL``."""
        model = self.RESPONSE_MODEL
        if model is None:
            return None  # type: ignore[return-value]

        try:
            payload = response.json()
        except ValueError as e:
            raise DeserializationError(
                f"{type(self).__name__}: response is not valid JSON",
                status_code=response.status_code,
                body=response.text,
            ) from e

        try:
            return model.model_validate(payload)  # type: ignore[return-value]
        except ValidationError as e:
            raise DeserializationError(
                f"{type(self).__name__}: unexpected response shape: {e.error_count()} error(s)",
                status_code=response.status_code,
                body=response.text,
            ) from e
