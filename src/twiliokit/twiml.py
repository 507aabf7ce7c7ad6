"""
TwiML voice response builder.

Builds the XML documents returned to Twilio from voice webhooks:

    VoiceResponse().say("Connecting you now").connect("wss://example.com/stream").to_xml()
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from urllib.parse import urlparse

from twiliokit.errors import InvalidCallbackUrlError, InvalidWebSocketUrlError

XML_DECLARATION = '<?xml version="1.0" encoding="UTF-8"?>'
MEDIA_TYPE = "application/xml"


def _xml_escape(text: str) -> str:
    return (
        text.replace("&", "&amp;")
        .replace("<", "&lt;")
        .replace(">", "&gt;")
        .replace('"', "&quot;")
        .replace("'", "&apos;")
    )


def _element(tag: str, attrs: list[tuple[str, str]], inner: str = "") -> str:
    rendered = "".join(f' {name}="{_xml_escape(value)}"' for name, value in attrs)
    if not inner:
        return f"<{tag}{rendered} />"
    return f"<{tag}{rendered}>{inner}</{tag}>"


def _is_absolute_url(url: str) -> bool:
    parsed = urlparse(url)
    return bool(parsed.scheme and parsed.netloc)


class Track(str, Enum):
    INBOUND_TRACK = "inbound_track"
    OUTBOUND_TRACK = "outbound_track"
    BOTH_TRACKS = "both_tracks"


@dataclass(frozen=True)
class Parameter:
    name: str
    value: str


@dataclass(frozen=True)
class Stream:
    """``<Stream>`` noun for ``<Connect>``; the URL must be ``wss://``."""

    url: str
    name: str | None = None
    track: Track | None = None
    status_callback: str | None = None
    status_callback_method: str | None = None
    parameters: tuple[Parameter, ...] = ()

    def __post_init__(self) -> None:
        if not _is_absolute_url(self.url):
            raise InvalidWebSocketUrlError(f"invalid websocket url: {self.url}")
        if not self.url.startswith("wss://"):
            raise InvalidWebSocketUrlError("invalid websocket url: URL must start with 'wss://'")
        if self.status_callback is not None and not _is_absolute_url(self.status_callback):
            raise InvalidCallbackUrlError(f"invalid callback url: {self.status_callback}")

    def render(self) -> str:
        attrs = [("url", self.url)]
        if self.name is not None:
            attrs.append(("name", self.name))
        if self.track is not None:
            attrs.append(("track", self.track.value))
        if self.status_callback is not None:
            attrs.append(("statusCallback", self.status_callback))
        if self.status_callback_method is not None:
            attrs.append(("statusCallbackMethod", self.status_callback_method))

        inner = "".join(
            _element("Parameter", [("name", p.name), ("value", p.value)])
            for p in self.parameters
        )
        return _element("Stream", attrs, inner)


class StreamBuilder:
    """Step-by-step construction of a :class:`Stream`.

    URL checks happen as soon as a URL is supplied, so a bad value fails at
    the call site rather than when the document is rendered.
    """

    def __init__(self) -> None:
        self._url: str | None = None
        self._name: str | None = None
        self._track: Track | None = None
        self._status_callback: str | None = None
        self._status_callback_method: str | None = None
        self._parameters: list[Parameter] = []

    def url(self, url: str) -> StreamBuilder:
        if not _is_absolute_url(url):
            raise InvalidWebSocketUrlError(f"invalid websocket url: {url}")
        if not url.startswith("wss://"):
            raise InvalidWebSocketUrlError("invalid websocket url: URL must start with 'wss://'")
        self._url = url
        return self

    def name(self, name: str) -> StreamBuilder:
        self._name = name
        return self

    def track(self, track: Track) -> StreamBuilder:
        self._track = track
        return self

    def status_callback(self, callback: str) -> StreamBuilder:
        if not _is_absolute_url(callback):
            raise InvalidCallbackUrlError(f"invalid callback url: {callback}")
        self._status_callback = callback
        return self

    def status_callback_method(self, method: str) -> StreamBuilder:
        self._status_callback_method = method
        return self

    def parameter(self, name: str, value: str) -> StreamBuilder:
        self._parameters.append(Parameter(name=name, value=value))
        return self

    def build(self) -> Stream:
        if self._url is None:
            raise InvalidWebSocketUrlError("invalid websocket url: WebSocket URL is required")
        return Stream(
            url=self._url,
            name=self._name,
            track=self._track,
            status_callback=self._status_callback,
            status_callback_method=self._status_callback_method,
            parameters=tuple(self._parameters),
        )


@dataclass
class VoiceResponse:
    """Ordered list of TwiML verbs rendered as a ``<Response>`` document."""

    verbs: list[str] = field(default_factory=list)

    def say(
        self,
        text: str,
        voice: str | None = None,
        language: str | None = None,
    ) -> VoiceResponse:
        attrs: list[tuple[str, str]] = []
        if voice is not None:
            attrs.append(("voice", voice))
        if language is not None:
            attrs.append(("language", language))
        self.verbs.append(_element("Say", attrs, _xml_escape(text)))
        return self

    def connect(self, stream: Stream | str) -> VoiceResponse:
        if isinstance(stream, str):
            stream = Stream(url=stream)
        self.verbs.append(_element("Connect", [], stream.render()))
        return self

    def redirect(self, url: str, method: str = "POST") -> VoiceResponse:
        self.verbs.append(_element("Redirect", [("method", method)], _xml_escape(url)))
        return self

    def hangup(self) -> VoiceResponse:
        self.verbs.append(_element("Hangup", []))
        return self

    def reject(self) -> VoiceResponse:
        self.verbs.append(_element("Reject", []))
        return self

    def to_xml(self) -> str:
        return XML_DECLARATION + _element("Response", [], "".join(self.verbs))

    def __str__(self) -> str:
        return self.to_xml()
