"""
Tests for webhook parameter parsing and Media Stream messages.
"""

import json

import pytest

from twiliokit.endpoints.calls import CallStatus
from twiliokit.errors import DeserializationError
from twiliokit.webhooks.params import (
    AmdRequestParams,
    AnsweredBy,
    CallRequestParams,
    ConferenceEvent,
    ConferenceRequestParams,
)
from twiliokit.webhooks.streams import (
    ClearMessage,
    ConnectedMessage,
    DtmfMessage,
    MarkMessage,
    MediaMessage,
    StartMessage,
    StopMessage,
    Track,
    parse_stream_message,
)


class TestCallRequestParams:
    def test_parse_form(self) -> None:
        params = CallRequestParams.from_form(
            {
                "CallSid": "CA123",
                "AccountSid": "AC123",
                "From": "+15557654321",
                "To": "+15551234567",
                "CallStatus": "no-answer",
                "ApiVersion": "2010-04-01",
                "Direction": "outbound-api",
                "FromCountry": "US",
                "SipResponseCode": "487",
            }
        )

        assert params.call_sid == "CA123"
        assert params.from_ == "+15557654321"
        assert params.call_status == CallStatus.NO_ANSWER
        assert params.is_no_answer()
        assert params.from_country == "US"
        assert params.get_extra("SipResponseCode") == "487"
        assert params.get_extra("Missing") is None

    def test_missing_required_field(self) -> None:
        with pytest.raises(DeserializationError) as exc_info:
            CallRequestParams.from_form({"CallSid": "CA123"})

        assert "CallRequestParams" in str(exc_info.value)

    def test_unknown_status_rejected(self) -> None:
        with pytest.raises(DeserializationError):
            CallRequestParams.from_form(
                {
                    "CallSid": "CA123",
                    "AccountSid": "AC123",
                    "From": "+1",
                    "To": "+2",
                    "CallStatus": "exploded",
                    "ApiVersion": "2010-04-01",
                    "Direction": "inbound",
                }
            )


class TestConferenceRequestParams:
    def test_conference_end(self) -> None:
        params = ConferenceRequestParams.from_form(
            {
                "ConferenceSid": "CF123",
                "FriendlyName": "survey-room",
                "AccountSid": "AC123",
                "SequenceNumber": "4",
                "Timestamp": "Mon, 15 Jan 2024 10:30:00 +0000",
                "StatusCallbackEvent": "conference-end",
                "Muted": "false",
                "ReasonConferenceEnded": "last-participant-left",
            }
        )

        assert params.sequence_number == 4
        assert params.status_callback_event == ConferenceEvent.CONFERENCE_END
        assert params.is_conference_end()
        assert params.muted is False
        assert params.extra == {"ReasonConferenceEnded": "last-participant-left"}


class TestAmdRequestParams:
    def test_human(self) -> None:
        params = AmdRequestParams.from_form(
            {
                "CallSid": "CA123",
                "AccountSid": "AC123",
                "AnsweredBy": "human",
                "MachineDetectionDuration": "2100",
            }
        )

        assert params.answered_by == AnsweredBy.HUMAN
        assert params.is_human()
        assert params.machine_detection_duration == 2100

    def test_machine(self) -> None:
        params = AmdRequestParams.from_form(
            {"CallSid": "CA123", "AccountSid": "AC123", "AnsweredBy": "machine_end_beep"}
        )

        assert not params.is_human()


class TestStreamMessages:
    def test_connected(self) -> None:
        message = parse_stream_message(
            '{"event": "connected", "protocol": "Call", "version": "1.0.0"}'
        )

        assert isinstance(message, ConnectedMessage)
        assert message.protocol == "Call"

    def test_start(self) -> None:
        raw = json.dumps(
            {
                "event": "start",
                "sequenceNumber": "1",
                "streamSid": "MZ123",
                "start": {
                    "streamSid": "MZ123",
                    "accountSid": "AC123",
                    "callSid": "CA123",
                    "tracks": ["inbound"],
                    "mediaFormat": {
                        "encoding": "audio/x-mulaw",
                        "sampleRate": 8000,
                        "channels": 1,
                    },
                    "customParameters": {"campaign": "c1"},
                },
            }
        )

        message = parse_stream_message(raw)

        assert isinstance(message, StartMessage)
        assert message.start.call_sid == "CA123"
        assert message.start.tracks == [Track.INBOUND]
        assert message.start.media_format.sample_rate == 8000
        assert message.start.custom_parameters == {"campaign": "c1"}

    def test_media_from_bytes(self) -> None:
        raw = (
            b'{"event": "media", "sequenceNumber": "3", "streamSid": "MZ123",'
            b' "media": {"track": "inbound", "chunk": "1", "timestamp": "5",'
            b' "payload": "AAAA"}}'
        )

        message = parse_stream_message(raw)

        assert isinstance(message, MediaMessage)
        assert message.media.payload == "AAAA"
        assert message.media.track == Track.INBOUND

    def test_mark_stop_and_dtmf(self) -> None:
        mark = parse_stream_message(
            '{"event": "mark", "streamSid": "MZ1", "sequenceNumber": "4",'
            ' "mark": {"name": "greeting"}}'
        )
        stop = parse_stream_message(
            '{"event": "stop", "streamSid": "MZ1", "sequenceNumber": "5",'
            ' "stop": {"accountSid": "AC1", "callSid": "CA1"}}'
        )
        dtmf = parse_stream_message(
            '{"event": "dtmf", "streamSid": "MZ1", "sequenceNumber": "6",'
            ' "dtmf": {"track": "inbound_track", "digit": "1"}}'
        )

        assert isinstance(mark, MarkMessage) and mark.mark.name == "greeting"
        assert isinstance(stop, StopMessage) and stop.stop.call_sid == "CA1"
        assert isinstance(dtmf, DtmfMessage) and dtmf.dtmf.digit == "1"

    def test_unknown_event(self) -> None:
        with pytest.raises(DeserializationError):
            parse_stream_message('{"event": "bogus", "streamSid": "MZ1"}')

    def test_invalid_json(self) -> None:
        with pytest.raises(DeserializationError) as exc_info:
            parse_stream_message("not json")

        assert exc_info.value.body == "not json"

    def test_outbound_messages_serialize_camel_case(self) -> None:
        media = json.loads(MediaMessage.outbound("MZ1", "AAAA").to_json())
        mark = json.loads(MarkMessage.outbound("MZ1", "end-of-prompt").to_json())
        clear = json.loads(ClearMessage.for_stream("MZ1").to_json())

        assert media == {"event": "media", "streamSid": "MZ1", "media": {"payload": "AAAA"}}
        assert mark == {"event": "mark", "streamSid": "MZ1", "mark": {"name": "end-of-prompt"}}
        assert clear == {"event": "clear", "streamSid": "MZ1"}
