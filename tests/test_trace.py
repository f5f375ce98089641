"""Unit tests for trace parsing, interaction requests and transcript entries."""

import pytest

from voiceflow_bot.domain.entities import (
    EndTrace,
    InteractionRequest,
    TextTrace,
    TranscriptEntry,
    TranscriptSource,
    UnknownTrace,
    VisualTrace,
    parse_trace,
    parse_traces,
)
from voiceflow_bot.domain.exceptions import MalformedTraceError
from voiceflow_bot.domain.value_objects import ChatId


class TestParseTrace:
    def test_text_and_speak(self):
        assert parse_trace({"type": "text", "payload": {"message": "hi"}}) == TextTrace("text", "hi")
        assert parse_trace({"type": "speak", "payload": {"message": "yo"}}) == TextTrace("speak", "yo")

    def test_visual(self):
        trace = parse_trace({"type": "visual", "payload": {"image": "https://img.example/a.png"}})
        assert trace == VisualTrace(image="https://img.example/a.png")

    def test_end(self):
        assert parse_trace({"type": "end"}) == EndTrace()

    def test_unknown_keeps_raw_tag(self):
        raw = {"type": "choice", "payload": {"buttons": []}}
        trace = parse_trace(raw)
        assert isinstance(trace, UnknownTrace)
        assert trace.type == "choice"
        assert trace.raw == raw

    def test_missing_message_is_malformed(self):
        with pytest.raises(MalformedTraceError):
            parse_trace({"type": "text", "payload": {}})

    def test_non_object_trace_is_malformed(self):
        with pytest.raises(MalformedTraceError):
            parse_trace("text")

    def test_parse_traces_preserves_order(self):
        traces = parse_traces(
            [
                {"type": "speak", "payload": {"message": "1"}},
                {"type": "path"},
                {"type": "visual", "payload": {"image": "2"}},
                {"type": "end"},
            ]
        )
        assert [t.type for t in traces] == ["speak", "path", "visual", "end"]

    def test_parse_traces_requires_list(self):
        with pytest.raises(MalformedTraceError):
            parse_traces({"type": "text"})


class TestInteractionRequest:
    def test_launch_has_no_payload(self):
        assert InteractionRequest.launch().to_dict() == {"type": "launch"}

    def test_text_carries_payload(self):
        assert InteractionRequest.text("oi").to_dict() == {"type": "text", "payload": "oi"}

    def test_invalid_type_rejected(self):
        with pytest.raises(ValueError):
            InteractionRequest(type="intent")

    def test_text_without_payload_rejected(self):
        with pytest.raises(ValueError):
            InteractionRequest(type="text")


class TestTranscriptEntry:
    def test_user_entry_shape(self):
        entry = TranscriptEntry.from_user("hello")
        data = entry.to_dict()
        assert data["type"] == "text"
        assert data["payload"] == {"message": "hello"}
        assert data["source"] == "user"
        assert isinstance(data["timestamp"], int)

    def test_engine_entry_source(self):
        entry = TranscriptEntry.from_engine("speak", "hi")
        assert entry.source is TranscriptSource.ENGINE
        assert entry.to_dict()["source"] == "voiceflow"

    def test_timestamp_is_epoch_milliseconds(self):
        entry = TranscriptEntry.create("text", "x", TranscriptSource.USER)
        # well past 2001-09-09 in ms, i.e. not seconds
        assert entry.timestamp > 1_000_000_000_000


class TestChatId:
    def test_int_ids_normalised_to_string(self):
        assert ChatId(12345) == ChatId("12345")
        assert str(ChatId(-100200)) == "-100200"

    def test_empty_rejected(self):
        with pytest.raises(ValueError):
            ChatId("  ")
