"""
Trace - one response event from the Voiceflow dialogue engine.

The interact endpoint returns an ordered JSON list of traces, each tagged by
``type``. Recognised tags map to their own class; everything else becomes an
UnknownTrace that keeps the raw tag so the ignore path is observable.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Union

from voiceflow_bot.domain.exceptions import MalformedTraceError

TEXT_TYPES = ("text", "speak")


@dataclass(frozen=True)
class TextTrace:
    type: str  # "text" or "speak"
    message: str


@dataclass(frozen=True)
class VisualTrace:
    image: str
    type: str = "visual"


@dataclass(frozen=True)
class EndTrace:
    type: str = "end"


@dataclass(frozen=True)
class UnknownTrace:
    type: str
    raw: dict[str, Any] = field(default_factory=dict, compare=False)


Trace = Union[TextTrace, VisualTrace, EndTrace, UnknownTrace]


def _payload_field(raw: dict[str, Any], key: str) -> Any:
    payload = raw.get("payload")
    if not isinstance(payload, dict) or key not in payload:
        raise MalformedTraceError(
            f"Trace of type {raw.get('type')!r} is missing payload.{key}"
        )
    return payload[key]


def parse_trace(raw: Any) -> Trace:
    """Parse a single raw trace dict into its typed form."""
    if not isinstance(raw, dict):
        raise MalformedTraceError(f"Trace must be an object, got {type(raw).__name__}")

    trace_type = raw.get("type")
    if trace_type in TEXT_TYPES:
        return TextTrace(type=trace_type, message=_payload_field(raw, "message"))
    if trace_type == "visual":
        return VisualTrace(image=_payload_field(raw, "image"))
    if trace_type == "end":
        return EndTrace()
    return UnknownTrace(type=str(trace_type), raw=raw)


def parse_traces(data: Any) -> list[Trace]:
    """Parse the interact response body, preserving order."""
    if not isinstance(data, list):
        raise MalformedTraceError(
            f"Interact response must be a list of traces, got {type(data).__name__}"
        )
    return [parse_trace(raw) for raw in data]
