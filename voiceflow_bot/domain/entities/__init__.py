from voiceflow_bot.domain.entities.interaction_request import InteractionRequest
from voiceflow_bot.domain.entities.trace import (
    Trace,
    TextTrace,
    VisualTrace,
    EndTrace,
    UnknownTrace,
    parse_trace,
    parse_traces,
)
from voiceflow_bot.domain.entities.transcript_entry import (
    TranscriptEntry,
    TranscriptSource,
)

__all__ = [
    "InteractionRequest",
    "Trace",
    "TextTrace",
    "VisualTrace",
    "EndTrace",
    "UnknownTrace",
    "parse_trace",
    "parse_traces",
    "TranscriptEntry",
    "TranscriptSource",
]
