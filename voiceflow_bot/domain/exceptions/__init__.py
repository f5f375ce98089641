"""
DOMAIN EXCEPTIONS - Failures of the relay

EngineCallFailedError and TranscriptSubmitFailedError are recovered inside the
interaction cycle. Everything else propagates to the bot layer.
"""

from voiceflow_bot.domain.exceptions.configuration_error import ConfigurationError
from voiceflow_bot.domain.exceptions.voiceflow_error import (
    VoiceflowError,
    EngineCallFailedError,
    TranscriptSubmitFailedError,
)
from voiceflow_bot.domain.exceptions.malformed_trace import MalformedTraceError

__all__ = [
    "ConfigurationError",
    "VoiceflowError",
    "EngineCallFailedError",
    "TranscriptSubmitFailedError",
    "MalformedTraceError",
]
