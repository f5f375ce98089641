"""
Voiceflow API errors.

EngineCallFailedError - the interact call failed (transport error or error status).
TranscriptSubmitFailedError - the transcript PUT failed.
"""


class VoiceflowError(Exception):
    """Base class for Voiceflow API failures."""

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        detail: str | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.detail = detail


class EngineCallFailedError(VoiceflowError):
    """Raised when the interact endpoint cannot be reached or returns an error status."""


class TranscriptSubmitFailedError(VoiceflowError):
    """Raised when the transcripts endpoint cannot be reached or returns an error status."""
