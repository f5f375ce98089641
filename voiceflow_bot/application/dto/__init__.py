from voiceflow_bot.application.dto.voiceflow import (
    InteractBodyDTO,
    TranscriptEntryDTO,
    TranscriptSubmissionDTO,
)

__all__ = ["InteractBodyDTO", "TranscriptEntryDTO", "TranscriptSubmissionDTO"]
