"""Voiceflow DTOs for API request bodies."""

from __future__ import annotations
from typing import Optional
from pydantic import BaseModel, Field

from voiceflow_bot.domain.entities import InteractionRequest, TranscriptEntry


class InteractRequestDTO(BaseModel):
    """The ``request`` field of an interact call."""

    type: str
    payload: Optional[str] = None


class InteractBodyDTO(BaseModel):
    """Body of POST /state/user/{userID}/interact."""

    request: InteractRequestDTO

    @classmethod
    def from_request(cls, request: InteractionRequest) -> InteractBodyDTO:
        return cls(request=InteractRequestDTO(**request.to_dict()))

    def to_json(self) -> dict:
        # launch requests must not carry a payload key at all
        return self.model_dump(exclude_none=True)


class TranscriptPayloadDTO(BaseModel):
    message: str


class TranscriptEntryDTO(BaseModel):
    """One transcript turn as the transcripts API expects it."""

    type: str
    payload: TranscriptPayloadDTO
    source: str
    timestamp: int

    @classmethod
    def from_entry(cls, entry: TranscriptEntry) -> TranscriptEntryDTO:
        return cls.model_validate(entry.to_dict())


class TranscriptSubmissionDTO(BaseModel):
    """Body of PUT /v2/transcripts."""

    project_id: str = Field(serialization_alias="projectID")
    session_id: str = Field(serialization_alias="sessionID")
    transcripts: list[TranscriptEntryDTO]

    def to_json(self) -> dict:
        return self.model_dump(by_alias=True)
