"""
EngineClient Port - Interface for the dialogue engine.

Implementations:
- VoiceflowClient (infrastructure/voiceflow/voiceflow_client.py)
"""

from abc import ABC, abstractmethod
from voiceflow_bot.domain.entities import InteractionRequest, Trace, TranscriptEntry
from voiceflow_bot.domain.value_objects import ChatId


class EngineClient(ABC):
    @abstractmethod
    async def interact(self, chat_id: ChatId, request: InteractionRequest) -> list[Trace]:
        """
        Send one request to the engine session keyed by chat_id.

        Returns:
            Traces in the order the engine produced them

        Raises:
            EngineCallFailedError: Transport failure or error status
            MalformedTraceError: Response body has an unexpected shape
        """
        ...

    @abstractmethod
    async def submit_transcript(
        self, chat_id: ChatId, entries: list[TranscriptEntry]
    ) -> None:
        """
        Submit one cycle's transcript entries as a single batch.

        Raises:
            TranscriptSubmitFailedError: Transport failure or error status
        """
        ...
