"""
ProcessInteraction Command - One full Telegram -> Voiceflow -> Telegram cycle.

Handler:
1. Record the user's text (if any) as a transcript entry
2. Call the Voiceflow interact endpoint
3. Reply to each trace in order, recording each as a transcript entry
4. Submit the collected entries to the transcripts endpoint

An interact failure ends the cycle with one apology reply and no transcript.
A transcript failure is only logged; replies already sent stay sent.
"""

import logging
from dataclasses import dataclass
from typing import Optional

from voiceflow_bot.application.common.interfaces import Command, CommandHandler
from voiceflow_bot.domain.entities import InteractionRequest, TranscriptEntry
from voiceflow_bot.domain.exceptions import EngineCallFailedError, TranscriptSubmitFailedError
from voiceflow_bot.domain.ports import ChatClient, EngineClient
from voiceflow_bot.domain.value_objects import ChatId
from voiceflow_bot.services.chat_locks import ChatLocks
from voiceflow_bot.services.trace_interpreter import TraceInterpreter

logger = logging.getLogger(__name__)

ENGINE_ERROR_MESSAGE = "There was an error processing your request with Voiceflow."


@dataclass(frozen=True)
class ProcessInteractionCommand(Command[None]):
    chat_id: ChatId
    request: InteractionRequest
    chat: ChatClient
    user_text: Optional[str] = None


class ProcessInteractionHandler(CommandHandler[None]):
    def __init__(
        self,
        engine: EngineClient,
        interpreter: TraceInterpreter,
        chat_locks: Optional[ChatLocks] = None,
    ):
        self.engine = engine
        self.interpreter = interpreter
        self.chat_locks = chat_locks or ChatLocks()

    async def execute(self, command: ProcessInteractionCommand) -> None:
        async with self.chat_locks.hold(str(command.chat_id)):
            await self._run_cycle(command)

    async def _run_cycle(self, command: ProcessInteractionCommand) -> None:
        chat_id = command.chat_id
        transcript_entries: list[TranscriptEntry] = []

        if command.user_text is not None:
            transcript_entries.append(TranscriptEntry.from_user(command.user_text))

        try:
            traces = await self.engine.interact(chat_id, command.request)
        except EngineCallFailedError as e:
            logger.error("Error calling interact endpoint for chat %s: %s", chat_id, e)
            await command.chat.send_text(ENGINE_ERROR_MESSAGE)
            return

        logger.info(
            "Processing %d traces for chat %s (request=%s)",
            len(traces),
            chat_id,
            command.request.type,
        )
        for trace in traces:
            entry = await self.interpreter.handle(trace, command.chat)
            if entry is not None:
                transcript_entries.append(entry)

        try:
            await self.engine.submit_transcript(chat_id, transcript_entries)
        except TranscriptSubmitFailedError as e:
            logger.error("Error updating transcripts for chat %s: %s", chat_id, e)
