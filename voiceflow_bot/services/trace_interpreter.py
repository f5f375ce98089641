"""Trace Interpreter - turns one Voiceflow trace into a chat reply and a transcript entry."""

import logging
from typing import Optional

from voiceflow_bot.domain.entities import (
    EndTrace,
    TextTrace,
    Trace,
    TranscriptEntry,
    UnknownTrace,
    VisualTrace,
)
from voiceflow_bot.domain.ports import ChatClient
from voiceflow_bot.utils.url_formatter import LinkFormatter

logger = logging.getLogger(__name__)

CONVERSATION_OVER_MESSAGE = "Conversation is over"


class TraceInterpreter:
    """Stateless per-trace dispatcher."""

    def __init__(self, link_formatter: LinkFormatter):
        self._link_formatter = link_formatter

    async def handle(self, trace: Trace, chat: ChatClient) -> Optional[TranscriptEntry]:
        """Perform the chat action for a trace.

        Returns:
            The transcript entry to record, or None for unrecognised traces
        """
        if isinstance(trace, TextTrace):
            message = self._link_formatter.format(trace.message)
            await chat.send_text(message, html=True, disable_preview=True)
            return TranscriptEntry.from_engine(trace.type, message)

        if isinstance(trace, VisualTrace):
            await chat.send_photo(trace.image)
            return TranscriptEntry.from_engine(trace.type, trace.image)

        if isinstance(trace, EndTrace):
            await chat.send_text(CONVERSATION_OVER_MESSAGE)
            return TranscriptEntry.from_engine(trace.type, CONVERSATION_OVER_MESSAGE)

        if isinstance(trace, UnknownTrace):
            logger.debug("Ignoring trace of type %s", trace.type)
            return None

        raise TypeError(f"Unsupported trace object: {type(trace).__name__}")
