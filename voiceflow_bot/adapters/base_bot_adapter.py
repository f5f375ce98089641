"""Base Bot Adapter - Abstract base class for chat platform adapters."""

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Optional

from voiceflow_bot.application.commands.chat import (
    ProcessInteractionCommand,
    ProcessInteractionHandler,
)
from voiceflow_bot.config.logging_config import correlation_id_var
from voiceflow_bot.domain.entities import InteractionRequest
from voiceflow_bot.domain.ports import ChatClient
from voiceflow_bot.domain.value_objects import ChatId

logger = logging.getLogger(__name__)


@dataclass
class BotMessage:
    """Normalized inbound event from any platform."""

    chat_id: ChatId
    text: Optional[str] = None
    event_id: Optional[str] = None


class BaseBotAdapter(ABC):
    """Abstract base for all bot adapters."""

    platform: str = "bot"

    def __init__(self, handler: ProcessInteractionHandler):
        self.handler = handler

    @abstractmethod
    def chat_client_for(self, message: BotMessage, context: Any) -> ChatClient:
        """Build the reply capability for the chat the message came from."""
        ...

    async def start_conversation(self, message: BotMessage, context: Any = None) -> None:
        """Send a launch request for the chat; no user text is recorded."""
        await self._process(message, InteractionRequest.launch(), None, context)

    async def forward_text(self, message: BotMessage, context: Any = None) -> None:
        """Forward the user's text to the engine and record it."""
        if message.text is None:
            logger.debug("Ignoring message without text in chat %s", message.chat_id)
            return
        await self._process(
            message, InteractionRequest.text(message.text), message.text, context
        )

    async def _process(
        self,
        message: BotMessage,
        request: InteractionRequest,
        user_text: Optional[str],
        context: Any,
    ) -> None:
        correlation_id_var.set(f"{self.platform}:{message.chat_id}:{message.event_id}")
        logger.info(
            "[%s] %s request from chat %s",
            self.platform.upper(),
            request.type,
            message.chat_id,
        )
        await self.handler.execute(
            ProcessInteractionCommand(
                chat_id=message.chat_id,
                request=request,
                chat=self.chat_client_for(message, context),
                user_text=user_text,
            )
        )
