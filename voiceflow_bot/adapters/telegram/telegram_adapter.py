"""Telegram Bot Adapter - python-telegram-bot handlers for /start and text messages."""

import logging
import re

from telegram import Bot, LinkPreviewOptions, Update
from telegram.constants import ParseMode
from telegram.ext import Application, CommandHandler, ContextTypes, MessageHandler, filters

from voiceflow_bot.adapters.base_bot_adapter import BaseBotAdapter, BotMessage
from voiceflow_bot.domain.ports import ChatClient
from voiceflow_bot.domain.value_objects import ChatId

logger = logging.getLogger(__name__)


class TelegramChatClient(ChatClient):
    """Sends replies into one Telegram chat."""

    def __init__(self, bot: Bot, chat_id: ChatId):
        self._bot = bot
        self._chat_id = chat_id

    async def send_text(
        self, text: str, html: bool = False, disable_preview: bool = False
    ) -> None:
        await self._bot.send_message(
            chat_id=str(self._chat_id),
            text=text,
            parse_mode=ParseMode.HTML if html else None,
            link_preview_options=(
                LinkPreviewOptions(is_disabled=True) if disable_preview else None
            ),
        )

    async def send_photo(self, photo: str) -> None:
        await self._bot.send_photo(chat_id=str(self._chat_id), photo=photo)


class TelegramBotAdapter(BaseBotAdapter):
    """Telegram bot adapter - turns updates into interaction cycles."""

    platform = "tg"

    def chat_client_for(
        self, message: BotMessage, context: ContextTypes.DEFAULT_TYPE
    ) -> ChatClient:
        return TelegramChatClient(context.bot, message.chat_id)

    @staticmethod
    def to_bot_message(update: Update) -> BotMessage:
        message = update.effective_message
        return BotMessage(
            chat_id=ChatId(str(update.effective_chat.id)),
            text=message.text if message else None,
            event_id=str(update.update_id),
        )

    async def handle_start(self, update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
        """/start command: initiates a launch request."""
        await self.start_conversation(self.to_bot_message(update), context)

    async def handle_text(self, update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
        """Any text message matching the configured pattern."""
        await self.forward_text(self.to_bot_message(update), context)

    async def handle_error(self, update: object, context: ContextTypes.DEFAULT_TYPE) -> None:
        """Log errors that escaped a handler (malformed Voiceflow responses, Telegram API errors)."""
        chat_id = None
        if isinstance(update, Update) and update.effective_chat:
            chat_id = update.effective_chat.id
        logger.error(
            "Unhandled error while processing update for chat %s",
            chat_id,
            exc_info=context.error,
        )

    def register(self, application: Application, text_pattern: str = "(.+)") -> None:
        """Attach handlers; /start is matched before the text handler."""
        application.add_handler(CommandHandler("start", self.handle_start))
        application.add_handler(
            MessageHandler(
                filters.TEXT & filters.Regex(re.compile(text_pattern, re.IGNORECASE)),
                self.handle_text,
            )
        )
        application.add_error_handler(self.handle_error)
        logger.info("Telegram handlers registered (text pattern %r)", text_pattern)
