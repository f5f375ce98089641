"""Tests for the Telegram adapter and chat client (Bot and Update are mocked)."""

import dataclasses
from unittest.mock import AsyncMock, MagicMock

from telegram.constants import ParseMode
from telegram.ext import ApplicationBuilder, CommandHandler, MessageHandler

from voiceflow_bot.adapters.base_bot_adapter import BotMessage
from voiceflow_bot.adapters.telegram.telegram_adapter import TelegramBotAdapter, TelegramChatClient
from voiceflow_bot.application.commands.chat import ProcessInteractionHandler
from voiceflow_bot.config.logging_config import correlation_id_var
from voiceflow_bot.domain.entities import TextTrace, VisualTrace
from voiceflow_bot.domain.value_objects import ChatId
from tests.conftest import FakeEngineClient


def make_update(chat_id=99, text="oi", update_id=5):
    update = MagicMock()
    update.update_id = update_id
    update.effective_chat.id = chat_id
    update.effective_message.text = text
    return update


def make_context():
    context = MagicMock()
    context.bot = AsyncMock()
    return context


class TestTelegramChatClient:
    async def test_send_text_html_without_preview(self):
        bot = AsyncMock()
        await TelegramChatClient(bot, ChatId(10)).send_text("<b>x</b>", html=True, disable_preview=True)

        kwargs = bot.send_message.await_args.kwargs
        assert kwargs["chat_id"] == "10"
        assert kwargs["text"] == "<b>x</b>"
        assert kwargs["parse_mode"] == ParseMode.HTML
        assert kwargs["link_preview_options"].is_disabled is True

    async def test_send_plain_text(self):
        bot = AsyncMock()
        await TelegramChatClient(bot, ChatId(10)).send_text("plain")

        kwargs = bot.send_message.await_args.kwargs
        assert kwargs["parse_mode"] is None
        assert kwargs["link_preview_options"] is None

    async def test_send_photo(self):
        bot = AsyncMock()
        await TelegramChatClient(bot, ChatId(10)).send_photo("https://img.test/p.png")
        bot.send_photo.assert_awaited_once_with(chat_id="10", photo="https://img.test/p.png")


class TestTelegramBotAdapter:
    async def test_start_sends_launch_request(self, interpreter):
        engine = FakeEngineClient(traces=[TextTrace("text", "Bem-vindo")])
        adapter = TelegramBotAdapter(ProcessInteractionHandler(engine, interpreter))
        context = make_context()

        await adapter.handle_start(make_update(text="/start"), context)

        chat_id, request = engine.interact_calls[0]
        assert chat_id == ChatId("99")
        assert request.to_dict() == {"type": "launch"}
        # /start text is not recorded as a user turn
        assert [e.source.value for e in engine.submissions[0][1]] == ["voiceflow"]
        assert context.bot.send_message.await_args.kwargs["text"] == "Bem-vindo"

    async def test_text_forwarded_and_replied(self, interpreter):
        engine = FakeEngineClient(traces=[VisualTrace(image="https://img.test/p.png")])
        adapter = TelegramBotAdapter(ProcessInteractionHandler(engine, interpreter))
        context = make_context()

        await adapter.handle_text(make_update(text="mostra"), context)

        assert engine.interact_calls[0][1].to_dict() == {"type": "text", "payload": "mostra"}
        context.bot.send_photo.assert_awaited_once_with(chat_id="99", photo="https://img.test/p.png")

    async def test_correlation_id_set_per_update(self, interpreter):
        adapter = TelegramBotAdapter(ProcessInteractionHandler(FakeEngineClient(), interpreter))
        await adapter.handle_text(make_update(chat_id=7, update_id=31), make_context())
        assert correlation_id_var.get() == "tg:7:31"

    async def test_message_without_text_is_ignored(self, interpreter):
        engine = FakeEngineClient()
        adapter = TelegramBotAdapter(ProcessInteractionHandler(engine, interpreter))

        await adapter.forward_text(BotMessage(chat_id=ChatId("1"), text=None), make_context())
        assert engine.interact_calls == []

    def test_to_bot_message_normalizes_update(self):
        message = TelegramBotAdapter.to_bot_message(make_update(chat_id=42, text="oi", update_id=8))

        assert message == BotMessage(chat_id=ChatId("42"), text="oi", event_id="8")
        assert [f.name for f in dataclasses.fields(BotMessage)] == ["chat_id", "text", "event_id"]

    def test_register_adds_start_before_text_handler(self, interpreter):
        application = ApplicationBuilder().token("123456:TEST-TOKEN").build()
        adapter = TelegramBotAdapter(ProcessInteractionHandler(FakeEngineClient(), interpreter))

        adapter.register(application, "(.+)")

        handlers = application.handlers[0]
        assert isinstance(handlers[0], CommandHandler)
        assert "start" in handlers[0].commands
        assert isinstance(handlers[1], MessageHandler)
        assert application.error_handlers
