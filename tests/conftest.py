from typing import Optional

import pytest

from voiceflow_bot.application.commands.chat import ProcessInteractionHandler
from voiceflow_bot.config.link_keywords import DEFAULT_LINK_KEYWORDS
from voiceflow_bot.domain.entities import InteractionRequest, Trace, TranscriptEntry
from voiceflow_bot.domain.ports import ChatClient, EngineClient
from voiceflow_bot.domain.value_objects import ChatId
from voiceflow_bot.services.trace_interpreter import TraceInterpreter
from voiceflow_bot.utils.url_formatter import LinkFormatter


class FakeChatClient(ChatClient):
    """Records every reply in order as (kind, value, options)."""

    def __init__(self):
        self.sent: list[tuple[str, str, dict]] = []

    async def send_text(self, text, html=False, disable_preview=False):
        self.sent.append(("text", text, {"html": html, "disable_preview": disable_preview}))

    async def send_photo(self, photo):
        self.sent.append(("photo", photo, {}))

    @property
    def texts(self) -> list[str]:
        return [value for kind, value, _ in self.sent if kind == "text"]


class FakeEngineClient(EngineClient):
    """Returns canned traces; optionally raises on either call."""

    def __init__(
        self,
        traces: Optional[list[Trace]] = None,
        interact_error: Optional[Exception] = None,
        submit_error: Optional[Exception] = None,
    ):
        self.traces = traces or []
        self.interact_error = interact_error
        self.submit_error = submit_error
        self.interact_calls: list[tuple[ChatId, InteractionRequest]] = []
        self.submissions: list[tuple[ChatId, list[TranscriptEntry]]] = []

    async def interact(self, chat_id, request):
        self.interact_calls.append((chat_id, request))
        if self.interact_error:
            raise self.interact_error
        return list(self.traces)

    async def submit_transcript(self, chat_id, entries):
        self.submissions.append((chat_id, list(entries)))
        if self.submit_error:
            raise self.submit_error


@pytest.fixture()
def chat():
    return FakeChatClient()


@pytest.fixture()
def link_formatter():
    return LinkFormatter(DEFAULT_LINK_KEYWORDS)


@pytest.fixture()
def interpreter(link_formatter):
    return TraceInterpreter(link_formatter)


@pytest.fixture()
def make_handler(interpreter):
    """Build a ProcessInteractionHandler around a FakeEngineClient."""

    def _make(**engine_kwargs):
        engine = FakeEngineClient(**engine_kwargs)
        return ProcessInteractionHandler(engine=engine, interpreter=interpreter), engine

    return _make
