"""Tests for the dishka container wiring."""

from dishka import Provider, Scope, provide

from voiceflow_bot.application.commands.chat import ProcessInteractionHandler
from voiceflow_bot.domain.ports import EngineClient
from voiceflow_bot.infrastructure.voiceflow import VoiceflowClient
from voiceflow_bot.services.trace_interpreter import TraceInterpreter
from voiceflow_bot.setup.ioc.container import create_container
from tests.conftest import FakeEngineClient


class TestContainer:
    async def test_resolves_handler_with_voiceflow_client(self):
        container = create_container()
        try:
            engine = await container.get(EngineClient)
            handler = await container.get(ProcessInteractionHandler)
        finally:
            await container.close()

        assert isinstance(engine, VoiceflowClient)
        assert handler.engine is engine
        assert isinstance(handler.interpreter, TraceInterpreter)

    async def test_handler_is_app_scoped(self):
        container = create_container()
        try:
            first = await container.get(ProcessInteractionHandler)
            second = await container.get(ProcessInteractionHandler)
        finally:
            await container.close()

        assert first is second

    async def test_override_engine_client(self):
        fake = FakeEngineClient()

        class FakeEngineProvider(Provider):
            @provide(scope=Scope.APP)
            def get_engine_client(self) -> EngineClient:
                return fake

        container = create_container(FakeEngineProvider())
        try:
            handler = await container.get(ProcessInteractionHandler)
        finally:
            await container.close()

        assert handler.engine is fake
