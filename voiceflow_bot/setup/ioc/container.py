"""
Dishka DI Container Setup.

Registers the Voiceflow client, trace interpreter and interaction handler.
Everything is APP scoped: built once at startup and shared by every update.

Flow:
  Container -> provides -> VoiceflowClient -> to -> ProcessInteractionHandler
                                  |
                          uses EngineClient interface
"""

from typing import AsyncIterable

import httpx
from dishka import AsyncContainer, Provider, Scope, make_async_container, provide

from voiceflow_bot.application.commands.chat import ProcessInteractionHandler
from voiceflow_bot.config.link_keywords import load_link_keywords
from voiceflow_bot.config.settings import Config
from voiceflow_bot.domain.ports import EngineClient
from voiceflow_bot.infrastructure.voiceflow import VoiceflowClient
from voiceflow_bot.services.chat_locks import ChatLocks
from voiceflow_bot.services.trace_interpreter import TraceInterpreter
from voiceflow_bot.utils.url_formatter import LinkFormatter


class AppProvider(Provider):
    """
    Application dependency provider.

    Registers all dependencies and their implementations.
    """

    # ==================== HTTP CLIENT ====================
    @provide(scope=Scope.APP)
    async def get_http_client(self) -> AsyncIterable[httpx.AsyncClient]:
        """Shared httpx client, closed when the container closes."""
        client = httpx.AsyncClient(timeout=Config.VOICEFLOW_TIMEOUT)
        yield client
        await client.aclose()

    # ==================== VOICEFLOW ====================
    @provide(scope=Scope.APP)
    def get_engine_client(self, http_client: httpx.AsyncClient) -> EngineClient:
        """
        Provide EngineClient implementation.

        - Return type is ABSTRACT (EngineClient)
        - Implementation is CONCRETE (VoiceflowClient)
        """
        return VoiceflowClient(
            http_client=http_client,
            api_key=Config.VOICEFLOW_API_KEY,
            project_id=Config.VOICEFLOW_PROJECT_ID,
            runtime_url=Config.VOICEFLOW_RUNTIME_URL,
            api_url=Config.VOICEFLOW_API_URL,
            version_id=Config.VOICEFLOW_VERSION_ID,
        )

    # ==================== SERVICES ====================
    @provide(scope=Scope.APP)
    def get_link_formatter(self) -> LinkFormatter:
        return LinkFormatter(load_link_keywords(Config.LINK_KEYWORDS_FILE))

    @provide(scope=Scope.APP)
    def get_trace_interpreter(self, link_formatter: LinkFormatter) -> TraceInterpreter:
        return TraceInterpreter(link_formatter)

    @provide(scope=Scope.APP)
    def get_chat_locks(self) -> ChatLocks:
        return ChatLocks()

    # ==================== HANDLERS ====================
    @provide(scope=Scope.APP)
    def get_process_interaction_handler(
        self,
        engine: EngineClient,
        interpreter: TraceInterpreter,
        chat_locks: ChatLocks,
    ) -> ProcessInteractionHandler:
        return ProcessInteractionHandler(
            engine=engine, interpreter=interpreter, chat_locks=chat_locks
        )


def create_container(*providers: Provider) -> AsyncContainer:
    """Create the async container; extra providers override AppProvider."""
    return make_async_container(AppProvider(), *providers)
