from voiceflow_bot.domain.ports.chat_client import ChatClient
from voiceflow_bot.domain.ports.engine_client import EngineClient

__all__ = ["ChatClient", "EngineClient"]
