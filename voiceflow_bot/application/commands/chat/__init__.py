from voiceflow_bot.application.commands.chat.process_interaction import (
    ProcessInteractionCommand,
    ProcessInteractionHandler,
    ENGINE_ERROR_MESSAGE,
)

__all__ = [
    "ProcessInteractionCommand",
    "ProcessInteractionHandler",
    "ENGINE_ERROR_MESSAGE",
]
