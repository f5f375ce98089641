"""
Base interfaces for command handlers.

A command is an immutable description of one unit of work; its handler holds
the collaborators (engine client, interpreter) and performs it.

Usage:
    @dataclass(frozen=True)
    class ProcessInteractionCommand(Command[None]):
        chat_id: ChatId
        request: InteractionRequest

    class ProcessInteractionHandler(CommandHandler[None]):
        async def execute(self, command: ProcessInteractionCommand) -> None:
            ...
"""

from abc import ABC, abstractmethod
from typing import Generic, TypeVar

ResultT = TypeVar("ResultT")


class Command(ABC, Generic[ResultT]):
    """Marker base for commands producing a ResultT."""


class CommandHandler(ABC, Generic[ResultT]):
    @abstractmethod
    async def execute(self, command: Command[ResultT]) -> ResultT:
        """Run the command to completion."""
        ...
