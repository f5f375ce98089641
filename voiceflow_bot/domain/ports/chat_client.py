"""
ChatClient Port - Interface for replying into the chat an interaction came from.

Implementations:
- TelegramChatClient (adapters/telegram/telegram_adapter.py)
"""

from abc import ABC, abstractmethod


class ChatClient(ABC):
    """Reply capability bound to a single chat."""

    @abstractmethod
    async def send_text(
        self, text: str, html: bool = False, disable_preview: bool = False
    ) -> None:
        """Send a text message. ``html`` enables HTML parse mode."""
        ...

    @abstractmethod
    async def send_photo(self, photo: str) -> None:
        """Send a photo by URL or platform file id."""
        ...
