"""
ChatId Value Object - Telegram chat identity, reused as the Voiceflow session key.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class ChatId:
    value: str

    def __post_init__(self):
        if not str(self.value).strip():
            raise ValueError("Chat ID cannot be empty")
        # Telegram delivers ints; normalise so equal chats compare equal
        object.__setattr__(self, "value", str(self.value).strip())

    def __str__(self) -> str:
        return self.value
