"""
TranscriptEntry - one turn recorded to the Voiceflow transcript store.
"""

from __future__ import annotations
import time
from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional


class TranscriptSource(str, Enum):
    USER = "user"
    ENGINE = "voiceflow"


def now_ms() -> int:
    return int(time.time() * 1000)


@dataclass(frozen=True)
class TranscriptEntry:
    type: str
    message: str
    source: TranscriptSource
    timestamp: int

    @classmethod
    def create(
        cls,
        type: str,
        message: str,
        source: TranscriptSource,
        timestamp: Optional[int] = None,
    ) -> TranscriptEntry:
        """Factory method stamping the entry with the current time in epoch ms."""
        return cls(
            type=type,
            message=message,
            source=source,
            timestamp=now_ms() if timestamp is None else timestamp,
        )

    @classmethod
    def from_user(cls, text: str) -> TranscriptEntry:
        return cls.create(type="text", message=text, source=TranscriptSource.USER)

    @classmethod
    def from_engine(cls, type: str, message: str) -> TranscriptEntry:
        return cls.create(type=type, message=message, source=TranscriptSource.ENGINE)

    def to_dict(self) -> dict[str, Any]:
        return {
            "type": self.type,
            "payload": {"message": self.message},
            "source": self.source.value,
            "timestamp": self.timestamp,
        }
