"""
InteractionRequest - the request body sent to the Voiceflow interact endpoint.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Optional


@dataclass(frozen=True)
class InteractionRequest:
    type: str
    payload: Optional[str] = None

    def __post_init__(self):
        if self.type not in ("launch", "text"):
            raise ValueError(f"Invalid request type: {self.type}")
        if self.type == "launch" and self.payload is not None:
            raise ValueError("Launch request carries no payload")
        if self.type == "text" and self.payload is None:
            raise ValueError("Text request requires a payload")

    @classmethod
    def launch(cls) -> InteractionRequest:
        return cls(type="launch")

    @classmethod
    def text(cls, message: str) -> InteractionRequest:
        return cls(type="text", payload=message)

    def to_dict(self) -> dict[str, Any]:
        if self.payload is None:
            return {"type": self.type}
        return {"type": self.type, "payload": self.payload}
