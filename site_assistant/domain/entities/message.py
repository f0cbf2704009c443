from __future__ import annotations

from dataclasses import dataclass

BOOKING_SHOWN = "booking_shown"


@dataclass(frozen=True)
class ChatMessage:
    role: str  # "user" | "assistant"
    content: str
    timestamp: float
    actions: tuple[str, ...] = ()

    @property
    def is_user(self) -> bool:
        return self.role == "user"
