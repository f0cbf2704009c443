from __future__ import annotations

from dataclasses import dataclass

from site_assistant.domain.entities.booking import BookingIntentAnalysis
from site_assistant.domain.entities.conversation import ConversationAnalysis, Language


@dataclass(frozen=True)
class ChatTurnResult:
    text: str
    language: Language
    analysis: ConversationAnalysis | None = None
    booking: BookingIntentAnalysis | None = None
    blocked: bool = False
    block_reason: str | None = None
    off_topic: bool = False
    failed: bool = False  # completion call failed, nothing was committed
