from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Language(str, Enum):
    sv = "sv"
    en = "en"


class ConversationStage(str, Enum):
    greeting = "greeting"
    inquiry = "inquiry"
    interested = "interested"
    ready_to_book = "ready_to_book"
    off_topic = "off_topic"


class InterestLevel(str, Enum):
    none = "none"
    low = "low"
    medium = "medium"
    high = "high"


@dataclass(frozen=True)
class ConversationAnalysis:
    stage: ConversationStage
    interest_level: InterestLevel
    topics_discussed: tuple[str, ...] = ()
    has_asked_prices: bool = False
    has_shown_buying_intent: bool = False
    conversation_length: int = 0  # number of user messages
