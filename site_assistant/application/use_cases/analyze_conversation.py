from __future__ import annotations

from site_assistant.application.utils.keyword_rules import (
    extract_topics,
    has_buying_intent,
    has_price_question,
)
from site_assistant.domain.entities.conversation import (
    ConversationAnalysis,
    ConversationStage,
    InterestLevel,
)
from site_assistant.domain.entities.message import ChatMessage


def analyze_conversation(history: list[ChatMessage], current_message: str | None = None) -> ConversationAnalysis:
    """
    Derive stage and interest from the whole visible conversation.

    Nothing is carried over from earlier turns: the same history always yields the
    same analysis. `current_message` is the user text of this turn when it is not
    yet part of `history`.
    """
    contents = [m.content for m in history]
    user_count = sum(1 for m in history if m.is_user)
    if current_message is not None:
        contents.append(current_message)
        user_count += 1

    all_content = " ".join(c.lower() for c in contents)

    topics = extract_topics(all_content)
    asked_prices = has_price_question(all_content)
    buying_intent = has_buying_intent(all_content)

    return ConversationAnalysis(
        stage=_stage(user_count, topics, asked_prices, buying_intent),
        interest_level=_interest(topics, asked_prices, buying_intent),
        topics_discussed=topics,
        has_asked_prices=asked_prices,
        has_shown_buying_intent=buying_intent,
        conversation_length=user_count,
    )


def _stage(user_count: int, topics: tuple[str, ...], asked_prices: bool, buying_intent: bool) -> ConversationStage:
    # First match wins. ready_to_book is unreachable while the interested row precedes it.
    if user_count == 0:
        return ConversationStage.greeting
    if not topics:
        return ConversationStage.inquiry
    if asked_prices or len(topics) > 1:
        return ConversationStage.interested
    if buying_intent and asked_prices:
        return ConversationStage.ready_to_book
    return ConversationStage.greeting


def _interest(topics: tuple[str, ...], asked_prices: bool, buying_intent: bool) -> InterestLevel:
    level = InterestLevel.none
    if topics:
        level = InterestLevel.low
    if asked_prices:
        level = InterestLevel.medium
    if buying_intent and asked_prices:
        level = InterestLevel.high
    return level
