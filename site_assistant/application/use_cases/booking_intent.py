from __future__ import annotations

from site_assistant.application.ports.service_catalog import ServiceCatalogPort
from site_assistant.application.utils.booking_marker import extract_booking_marker
from site_assistant.application.utils.keyword_rules import derive_service_type, is_general_question
from site_assistant.domain.entities.booking import BookingIntentAnalysis
from site_assistant.domain.entities.conversation import (
    ConversationAnalysis,
    ConversationStage,
    InterestLevel,
)
from site_assistant.domain.entities.message import BOOKING_SHOWN, ChatMessage

BOOKING_RECENCY_WINDOW = 3

EXPLICIT_CONFIDENCE = 0.9
INFERRED_CONFIDENCE = 0.7

NO_INTENT_REASON = "No booking intent detected"


def analyze_booking_intent(
    reply_text: str,
    analysis: ConversationAnalysis,
    current_message: str,
    history: list[ChatMessage],
    catalog: ServiceCatalogPort | None = None,
    language: str = "sv",
) -> BookingIntentAnalysis:
    """
    Decide whether the booking button goes with this reply.

    `reply_text` is the raw completion, marker included. `history` is the conversation
    before this turn; it feeds the recency check and the service-type fallback.
    """
    if analysis.stage == ConversationStage.greeting or analysis.conversation_length < 2:
        return _hide("Too early in the conversation")
    if analysis.stage == ConversationStage.off_topic:
        return _hide("Off-topic conversation")
    if is_general_question(current_message) and not analysis.has_asked_prices:
        return _hide("General question without price interest")

    marker = extract_booking_marker(reply_text)
    if marker:
        return _show(
            marker.service_type,
            EXPLICIT_CONFIDENCE,
            "Explicit booking intent with high interest",
            catalog,
            language,
        )

    qualifies = analysis.interest_level == InterestLevel.high or (
        analysis.has_asked_prices and analysis.interest_level == InterestLevel.medium
    )
    if not qualifies:
        return _hide(NO_INTENT_REASON)
    if booking_recently_shown(history):
        return _hide("Booking recently shown")

    all_content = " ".join(m.content for m in history) + " " + (current_message or "")
    return _show(
        derive_service_type(all_content),
        INFERRED_CONFIDENCE,
        "High interest level detected",
        catalog,
        language,
    )


def booking_recently_shown(history: list[ChatMessage], window: int = BOOKING_RECENCY_WINDOW) -> bool:
    return any(BOOKING_SHOWN in m.actions for m in history[-window:])


def _show(
    service_type: str,
    confidence: float,
    reason: str,
    catalog: ServiceCatalogPort | None,
    language: str,
) -> BookingIntentAnalysis:
    service_name = catalog.get_display_name(service_type, language) if catalog else None
    return BookingIntentAnalysis(
        should_show=True,
        confidence=confidence,
        reason=reason,
        service_type=service_type,
        service_name=service_name,
    )


def _hide(reason: str) -> BookingIntentAnalysis:
    return BookingIntentAnalysis(should_show=False, confidence=0.0, reason=reason)
