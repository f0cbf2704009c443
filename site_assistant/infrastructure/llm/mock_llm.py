from __future__ import annotations

from site_assistant.application.ports.llm import CompletionPort
from site_assistant.application.utils.booking_marker import format_booking_marker
from site_assistant.application.utils.keyword_rules import derive_service_type, has_buying_intent, has_price_question
from site_assistant.application.utils.language import detect_language
from site_assistant.domain.entities.message import ChatMessage

_REPLIES = {
    "sv": {
        "pricing": "Här är en översikt av våra **priser**. Säg gärna till om du vill veta mer om något paket!",
        "booking": "Vad roligt! Vi bokar gärna in ett **kostnadsfritt möte** där vi går igenom dina behov.",
        "default": "Axie Studio hjälper dig med hemsidor, bokningssystem, appar och e-handel. Vad funderar du på?",
    },
    "en": {
        "pricing": "Here is an overview of our **prices**. Let me know if you want details on any package!",
        "booking": "Great! We'd be happy to book a **free meeting** to go through your needs.",
        "default": "Axie Studio helps you with websites, booking systems, apps and e-commerce. What do you have in mind?",
    },
}


class MockCompletion(CompletionPort):
    """Keyword-driven canned replies for local runs without an API key."""

    def complete(self, system_prompt: str, messages: list[ChatMessage]) -> str:
        last_user = next((m.content for m in reversed(messages) if m.is_user), "")
        lang = detect_language(last_user).value
        replies = _REPLIES[lang]

        if has_buying_intent(last_user):
            kind = "booking"
        elif has_price_question(last_user):
            kind = "pricing"
        else:
            return replies["default"]

        service_type = derive_service_type(last_user)
        label = "Boka möte" if lang == "sv" else "Book meeting"
        return f"{replies[kind]} {format_booking_marker(service_type, label)}"
