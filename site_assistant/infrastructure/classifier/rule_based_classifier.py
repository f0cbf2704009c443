from __future__ import annotations

from site_assistant.application.ports.message_classifier import MessageClassifierPort
from site_assistant.application.utils.keyword_rules import (
    BUSINESS_KEYWORDS,
    OFF_TOPIC_KEYWORDS,
    SECURITY_RULES,
    contains_any,
)
from site_assistant.domain.entities.security import SecurityVerdict


class RuleBasedMessageClassifier(MessageClassifierPort):
    """Keyword matching over one message. Unknown languages fall back to Swedish tables."""

    def check_security(self, text: str, language: str) -> SecurityVerdict:
        for keywords, reason in SECURITY_RULES.get(_lang(language), SECURITY_RULES["sv"]):
            if contains_any(text, keywords):
                return SecurityVerdict(True, reason)
        return SecurityVerdict(False)

    def is_off_topic(self, text: str, language: str) -> bool:
        lang = _lang(language)
        has_off_topic = contains_any(text, OFF_TOPIC_KEYWORDS[lang])
        has_business = contains_any(text, BUSINESS_KEYWORDS[lang])
        return has_off_topic and not has_business


def _lang(language: str) -> str:
    value = getattr(language, "value", language)
    return value if value in {"sv", "en"} else "sv"
