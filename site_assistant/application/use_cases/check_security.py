from __future__ import annotations

from site_assistant.application.ports.message_classifier import MessageClassifierPort
from site_assistant.application.utils.keyword_rules import REPEATED_VIOLATIONS_REASON
from site_assistant.domain.entities.security import SecurityVerdict

SECURITY_WINDOW = 3
MIN_REPEATED_VIOLATIONS = 2


class CheckSecurityUseCase:
    def __init__(self, classifier: MessageClassifierPort) -> None:
        self._classifier = classifier

    def execute(self, text: str, language: str, recent_user_messages: list[str] | None = None) -> SecurityVerdict:
        """
        `recent_user_messages` holds prior user texts, oldest first, without the current one.
        Does not touch any counter; the caller records the violation once per turn.
        """
        window = list(recent_user_messages or [])[-SECURITY_WINDOW:]
        if is_repeated_violation(self._classifier, window, language):
            return SecurityVerdict(True, REPEATED_VIOLATIONS_REASON)
        return self._classifier.check_security(text, language)


def is_repeated_violation(classifier: MessageClassifierPort, window: list[str], language: str) -> bool:
    if len(window) < MIN_REPEATED_VIOLATIONS:
        return False
    return all(classifier.check_security(text, language).is_violation for text in window)
