from __future__ import annotations

from site_assistant.application.ports.message_classifier import MessageClassifierPort
from site_assistant.domain.entities.security import OffTopicDecision

OFF_TOPIC_WINDOW = 3
ESCALATION_THRESHOLD = 2


class DetectOffTopicUseCase:
    def __init__(self, classifier: MessageClassifierPort) -> None:
        self._classifier = classifier

    def execute(self, text: str, language: str, recent_user_messages: list[str] | None = None) -> OffTopicDecision:
        window = list(recent_user_messages or [])[-OFF_TOPIC_WINDOW:]
        return evaluate_off_topic(
            current_off_topic=self._classifier.is_off_topic(text, language),
            window_off_topic=[self._classifier.is_off_topic(prior, language) for prior in window],
        )


def evaluate_off_topic(current_off_topic: bool, window_off_topic: list[bool]) -> OffTopicDecision:
    if sum(1 for flag in window_off_topic if flag) >= ESCALATION_THRESHOLD:
        return OffTopicDecision(True, escalated=True, reason="repeated_off_topic")
    if current_off_topic:
        return OffTopicDecision(True, reason="off_topic_keywords")
    return OffTopicDecision(False)
