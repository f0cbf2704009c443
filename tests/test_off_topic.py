"""
Tests for off-topic detection and escalation.
"""

from __future__ import annotations

from site_assistant.application.use_cases.detect_off_topic import DetectOffTopicUseCase, evaluate_off_topic
from site_assistant.infrastructure.classifier.rule_based_classifier import RuleBasedMessageClassifier


def test_weather_question_is_off_topic():
    assert RuleBasedMessageClassifier().is_off_topic("what's the weather in Stockholm?", "en") is True


def test_business_keyword_overrides_off_topic_keyword():
    """'sport' is off-topic but 'hemsida' keeps it in scope."""
    assert RuleBasedMessageClassifier().is_off_topic("Jag vill ha en hemsida för min sportklubb", "sv") is False


def test_plain_business_question_is_on_topic():
    assert RuleBasedMessageClassifier().is_off_topic("Vad kostar en hemsida?", "sv") is False


def test_single_off_topic_message():
    use_case = DetectOffTopicUseCase(RuleBasedMessageClassifier())
    decision = use_case.execute("Vad blir 1+1?", "sv", [])
    assert decision.is_off_topic is True
    assert decision.escalated is False
    assert decision.reason == "off_topic_keywords"


def test_escalates_after_two_prior_off_topic_messages():
    """On-topic message is still flagged while the window holds two off-topic entries."""
    use_case = DetectOffTopicUseCase(RuleBasedMessageClassifier())
    decision = use_case.execute("Vad kostar en hemsida?", "sv", ["Vad blir 1+1?", "Vad blir 1+1?", "Vad blir 1+1?"])
    assert decision.is_off_topic is True
    assert decision.escalated is True
    assert decision.reason == "repeated_off_topic"


def test_evaluate_off_topic_rules():
    assert evaluate_off_topic(False, [True, False, False]).is_off_topic is False
    assert evaluate_off_topic(False, [True, True]).escalated is True
    assert evaluate_off_topic(True, []).escalated is False


def test_off_topic_check_is_repeatable():
    classifier = RuleBasedMessageClassifier()
    for text in ("what's the weather in Stockholm?", "Vad kostar en hemsida?"):
        assert classifier.is_off_topic(text, "en") == classifier.is_off_topic(text, "en")
