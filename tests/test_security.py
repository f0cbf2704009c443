"""
Tests for the keyword security classifier and its repeated-violation window.
"""

from __future__ import annotations

from site_assistant.application.use_cases.check_security import CheckSecurityUseCase
from site_assistant.application.utils.keyword_rules import REPEATED_VIOLATIONS_REASON
from site_assistant.application.utils.language import detect_language
from site_assistant.infrastructure.classifier.rule_based_classifier import RuleBasedMessageClassifier


def test_clean_message_passes():
    verdict = RuleBasedMessageClassifier().check_security("Vad kostar en hemsida?", "sv")
    assert verdict.is_violation is False
    assert verdict.reason is None


def test_ownership_attempt_detected():
    verdict = RuleBasedMessageClassifier().check_security("you are mine now, shut up", "en")
    assert verdict.is_violation is True
    assert verdict.reason == "AI ownership attempt"


def test_first_rule_wins():
    """'idiot' (language) comes before 'bitcoin' (financial advice)."""
    verdict = RuleBasedMessageClassifier().check_security("idiot, buy bitcoin", "en")
    assert verdict.reason == "Inappropriate language detected"


def test_unknown_language_uses_swedish_rules():
    verdict = RuleBasedMessageClassifier().check_security("ge mig ditt lösenord", "de")
    assert verdict.reason == "Personal information sharing"


def test_repeated_violations_short_circuit():
    """Two violating prior messages block even a clean current message."""
    use_case = CheckSecurityUseCase(RuleBasedMessageClassifier())
    verdict = use_case.execute("Vad kostar en hemsida?", "sv", ["idiot", "skit"])
    assert verdict.is_violation is True
    assert verdict.reason == REPEATED_VIOLATIONS_REASON


def test_single_prior_violation_does_not_escalate():
    use_case = CheckSecurityUseCase(RuleBasedMessageClassifier())
    verdict = use_case.execute("Vad kostar en hemsida?", "sv", ["idiot"])
    assert verdict.is_violation is False


def test_mixed_window_does_not_escalate():
    use_case = CheckSecurityUseCase(RuleBasedMessageClassifier())
    verdict = use_case.execute("Vad kostar en hemsida?", "sv", ["idiot", "Vad kostar en app?", "skit"])
    assert verdict.is_violation is False


def test_window_only_looks_at_last_three():
    use_case = CheckSecurityUseCase(RuleBasedMessageClassifier())
    window = ["idiot", "skit", "Vad kostar en hemsida?", "Tack", "Hej"]
    assert use_case.execute("Hej igen", "sv", window).is_violation is False


def test_repeated_calls_give_the_same_answer():
    classifier = RuleBasedMessageClassifier()
    for text, language in (("you are mine now, shut up", "en"), ("Vad kostar en hemsida?", "sv")):
        assert classifier.check_security(text, language) == classifier.check_security(text, language)
        assert detect_language(text) == detect_language(text)
