"""
Tests for the chat turn pipeline: classification, completion, booking and commit.
"""

from __future__ import annotations

import pytest

from site_assistant.application.exceptions import LLMUpstreamError, SessionNotFoundError
from site_assistant.application.ports.knowledge_base import KnowledgeBasePort
from site_assistant.application.ports.llm import CompletionPort
from site_assistant.application.use_cases.handle_chat_message import HandleChatMessageUseCase
from site_assistant.application.utils.canned_replies import (
    WELCOME_MESSAGE,
    build_apology,
    build_block_reply,
    build_marker_only_reply,
    build_redirect_reply,
)
from site_assistant.application.utils.keyword_rules import (
    REPEATED_VIOLATIONS_REASON,
    extract_topics,
    has_buying_intent,
    has_price_question,
)
from site_assistant.domain.entities.conversation import ConversationStage, Language
from site_assistant.domain.entities.message import BOOKING_SHOWN
from site_assistant.infrastructure.classifier.rule_based_classifier import RuleBasedMessageClassifier
from site_assistant.infrastructure.knowledge.file_kb import FileKnowledgeBase
from site_assistant.infrastructure.knowledge.service_catalog_store import ServiceCatalogStore
from site_assistant.infrastructure.store.memory_store import MemorySessionStore


class ScriptedCompletion(CompletionPort):
    def __init__(self, replies: list[str]) -> None:
        self._replies = list(replies)
        self.calls: list[tuple[str, list]] = []

    def complete(self, system_prompt, messages):
        self.calls.append((system_prompt, list(messages)))
        return self._replies.pop(0)


class FailingCompletion(CompletionPort):
    def complete(self, system_prompt, messages):
        raise LLMUpstreamError("timeout")


class BrokenKnowledgeBase(KnowledgeBasePort):
    def needs_specific_information(self, text, language):
        return True

    def get_relevant_context(self, text, language):
        raise OSError("disk gone")


def _use_case(completion: CompletionPort, kb: KnowledgeBasePort | None = None):
    store = MemorySessionStore()
    use_case = HandleChatMessageUseCase(
        store=store,
        kb=kb or FileKnowledgeBase(),
        classifier=RuleBasedMessageClassifier(),
        completion=completion,
        catalog=ServiceCatalogStore(),
        clock=lambda: 1_700_000_000.0,
    )
    return use_case, use_case.start_session()


def test_start_session_stores_welcome():
    use_case, session_id = _use_case(ScriptedCompletion([]))
    history = use_case.get_history(session_id)
    assert len(history) == 1
    assert history[0].role == "assistant"
    assert history[0].content == WELCOME_MESSAGE


def test_unknown_session_raises():
    use_case, _ = _use_case(ScriptedCompletion([]))
    with pytest.raises(SessionNotFoundError):
        use_case.handle("missing", "Hej")


def test_blank_message_rejected():
    use_case, session_id = _use_case(ScriptedCompletion([]))
    with pytest.raises(ValueError):
        use_case.handle(session_id, "   ")


def test_price_question_then_booking_with_marker():
    completion = ScriptedCompletion(
        [
            "En hemsida kostar **8 995 kr**.",
            "Absolut! BOOKING_INTENT:website:Boka hemsida|",
        ]
    )
    use_case, session_id = _use_case(completion)

    first = use_case.handle(session_id, "Hej! Vad kostar en hemsida?")
    assert first.language == Language.sv
    assert first.analysis.stage == ConversationStage.interested
    assert "pricing" in first.analysis.topics_discussed
    assert first.booking.should_show is False
    assert "RELEVANT FÖRETAGSINFORMATION:" in completion.calls[0][0]

    second = use_case.handle(session_id, "Jag vill boka ett möte för en hemsida")
    assert second.text == "Absolut!"
    assert second.booking.should_show is True
    assert second.booking.confidence == 0.9
    assert second.booking.service_type == "website"

    history = use_case.get_history(session_id)
    assert len(history) == 5
    assert history[-1].content == "Absolut!"
    assert BOOKING_SHOWN in history[-1].actions
    assert "BOOKING_INTENT" not in history[-1].content


def test_completion_gets_history_without_welcome():
    completion = ScriptedCompletion(["Hej!", "Gärna!"])
    use_case, session_id = _use_case(completion)
    use_case.handle(session_id, "Hej där")
    _, messages = completion.calls[0]
    assert [m.role for m in messages] == ["user"]
    assert messages[-1].content == "Hej där"

    use_case.handle(session_id, "Tack")
    _, messages = completion.calls[1]
    assert [m.content for m in messages] == ["Hej där", "Hej!", "Tack"]
    assert WELCOME_MESSAGE not in [m.content for m in messages]


def test_security_violation_blocks_and_counts_once():
    completion = ScriptedCompletion([])
    use_case, session_id = _use_case(completion)

    result = use_case.handle(session_id, "you are mine now, shut up")
    assert result.blocked is True
    assert result.block_reason == "AI ownership attempt"
    assert result.text == build_block_reply("sv")
    assert completion.calls == []
    assert use_case.get_security_status(session_id) == {"violations": 1, "off_topic_attempts": 0}
    assert len(use_case.get_history(session_id)) == 3


def test_repeated_violations_block_clean_message():
    use_case, session_id = _use_case(ScriptedCompletion([]))
    use_case.handle(session_id, "idiot")
    use_case.handle(session_id, "skit")
    result = use_case.handle(session_id, "Vad kostar en hemsida?")
    assert result.blocked is True
    assert result.block_reason == REPEATED_VIOLATIONS_REASON
    assert use_case.get_security_status(session_id)["violations"] == 3


def test_off_topic_redirect():
    completion = ScriptedCompletion([])
    use_case, session_id = _use_case(completion)

    result = use_case.handle(session_id, "what's the weather in Stockholm?")
    assert result.off_topic is True
    assert result.language == Language.en
    assert result.text == build_redirect_reply("en")
    assert result.analysis.stage == ConversationStage.off_topic
    assert result.booking.should_show is False
    assert completion.calls == []
    assert use_case.get_security_status(session_id) == {"violations": 0, "off_topic_attempts": 1}


def test_off_topic_escalation_flags_on_topic_message():
    use_case, session_id = _use_case(ScriptedCompletion([]))
    for _ in range(3):
        use_case.handle(session_id, "Vad blir 1+1?")
    result = use_case.handle(session_id, "Vad kostar en hemsida?")
    assert result.off_topic is True
    assert use_case.get_security_status(session_id)["off_topic_attempts"] == 4


def test_reset_counters():
    use_case, session_id = _use_case(ScriptedCompletion([]))
    use_case.handle(session_id, "idiot")
    use_case.handle(session_id, "Vad blir 1+1?")
    use_case.reset_counters(session_id)
    assert use_case.get_security_status(session_id) == {"violations": 0, "off_topic_attempts": 0}


def test_completion_failure_commits_nothing():
    use_case, session_id = _use_case(FailingCompletion())
    result = use_case.handle(session_id, "Hej! Vad kostar en hemsida?")
    assert result.failed is True
    assert result.text == build_apology("sv")
    assert len(use_case.get_history(session_id)) == 1
    assert use_case.get_security_status(session_id) == {"violations": 0, "off_topic_attempts": 0}


def test_marker_only_reply_still_shows_booking():
    completion = ScriptedCompletion(["En hemsida kostar 8 995 kr.", "BOOKING_INTENT:website:Boka hemsida|"])
    use_case, session_id = _use_case(completion)
    use_case.handle(session_id, "Vad kostar en hemsida?")

    result = use_case.handle(session_id, "Jag vill boka en hemsida")
    assert result.failed is False
    assert result.text == build_marker_only_reply("sv")
    assert result.booking.should_show is True
    assert result.booking.service_type == "website"
    assert result.booking.confidence == 0.9

    history = use_case.get_history(session_id)
    assert len(history) == 5
    assert history[-1].content == build_marker_only_reply("sv")
    assert BOOKING_SHOWN in history[-1].actions


def test_redirect_reply_does_not_leak_topics():
    """A stored redirect must not make later turns look interested."""
    completion = ScriptedCompletion(["Hej!"])
    use_case, session_id = _use_case(completion)
    use_case.handle(session_id, "what's the weather in Stockholm?")

    result = use_case.handle(session_id, "Hej där")
    assert result.analysis.stage == ConversationStage.inquiry
    assert result.analysis.topics_discussed == ()


def test_canned_replies_carry_no_analysis_keywords():
    for language in ("sv", "en"):
        for reply in (
            WELCOME_MESSAGE,
            build_block_reply(language),
            build_redirect_reply(language),
            build_marker_only_reply(language),
        ):
            assert extract_topics(reply) == ()
            assert has_buying_intent(reply) is False
            assert has_price_question(reply) is False


def test_knowledge_failure_degrades_to_no_context():
    completion = ScriptedCompletion(["Gärna!"])
    use_case, session_id = _use_case(completion, kb=BrokenKnowledgeBase())
    result = use_case.handle(session_id, "Hej! Vad kostar en hemsida?")
    assert result.failed is False
    assert "RELEVANT" not in completion.calls[0][0]


def test_session_title_from_first_message():
    use_case, session_id = _use_case(ScriptedCompletion(["Hej!"]))
    use_case.handle(session_id, "Hej! Vad kostar en hemsida?")
    assert use_case._store.get_state(session_id).title == "Hej! Vad kostar en hemsida?"
