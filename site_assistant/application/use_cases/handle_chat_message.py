from __future__ import annotations

import logging
import time
from typing import Callable

from site_assistant.application.exceptions import LLMContractError, LLMUpstreamError, SessionNotFoundError
from site_assistant.application.ports.knowledge_base import KnowledgeBasePort
from site_assistant.application.ports.llm import CompletionPort
from site_assistant.application.ports.message_classifier import MessageClassifierPort
from site_assistant.application.ports.service_catalog import ServiceCatalogPort
from site_assistant.application.ports.session_store import SessionStorePort
from site_assistant.application.use_cases.analyze_conversation import analyze_conversation
from site_assistant.application.use_cases.booking_intent import analyze_booking_intent
from site_assistant.application.use_cases.check_security import SECURITY_WINDOW, CheckSecurityUseCase
from site_assistant.application.use_cases.detect_off_topic import OFF_TOPIC_WINDOW, DetectOffTopicUseCase
from site_assistant.application.use_cases.prompt_composer import build_system_prompt
from site_assistant.application.utils.booking_marker import strip_booking_markers
from site_assistant.application.utils.canned_replies import (
    WELCOME_MESSAGE,
    build_apology,
    build_block_reply,
    build_marker_only_reply,
    build_redirect_reply,
)
from site_assistant.application.utils.language import detect_language
from site_assistant.application.utils.state_helpers import (
    mark_seen,
    record_off_topic,
    record_violation,
    reset_counters,
)
from site_assistant.domain.entities.booking import BookingIntentAnalysis
from site_assistant.domain.entities.conversation import ConversationAnalysis, ConversationStage, Language
from site_assistant.domain.entities.knowledge import KnowledgeSnippet
from site_assistant.domain.entities.message import BOOKING_SHOWN, ChatMessage
from site_assistant.domain.entities.reply import ChatTurnResult
from site_assistant.domain.entities.session_state import SessionClassificationState


class HandleChatMessageUseCase:
    def __init__(
        self,
        store: SessionStorePort,
        kb: KnowledgeBasePort,
        classifier: MessageClassifierPort,
        completion: CompletionPort,
        catalog: ServiceCatalogPort,
        business_name: str = "Axie Studio",
        clock: Callable[[], float] = time.time,
    ) -> None:
        self._store = store
        self._kb = kb
        self._completion = completion
        self._catalog = catalog
        self._business_name = business_name
        self._clock = clock
        self._check_security = CheckSecurityUseCase(classifier)
        self._detect_off_topic = DetectOffTopicUseCase(classifier)
        self._logger = logging.getLogger(__name__)

    def start_session(self, session_id: str | None = None) -> str:
        session_id = self._store.get_or_create(session_id)
        with self._store.session_lock(session_id):
            if not self._store.get_history(session_id):
                now_ts = self._clock()
                self._store.append_message(
                    session_id, ChatMessage(role="assistant", content=WELCOME_MESSAGE, timestamp=now_ts)
                )
                self._store.set_state(session_id, SessionClassificationState(created_at=now_ts))
                self._logger.info("Session started", extra={"session_id": session_id})
        return session_id

    def get_history(self, session_id: str) -> list[ChatMessage]:
        self._require_session(session_id)
        return self._store.get_history(session_id)

    def get_security_status(self, session_id: str) -> dict[str, int]:
        self._require_session(session_id)
        state = self._store.get_state(session_id)
        return {"violations": state.violation_count, "off_topic_attempts": state.off_topic_attempts}

    def reset_counters(self, session_id: str) -> None:
        self._require_session(session_id)
        with self._store.session_lock(session_id):
            self._store.set_state(session_id, reset_counters(self._store.get_state(session_id)))
        self._logger.info("Security counters reset", extra={"session_id": session_id})

    def handle(self, session_id: str, text: str) -> ChatTurnResult:
        self._require_session(session_id)
        text = (text or "").strip()
        if not text:
            raise ValueError("Message must not be empty.")

        with self._store.session_lock(session_id):
            history = self._store.get_history(session_id)
            state = self._store.get_state(session_id)
            language = detect_language(text)
            prior_user_texts = [m.content for m in history if m.is_user]

            verdict = self._check_security.execute(text, language.value, prior_user_texts[-SECURITY_WINDOW:])
            if verdict.is_violation:
                self._logger.warning(
                    "Security violation",
                    extra={"session_id": session_id, "language": language.value, "reason": verdict.reason},
                )
                result = ChatTurnResult(
                    text=build_block_reply(language.value),
                    language=language,
                    blocked=True,
                    block_reason=verdict.reason,
                )
                self._commit(session_id, record_violation(state), text, result)
                return result

            decision = self._detect_off_topic.execute(text, language.value, prior_user_texts[-OFF_TOPIC_WINDOW:])
            if decision.is_off_topic:
                self._logger.info(
                    "Off-topic message redirected",
                    extra={"session_id": session_id, "language": language.value, "reason": decision.reason},
                )
                derived = analyze_conversation(history, text)
                result = ChatTurnResult(
                    text=build_redirect_reply(language.value),
                    language=language,
                    analysis=_as_off_topic(derived),
                    booking=BookingIntentAnalysis(should_show=False, confidence=0.0, reason="Off-topic conversation"),
                    off_topic=True,
                )
                self._commit(session_id, record_off_topic(state), text, result)
                return result

            analysis = analyze_conversation(history, text)
            snippets = self._lookup_knowledge(session_id, text, language)
            system_prompt = build_system_prompt(
                language=language.value,
                analysis=analysis,
                snippets=snippets,
                catalog=self._catalog,
                business_name=self._business_name,
            )
            outgoing = [m for m in history if not _is_welcome(m)]
            outgoing.append(ChatMessage(role="user", content=text, timestamp=self._clock()))

            try:
                raw_reply = self._completion.complete(system_prompt, outgoing)
            except (LLMUpstreamError, LLMContractError) as e:
                self._logger.error(
                    "Completion failed",
                    extra={"session_id": session_id, "language": language.value, "error": str(e)},
                )
                return ChatTurnResult(
                    text=build_apology(language.value),
                    language=language,
                    analysis=analysis,
                    failed=True,
                )

            reply_text = strip_booking_markers(raw_reply) or build_marker_only_reply(language.value)
            booking = analyze_booking_intent(
                reply_text=raw_reply,
                analysis=analysis,
                current_message=text,
                history=history,
                catalog=self._catalog,
                language=language.value,
            )
            result = ChatTurnResult(text=reply_text, language=language, analysis=analysis, booking=booking)
            self._commit(session_id, state, text, result)

            self._logger.info(
                "Reply generated",
                extra={
                    "session_id": session_id,
                    "language": language.value,
                    "stage": analysis.stage.value,
                    "service_type": booking.service_type,
                    "reason": booking.reason,
                },
            )
            return result

    def _commit(
        self,
        session_id: str,
        state: SessionClassificationState,
        user_text: str,
        result: ChatTurnResult,
    ) -> None:
        now_ts = self._clock()
        actions = (BOOKING_SHOWN,) if result.booking and result.booking.should_show else ()
        self._store.append_message(session_id, ChatMessage(role="user", content=user_text, timestamp=now_ts))
        self._store.append_message(
            session_id,
            ChatMessage(role="assistant", content=result.text, timestamp=now_ts, actions=actions),
        )
        self._store.set_state(session_id, mark_seen(state, now_ts, user_text))

    def _lookup_knowledge(self, session_id: str, text: str, language: Language) -> list[KnowledgeSnippet]:
        try:
            return self._kb.get_relevant_context(text, language.value)
        except Exception as e:
            self._logger.warning(
                "Knowledge lookup failed; continuing without context",
                extra={"session_id": session_id, "error": str(e)},
            )
            return []

    def _require_session(self, session_id: str) -> None:
        if not self._store.exists(session_id):
            raise SessionNotFoundError(session_id)


def _as_off_topic(analysis: ConversationAnalysis) -> ConversationAnalysis:
    return ConversationAnalysis(
        stage=ConversationStage.off_topic,
        interest_level=analysis.interest_level,
        topics_discussed=analysis.topics_discussed,
        has_asked_prices=analysis.has_asked_prices,
        has_shown_buying_intent=analysis.has_shown_buying_intent,
        conversation_length=analysis.conversation_length,
    )


def _is_welcome(message: ChatMessage) -> bool:
    return message.role == "assistant" and message.content == WELCOME_MESSAGE
