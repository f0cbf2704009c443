from __future__ import annotations

from site_assistant.application.utils.session_title import build_session_title
from site_assistant.domain.entities.session_state import SessionClassificationState


def record_violation(state: SessionClassificationState) -> SessionClassificationState:
    return SessionClassificationState(
        violation_count=state.violation_count + 1,
        off_topic_attempts=state.off_topic_attempts,
        title=state.title,
        created_at=state.created_at,
        last_seen_at=state.last_seen_at,
    )


def record_off_topic(state: SessionClassificationState) -> SessionClassificationState:
    return SessionClassificationState(
        violation_count=state.violation_count,
        off_topic_attempts=state.off_topic_attempts + 1,
        title=state.title,
        created_at=state.created_at,
        last_seen_at=state.last_seen_at,
    )


def reset_counters(state: SessionClassificationState) -> SessionClassificationState:
    """Zero both counters; title and timestamps are kept."""
    return SessionClassificationState(
        violation_count=0,
        off_topic_attempts=0,
        title=state.title,
        created_at=state.created_at,
        last_seen_at=state.last_seen_at,
    )


def mark_seen(state: SessionClassificationState, now_ts: float, user_text: str) -> SessionClassificationState:
    title = state.title
    if title is None and user_text.strip():
        title = build_session_title(user_text)
    return SessionClassificationState(
        violation_count=state.violation_count,
        off_topic_attempts=state.off_topic_attempts,
        title=title,
        created_at=state.created_at if state.created_at is not None else now_ts,
        last_seen_at=now_ts,
    )
