from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class SessionClassificationState:
    violation_count: int = 0
    off_topic_attempts: int = 0
    title: str | None = None  # derived from the first user message
    created_at: float | None = None
    last_seen_at: float | None = None
