from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class SecurityVerdict:
    is_violation: bool
    reason: str | None = None


@dataclass(frozen=True)
class OffTopicDecision:
    is_off_topic: bool
    escalated: bool = False
    reason: str = ""
