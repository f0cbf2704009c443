from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ContactRequest:
    email: str
    name: str | None = None
    language: str = "sv"


@dataclass(frozen=True)
class ContactPayload:
    name: str
    email: str
    time_created: str  # ISO-8601, UTC
    routing_id: str
    internal_id: str


@dataclass(frozen=True)
class ContactResult:
    success: bool
    message: str
    internal_id: str | None = None
