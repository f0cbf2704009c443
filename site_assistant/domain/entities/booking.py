from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class BookingMarker:
    service_type: str
    label: str


@dataclass(frozen=True)
class BookingIntentAnalysis:
    should_show: bool
    confidence: float
    reason: str
    service_type: str | None = None
    service_name: str | None = None
