from __future__ import annotations

import re

from site_assistant.domain.entities.booking import BookingMarker

MARKER_PREFIX = "BOOKING_INTENT:"

_MARKER_RE = re.compile(r"BOOKING_INTENT:([^:]+):([^|]+)")
_STRIP_RE = re.compile(r"BOOKING_INTENT:[^:]+:[^|]+\|?")


def extract_booking_marker(text: str) -> BookingMarker | None:
    match = _MARKER_RE.search(text or "")
    if not match:
        return None
    return BookingMarker(service_type=match.group(1), label=match.group(2).strip())


def strip_booking_markers(text: str) -> str:
    return _STRIP_RE.sub("", text or "").strip()


def format_booking_marker(service_type: str, label: str) -> str:
    return f"{MARKER_PREFIX}{service_type}:{label}|"
