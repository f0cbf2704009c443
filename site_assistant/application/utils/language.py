from __future__ import annotations

from site_assistant.application.utils.keyword_rules import (
    ENGLISH_INDICATORS,
    SWEDISH_INDICATORS,
    count_hits,
)
from site_assistant.domain.entities.conversation import Language


def detect_language(text: str) -> Language:
    """English only when it strictly outscores Swedish; ties and empty text stay Swedish."""
    swedish_score = count_hits(text, SWEDISH_INDICATORS)
    english_score = count_hits(text, ENGLISH_INDICATORS)
    return Language.en if english_score > swedish_score else Language.sv
