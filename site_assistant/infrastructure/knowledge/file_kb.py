from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

from site_assistant.application.ports.knowledge_base import KnowledgeBasePort
from site_assistant.application.utils.keyword_rules import contains_any
from site_assistant.domain.entities.knowledge import KnowledgeSnippet

DEFAULT_DATA_DIR = Path(__file__).parent / "data"


@dataclass(frozen=True)
class KnowledgeFile:
    name: str  # file stem without the language suffix
    label: str
    language: str
    keywords: tuple[str, ...]


KNOWLEDGE_FILES: tuple[KnowledgeFile, ...] = (
    KnowledgeFile(
        "security", "security", "sv",
        ("säkerhet", "regler", "policy", "riktlinjer", "moderering", "hat", "spam", "olämpligt"),
    ),
    KnowledgeFile(
        "company-info", "company-info", "sv",
        ("axie studio", "företag", "om oss", "mission", "vision", "värderingar", "team", "kontakt", "certifiering"),
    ),
    KnowledgeFile(
        "company-services", "services", "sv",
        ("tjänster", "service", "hemsida", "website", "app", "bokning", "booking", "onboarding", "pris",
         "kostnad", "utveckling"),
    ),
    KnowledgeFile(
        "security", "security", "en",
        ("security", "rules", "policy", "guidelines", "moderation", "hate", "spam", "inappropriate"),
    ),
    KnowledgeFile(
        "company-info", "company-info", "en",
        ("axie studio", "company", "about us", "mission", "vision", "values", "team", "contact", "certification"),
    ),
    KnowledgeFile(
        "company-services", "services", "en",
        ("services", "service", "website", "app", "booking", "onboarding", "price", "cost", "development"),
    ),
)

INFORMATION_TRIGGERS: dict[str, tuple[str, ...]] = {
    "sv": (
        "axie studio", "företag", "om er", "om oss", "vem är ni", "kontakt", "adress", "telefon",
        "tjänst", "service", "pris", "kostnad", "hemsida", "website", "app", "utveckling",
        "bokning", "booking", "onboarding", "konsultation",
        "hur fungerar", "process", "leveranstid", "timeline", "betalning",
        "teknologi", "platform", "cms", "databas", "hosting", "domän",
    ),
    "en": (
        "axie studio", "company", "about you", "about us", "who are you", "contact", "address", "phone",
        "service", "services", "price", "cost", "website", "app", "development",
        "booking", "onboarding", "consultation",
        "how does", "process", "delivery time", "timeline", "payment",
        "technology", "platform", "cms", "database", "hosting", "domain",
    ),
}

# Used when a message needs information but no file keyword matched.
FALLBACK_SNIPPETS = (("company-info", "company"), ("company-services", "services"))


class FileKnowledgeBase(KnowledgeBasePort):
    """
    Plain-text knowledge files named `<name>-<language>.txt`, loaded once at construction.
    Missing or unreadable files are logged and skipped.
    """

    def __init__(self, data_dir: str | Path | None = None, files: tuple[KnowledgeFile, ...] = KNOWLEDGE_FILES) -> None:
        self._data_dir = Path(data_dir) if data_dir else DEFAULT_DATA_DIR
        self._logger = logging.getLogger(__name__)
        self._files: list[tuple[KnowledgeFile, str]] = []
        for entry in files:
            content = self._load(entry)
            if content is not None:
                self._files.append((entry, content))

    def needs_specific_information(self, text: str, language: str) -> bool:
        return contains_any(text, INFORMATION_TRIGGERS.get(_lang(language), INFORMATION_TRIGGERS["sv"]))

    def get_relevant_context(self, text: str, language: str) -> list[KnowledgeSnippet]:
        lang = _lang(language)
        if not self.needs_specific_information(text, lang):
            return []
        language_files = [(entry, content) for entry, content in self._files if entry.language == lang]

        snippets = [
            KnowledgeSnippet(label=entry.label, content=content)
            for entry, content in language_files
            if contains_any(text, entry.keywords)
        ]
        if snippets:
            return snippets

        by_name = {entry.name: content for entry, content in language_files}
        return [
            KnowledgeSnippet(label=label, content=by_name[name])
            for name, label in FALLBACK_SNIPPETS
            if name in by_name
        ]

    def _load(self, entry: KnowledgeFile) -> str | None:
        path = self._data_dir / f"{entry.name}-{entry.language}.txt"
        try:
            return path.read_text(encoding="utf-8").strip()
        except OSError as e:
            self._logger.warning(
                "Knowledge file not loaded",
                extra={"language": entry.language, "reason": str(path), "error": str(e)},
            )
            return None


def _lang(language: str) -> str:
    return language if language in INFORMATION_TRIGGERS else "sv"
