from dataclasses import dataclass


@dataclass(frozen=True)
class KnowledgeSnippet:
    label: str
    content: str
