from abc import ABC, abstractmethod

from site_assistant.domain.entities.knowledge import KnowledgeSnippet


class KnowledgeBasePort(ABC):
    @abstractmethod
    def needs_specific_information(self, text: str, language: str) -> bool:
        """True when the message asks about the company, services, prices or process."""
        raise NotImplementedError

    @abstractmethod
    def get_relevant_context(self, text: str, language: str) -> list[KnowledgeSnippet]:
        """
        Return the labeled text blocks relevant to the message, in the given language.
        Returns an empty list when nothing matches.
        """
        raise NotImplementedError
