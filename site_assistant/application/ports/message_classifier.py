from abc import ABC, abstractmethod

from site_assistant.domain.entities.security import SecurityVerdict


class MessageClassifierPort(ABC):
    """Single-message predicates. Implementations must be pure: no counters, no history."""

    @abstractmethod
    def check_security(self, text: str, language: str) -> SecurityVerdict:
        raise NotImplementedError

    @abstractmethod
    def is_off_topic(self, text: str, language: str) -> bool:
        raise NotImplementedError
