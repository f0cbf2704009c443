from abc import ABC, abstractmethod
from contextlib import AbstractContextManager

from site_assistant.domain.entities.message import ChatMessage
from site_assistant.domain.entities.session_state import SessionClassificationState


class SessionStorePort(ABC):
    @abstractmethod
    def get_or_create(self, session_id: str | None) -> str:
        raise NotImplementedError

    @abstractmethod
    def exists(self, session_id: str) -> bool:
        raise NotImplementedError

    @abstractmethod
    def get_history(self, session_id: str) -> list[ChatMessage]:
        raise NotImplementedError

    @abstractmethod
    def append_message(self, session_id: str, message: ChatMessage) -> None:
        raise NotImplementedError

    @abstractmethod
    def get_state(self, session_id: str) -> SessionClassificationState:
        raise NotImplementedError

    @abstractmethod
    def set_state(self, session_id: str, state: SessionClassificationState) -> None:
        raise NotImplementedError

    @abstractmethod
    def session_lock(self, session_id: str) -> AbstractContextManager:
        """
        Lock held for a whole chat turn.
        Turns of one session run one at a time; different sessions do not block each other.
        """
        raise NotImplementedError
