from __future__ import annotations

import threading
import uuid

from site_assistant.application.ports.session_store import SessionStorePort
from site_assistant.domain.entities.message import ChatMessage
from site_assistant.domain.entities.session_state import SessionClassificationState


class MemorySessionStore(SessionStorePort):
    def __init__(self, history_limit: int = 200) -> None:
        self._sessions: dict[str, list[ChatMessage]] = {}
        self._states: dict[str, SessionClassificationState] = {}
        self._history_limit = history_limit
        self._locks: dict[str, threading.RLock] = {}
        self._lock_lock = threading.Lock()

    def session_lock(self, session_id: str) -> threading.RLock:
        with self._lock_lock:
            if session_id not in self._locks:
                self._locks[session_id] = threading.RLock()
            return self._locks[session_id]

    def get_or_create(self, session_id: str | None) -> str:
        sid = session_id or str(uuid.uuid4())
        with self._lock_lock:
            self._sessions.setdefault(sid, [])
        return sid

    def exists(self, session_id: str) -> bool:
        return session_id in self._sessions

    def get_history(self, session_id: str) -> list[ChatMessage]:
        return list(self._sessions.get(session_id, []))

    def append_message(self, session_id: str, message: ChatMessage) -> None:
        with self.session_lock(session_id):
            messages = self._sessions.setdefault(session_id, [])
            messages.append(message)
            if len(messages) > self._history_limit:
                self._sessions[session_id] = messages[-self._history_limit :]

    def get_state(self, session_id: str) -> SessionClassificationState:
        return self._states.get(session_id, SessionClassificationState())

    def set_state(self, session_id: str, state: SessionClassificationState) -> None:
        self._states[session_id] = state
