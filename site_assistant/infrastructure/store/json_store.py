from __future__ import annotations

import json
import logging
import re
import threading
import uuid
from pathlib import Path
from typing import Any

from site_assistant.application.ports.session_store import SessionStorePort
from site_assistant.domain.entities.message import ChatMessage
from site_assistant.domain.entities.session_state import SessionClassificationState

_SAFE_ID_RE = re.compile(r"^[A-Za-z0-9_-]{1,128}$")


class JsonSessionStore(SessionStorePort):
    """One JSON file per session: `{session_id, state, messages, version}`."""

    def __init__(self, data_dir: str = "./data/sessions", history_limit: int = 200) -> None:
        self._data_dir = Path(data_dir)
        self._data_dir.mkdir(parents=True, exist_ok=True)
        self._history_limit = history_limit
        self._locks: dict[str, threading.RLock] = {}
        self._lock_lock = threading.Lock()  # Lock for managing locks dict
        self._logger = logging.getLogger(__name__)

    def session_lock(self, session_id: str) -> threading.RLock:
        """Get or create the reentrant lock for a session_id."""
        with self._lock_lock:
            if session_id not in self._locks:
                self._locks[session_id] = threading.RLock()
            return self._locks[session_id]

    def get_or_create(self, session_id: str | None) -> str:
        sid = session_id or str(uuid.uuid4())
        with self.session_lock(sid):
            if not self._get_file_path(sid).exists():
                self._save_session_data(sid, self._empty_session(sid))
        return sid

    def exists(self, session_id: str) -> bool:
        if not _SAFE_ID_RE.match(session_id or ""):
            return False
        return self._get_file_path(session_id).exists()

    def get_history(self, session_id: str) -> list[ChatMessage]:
        with self.session_lock(session_id):
            data = self._load_session_data(session_id)
            return [_deserialize_message(m) for m in data.get("messages", [])]

    def append_message(self, session_id: str, message: ChatMessage) -> None:
        with self.session_lock(session_id):
            data = self._load_session_data(session_id)
            messages = data.get("messages", [])
            messages.append(_serialize_message(message))

            # Keep last N messages
            if len(messages) > self._history_limit:
                messages = messages[-self._history_limit :]

            data["messages"] = messages
            self._save_session_data(session_id, data)

    def get_state(self, session_id: str) -> SessionClassificationState:
        with self.session_lock(session_id):
            data = self._load_session_data(session_id)
            return _deserialize_state(data.get("state", {}))

    def set_state(self, session_id: str, state: SessionClassificationState) -> None:
        with self.session_lock(session_id):
            data = self._load_session_data(session_id)
            data["state"] = _serialize_state(state)
            self._save_session_data(session_id, data)

    def _get_file_path(self, session_id: str) -> Path:
        if not _SAFE_ID_RE.match(session_id or ""):
            raise ValueError(f"Invalid session id: {session_id!r}")
        return self._data_dir / f"{session_id}.json"

    def _empty_session(self, session_id: str) -> dict[str, Any]:
        return {
            "session_id": session_id,
            "state": _serialize_state(SessionClassificationState()),
            "messages": [],
            "version": 1,
        }

    def _load_session_data(self, session_id: str) -> dict[str, Any]:
        """Load session data from JSON file, return defaults if missing or corrupted."""
        file_path = self._get_file_path(session_id)
        if not file_path.exists():
            return self._empty_session(session_id)

        try:
            with open(file_path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (json.JSONDecodeError, OSError) as e:
            self._logger.warning(
                "Session file unreadable, starting empty",
                extra={"session_id": session_id, "error": str(e)},
            )
            return self._empty_session(session_id)

        data.setdefault("version", 1)
        data.setdefault("messages", [])
        return data

    def _save_session_data(self, session_id: str, data: dict[str, Any]) -> None:
        """Save session data to JSON file atomically."""
        file_path = self._get_file_path(session_id)
        temp_path = file_path.with_suffix(".json.tmp")

        try:
            with open(temp_path, "w", encoding="utf-8") as f:
                json.dump(data, f, indent=2, ensure_ascii=False)
            # Atomic rename
            temp_path.replace(file_path)
        except OSError:
            temp_path.unlink(missing_ok=True)
            raise


def _serialize_message(message: ChatMessage) -> dict[str, Any]:
    return {
        "role": message.role,
        "content": message.content,
        "ts": message.timestamp,
        "actions": list(message.actions),
    }


def _deserialize_message(data: dict[str, Any]) -> ChatMessage:
    return ChatMessage(
        role=data.get("role", "user"),
        content=data.get("content", ""),
        timestamp=float(data.get("ts") or 0.0),
        actions=tuple(data.get("actions") or ()),
    )


def _serialize_state(state: SessionClassificationState) -> dict[str, Any]:
    return {
        "violation_count": state.violation_count,
        "off_topic_attempts": state.off_topic_attempts,
        "title": state.title,
        "created_at": state.created_at,
        "last_seen_at": state.last_seen_at,
    }


def _deserialize_state(data: dict[str, Any]) -> SessionClassificationState:
    return SessionClassificationState(
        violation_count=int(data.get("violation_count", 0)),
        off_topic_attempts=int(data.get("off_topic_attempts", 0)),
        title=data.get("title"),
        created_at=data.get("created_at"),
        last_seen_at=data.get("last_seen_at"),
    )
