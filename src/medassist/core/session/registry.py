"""In-memory registry of client sessions."""

from __future__ import annotations

import logging
import threading
from typing import Callable, Dict
from uuid import uuid4

from medassist.core.actions.schemas import ActionRecord, Sequence

from .seeds import default_seed
from .store import SessionStore

logger = logging.getLogger("medassist.session")


class SessionRegistry:
    """Create, look up and close sessions. Nothing outlives the process."""

    def __init__(self, seed_factory: Callable[[], dict[Sequence, list[ActionRecord]]] = default_seed) -> None:
        self._sessions: Dict[str, SessionStore] = {}
        self._seed_factory = seed_factory
        self._lock = threading.Lock()

    def create(self) -> SessionStore:
        """Create a session pre-filled with the demo reports and scans."""
        session_id = uuid4().hex
        store = SessionStore(session_id=session_id, seed=self._seed_factory())
        with self._lock:
            self._sessions[session_id] = store
        logger.info("session created", extra={"extra_fields": {"session_id": session_id}})
        return store

    def get(self, session_id: str) -> SessionStore:
        """Return an open session or raise KeyError."""
        with self._lock:
            store = self._sessions.get(session_id)
        if store is None or store.closed:
            raise KeyError(f"Session {session_id} not found")
        return store

    def close(self, session_id: str) -> SessionStore:
        """Drop a session; completions still in flight land on the detached store."""
        with self._lock:
            store = self._sessions.pop(session_id, None)
        if store is None:
            raise KeyError(f"Session {session_id} not found")
        store.closed = True
        logger.info("session closed", extra={"extra_fields": {"session_id": session_id}})
        return store

    def __len__(self) -> int:
        with self._lock:
            return len(self._sessions)
