#!/usr/bin/env python3
"""
Session service - registry of live swipe sessions.
"""

import uuid
import logging
from threading import Lock
from typing import Dict

from core.app_context import AppContext
from core.errors import SessionNotFoundError
from core.swipe import SwipeSession

logger = logging.getLogger(__name__)


class SessionManager:
    """
    Holds swipe sessions by id for the lifetime of the web process.

    Thread-safe: FastAPI runs sync endpoints on a thread pool.
    """

    def __init__(self, context: AppContext):
        self.context = context
        self._sessions: Dict[str, SwipeSession] = {}
        self._lock = Lock()

    def create(self, candidate_id: str) -> str:
        session = self.context.start_session(candidate_id)
        session_id = str(uuid.uuid4())
        with self._lock:
            self._sessions[session_id] = session
        logger.info(f"Opened swipe session {session_id} for candidate {candidate_id}")
        return session_id

    def get(self, session_id: str) -> SwipeSession:
        with self._lock:
            session = self._sessions.get(session_id)
        if session is None:
            raise SessionNotFoundError(f"Swipe session {session_id} not found")
        return session

    def close(self, session_id: str) -> None:
        with self._lock:
            session = self._sessions.pop(session_id, None)
        if session is None:
            raise SessionNotFoundError(f"Swipe session {session_id} not found")
        session.close()
        self.context.feed_supplier.invalidate(session.candidate_id)

    def close_all(self) -> None:
        with self._lock:
            sessions = list(self._sessions.values())
            self._sessions.clear()
        for session in sessions:
            session.close()
        if sessions:
            logger.info(f"Closed {len(sessions)} swipe sessions")
