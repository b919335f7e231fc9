"""Business logic services."""

from .session_service import SessionManager
