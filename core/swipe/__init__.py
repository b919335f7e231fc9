"""Swipe Module - gesture interpretation and the card-deck state machine."""
from core.swipe.gesture import GestureDecision, GestureInterpreter, interpret
from core.swipe.session import (
    SwipeSession,
    SessionState,
    SessionEvent,
    SessionEventKind,
    SessionSnapshot,
    SwipeRecord,
)

__all__ = [
    'GestureDecision',
    'GestureInterpreter',
    'interpret',
    'SwipeSession',
    'SessionState',
    'SessionEvent',
    'SessionEventKind',
    'SessionSnapshot',
    'SwipeRecord',
]
