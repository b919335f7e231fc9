#!/usr/bin/env python3
"""
Swipe session endpoints - drive the card deck.
"""

import logging
from fastapi import APIRouter, Depends

from core.swipe import GestureDecision
from ..dependencies import get_session_manager
from ..services.session_service import SessionManager
from ..models.requests import CreateSessionRequest, SwipeRequest, ReleaseRequest
from ..models.responses import SessionResponse, SwipeResponse, session_response

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/sessions", tags=["sessions"])


def _session_view(manager: SessionManager, session_id: str) -> SessionResponse:
    session = manager.get(session_id)
    return session_response(session_id, session.candidate_id, session.snapshot())


@router.post("", response_model=SessionResponse, status_code=201)
def create_session(
    request: CreateSessionRequest,
    manager: SessionManager = Depends(get_session_manager)
):
    """Open a swipe session loaded with the candidate's current feed."""
    session_id = manager.create(request.candidate_id)
    return _session_view(manager, session_id)


@router.get("/{session_id}", response_model=SessionResponse)
def get_session(
    session_id: str,
    manager: SessionManager = Depends(get_session_manager)
):
    """Get the deck, history and state of a session."""
    return _session_view(manager, session_id)


@router.post("/{session_id}/swipe", response_model=SwipeResponse)
def swipe(
    session_id: str,
    request: SwipeRequest,
    manager: SessionManager = Depends(get_session_manager)
):
    """
    Swipe the top card left or right.

    A right swipe records an application in the background. A swipe sent
    while another one is still being applied is ignored (action "ignored").
    """
    session = manager.get(session_id)
    record = session.commit(request.direction)
    if record is None:
        return SwipeResponse(
            success=True,
            action="ignored",
            session=_session_view(manager, session_id)
        )
    return SwipeResponse(
        success=True,
        action="committed",
        job_id=record.job.id,
        direction=record.direction.value,
        session=_session_view(manager, session_id)
    )


@router.post("/{session_id}/release", response_model=SwipeResponse)
def release(
    session_id: str,
    request: ReleaseRequest,
    manager: SessionManager = Depends(get_session_manager)
):
    """
    End a drag gesture. Crossing the distance or velocity threshold commits
    the swipe, otherwise the card snaps back. A commit sent while another
    swipe is still in flight is ignored.
    """
    session = manager.get(session_id)
    decision = session.interpreter.interpret(request.offset_x, request.velocity_x)
    if decision is GestureDecision.SNAP_BACK:
        session.release(request.offset_x, request.velocity_x)
        return SwipeResponse(
            success=True,
            action="snapped_back",
            session=_session_view(manager, session_id)
        )

    record = session.commit(decision.direction)
    if record is None:
        return SwipeResponse(
            success=True,
            action="ignored",
            direction=decision.direction.value,
            session=_session_view(manager, session_id)
        )
    return SwipeResponse(
        success=True,
        action="committed",
        job_id=record.job.id,
        direction=record.direction.value,
        session=_session_view(manager, session_id)
    )


@router.post("/{session_id}/undo", response_model=SwipeResponse)
def undo(
    session_id: str,
    manager: SessionManager = Depends(get_session_manager)
):
    """Put the last swiped card back on top of the deck."""
    session = manager.get(session_id)
    record = session.undo()
    return SwipeResponse(
        success=True,
        action="undone",
        job_id=record.job.id,
        direction=record.direction.value,
        session=_session_view(manager, session_id)
    )


@router.delete("/{session_id}")
def close_session(
    session_id: str,
    manager: SessionManager = Depends(get_session_manager)
):
    """Close a session. Applications already submitted are still saved."""
    manager.close(session_id)
    return {"success": True, "session_id": session_id}
