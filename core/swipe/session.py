#!/usr/bin/env python3
"""
Swipe Session - state machine behind the card deck.

States are derived from the deck: LOADING until ``initialize`` runs, then
READY while cards remain and EXHAUSTED once the stack is empty.

Invariants:
- ``len(stack) + len(history)`` equals the initial feed size
- A commit pops the top card and appends it to history under one lock
- While a commit is in flight (``begin_commit`` without ``finish_commit``)
  further commits are ignored, so one gesture yields at most one application
- ``undo`` puts the last card back on top; by default the application sent
  for a right swipe stays stored (see ``undo_retracts_application``)

The session never blocks on I/O: applications are recorded through the
recorder's background tasks and their outcome is reported to listeners.
"""
import logging
import threading
from collections import deque
from concurrent.futures import Future
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, Deque, List, Optional, Sequence, Tuple, Union

from core.applications.recorder import ApplicationRecorder
from core.errors import InvalidDirectionError, SessionStateError
from core.models import Application, CandidateProfile, Job, SwipeDirection
from core.swipe.gesture import GestureDecision, GestureInterpreter

logger = logging.getLogger(__name__)


class SessionState(str, Enum):
    LOADING = "loading"
    READY = "ready"
    EXHAUSTED = "exhausted"


class SessionEventKind(str, Enum):
    INITIALIZED = "initialized"
    DRAGGED = "dragged"
    SNAPPED_BACK = "snapped_back"
    COMMIT_STARTED = "commit_started"
    COMMITTED = "committed"
    UNDONE = "undone"
    APPLICATION_RECORDED = "application_recorded"
    APPLICATION_FAILED = "application_failed"
    DEMO_LIKED = "demo_liked"
    CLOSED = "closed"


@dataclass(frozen=True)
class SwipeRecord:
    """One history entry. ``application`` is the recorder task for right swipes."""
    job: Job
    direction: SwipeDirection
    application: Optional[Future] = field(default=None, compare=False, repr=False)


@dataclass(frozen=True)
class SessionSnapshot:
    state: SessionState
    stack: Tuple[Job, ...]
    history: Tuple[SwipeRecord, ...]
    pending_direction: Optional[SwipeDirection]
    drag_offset: float

    @property
    def top(self) -> Optional[Job]:
        return self.stack[0] if self.stack else None


@dataclass(frozen=True)
class SessionEvent:
    kind: SessionEventKind
    snapshot: SessionSnapshot
    job: Optional[Job] = None
    application: Optional[Application] = None
    error: Optional[BaseException] = None


SessionListener = Callable[[SessionEvent], None]


def coerce_direction(direction: Union[str, SwipeDirection]) -> SwipeDirection:
    try:
        return SwipeDirection(direction)
    except ValueError:
        raise InvalidDirectionError(f"Swipe direction must be 'left' or 'right', got {direction!r}")


class SwipeSession:
    """
    Deck of jobs for one candidate.

    Args:
        candidate_id: Candidate swiping in this session
        recorder: Records right swipes; None disables recording
        interpreter: Gesture thresholds for ``release``
        profile: Candidate profile passed to the recorder (resume url, scoring)
        undo_retracts_application: Undoing a right swipe also deletes its application
    """

    def __init__(
        self,
        candidate_id: str,
        recorder: Optional[ApplicationRecorder] = None,
        interpreter: Optional[GestureInterpreter] = None,
        profile: Optional[CandidateProfile] = None,
        undo_retracts_application: bool = False
    ):
        self.candidate_id = candidate_id
        self.recorder = recorder
        self.interpreter = interpreter or GestureInterpreter()
        self.profile = profile
        self.undo_retracts_application = undo_retracts_application

        self._lock = threading.RLock()
        self._listeners: List[SessionListener] = []
        self._stack: Deque[Job] = deque()
        self._history: List[SwipeRecord] = []
        self._initialized = False
        self._closed = False
        self._pending_direction: Optional[SwipeDirection] = None
        self._drag_offset = 0.0

    # ------------------------------------------------------------------
    # Observation
    # ------------------------------------------------------------------

    def subscribe(self, listener: SessionListener) -> Callable[[], None]:
        with self._lock:
            self._listeners.append(listener)

        def unsubscribe() -> None:
            with self._lock:
                if listener in self._listeners:
                    self._listeners.remove(listener)

        return unsubscribe

    def _emit(self, kind: SessionEventKind, **details) -> None:
        with self._lock:
            listeners = list(self._listeners)
            event = SessionEvent(kind=kind, snapshot=self.snapshot(), **details)

        for listener in listeners:
            try:
                listener(event)
            except Exception:
                logger.exception(f"Session listener failed on {kind.value}")

    @property
    def state(self) -> SessionState:
        with self._lock:
            if not self._initialized:
                return SessionState.LOADING
            return SessionState.READY if self._stack else SessionState.EXHAUSTED

    @property
    def closed(self) -> bool:
        return self._closed

    @property
    def top(self) -> Optional[Job]:
        with self._lock:
            return self._stack[0] if self._stack else None

    @property
    def stack(self) -> Tuple[Job, ...]:
        with self._lock:
            return tuple(self._stack)

    @property
    def history(self) -> Tuple[SwipeRecord, ...]:
        with self._lock:
            return tuple(self._history)

    @property
    def pending_direction(self) -> Optional[SwipeDirection]:
        return self._pending_direction

    @property
    def drag_offset(self) -> float:
        return self._drag_offset

    def snapshot(self) -> SessionSnapshot:
        with self._lock:
            return SessionSnapshot(
                state=self.state,
                stack=tuple(self._stack),
                history=tuple(self._history),
                pending_direction=self._pending_direction,
                drag_offset=self._drag_offset,
            )

    def _ensure_open(self) -> None:
        if self._closed:
            raise SessionStateError("Session is closed")

    # ------------------------------------------------------------------
    # Transitions
    # ------------------------------------------------------------------

    def initialize(self, feed: Sequence[Job]) -> None:
        """Load the deck. The first job of ``feed`` becomes the top card."""
        with self._lock:
            self._ensure_open()
            self._stack = deque(feed)
            self._history = []
            self._pending_direction = None
            self._drag_offset = 0.0
            self._initialized = True
            logger.info(f"Swipe session for {self.candidate_id} loaded with {len(self._stack)} jobs")
        self._emit(SessionEventKind.INITIALIZED)

    def drag(self, offset_x: float) -> bool:
        """Track the live drag offset. Ignored while a commit is in flight."""
        with self._lock:
            self._ensure_open()
            if self.state is not SessionState.READY or self._pending_direction is not None:
                return False
            self._drag_offset = float(offset_x)
        self._emit(SessionEventKind.DRAGGED)
        return True

    def release(self, offset_x: float, velocity_x: float = 0.0) -> GestureDecision:
        """
        End a drag. Commits (begin phase) or snaps the card back.

        Returns the interpreted decision; a commit decision that hit the
        reentrancy guard starts nothing.
        """
        decision = self.interpreter.interpret(offset_x, velocity_x)
        if decision is GestureDecision.SNAP_BACK:
            with self._lock:
                self._ensure_open()
                self._drag_offset = 0.0
            self._emit(SessionEventKind.SNAPPED_BACK)
            return decision

        self.begin_commit(decision.direction)
        return decision

    def begin_commit(self, direction: Union[str, SwipeDirection]) -> bool:
        """
        Start a commit on the top card (the exit animation phase).

        Returns False when another commit is already in flight.

        Raises:
            InvalidDirectionError: unknown direction
            SessionStateError: session not READY or closed
        """
        direction = coerce_direction(direction)
        with self._lock:
            self._ensure_open()
            if self._pending_direction is not None:
                logger.debug(f"Ignoring {direction.value} swipe: commit already in flight")
                return False
            if self.state is not SessionState.READY:
                raise SessionStateError(f"Cannot swipe while session is {self.state.value}")
            self._pending_direction = direction
            job = self._stack[0]
        self._emit(SessionEventKind.COMMIT_STARTED, job=job)
        return True

    def finish_commit(self) -> Optional[SwipeRecord]:
        """
        Complete the in-flight commit: pop the top card, append it to
        history and, for a right swipe, hand it to the recorder.

        A recorder that refuses the task does not undo the commit; the
        failure is reported as APPLICATION_FAILED.

        Returns None when no commit is in flight.
        """
        submit_error = None
        with self._lock:
            self._ensure_open()
            if self._pending_direction is None:
                return None

            direction = self._pending_direction
            job = self._stack.popleft()
            self._pending_direction = None
            self._drag_offset = 0.0

            handle = None
            if direction is SwipeDirection.RIGHT and self.recorder is not None:
                try:
                    handle = self.recorder.submit(self.candidate_id, job, self.profile)
                except Exception as e:
                    logger.error(f"Could not submit application of {self.candidate_id} to job {job.id}: {e}")
                    submit_error = e

            record = SwipeRecord(job=job, direction=direction, application=handle)
            self._history.append(record)

        logger.info(f"Candidate {self.candidate_id} swiped {direction.value} on job {job.id}")
        self._emit(SessionEventKind.COMMITTED, job=job)
        if submit_error is not None:
            self._emit(SessionEventKind.APPLICATION_FAILED, job=job, error=submit_error)
        if handle is not None:
            handle.add_done_callback(lambda future: self._on_application_done(job, future))
        return record

    def commit(self, direction: Union[str, SwipeDirection]) -> Optional[SwipeRecord]:
        """Both commit phases at once. Returns None if a commit was already in flight."""
        if not self.begin_commit(direction):
            return None
        return self.finish_commit()

    def undo(self) -> SwipeRecord:
        """
        Put the most recently swiped card back on top of the deck.

        Raises:
            SessionStateError: nothing to undo, commit in flight or session closed
        """
        with self._lock:
            self._ensure_open()
            if self._pending_direction is not None:
                raise SessionStateError("Cannot undo while a swipe is in progress")
            if not self._history:
                raise SessionStateError("Nothing to undo")

            record = self._history.pop()
            self._stack.appendleft(record.job)
            self._drag_offset = 0.0

        logger.info(f"Candidate {self.candidate_id} undid {record.direction.value} swipe on job {record.job.id}")
        if self.undo_retracts_application and record.application is not None:
            self._retract(record)
        self._emit(SessionEventKind.UNDONE, job=record.job)
        return record

    def close(self) -> None:
        """
        Tear the session down. Background tasks already submitted are left to
        finish; their results are no longer reported.
        """
        with self._lock:
            if self._closed:
                return
            self._emit_closed_locked()
            self._closed = True
            self._listeners.clear()
        logger.info(f"Swipe session for {self.candidate_id} closed")

    def _emit_closed_locked(self) -> None:
        event = SessionEvent(kind=SessionEventKind.CLOSED, snapshot=self.snapshot())
        for listener in list(self._listeners):
            try:
                listener(event)
            except Exception:
                logger.exception("Session listener failed on closed")

    # ------------------------------------------------------------------
    # Background completions
    # ------------------------------------------------------------------

    def _on_application_done(self, job: Job, future: Future) -> None:
        if future.cancelled():
            return
        exc = future.exception()
        if exc is not None:
            logger.error(f"Could not save application of {self.candidate_id} to job {job.id}: {exc}")
        if self._closed:
            return

        if exc is not None:
            self._emit(SessionEventKind.APPLICATION_FAILED, job=job, error=exc)
            return

        application = future.result()
        if application is None:
            self._emit(SessionEventKind.DEMO_LIKED, job=job)
        else:
            self._emit(SessionEventKind.APPLICATION_RECORDED, job=job, application=application)

    def _retract(self, record: SwipeRecord) -> None:
        future = record.application
        if future.cancel():
            logger.info(f"Application to job {record.job.id} cancelled before it was saved")
            return

        def retract_when_saved(done: Future) -> None:
            if done.cancelled() or done.exception() is not None:
                return
            application = done.result()
            if application is None:
                return
            try:
                self.recorder.retract(application)
            except Exception:
                logger.exception(f"Could not retract application {application.id}")

        future.add_done_callback(retract_when_saved)
