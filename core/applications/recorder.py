#!/usr/bin/env python3
"""
Application Recorder - persists the application behind a right swipe.

One call creates exactly one Application document (status pending, no
screening answers, initial score from the configured MatchScorer). It does
not look for an earlier application first: the feed never offers a job the
candidate applied to, and a concurrent double submit is caught by the
store's unique (candidate, job) constraint and resolved to the existing
application.

``submit`` runs the same work as a background task and returns its Future;
when a ScoreRefinementService is configured, a refinement task is chained
after a successful write.
"""
import logging
from concurrent.futures import Future
from datetime import datetime, timezone
from typing import Callable, Optional, Tuple

from tenacity import (
    retry,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential,
)
from tenacity import RetryCallState

from core.errors import DuplicateApplicationError, InvalidInputError, StoreUnavailableError
from core.models import Application, ApplicationStatus, Job, CandidateProfile
from core.scorer.bounds import clamp_score
from core.scorer.heuristics import MatchScorer
from core.scorer.service import ScoreRefinementService
from core.store import DocumentStore, APPLICATIONS
from core.tasks import TaskRunner, InlineTaskRunner

logger = logging.getLogger(__name__)


def _log_retry(retry_state: RetryCallState) -> None:
    exc = retry_state.outcome.exception()
    logger.warning(
        "Saving application failed (attempt %s): %s. Retrying.",
        retry_state.attempt_number, exc,
    )


def _log_refinement_outcome(future: Future) -> None:
    if future.cancelled():
        return
    exc = future.exception()
    if exc is not None:
        logger.error(f"Score refinement task failed: {exc}")


class ApplicationRecorder:
    """Creates Application documents for committed right swipes."""

    def __init__(
        self,
        store: DocumentStore,
        scorer: MatchScorer,
        task_runner: Optional[TaskRunner] = None,
        refinement: Optional[ScoreRefinementService] = None,
        retry_attempts: int = 3,
        backoff_seconds: float = 0.5,
        persist_demo_jobs: bool = False,
        clock: Callable[[], datetime] = lambda: datetime.now(timezone.utc)
    ):
        self.store = store
        self.scorer = scorer
        self.task_runner = task_runner or InlineTaskRunner()
        self.refinement = refinement
        self.persist_demo_jobs = persist_demo_jobs
        self.clock = clock
        self._create = retry(
            retry=retry_if_exception_type(StoreUnavailableError),
            wait=wait_exponential(multiplier=backoff_seconds, max=10),
            stop=stop_after_attempt(retry_attempts),
            before_sleep=_log_retry,
            reraise=True,
        )(self.store.create)

    def record_application(
        self,
        candidate_id: str,
        job: Job,
        profile: Optional[CandidateProfile] = None
    ) -> Optional[Application]:
        """
        Persist a pending application of ``candidate_id`` to ``job``.

        Returns None for demo jobs (nothing is stored unless
        ``persist_demo_jobs`` is set).

        Raises:
            InvalidInputError: missing candidate or job id
            StoreUnavailableError: the store stayed unreachable after retries
        """
        return self._record(candidate_id, job, profile)[0]

    def _record(
        self,
        candidate_id: str,
        job: Job,
        profile: Optional[CandidateProfile]
    ) -> Tuple[Optional[Application], bool]:
        """Returns (application, created)."""
        if not candidate_id:
            raise InvalidInputError("candidate_id is required")
        if not job.id:
            raise InvalidInputError("job.id is required")

        if job.is_demo and not self.persist_demo_jobs:
            logger.info(f"Candidate {candidate_id} liked demo job {job.id}; nothing stored")
            return None, False

        now = self.clock()
        application = Application(
            candidate_id=candidate_id,
            job_id=job.id,
            recruiter_id=job.posted_by,
            company_id=job.company_id,
            answers=[],
            resume_url=(profile.resume_url or "") if profile else "",
            match_score=clamp_score(self.scorer.score(job, profile)),
            status=ApplicationStatus.PENDING,
            created_at=now,
            updated_at=now,
        )

        try:
            application.id = self._create(APPLICATIONS, application.to_document())
        except DuplicateApplicationError:
            existing = self._find_existing(candidate_id, job.id)
            if existing is None:
                raise
            logger.warning(
                f"Candidate {candidate_id} already applied to job {job.id}; "
                f"keeping application {existing.id}"
            )
            return existing, False

        logger.info(
            f"Application {application.id} sent: candidate {candidate_id} -> job {job.id} "
            f"(score {application.match_score:g})"
        )
        return application, True

    def _find_existing(self, candidate_id: str, job_id: str) -> Optional[Application]:
        for doc in self.store.query_by_field(APPLICATIONS, 'candidateId', candidate_id):
            if doc['jobId'] == job_id:
                return Application.model_validate(doc)
        return None

    def submit(
        self,
        candidate_id: str,
        job: Job,
        profile: Optional[CandidateProfile] = None
    ) -> Future:
        """Record in the background. The Future resolves to the Application (or None)."""
        return self.task_runner.submit(self._record_and_refine, candidate_id, job, profile)

    def _record_and_refine(
        self,
        candidate_id: str,
        job: Job,
        profile: Optional[CandidateProfile]
    ) -> Optional[Application]:
        application, created = self._record(candidate_id, job, profile)
        if created and self.refinement is not None:
            refine_future = self.task_runner.submit(
                self.refinement.refine_application, application, job, profile
            )
            refine_future.add_done_callback(_log_refinement_outcome)
        return application

    def retract(self, application: Application) -> None:
        """Delete a previously recorded application."""
        if application.id is None:
            return
        self.store.delete(APPLICATIONS, application.id)
        logger.info(f"Application {application.id} retracted")
