#!/usr/bin/env python3
"""
Application Service - read side and recruiter decisions.
"""
import logging
from datetime import datetime, timezone
from typing import List, Union

from core.errors import ApplicationNotFoundError, InvalidInputError
from core.models import Application, ApplicationStatus
from core.store import DocumentStore, APPLICATIONS

logger = logging.getLogger(__name__)

RECRUITER_DECISIONS = (ApplicationStatus.ACCEPTED, ApplicationStatus.REJECTED)


class ApplicationService:
    """Queries and status changes for stored applications."""

    def __init__(self, store: DocumentStore):
        self.store = store

    def get(self, application_id: str) -> Application:
        doc = self.store.get(APPLICATIONS, application_id)
        if doc is None:
            raise ApplicationNotFoundError(f"Application {application_id} not found")
        return Application.model_validate(doc)

    def list_for_candidate(self, candidate_id: str) -> List[Application]:
        """A candidate's applications, newest first."""
        docs = self.store.query_by_field(APPLICATIONS, 'candidateId', candidate_id)
        return [Application.model_validate(doc) for doc in docs]

    def list_for_job(self, job_id: str) -> List[Application]:
        """Applicants for a job, best match first."""
        docs = self.store.query_by_field(APPLICATIONS, 'jobId', job_id)
        applications = [Application.model_validate(doc) for doc in docs]
        return sorted(applications, key=lambda a: a.match_score, reverse=True)

    def update_status(self, application_id: str, status: Union[str, ApplicationStatus]) -> Application:
        """
        Record a recruiter decision (accepted or rejected).

        Raises:
            InvalidInputError: status is not a recruiter decision
            ApplicationNotFoundError: unknown application id
        """
        try:
            status = ApplicationStatus(status)
        except ValueError:
            raise InvalidInputError(f"Unknown application status: {status}")
        if status not in RECRUITER_DECISIONS:
            raise InvalidInputError(f"Recruiters can only accept or reject, got '{status.value}'")

        application = self.get(application_id)
        if application.status == status:
            return application

        now = datetime.now(timezone.utc)
        self.store.update(APPLICATIONS, application_id, {'status': status, 'updatedAt': now})
        logger.info(f"Application {application_id}: {application.status.value} -> {status.value}")
        return application.model_copy(update={'status': status, 'updated_at': now})
