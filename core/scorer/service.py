#!/usr/bin/env python3
"""
Score Refinement Service - writes refined match scores back to applications.

Runs after an application has been recorded. A failed refinement leaves the
stored score untouched and never rolls the application back.
"""
import logging
from datetime import datetime, timezone
from typing import Optional

from core.errors import ApplicationNotFoundError, JobNotFoundError
from core.models import Application, Job, CandidateProfile
from core.scorer.refiner import MatchScoreRefiner, RefinementResult
from core.store import DocumentStore, APPLICATIONS, JOBS, PROFILES

logger = logging.getLogger(__name__)


def describe_job(job: Job) -> str:
    """Free-text job description sent for refinement."""
    parts = [f"{job.title} at {job.company_name}"]
    parts.append(f"Role type: {job.role_type.value}, experience level: {job.experience_level.value}")
    if job.domain:
        parts.append(f"Domain: {job.domain}")
    if job.required_skills:
        parts.append(f"Required skills: {', '.join(job.required_skills)}")
    location = job.location.city + (" (remote allowed)" if job.location.remote_allowed else "")
    parts.append(f"Location: {location}")
    if job.description:
        parts.append(job.description)
    return "\n".join(parts)


class ScoreRefinementService:
    """Refines stored application scores."""

    def __init__(self, store: DocumentStore, refiner: MatchScoreRefiner):
        self.store = store
        self.refiner = refiner

    def refine_application(
        self,
        application: Application,
        job: Job,
        profile: Optional[CandidateProfile] = None
    ) -> RefinementResult:
        """Refine ``application.match_score`` and persist it on success."""
        candidate_text = profile.summary() if profile else ""
        result = self.refiner.refine(application.match_score, describe_job(job), candidate_text)

        if result.fallback:
            logger.info(f"Keeping initial score {application.match_score:g} for application {application.id}")
            return result

        if application.id is not None:
            self.store.update(APPLICATIONS, application.id, {
                'matchScore': result.refined_match_score,
                'updatedAt': datetime.now(timezone.utc),
            })
            logger.info(
                f"Application {application.id} score refined "
                f"{application.match_score:g} -> {result.refined_match_score:g}"
                + (" (clamped)" if result.clamped else "")
            )
        return result

    def refine_application_by_id(self, application_id: str) -> RefinementResult:
        """Load an application with its job and candidate profile, then refine it."""
        doc = self.store.get(APPLICATIONS, application_id)
        if doc is None:
            raise ApplicationNotFoundError(f"Application {application_id} not found")
        application = Application.model_validate(doc)

        job_doc = self.store.get(JOBS, application.job_id)
        if job_doc is None:
            raise JobNotFoundError(f"Job {application.job_id} not found")
        job = Job.model_validate(job_doc)

        profile = load_profile(self.store, application.candidate_id)
        return self.refine_application(application, job, profile)


def load_profile(store: DocumentStore, candidate_id: str) -> Optional[CandidateProfile]:
    docs = store.query_by_field(PROFILES, 'userId', candidate_id)
    return CandidateProfile.model_validate(docs[0]) if docs else None
