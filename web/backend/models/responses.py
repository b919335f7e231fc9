#!/usr/bin/env python3
"""
Response models for API endpoints.
"""

from pydantic import BaseModel, ConfigDict, Field
from typing import List, Optional

from core.models import Application, Job
from core.swipe import SessionSnapshot, SwipeRecord


class JobSummary(BaseModel):
    """Card shown in the swipe deck."""
    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "job_id": "demo-1",
                "title": "Frontend Developer Intern",
                "company_name": "Acme Labs",
                "role_type": "internship",
                "experience_level": "fresher",
                "domain": "Web Development",
                "city": "Bengaluru",
                "remote_allowed": True,
                "required_skills": ["React", "TypeScript"],
                "is_demo": True
            }
        }
    )

    job_id: str
    title: str
    company_name: str
    company_logo_url: Optional[str] = None
    role_type: str
    experience_level: str
    domain: str
    city: str
    remote_allowed: bool
    required_skills: List[str] = Field(default_factory=list)
    salary_min: Optional[float] = None
    salary_max: Optional[float] = None
    currency: Optional[str] = None
    description: str = ""
    is_demo: bool = False

    @classmethod
    def from_job(cls, job: Job) -> "JobSummary":
        salary = job.salary_range
        return cls(
            job_id=job.id,
            title=job.title,
            company_name=job.company_name,
            company_logo_url=job.company_logo_url,
            role_type=job.role_type.value,
            experience_level=job.experience_level.value,
            domain=job.domain,
            city=job.location.city,
            remote_allowed=job.location.remote_allowed,
            required_skills=list(job.required_skills),
            salary_min=salary.min if salary else None,
            salary_max=salary.max if salary else None,
            currency=salary.currency if salary else None,
            description=job.description,
            is_demo=job.is_demo,
        )


class FeedResponse(BaseModel):
    """Response for a candidate's feed."""
    success: bool
    count: int
    jobs: List[JobSummary]


class SwipeHistoryEntry(BaseModel):
    job_id: str
    direction: str


class SessionResponse(BaseModel):
    """Current state of a swipe session."""
    success: bool
    session_id: str
    candidate_id: str
    state: str
    remaining: int
    top: Optional[JobSummary] = None
    stack: List[JobSummary] = Field(default_factory=list)
    history: List[SwipeHistoryEntry] = Field(default_factory=list)
    swiping: bool = False


class SwipeResponse(BaseModel):
    """Outcome of a swipe, release or undo."""
    success: bool
    action: str
    job_id: Optional[str] = None
    direction: Optional[str] = None
    session: SessionResponse


class ApplicationSummary(BaseModel):
    """Stored application."""
    application_id: Optional[str]
    candidate_id: str
    job_id: str
    recruiter_id: str
    company_id: str
    resume_url: str
    match_score: float = Field(ge=0, le=100)
    status: str
    created_at: Optional[str] = None
    updated_at: Optional[str] = None

    @classmethod
    def from_application(cls, application: Application) -> "ApplicationSummary":
        return cls(
            application_id=application.id,
            candidate_id=application.candidate_id,
            job_id=application.job_id,
            recruiter_id=application.recruiter_id,
            company_id=application.company_id,
            resume_url=application.resume_url,
            match_score=application.match_score,
            status=application.status.value,
            created_at=application.created_at.isoformat() if application.created_at else None,
            updated_at=application.updated_at.isoformat() if application.updated_at else None,
        )


class ApplicationsResponse(BaseModel):
    """List of applications."""
    success: bool
    count: int
    applications: List[ApplicationSummary]


class ApplicationResponse(BaseModel):
    """Single application."""
    success: bool
    application: ApplicationSummary


class RefinementResponse(BaseModel):
    """Outcome of a score refinement."""
    success: bool
    application_id: str
    refined_match_score: float = Field(ge=0, le=100)
    reasoning: Optional[str] = None
    clamped: bool = False
    fallback: bool = False
    error: Optional[str] = None


def session_response(session_id: str, candidate_id: str, snapshot: SessionSnapshot) -> SessionResponse:
    return SessionResponse(
        success=True,
        session_id=session_id,
        candidate_id=candidate_id,
        state=snapshot.state.value,
        remaining=len(snapshot.stack),
        top=JobSummary.from_job(snapshot.top) if snapshot.top else None,
        stack=[JobSummary.from_job(job) for job in snapshot.stack],
        history=[history_entry(record) for record in snapshot.history],
        swiping=snapshot.pending_direction is not None,
    )


def history_entry(record: SwipeRecord) -> SwipeHistoryEntry:
    return SwipeHistoryEntry(job_id=record.job.id, direction=record.direction.value)
