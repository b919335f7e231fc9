#!/usr/bin/env python3
"""
Builders for jobs, profiles and applications used across the test suite.
"""
from core.models import (
    Application,
    ApplicationStatus,
    CandidateProfile,
    ExperienceLevel,
    Job,
    Location,
    RoleType,
)
from core.store import JOBS, PROFILES, APPLICATIONS


def make_job(job_id: str = "job-1", **overrides) -> Job:
    fields = dict(
        id=job_id,
        company_id="company-1",
        company_name="TechCorp",
        posted_by="recruiter-1",
        title=f"Backend Engineer {job_id}",
        role_type=RoleType.FULL_TIME,
        experience_level=ExperienceLevel.ONE_TO_THREE,
        domain="Software",
        required_skills=["Python", "SQL"],
        location=Location(city="Pune", remote_allowed=True),
        description="Build APIs.",
    )
    fields.update(overrides)
    return Job(**fields)


def make_profile(user_id: str = "candidate-1", **overrides) -> CandidateProfile:
    fields = dict(
        user_id=user_id,
        full_name="Sam Rivera",
        headline="Python developer",
        skills=["python", "Docker"],
        domain="Software",
        experience_years=2,
        resume_url="https://files.example.com/resume.pdf",
    )
    fields.update(overrides)
    return CandidateProfile(**fields)


def make_application(candidate_id: str = "candidate-1", job_id: str = "job-1", **overrides) -> Application:
    fields = dict(
        candidate_id=candidate_id,
        job_id=job_id,
        recruiter_id="recruiter-1",
        company_id="company-1",
        match_score=80.0,
        status=ApplicationStatus.PENDING,
    )
    fields.update(overrides)
    return Application(**fields)


def store_job(store, job: Job) -> Job:
    """Insert ``job`` keeping its id."""
    doc = job.to_document()
    doc['id'] = job.id
    store.create(JOBS, doc)
    return job


def store_profile(store, profile: CandidateProfile) -> CandidateProfile:
    profile.id = store.create(PROFILES, profile.to_document())
    return profile


def store_application(store, application: Application) -> Application:
    application.id = store.create(APPLICATIONS, application.to_document())
    return application
