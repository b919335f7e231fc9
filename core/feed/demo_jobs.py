"""
Fixed demo job set, used when no live jobs are available for a candidate.
"""
from typing import List

from core.models import Job, Location, SalaryRange, RoleType, ExperienceLevel

_DEMO_COMPANY = "demo-company"
_DEMO_RECRUITER = "demo-recruiter"


def _demo_job(job_id: str, **fields) -> Job:
    return Job(
        id=job_id,
        company_id=_DEMO_COMPANY,
        posted_by=_DEMO_RECRUITER,
        is_demo=True,
        **fields
    )


DEMO_JOBS: List[Job] = [
    _demo_job(
        "demo-1",
        company_name="Innovate Inc.",
        title="Frontend Developer",
        role_type=RoleType.FULL_TIME,
        experience_level=ExperienceLevel.ONE_TO_THREE,
        domain="Web Development",
        required_skills=["React", "TypeScript", "CSS"],
        location=Location(city="Bengaluru", remote_allowed=True),
        salary_range=SalaryRange(min=800000, max=1400000, currency="INR"),
        description="Build and ship customer-facing features on our React design system.",
        openings=2,
        screening_questions=["Share a UI you are proud of."],
    ),
    _demo_job(
        "demo-2",
        company_name="Creative Solutions",
        title="UX/UI Designer Intern",
        role_type=RoleType.INTERNSHIP,
        experience_level=ExperienceLevel.FRESHER,
        domain="Design",
        required_skills=["Figma", "User Research", "Prototyping"],
        location=Location(city="Pune", remote_allowed=False),
        salary_range=SalaryRange(min=20000, max=30000, currency="INR"),
        description="Six-month internship pairing with senior designers on mobile app flows.",
    ),
    _demo_job(
        "demo-3",
        company_name="DataDriven Co.",
        title="Data Scientist",
        role_type=RoleType.FULL_TIME,
        experience_level=ExperienceLevel.THREE_PLUS,
        domain="Data Science",
        required_skills=["Python", "SQL", "Machine Learning", "Statistics"],
        location=Location(city="Hyderabad", remote_allowed=True),
        description="Own forecasting models end to end, from feature pipelines to monitoring.",
    ),
    _demo_job(
        "demo-4",
        company_name="CloudNine Systems",
        title="Backend Engineer",
        role_type=RoleType.FULL_TIME,
        experience_level=ExperienceLevel.ZERO_TO_ONE,
        domain="Software Engineering",
        required_skills=["Python", "PostgreSQL", "REST APIs"],
        location=Location(city="Chennai", remote_allowed=True),
        salary_range=SalaryRange(min=600000, max=900000, currency="INR"),
        description="Design APIs and data models for our logistics platform.",
    ),
    _demo_job(
        "demo-5",
        company_name="GreenLeaf Marketing",
        title="Content Writer",
        role_type=RoleType.PART_TIME,
        experience_level=ExperienceLevel.FRESHER,
        domain="Marketing",
        required_skills=["Copywriting", "SEO"],
        location=Location(city="Mumbai", remote_allowed=True),
        description="Write blog posts and product copy, around 20 hours a week.",
    ),
]
