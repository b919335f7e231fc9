"""
Domain models for jobs, applications and candidate profiles.

Documents travel through the document store with camelCase keys
(``candidateId``, ``matchScore`` ...); the models expose snake_case
attributes and accept either spelling on input.
"""
from datetime import datetime
from enum import Enum
from typing import List, Optional, Dict, Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class SwipeDirection(str, Enum):
    LEFT = "left"
    RIGHT = "right"


class RoleType(str, Enum):
    INTERNSHIP = "internship"
    FULL_TIME = "full-time"
    PART_TIME = "part-time"


class ExperienceLevel(str, Enum):
    FRESHER = "fresher"
    ZERO_TO_ONE = "0-1"
    ONE_TO_THREE = "1-3"
    THREE_PLUS = "3+"


class ApplicationStatus(str, Enum):
    PENDING = "pending"
    ACCEPTED = "accepted"
    REJECTED = "rejected"


class Document(BaseModel):
    """Base for everything stored in the document store."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    def to_document(self) -> Dict[str, Any]:
        """Serialize to a store document (camelCase keys, no id)."""
        return self.model_dump(by_alias=True, exclude={'id'})

    @classmethod
    def from_document(cls, doc_id: str, data: Dict[str, Any]):
        return cls.model_validate({**data, 'id': doc_id})


class Location(Document):
    city: str
    remote_allowed: bool = False


class SalaryRange(Document):
    min: Optional[float] = None
    max: Optional[float] = None
    currency: Optional[str] = None


class ScreeningAnswer(Document):
    question: str
    answer: str


class Job(Document):
    id: str
    company_id: str
    company_name: str
    company_logo_url: Optional[str] = None
    posted_by: str
    title: str
    role_type: RoleType
    experience_level: ExperienceLevel
    domain: str
    required_skills: List[str] = Field(default_factory=list)
    location: Location
    salary_range: Optional[SalaryRange] = None
    description: str = ""
    openings: int = Field(default=1, ge=1)
    screening_questions: List[str] = Field(default_factory=list)
    is_active: bool = True
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    # Set on the fallback demo set; never stored
    is_demo: bool = Field(default=False, exclude=True)


class Application(Document):
    id: Optional[str] = None
    candidate_id: str
    job_id: str
    recruiter_id: str
    company_id: str
    answers: List[ScreeningAnswer] = Field(default_factory=list)
    resume_url: str = ""
    match_score: float = Field(ge=0, le=100)
    status: ApplicationStatus = ApplicationStatus.PENDING
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class CandidateProfile(Document):
    """Job seeker profile, the input for scoring and refinement."""
    id: Optional[str] = None
    user_id: str
    full_name: str = ""
    headline: str = ""
    skills: List[str] = Field(default_factory=list)
    domain: str = ""
    preferred_roles: List[str] = Field(default_factory=list)
    experience_years: float = 0
    preferred_locations: List[str] = Field(default_factory=list)
    resume_url: Optional[str] = None

    def summary(self) -> str:
        """Render the profile as the free-text summary sent for refinement."""
        lines = []
        if self.full_name:
            lines.append(f"Name: {self.full_name}")
        if self.headline:
            lines.append(f"Headline: {self.headline}")
        if self.domain:
            lines.append(f"Domain: {self.domain}")
        lines.append(f"Experience: {self.experience_years:g} years")
        if self.skills:
            lines.append(f"Skills: {', '.join(self.skills)}")
        if self.preferred_roles:
            lines.append(f"Preferred roles: {', '.join(self.preferred_roles)}")
        if self.preferred_locations:
            lines.append(f"Preferred locations: {', '.join(self.preferred_locations)}")
        return "\n".join(lines)
