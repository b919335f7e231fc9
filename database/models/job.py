import uuid

from sqlalchemy import Column, Integer, Text, TIMESTAMP, Boolean, Index
from sqlalchemy.orm import relationship

from .base import Base, JsonType, utcnow


class JobPost(Base):
    """A recruiter's job posting, swiped on by candidates."""
    __tablename__ = 'job'

    id = Column(Text, primary_key=True, default=lambda: str(uuid.uuid4()))

    # Company / ownership (company name is denormalized for display)
    company_id = Column(Text, nullable=False)
    company_name = Column(Text, nullable=False)
    company_logo_url = Column(Text)
    posted_by = Column(Text, nullable=False)  # recruiter user id

    title = Column(Text, nullable=False)
    role_type = Column(Text, nullable=False)  # internship|full-time|part-time
    experience_level = Column(Text, nullable=False)  # fresher|0-1|1-3|3+
    domain = Column(Text, nullable=False, default='')
    required_skills = Column(JsonType, nullable=False, default=list)
    location = Column(JsonType, nullable=False, default=dict)  # {city, remoteAllowed}
    salary_range = Column(JsonType)  # {min, max, currency}
    description = Column(Text, nullable=False, default='')
    openings = Column(Integer, nullable=False, default=1)
    screening_questions = Column(JsonType, nullable=False, default=list)
    is_active = Column(Boolean, nullable=False, default=True)

    created_at = Column(TIMESTAMP(timezone=True), nullable=False, default=utcnow)
    updated_at = Column(TIMESTAMP(timezone=True), nullable=False, default=utcnow, onupdate=utcnow)

    applications = relationship("Application", back_populates="job", cascade="all, delete-orphan")

    __table_args__ = (
        Index('idx_job_active', 'is_active'),
        Index('idx_job_posted_by', 'posted_by'),
        Index('idx_job_created', 'created_at'),
    )
