import uuid

from sqlalchemy import Column, Text, TIMESTAMP, ForeignKey, Numeric, UniqueConstraint, Index
from sqlalchemy.orm import relationship

from .base import Base, JsonType, utcnow


class Application(Base):
    """
    A candidate's application to a job, created by a right swipe.

    Tracks:
    - Match score (initial heuristic, later refined)
    - Recruiter decision via status
    """
    __tablename__ = 'application'

    id = Column(Text, primary_key=True, default=lambda: str(uuid.uuid4()))
    candidate_id = Column(Text, nullable=False)
    job_id = Column(Text, ForeignKey('job.id', ondelete='CASCADE'), nullable=False)
    recruiter_id = Column(Text, nullable=False)
    company_id = Column(Text, nullable=False)

    answers = Column(JsonType, nullable=False, default=list)  # [{question, answer}]
    resume_url = Column(Text, nullable=False, default='')
    match_score = Column(Numeric(5, 2), nullable=False)
    status = Column(Text, nullable=False, default='pending')  # pending|accepted|rejected

    created_at = Column(TIMESTAMP(timezone=True), nullable=False, default=utcnow)
    updated_at = Column(TIMESTAMP(timezone=True), nullable=False, default=utcnow, onupdate=utcnow)

    job = relationship("JobPost", back_populates="applications")

    __table_args__ = (
        UniqueConstraint('candidate_id', 'job_id', name='uq_application_candidate_job'),
        Index('idx_application_candidate', 'candidate_id'),
        Index('idx_application_job', 'job_id'),
        Index('idx_application_status', 'status'),
    )
