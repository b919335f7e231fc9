import uuid

from sqlalchemy import Column, Text, TIMESTAMP, Numeric

from .base import Base, JsonType, utcnow


class CandidateProfile(Base):
    __tablename__ = 'candidate_profile'

    id = Column(Text, primary_key=True, default=lambda: str(uuid.uuid4()))
    user_id = Column(Text, nullable=False, unique=True)
    full_name = Column(Text, nullable=False, default='')
    headline = Column(Text, nullable=False, default='')
    skills = Column(JsonType, nullable=False, default=list)
    domain = Column(Text, nullable=False, default='')
    preferred_roles = Column(JsonType, nullable=False, default=list)
    experience_years = Column(Numeric(4, 1), nullable=False, default=0)
    preferred_locations = Column(JsonType, nullable=False, default=list)
    resume_url = Column(Text)

    created_at = Column(TIMESTAMP(timezone=True), nullable=False, default=utcnow)
    updated_at = Column(TIMESTAMP(timezone=True), nullable=False, default=utcnow, onupdate=utcnow)
