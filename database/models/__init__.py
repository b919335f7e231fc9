from .base import Base
from .job import JobPost
from .application import Application
from .profile import CandidateProfile

__all__ = [
    'Base',
    'JobPost',
    'Application',
    'CandidateProfile',
]
