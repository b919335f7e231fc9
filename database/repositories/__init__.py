from database.repositories.base import BaseRepository
from database.repositories.job import JobRepository
from database.repositories.application import ApplicationRepository
from database.repositories.profile import ProfileRepository

__all__ = [
    'BaseRepository',
    'JobRepository',
    'ApplicationRepository',
    'ProfileRepository',
]
