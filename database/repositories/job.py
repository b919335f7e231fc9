from database.models import JobPost
from database.repositories.base import BaseRepository


class JobRepository(BaseRepository):
    model = JobPost
