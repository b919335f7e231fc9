from database.models import CandidateProfile
from database.repositories.base import BaseRepository


class ProfileRepository(BaseRepository):
    model = CandidateProfile
