from database.models import Application
from database.repositories.base import BaseRepository


class ApplicationRepository(BaseRepository):
    model = Application
