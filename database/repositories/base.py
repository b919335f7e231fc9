from typing import Any, Dict, List, Optional

from sqlalchemy import select
from sqlalchemy.orm import Session


class BaseRepository:
    """Generic CRUD over one ORM model."""
    model = None

    def __init__(self, db: Session):
        self.db = db

    def get(self, record_id: Any):
        return self.db.get(self.model, record_id)

    def find_by(self, column: str, value: Any) -> List[Any]:
        """Rows where ``column == value``, newest first."""
        attr = getattr(self.model, column)
        stmt = (
            select(self.model)
            .where(attr == value)
            .order_by(self.model.created_at.desc(), self.model.id)
        )
        return list(self.db.execute(stmt).scalars().all())

    def add(self, values: Dict[str, Any]):
        row = self.model(**values)
        self.db.add(row)
        self.db.flush()  # Generate ID / surface constraint violations now
        return row

    def update_fields(self, record_id: Any, values: Dict[str, Any]) -> Optional[Any]:
        row = self.get(record_id)
        if row is None:
            return None
        for key, value in values.items():
            setattr(row, key, value)
        self.db.flush()
        return row

    def delete(self, record_id: Any) -> bool:
        row = self.get(record_id)
        if row is None:
            return False
        self.db.delete(row)
        self.db.flush()
        return True
