"""
SQL Document Store - DocumentStore implementation over the ORM tables.

Maps collection names to repositories and camelCase document keys to
snake_case columns. Live subscriptions are in-process: listeners are
re-queried after every write made through this store instance.
"""
import logging
import threading
from collections import defaultdict
from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from typing import Any, Callable, Dict, List, Optional

from pydantic.alias_generators import to_camel, to_snake
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import sessionmaker

from core.errors import (
    DocumentNotFoundError,
    JobNotFoundError,
    ApplicationNotFoundError,
    DuplicateApplicationError,
)
from core.store import DocumentStore, StoredDocument, SnapshotCallback, JOBS, APPLICATIONS, PROFILES
from database.uow import store_uow

logger = logging.getLogger(__name__)

_NOT_FOUND_ERRORS = {
    JOBS: JobNotFoundError,
    APPLICATIONS: ApplicationNotFoundError,
}


def _plain(value: Any) -> Any:
    """Strip enums out of a (possibly nested) document value."""
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, dict):
        return {k: _plain(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [_plain(v) for v in value]
    return value


def _row_to_document(row) -> StoredDocument:
    doc = {}
    for column in row.__table__.columns:
        value = getattr(row, column.name)
        if isinstance(value, Decimal):
            value = float(value)
        doc[to_camel(column.name)] = value
    return doc


@dataclass(eq=False)
class _Subscription:
    field: str
    value: Any
    callback: SnapshotCallback


class SqlDocumentStore(DocumentStore):
    """DocumentStore backed by SQLAlchemy sessions."""

    def __init__(self, session_factory: sessionmaker):
        self.session_factory = session_factory
        self._subscriptions: Dict[str, List[_Subscription]] = defaultdict(list)
        self._lock = threading.Lock()

    @staticmethod
    def _repo(uow, collection: str):
        repos = {
            JOBS: uow.jobs,
            APPLICATIONS: uow.applications,
            PROFILES: uow.profiles,
        }
        if collection not in repos:
            raise ValueError(f"Unknown collection: {collection}")
        return repos[collection]

    @staticmethod
    def _column(repo, field: str) -> str:
        column = to_snake(field)
        if column not in repo.model.__table__.columns:
            raise ValueError(f"Unknown field '{field}' for table {repo.model.__tablename__}")
        return column

    def _row_values(self, repo, data: Dict[str, Any]) -> Dict[str, Any]:
        return {self._column(repo, key): _plain(value) for key, value in data.items()}

    def _not_found(self, collection: str, doc_id: str) -> DocumentNotFoundError:
        error_cls = _NOT_FOUND_ERRORS.get(collection, DocumentNotFoundError)
        return error_cls(f"No document '{doc_id}' in {collection}")

    def get(self, collection: str, doc_id: str) -> Optional[StoredDocument]:
        with store_uow(self.session_factory) as uow:
            row = self._repo(uow, collection).get(doc_id)
            return _row_to_document(row) if row is not None else None

    def query_by_field(self, collection: str, field: str, value: Any) -> List[StoredDocument]:
        with store_uow(self.session_factory) as uow:
            repo = self._repo(uow, collection)
            rows = repo.find_by(self._column(repo, field), _plain(value))
            return [_row_to_document(row) for row in rows]

    def create(self, collection: str, data: Dict[str, Any]) -> str:
        try:
            with store_uow(self.session_factory) as uow:
                repo = self._repo(uow, collection)
                # Unset fields fall back to column defaults
                values = self._row_values(repo, {k: v for k, v in data.items() if v is not None})
                doc_id = repo.add(values).id
        except IntegrityError:
            if collection == APPLICATIONS and self._application_exists(data):
                raise DuplicateApplicationError(data.get('candidateId'), data.get('jobId'))
            raise

        logger.debug(f"Created {collection}/{doc_id}")
        self._notify(collection)
        return doc_id

    def _application_exists(self, data: Dict[str, Any]) -> bool:
        existing = self.query_by_field(APPLICATIONS, 'candidateId', data.get('candidateId'))
        return any(doc['jobId'] == data.get('jobId') for doc in existing)

    def update(self, collection: str, doc_id: str, partial: Dict[str, Any]) -> None:
        with store_uow(self.session_factory) as uow:
            repo = self._repo(uow, collection)
            values = self._row_values(repo, {k: v for k, v in partial.items() if k != 'id'})
            if repo.update_fields(doc_id, values) is None:
                raise self._not_found(collection, doc_id)

        self._notify(collection)

    def delete(self, collection: str, doc_id: str) -> None:
        with store_uow(self.session_factory) as uow:
            deleted = self._repo(uow, collection).delete(doc_id)

        if deleted:
            self._notify(collection)
        else:
            logger.debug(f"Delete of missing document {collection}/{doc_id} ignored")

    def subscribe(
        self,
        collection: str,
        field: str,
        value: Any,
        callback: SnapshotCallback
    ) -> Callable[[], None]:
        subscription = _Subscription(field=field, value=value, callback=callback)
        # Validates collection and field before registering
        snapshot = self.query_by_field(collection, field, value)

        with self._lock:
            self._subscriptions[collection].append(subscription)

        callback(snapshot)

        def unsubscribe() -> None:
            with self._lock:
                if subscription in self._subscriptions[collection]:
                    self._subscriptions[collection].remove(subscription)

        return unsubscribe

    def _notify(self, collection: str) -> None:
        with self._lock:
            subscriptions = list(self._subscriptions[collection])

        for subscription in subscriptions:
            try:
                subscription.callback(
                    self.query_by_field(collection, subscription.field, subscription.value)
                )
            except Exception:
                logger.exception(f"Subscriber callback for {collection} failed")
