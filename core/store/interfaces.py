"""
Document Store Interface - abstract base for the persistence collaborator.

Documents are plain dicts with camelCase keys; ids are assigned by the store.
"""
from abc import ABC, abstractmethod
from typing import Any, Callable, Dict, List, Optional

JOBS = "jobs"
APPLICATIONS = "applications"
PROFILES = "profiles"

# Document data plus its "id" key
StoredDocument = Dict[str, Any]
SnapshotCallback = Callable[[List[StoredDocument]], None]


class DocumentStore(ABC):
    """
    Abstract interface for document storage backends.
    """

    @abstractmethod
    def get(self, collection: str, doc_id: str) -> Optional[StoredDocument]:
        """Return the document (including its ``id`` key) or None."""
        pass

    @abstractmethod
    def query_by_field(self, collection: str, field: str, value: Any) -> List[StoredDocument]:
        """Return documents whose ``field`` equals ``value``, newest first."""
        pass

    @abstractmethod
    def create(self, collection: str, data: Dict[str, Any]) -> str:
        """Insert a document and return its id."""
        pass

    @abstractmethod
    def update(self, collection: str, doc_id: str, partial: Dict[str, Any]) -> None:
        """Merge ``partial`` into an existing document."""
        pass

    @abstractmethod
    def delete(self, collection: str, doc_id: str) -> None:
        pass

    @abstractmethod
    def subscribe(
        self,
        collection: str,
        field: str,
        value: Any,
        callback: SnapshotCallback
    ) -> Callable[[], None]:
        """
        Register a live query.

        The callback receives the current result set immediately and again
        after every write to ``collection``. Returns an unsubscribe function.
        """
        pass
