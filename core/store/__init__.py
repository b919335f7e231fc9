from core.store.interfaces import (
    DocumentStore,
    StoredDocument,
    SnapshotCallback,
    JOBS,
    APPLICATIONS,
    PROFILES,
)

__all__ = [
    'DocumentStore',
    'StoredDocument',
    'SnapshotCallback',
    'JOBS',
    'APPLICATIONS',
    'PROFILES',
]
