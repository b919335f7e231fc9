#!/usr/bin/env python3
"""
Job Feed Supplier - the ordered pool of jobs a candidate can swipe on.

feed = active jobs - jobs the candidate already applied to, in store order
(newest first). When that is empty the fixed demo set, filtered by the same
rule, is returned instead.
"""
import logging
from typing import Dict, List, Optional, Sequence, Set, Tuple

from core.models import Job
from core.feed.demo_jobs import DEMO_JOBS
from core.store import DocumentStore, JOBS, APPLICATIONS

logger = logging.getLogger(__name__)


def filter_unapplied(jobs: Sequence[Job], applied_job_ids: Set[str]) -> List[Job]:
    """Drop jobs whose id is in ``applied_job_ids``, preserving order."""
    return [job for job in jobs if job.id not in applied_job_ids]


class JobFeedSupplier:
    """
    Builds swipe feeds from the document store.

    Results are cached per candidate keyed on the set of applied job ids, so
    a new application always invalidates the cached feed.
    """

    def __init__(
        self,
        store: DocumentStore,
        demo_jobs: Optional[Sequence[Job]] = None,
        use_cache: bool = True
    ):
        self.store = store
        self.demo_jobs = list(DEMO_JOBS if demo_jobs is None else demo_jobs)
        self.use_cache = use_cache
        self._cache: Dict[str, Tuple[frozenset, List[Job]]] = {}

    def applied_job_ids(self, candidate_id: str) -> Set[str]:
        applications = self.store.query_by_field(APPLICATIONS, 'candidateId', candidate_id)
        return {doc['jobId'] for doc in applications}

    def active_jobs(self) -> List[Job]:
        docs = self.store.query_by_field(JOBS, 'isActive', True)
        return [Job.model_validate(doc) for doc in docs]

    def get_feed(self, candidate_id: str) -> List[Job]:
        applied = frozenset(self.applied_job_ids(candidate_id))

        if self.use_cache and candidate_id in self._cache:
            cached_applied, cached_feed = self._cache[candidate_id]
            if cached_applied == applied:
                return list(cached_feed)

        feed = filter_unapplied(self.active_jobs(), applied)
        if not feed:
            feed = filter_unapplied(self.demo_jobs, applied)
            logger.info(f"No live jobs for candidate {candidate_id}, serving {len(feed)} demo jobs")
        else:
            logger.debug(f"Feed for candidate {candidate_id}: {len(feed)} live jobs")

        if self.use_cache:
            self._cache[candidate_id] = (applied, feed)
        return list(feed)

    def invalidate(self, candidate_id: Optional[str] = None) -> None:
        if candidate_id is None:
            self._cache.clear()
        else:
            self._cache.pop(candidate_id, None)
