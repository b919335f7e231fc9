"""Job feed - candidate pool for swiping."""
from core.feed.supplier import JobFeedSupplier, filter_unapplied
from core.feed.demo_jobs import DEMO_JOBS

__all__ = ['JobFeedSupplier', 'filter_unapplied', 'DEMO_JOBS']
