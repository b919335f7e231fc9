#!/usr/bin/env python3
"""
Candidate endpoints - feed and submitted applications.
"""

import logging
from fastapi import APIRouter, Depends

from core.app_context import AppContext
from ..dependencies import get_context
from ..models.responses import (
    FeedResponse,
    JobSummary,
    ApplicationsResponse,
    ApplicationSummary
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/candidates", tags=["candidates"])


@router.get("/{candidate_id}/feed", response_model=FeedResponse)
def get_feed(
    candidate_id: str,
    ctx: AppContext = Depends(get_context)
):
    """
    Get the jobs a candidate can still swipe on.

    Active jobs the candidate has not applied to, newest first. Falls back to
    the demo deck when no live job is left.
    """
    jobs = ctx.feed_supplier.get_feed(candidate_id)
    return FeedResponse(
        success=True,
        count=len(jobs),
        jobs=[JobSummary.from_job(job) for job in jobs]
    )


@router.get("/{candidate_id}/applications", response_model=ApplicationsResponse)
def get_candidate_applications(
    candidate_id: str,
    ctx: AppContext = Depends(get_context)
):
    """Get a candidate's applications, newest first."""
    applications = ctx.applications.list_for_candidate(candidate_id)
    return ApplicationsResponse(
        success=True,
        count=len(applications),
        applications=[ApplicationSummary.from_application(a) for a in applications]
    )
