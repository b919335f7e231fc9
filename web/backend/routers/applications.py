#!/usr/bin/env python3
"""
Application endpoints - recruiter view and decisions.
"""

import logging
from fastapi import APIRouter, Depends, HTTPException

from core.app_context import AppContext
from ..dependencies import get_context
from ..models.requests import StatusUpdate
from ..models.responses import (
    ApplicationResponse,
    ApplicationsResponse,
    ApplicationSummary,
    RefinementResponse
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["applications"])


@router.get("/jobs/{job_id}/applications", response_model=ApplicationsResponse)
def get_job_applications(
    job_id: str,
    ctx: AppContext = Depends(get_context)
):
    """Get the applicants for a job, best match first."""
    applications = ctx.applications.list_for_job(job_id)
    return ApplicationsResponse(
        success=True,
        count=len(applications),
        applications=[ApplicationSummary.from_application(a) for a in applications]
    )


@router.post("/applications/{application_id}/status", response_model=ApplicationResponse)
def update_application_status(
    application_id: str,
    update: StatusUpdate,
    ctx: AppContext = Depends(get_context)
):
    """Accept or reject an application."""
    application = ctx.applications.update_status(application_id, update.status)
    return ApplicationResponse(
        success=True,
        application=ApplicationSummary.from_application(application)
    )


@router.post("/applications/{application_id}/refine", response_model=RefinementResponse)
def refine_application(
    application_id: str,
    ctx: AppContext = Depends(get_context)
):
    """
    Re-run match score refinement for an application.

    Backend failures keep the stored score (fallback=true).
    """
    if ctx.refinement_service is None:
        raise HTTPException(status_code=503, detail="Match score refinement is disabled")

    result = ctx.refinement_service.refine_application_by_id(application_id)
    return RefinementResponse(
        success=True,
        application_id=application_id,
        refined_match_score=result.refined_match_score,
        reasoning=result.reasoning,
        clamped=result.clamped,
        fallback=result.fallback,
        error=result.error
    )
