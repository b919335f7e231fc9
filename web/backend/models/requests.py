#!/usr/bin/env python3
"""
Request models for API endpoints.
"""

from pydantic import BaseModel, Field
from typing import Literal


class CreateSessionRequest(BaseModel):
    """Request to open a swipe session."""
    candidate_id: str = Field(..., min_length=1, description="Candidate who swipes")


class SwipeRequest(BaseModel):
    """Request to commit the top card (button swipe)."""
    direction: str = Field(..., description="Swipe direction: left or right")


class ReleaseRequest(BaseModel):
    """Request describing the end of a drag gesture."""
    offset_x: float = Field(..., description="Horizontal drag offset in pixels")
    velocity_x: float = Field(default=0.0, description="Horizontal velocity in pixels per second")


class StatusUpdate(BaseModel):
    """Recruiter decision on an application."""
    status: Literal["accepted", "rejected"] = Field(..., description="New status: accepted or rejected")
