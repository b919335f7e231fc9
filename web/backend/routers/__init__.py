"""API route handlers."""

from .candidates import router as candidates_router
from .sessions import router as sessions_router
from .applications import router as applications_router
