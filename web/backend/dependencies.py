#!/usr/bin/env python3
"""
FastAPI dependencies for dependency injection.
"""

from functools import lru_cache

from core.app_context import AppContext
from .config import get_config
from .services.session_service import SessionManager


@lru_cache()
def get_context() -> AppContext:
    """
    Application context shared by all requests.

    Usage:
        @router.get("/endpoint")
        def my_endpoint(ctx: AppContext = Depends(get_context)):
            ...
    """
    return AppContext.build(get_config())


@lru_cache()
def get_session_manager() -> SessionManager:
    """Registry of live swipe sessions."""
    return SessionManager(get_context())
