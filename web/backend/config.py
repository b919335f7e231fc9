#!/usr/bin/env python3
"""
Configuration management for the JobSwipe web application.
"""

import os
from functools import lru_cache
from pathlib import Path

from core.config_loader import AppConfig, load_config


def get_project_root() -> Path:
    """Get the project root directory."""
    return Path(__file__).parent.parent.parent


def apply_web_overrides(config: AppConfig) -> AppConfig:
    """Apply web server environment variable overrides."""
    web = config.web
    if 'WEB_HOST' in os.environ:
        web = web.model_copy(update={'host': os.environ['WEB_HOST']})
    if 'WEB_PORT' in os.environ:
        web = web.model_copy(update={'port': int(os.environ['WEB_PORT'])})
    return config.model_copy(update={'web': web})


@lru_cache()
def get_config() -> AppConfig:
    """
    Get application configuration with caching.

    Loads JOBSWIPE_CONFIG, or config.yaml from the project root. Database,
    llm and web settings can be overridden from the environment. Result is cached for the process
    lifetime.

    Returns:
        AppConfig: The application configuration.
    """
    config_path = os.environ.get('JOBSWIPE_CONFIG', str(get_project_root() / 'config.yaml'))
    config = load_config(config_path)
    return apply_web_overrides(config)
