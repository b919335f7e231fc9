"""
Pytest configuration and fixtures.

This file provides pytest-specific configuration and fixtures.
For reusable builders, see tests/fixtures and tests/mocks.
"""

import pytest

from core.config_loader import AppConfig
from tests.mocks.store_mocks import InMemoryDocumentStore


def pytest_configure(config):
    """Configure pytest markers."""
    config.addinivalue_line(
        "markers", "db: marks tests that run against a SQL database (deselect with '-m \"not db\"')"
    )


@pytest.fixture
def memory_store():
    """Empty in-memory document store."""
    return InMemoryDocumentStore()


@pytest.fixture
def sql_store():
    """SqlDocumentStore on a fresh in-memory SQLite database."""
    from database.database import make_engine, make_session_factory, init_db
    from database.document_store import SqlDocumentStore

    engine = make_engine("sqlite://")
    init_db(engine)
    yield SqlDocumentStore(make_session_factory(engine))
    engine.dispose()


@pytest.fixture
def inline_config():
    """Config that runs background work inline and scores deterministically."""
    return AppConfig(
        database={"url": "sqlite://"},
        swipe={"background_tasks": "inline"},
        scoring={"strategy": "skill_overlap"},
        refiner={"retries": 0, "backoff_seconds": 0},
        recorder={"retry_attempts": 1, "backoff_seconds": 0},
    )
