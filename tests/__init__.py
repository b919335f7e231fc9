#!/usr/bin/env python3
"""
Test suite configuration.

All tests run without external services:

    # Run all tests
    python -m pytest tests/ -v

    # Skip the SQL-backed tests
    python -m pytest tests/ -v -m "not db"

Store-backed tests use SQLite in memory through the same SqlDocumentStore
the application runs on PostgreSQL. The completion backend is always mocked.
"""
