"""
Pytest configuration and fixtures.

This file provides pytest-specific configuration and fixtures.
For standard test utilities, see tests/__init__.py
"""

import pytest


def pytest_configure(config):
    """Configure pytest markers."""
    config.addinivalue_line(
        "markers", "db: marks tests as using the in-memory SQLite database"
    )


@pytest.fixture
def db_session():
    """Function-scoped in-memory database session."""
    from tests import create_test_session

    session = create_test_session()
    try:
        yield session
    finally:
        session.close()
