# This project was developed with assistance from AI tools.
"""Fixtures for functional tests.

The real app from ``src.main`` is a module singleton. ``_clean_overrides``
ensures dependency_overrides are cleared after every test so the mock
session from one test never leaks into the next.
"""

from unittest.mock import AsyncMock

import pytest
from fastapi.testclient import TestClient

from src.core.config import settings
from src.main import app as real_app

from .mock_db import configure_app


@pytest.fixture(autouse=True)
def _clean_overrides():
    """Clear app dependency overrides after each test."""
    yield
    real_app.dependency_overrides.clear()


@pytest.fixture
def app():
    """Return the real FastAPI app with all routers mounted."""
    return real_app


@pytest.fixture
def make_client(app):
    """Factory fixture: wire a mock DB session into the app, return TestClient."""

    def _make(session: AsyncMock) -> TestClient:
        configure_app(app, session)
        return TestClient(app)

    return _make


@pytest.fixture
def admin_auth(monkeypatch):
    """Known admin credentials with the Basic gate switched on."""
    monkeypatch.setattr(settings, "AUTH_DISABLED", False)
    monkeypatch.setattr(settings, "SQLADMIN_USER", "admin")
    monkeypatch.setattr(settings, "SQLADMIN_PASSWORD", "letmein")
    return ("admin", "letmein")
