# This project was developed with assistance from AI tools.
"""Shared fixtures for unit tests.

``client`` mounts the real app with ``get_db`` overridden by an AsyncMock
session; route tests patch the service functions they exercise.
"""

from unittest.mock import AsyncMock

import pytest
from db import get_db
from fastapi.testclient import TestClient

from src.main import app


@pytest.fixture
def mock_session():
    return AsyncMock()


@pytest.fixture
def client(mock_session):
    """TestClient with the DB session dependency replaced by ``mock_session``."""

    async def fake_db():
        yield mock_session

    app.dependency_overrides[get_db] = fake_db
    yield TestClient(app)
    app.dependency_overrides.clear()
