"""
Backend-specific test fixtures and configuration.

These fixtures extend the global fixtures with helpers for testing the
FastAPI routes against the mock database.
"""

import time
from contextlib import asynccontextmanager
from unittest.mock import AsyncMock, MagicMock

import pytest
import pytest_asyncio


# =============================================================================
# App Fixtures
# =============================================================================

@pytest.fixture
def app():
    """A fresh FastAPI application (lifespan not started)."""
    from app.main import create_app
    return create_app()


@pytest_asyncio.fixture
async def async_client(app, record_service):
    """
    Async test client with the RecordService bound directly to app.state.

    Runs in the same event loop as the database fixtures.
    """
    from httpx import AsyncClient, ASGITransport

    app.state.record_service = record_service
    app.state.started_at = time.monotonic()

    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test"
    ) as ac:
        yield ac


@pytest.fixture
def fake_open_database():
    """
    Factory for a stand-in of ``app.main.open_database`` yielding ``db``.

    Usage:
        with patch("app.main.open_database", fake_open_database(db)):
            with TestClient(app) as client: ...
    """
    def _factory(db):
        @asynccontextmanager
        async def _open(settings):
            yield db
        return _open
    return _factory


# =============================================================================
# Broken Database Fixtures
# =============================================================================

@pytest.fixture
def unreachable_db():
    """A database whose every call fails with a server selection timeout."""
    from pymongo.errors import ServerSelectionTimeoutError

    error = ServerSelectionTimeoutError("localhost:27017: [Errno 111] Connection refused")
    collection = MagicMock()
    collection.count_documents = AsyncMock(side_effect=error)
    collection.find_one = AsyncMock(side_effect=error)
    collection.update_one = AsyncMock(side_effect=error)

    db = MagicMock()
    db.list_collection_names = AsyncMock(side_effect=error)
    db.__getitem__.return_value = collection
    return db


# =============================================================================
# Response Assertion Helpers
# =============================================================================

@pytest.fixture
def assert_error_response():
    """Helper to assert the uniform error envelope."""
    def _assert(response, status_code: int, error_contains: str = None):
        assert response.status_code == status_code
        data = response.json()
        assert data["success"] is False
        assert "error" in data
        if error_contains:
            assert error_contains.lower() in data["error"].lower()
    return _assert
