"""
Tests for health, root and server info endpoints, and application startup.

These tests verify:
- Health endpoint returns 200 regardless of database state
- Server info exposes the shape used by the access info panel
- Startup binds the RecordService and aborts when the database is unreachable
"""

from contextlib import asynccontextmanager
from types import SimpleNamespace
import socket
from unittest.mock import MagicMock, patch

import pytest
from fastapi.testclient import TestClient

from app.exceptions import StoreConnectionError


class TestHealthEndpoint:
    """Tests for GET /health endpoint."""

    @pytest.mark.asyncio
    async def test_health_endpoint_returns_200_when_api_running(self, async_client):
        response = await async_client.get("/health")

        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "healthy"
        assert data["uptime"] >= 0

    def test_health_independent_of_database(self, app, fake_open_database, unreachable_db):
        with patch("app.main.open_database", fake_open_database(unreachable_db)):
            with TestClient(app) as client:
                health = client.get("/health")
                collections = client.get("/api/collections")

        assert health.status_code == 200
        assert health.json()["status"] == "healthy"
        assert collections.status_code == 500
        assert collections.json()["success"] is False

    @pytest.mark.asyncio
    async def test_root_describes_api(self, async_client):
        data = (await async_client.get("/")).json()

        assert data["health"] == "/health"
        assert data["docs"] == "/docs"


class TestServerInfoEndpoint:
    """Tests for GET /api/server-info."""

    @pytest.mark.asyncio
    async def test_server_info_shape(self, async_client):
        response = await async_client.get("/api/server-info")

        assert response.status_code == 200
        data = response.json()
        assert data["success"] is True
        info = data["serverInfo"]
        for key in ["hostname", "platform", "addresses", "port", "uptime", "memoryUsage", "pythonVersion"]:
            assert key in info
        assert info["port"] == 3000
        assert info["memoryUsage"]["rss"] > 0

    @pytest.mark.asyncio
    async def test_server_info_lists_non_loopback_ipv4(self, async_client):
        interfaces = {
            "lo": [SimpleNamespace(family=socket.AF_INET, address="127.0.0.1")],
            "eth0": [
                SimpleNamespace(family=socket.AF_INET, address="192.168.1.20"),
                SimpleNamespace(family=socket.AF_INET6, address="fe80::1"),
            ],
            "wlan0": [SimpleNamespace(family=socket.AF_INET, address="10.0.0.5")],
        }
        with patch("app.services.server_info.psutil.net_if_addrs", return_value=interfaces):
            response = await async_client.get("/api/server-info")

        assert response.json()["serverInfo"]["addresses"] == [
            {"interface": "eth0", "address": "192.168.1.20"},
            {"interface": "wlan0", "address": "10.0.0.5"},
        ]


class TestStartup:
    """Tests for the application lifespan."""

    def test_startup_binds_record_service(self, app, fake_open_database):
        db = MagicMock()

        with patch("app.main.open_database", fake_open_database(db)):
            with TestClient(app):
                assert app.state.record_service.db is db

        assert app.state.record_service is None

    def test_startup_fails_when_database_unreachable(self, app):
        @asynccontextmanager
        async def _unreachable(settings):
            raise StoreConnectionError("Database is unreachable: connection refused")
            yield

        with patch("app.main.open_database", _unreachable):
            with pytest.raises(StoreConnectionError):
                with TestClient(app):
                    pass
