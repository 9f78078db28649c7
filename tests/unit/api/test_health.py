"""Tests for the health check endpoints."""

from __future__ import annotations

from unittest.mock import AsyncMock, patch

import pytest
from fastapi.testclient import TestClient

from pagesift.adapters.base.adapter import AdapterHealth
from pagesift.adapters.wikipedia.adapter import WikipediaAdapter
from pagesift.api.app import create_app
from pagesift.api.deps import get_adapter, set_adapter
from pagesift.config.settings import Settings


@pytest.fixture
def adapter(settings: Settings) -> WikipediaAdapter:
    return WikipediaAdapter.from_settings(settings.wikipedia)


@pytest.fixture
def client(settings: Settings, adapter: WikipediaAdapter) -> TestClient:
    """Create a test client for the API."""
    app = create_app(settings)
    set_adapter(adapter)
    yield TestClient(app)
    set_adapter(None)


class TestHealthEndpoints:
    """Tests for health check endpoints."""

    def test_health_check(self, client: TestClient) -> None:
        response = client.get("/v1/health")
        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "healthy"
        assert data["service"] == "pagesift"
        assert data["adapter"] == "wikipedia"
        assert "version" in data

    def test_adapter_health_not_initialized(self, client: TestClient) -> None:
        response = client.get("/v1/health/adapter")
        assert response.status_code == 200
        assert response.json()["status"] == "unhealthy"

    def test_adapter_health_reports_provider_status(self, client: TestClient, adapter: WikipediaAdapter) -> None:
        with patch.object(adapter, "health_check", new_callable=AsyncMock) as mock_health:
            mock_health.return_value = AdapterHealth(status="healthy", latency_ms=42, message="Wikipedia (en) OK")

            response = client.get("/v1/health/adapter")

        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "healthy"
        assert data["latency_ms"] == 42


class TestDeps:
    def test_get_adapter_without_server_raises(self) -> None:
        set_adapter(None)
        with pytest.raises(RuntimeError, match="not initialized"):
            get_adapter()


class TestLifespan:
    def test_lifespan_initializes_and_shuts_down_adapter(self, settings: Settings) -> None:
        app = create_app(settings)

        with TestClient(app) as client:
            adapter = app.state.adapter
            assert isinstance(adapter, WikipediaAdapter)
            assert adapter._client is not None
            assert client.get("/v1/health").json()["adapter"] == "wikipedia"

        assert adapter._client is None
        with pytest.raises(RuntimeError):
            get_adapter()


class TestAppFactory:
    def test_debug_flag_follows_settings(self, settings: Settings) -> None:
        assert create_app(settings).debug is True
        assert create_app(settings.model_copy(update={"debug": False})).debug is False
