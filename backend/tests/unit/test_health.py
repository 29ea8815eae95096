from __future__ import annotations

from unittest.mock import AsyncMock, MagicMock

from records_api.core.dependencies import get_store
from records_api.main import app


def _cosmos_store(connected: bool) -> MagicMock:
    store = MagicMock()
    store.backend_name = "cosmos_db"
    store.check_connection = AsyncMock(return_value=connected)
    return store


def test_health_in_memory_is_healthy(client):
    response = client.get("/health")
    data = response.json()
    assert data["status"] == "healthy"
    assert data["services"]["database"] == "in_memory"


def test_health_reports_connected_database(client):
    app.dependency_overrides[get_store] = lambda: _cosmos_store(True)
    data = client.get("/health").json()
    assert data["status"] == "healthy"
    assert data["services"]["database"] == "ok"


def test_health_degraded_when_database_unreachable(client):
    app.dependency_overrides[get_store] = lambda: _cosmos_store(False)
    data = client.get("/health").json()
    assert data["status"] == "degraded"
    assert data["services"]["database"] == "error"


def test_health_degraded_when_check_raises(client):
    store = _cosmos_store(True)
    store.check_connection = AsyncMock(side_effect=RuntimeError("boom"))
    app.dependency_overrides[get_store] = lambda: store
    data = client.get("/health").json()
    assert data["status"] == "degraded"


def test_readiness_check(client):
    response = client.get("/health/ready")
    assert response.status_code == 200
    assert response.json()["ready"] is True
