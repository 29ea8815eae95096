import logging

from starlette.testclient import TestClient

from records_api.core.config import settings
from records_api.main import app
from records_api.services.record_store import InMemoryRecordStore


def test_root_returns_message(client):
    response = client.get("/")
    assert response.status_code == 200
    data = response.json()
    assert data["message"] == "Employee Records API"


def test_health_returns_status(client):
    response = client.get("/health")
    assert response.status_code == 200
    data = response.json()
    assert data["status"] in ("healthy", "degraded")
    assert data["version"] == "0.1.0"
    assert "services" in data


def test_app_uses_in_memory_store_without_credentials(client):
    assert isinstance(app.state.store, InMemoryRecordStore)


def test_unknown_route_returns_404(client):
    response = client.get("/nowhere")
    assert response.status_code == 404


def test_log_level_applied_at_startup():
    logger = logging.getLogger("records_api")
    original_setting, original_level = settings.LOG_LEVEL, logger.level
    settings.LOG_LEVEL = "WARNING"
    try:
        with TestClient(app):
            assert logger.level == logging.WARNING
    finally:
        settings.LOG_LEVEL = original_setting
        logger.setLevel(original_level)
