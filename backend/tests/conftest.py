from __future__ import annotations

import pytest
from starlette.testclient import TestClient

from records_api.main import app
from records_api.services.record_store import InMemoryRecordStore


@pytest.fixture(autouse=True)
def _app_settings(tmp_path):
    from records_api.core.config import settings

    original = (
        settings.COSMOS_DB_ENDPOINT,
        settings.COSMOS_DB_KEY,
        settings.UPLOAD_DIR,
        settings.MAX_UPLOAD_SIZE,
    )
    settings.COSMOS_DB_ENDPOINT = ""
    settings.COSMOS_DB_KEY = ""
    settings.UPLOAD_DIR = str(tmp_path / "uploads")
    yield
    (
        settings.COSMOS_DB_ENDPOINT,
        settings.COSMOS_DB_KEY,
        settings.UPLOAD_DIR,
        settings.MAX_UPLOAD_SIZE,
    ) = original


@pytest.fixture
def client():
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()


@pytest.fixture
def upload_dir(tmp_path):
    return tmp_path / "uploads"


@pytest.fixture
def store():
    return InMemoryRecordStore()


@pytest.fixture
def employee_payload():
    return {
        "emp_first_name": "Jo",
        "emp_last_name": "Lee",
        "emp_dob": "1990-01-01",
        "emp_designation": "Engineer",
    }


@pytest.fixture
def create_employee(client, employee_payload):
    def _create(**overrides):
        response = client.post("/employees", json={**employee_payload, **overrides})
        assert response.status_code == 200, response.text
        return response.json()["responseData"]

    return _create
