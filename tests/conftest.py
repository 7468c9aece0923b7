import pytest
from fastapi.testclient import TestClient

from user_registry_api.app.core.config import settings
from user_registry_api.app.core.db import init_db
from user_registry_api.app.main import app


@pytest.fixture
def db_path(tmp_path, monkeypatch):
    """Fresh SQLite file per test, schema already applied."""
    path = tmp_path / "users.db"
    monkeypatch.setattr(settings, "database_url", str(path))
    init_db()
    return path


@pytest.fixture
def broken_store(tmp_path, monkeypatch):
    """Point the store at a directory that does not exist."""
    monkeypatch.setattr(settings, "database_url", str(tmp_path / "missing" / "users.db"))


@pytest.fixture
def client(db_path):
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def sample_user_data():
    return {"name": "Ann", "email": "ann@x.com", "address": "1 Rd"}


@pytest.fixture
def created_user_id(client, sample_user_data):
    """Create the sample user through the API and return its id."""
    response = client.post("/api/user", json=sample_user_data)
    assert response.status_code == 200
    users = client.get("/api/users").json()
    return users[0]["id"]
