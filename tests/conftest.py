from __future__ import annotations

import pytest

from src.institute_sync.institute_sync.main import create_app
from src.institute_sync.institute_sync.storage.memory_store import InMemoryStore

API_TOKEN = "test-token"
ADMIN_PASSWORD = "test-admin"


@pytest.fixture
def store():
    return InMemoryStore()


@pytest.fixture
def app(monkeypatch, store):
    monkeypatch.setenv("APP_ENV", "testing")
    return create_app(store=store)


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def auth_headers():
    return {"Authorization": f"Bearer {API_TOKEN}"}
