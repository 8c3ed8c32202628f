"""Shared pytest fixtures."""

import pytest
from fastapi.testclient import TestClient

from tutorials.config.app_config import AppConfig, clear_config_cache
from tutorials.core.memory_store import InMemoryTutorialStore
from tutorials.web.api import create_app


@pytest.fixture(autouse=True)
def fresh_config(monkeypatch):
    """Isolate tests from cached config and environment overrides."""
    monkeypatch.delenv("MONGO_URL", raising=False)
    monkeypatch.delenv("PORT", raising=False)
    clear_config_cache()
    yield
    clear_config_cache()


@pytest.fixture
def store():
    """Empty in-memory tutorial store."""
    return InMemoryTutorialStore()


@pytest.fixture
def client(store):
    """Test client serving from the in-memory store."""
    app = create_app(store=store, config=AppConfig())
    return TestClient(app)
