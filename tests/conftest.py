# tests/conftest.py
import pytest
from fastapi.testclient import TestClient

from erfpacht.adapters.state_store import InMemoryStateStore
from erfpacht.api.http import app  # ensures imports resolve; run tests from repo root


@pytest.fixture(scope="session")
def client():
    app.state.store = InMemoryStateStore()
    return TestClient(app)
