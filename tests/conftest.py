"""Shared fixtures: every test gets a freshly built app and its own state."""

import pytest
from fastapi.testclient import TestClient

from misconfig_api.config import Settings
from misconfig_api.main import create_app


@pytest.fixture
def make_client():
    """Build a client for an app created with the given Settings overrides."""

    def _make(**overrides) -> TestClient:
        app = create_app(Settings(**overrides))
        # /crash is supposed to blow up; we want the response, not the exception
        return TestClient(app, raise_server_exceptions=False)

    return _make


@pytest.fixture
def client(make_client) -> TestClient:
    return make_client()
