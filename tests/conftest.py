import pytest
from fastapi.testclient import TestClient

from catalog.config import AuthMode, Settings
from catalog.main import create_app


@pytest.fixture
def make_app():
    def _make(**overrides):
        overrides.setdefault("auth_mode", AuthMode.BEARER)
        overrides.setdefault("seed_sample_data", False)
        return create_app(Settings(_env_file=None, **overrides))
    return _make


@pytest.fixture
def make_client(make_app):
    def _make(**overrides):
        return TestClient(make_app(**overrides))
    return _make


@pytest.fixture
def client(make_client):
    return make_client()
