"""Shared pytest fixtures for the API tests."""

import pytest
from fastapi.testclient import TestClient

from app.core.config import Settings
from app.main import create_application


@pytest.fixture
def test_settings():
    """Settings built from defaults only, independent of any local `.env`."""
    return Settings(_env_file=None)


@pytest.fixture
def application(test_settings):
    return create_application(test_settings)


@pytest.fixture
def client(application):
    """TestClient entered as a context manager so startup and shutdown run."""
    with TestClient(application) as test_client:
        yield test_client
