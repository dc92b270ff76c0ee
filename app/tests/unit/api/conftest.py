"""Fixtures for API tests.

The client is used as a context manager so the lifespan runs and the
services are created on app.state.
"""

import pytest
from fastapi.testclient import TestClient

from infrastructure.services import get_settings
from server.server import create_app


@pytest.fixture
def app(settings, table_client, no_sleep):
    app = create_app(settings, table_client=table_client, sleep=no_sleep)
    app.dependency_overrides[get_settings] = lambda: settings
    return app


@pytest.fixture
def client(app):
    with TestClient(app) as test_client:
        yield test_client
