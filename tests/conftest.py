"""Test configuration and fixtures."""

import pytest
from fastapi.testclient import TestClient

from betagate.interface.api.app import create_app
from tests.di import TEST_SECRET, build_test_container, make_test_settings


@pytest.fixture
def beta_secret() -> str:
    """Gating secret used by test settings."""
    return TEST_SECRET


@pytest.fixture
def make_client():
    """Factory building a TestClient over a fresh mocked container.

    Returns ``(client, container)`` so tests can inspect mock collaborators.
    """
    clients = []

    def _make(settings=None):
        settings = settings or make_test_settings()
        container = build_test_container(settings=settings)
        client = TestClient(create_app(settings, container))
        clients.append(client)
        return client, container

    yield _make

    for client in clients:
        client.close()


@pytest.fixture
def client(make_client) -> TestClient:
    """Test client with default test settings."""
    test_client, _ = make_client()
    return test_client
