"""Test harness for unit, integration and E2E tests.

Integration tests that unmock persistence assume a PostgreSQL database is
reachable with the configured DATABASE__URL and migrated to head.
"""

import pytest
import pytest_asyncio
from fastapi.testclient import TestClient

from connector.config import Settings
from connector.interface.api.app import create_app
from connector.util.di import Component
from tests.di import build_test_container


def create_env_fixture(unmock: set[Component] | None = None):
    """Factory for creating test environment fixtures.

    Creates a pytest fixture that builds a test container with the given
    components unmocked and yields a request-scoped container.

    Args:
        unmock: Components to use real implementations for

    Returns:
        Pytest fixture function that yields AsyncContainer

    Usage:
        unit_env = create_env_fixture()

        @pytest.mark.asyncio
        async def test_like(unit_env):
            post_service = await unit_env.get(PostService)
    """

    @pytest_asyncio.fixture
    async def _test_environment():
        container = build_test_container(unmock=unmock or set())

        async with container() as request_container:
            yield request_container

        await container.close()

    return _test_environment


def create_client_fixture(unmock: set[Component] | None = None):
    """Factory for creating HTTP client fixtures.

    The application gets a fresh test container, so repositories start empty
    for every test.

    Args:
        unmock: Components to use real implementations for

    Returns:
        Pytest fixture function that yields a TestClient
    """

    @pytest.fixture
    def _client():
        container = build_test_container(unmock=unmock or set())
        app = create_app(settings=Settings(), container=container)
        with TestClient(app) as client:
            yield client

    return _client
