"""Test harness for unit, integration and API tests.

Integration tests assume a Postgres instance is reachable with the schema
migrated. Settings are loaded from environment variables.
"""

import pytest
import pytest_asyncio
from fastapi.testclient import TestClient

from taskboard.config import Settings
from taskboard.interface.api.app import create_app
from taskboard.util.di import Component
from taskboard.util.jwt import create_token
from tests.di import build_test_container


def create_env_fixture(unmock: set[Component] | None = None):
    """Factory for creating test environment fixtures.

    Creates a pytest fixture that:
    - Builds a test container with specified unmocking
    - Yields request-scoped container for service access
    - Closes the container afterwards

    Args:
        unmock: Components to use real implementations for

    Returns:
        Pytest fixture function that yields AsyncContainer

    Usage:
        # Unit tests - everything mocked
        unit_env = create_env_fixture()

        # Integration tests - real persistence, assumes postgres running
        integration_env = create_env_fixture(unmock={"persistence"})

        @pytest.mark.asyncio
        async def test_create_project(unit_env):
            service = await unit_env.get(ProjectService)
            project = await service.create_project("Launch", owner_id)
            assert project.invite_token is not None
    """

    @pytest_asyncio.fixture
    async def _test_environment():
        container = build_test_container(unmock=unmock or set())

        async with container() as request_container:
            yield request_container

        await container.close()

    return _test_environment


def create_client_fixture(raise_server_exceptions: bool = True):
    """Factory for API test client fixtures.

    Each test gets a fresh app over a fresh mocked container. The container
    is reachable as ``client.app.state.dishka_container``.

    Args:
        raise_server_exceptions: Re-raise unhandled errors in the test instead
            of returning the 500 response
    """

    @pytest.fixture
    def _client():
        app = create_app(build_test_container())
        # One event loop for all requests and WebSockets of the test
        with TestClient(app, raise_server_exceptions=raise_server_exceptions) as client:
            yield client

    return _client


def auth_headers(user_id: str) -> dict[str, str]:
    """Bearer header for a user, signed with the configured secret."""
    token = create_token(user_id, Settings().auth)
    return {"Authorization": f"Bearer {token}"}
