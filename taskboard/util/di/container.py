"""Dependency injection container."""

from dishka import AsyncContainer, make_async_container
from dishka.integrations.fastapi import FastapiProvider, setup_dishka
from fastapi import FastAPI

from taskboard.util.di import Component, build_providers


def create_container(mocked: set[Component] | None = None) -> AsyncContainer:
    """Build the application container.

    Settings are loaded from environment variables by the config provider.

    Args:
        mocked: Components to replace with mocks (tests only)
    """
    return make_async_container(*build_providers(mocked), FastapiProvider())


def setup_di(app: FastAPI, container: AsyncContainer) -> None:
    """Attach the container to the app; requests get a child container."""
    setup_dishka(container, app)
