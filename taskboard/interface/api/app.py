"""FastAPI application."""

from dishka import AsyncContainer
from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware

from taskboard.config import Settings
from taskboard.interface.api.routes import (
    guest,
    health,
    invites,
    projects,
    realtime,
    tasks,
)
from taskboard.interface.error import (
    internal_error_handler,
    validation_error_handler,
)
from taskboard.util.di.container import create_container, setup_di
from taskboard.util.observability import instrument_fastapi

ROUTERS = (
    health.router,
    projects.router,
    invites.router,
    tasks.router,
    guest.router,
    realtime.router,
)


def _allowed_origins(settings: Settings) -> list[str]:
    origins = [settings.api.frontend_url]
    if settings.environment in ("test", "development"):
        # CRA and Vite dev servers
        origins += ["http://localhost:3000", "http://localhost:5173"]
    return sorted(set(origins))


def create_app(container: AsyncContainer | None = None) -> FastAPI:
    """Build the API.

    Logfire is configured by the caller first: ``scripts/start_app.py`` in
    production, ``tests/conftest.py`` in tests.

    Args:
        container: DI container, the production container if omitted
    """
    settings = Settings()

    app = FastAPI(
        title="Taskboard API",
        description="Shared task lists with invites, share links and guest access",
        version="0.1.0",
    )
    instrument_fastapi(app)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=_allowed_origins(settings),
        allow_credentials=True,
        allow_methods=["GET", "POST", "PATCH", "DELETE", "OPTIONS"],
        allow_headers=["Authorization", "Content-Type", "Accept"],
        max_age=600,
    )

    setup_di(app, container or create_container())

    for router in ROUTERS:
        app.include_router(router)

    app.add_exception_handler(RequestValidationError, validation_error_handler)
    # Rendered after the request session has rolled back
    app.add_exception_handler(Exception, internal_error_handler)

    return app


# Imported by uvicorn as "taskboard.interface.api.app:app"
app = create_app()
