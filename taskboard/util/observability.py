"""Logfire setup and instrumentation.

Services and use cases log through ``logfire`` directly::

    with logfire.span("accept_invite", token=mask_token(token)):
        logfire.info("Invite accepted", invite_id=str(invite.id))

Spans go to the console always, and to Logfire cloud when a write token is
configured (or ``OBSERVABILITY__SEND_TO_LOGFIRE`` says so).
"""

from typing import Any

import logfire
from fastapi import FastAPI
from sqlalchemy.ext.asyncio import AsyncEngine

from taskboard.config import Settings

SERVICE_NAME = "taskboard-api"
SERVICE_VERSION = "0.1.0"

# Path segments followed by a secret token
TOKEN_PATH_PREFIXES = ("guest", "accept")


def _should_send(settings: Settings) -> bool:
    # Explicit flag wins, otherwise a token implies sending
    explicit = settings.observability.send_to_logfire
    if explicit is not None:
        return explicit
    return settings.observability.logfire_token is not None


def configure_logfire(settings: Settings) -> None:
    """Configure Logfire once at process start."""
    send = _should_send(settings)
    logfire.configure(
        service_name=SERVICE_NAME,
        service_version=SERVICE_VERSION,
        environment=settings.environment,
        token=settings.observability.logfire_token,
        send_to_logfire=send,
        console=logfire.ConsoleOptions(
            colors="auto",
            span_style="show-parents",
            include_timestamps=True,
            verbose=settings.debug,
        ),
    )
    logfire.info(
        "Observability configured",
        environment=settings.environment,
        git_sha=settings.git_sha,
        send_to_logfire=send,
    )


def _request_attributes(request: Any, attributes: dict[str, Any]) -> dict[str, Any]:
    """Span attributes for HTTP requests and WebSocket sessions.

    The path is the route template, so guest and invite tokens in the URL
    never reach a span. Query strings are left out: the WebSocket token
    travels there.
    """
    route = request.scope.get("route")
    path = getattr(route, "path", None) or mask_path(request.url.path)
    result = {**attributes, "path": path}
    method = getattr(request, "method", None)
    result["method"] = method or "WEBSOCKET"
    if request.client:
        result["client_host"] = request.client.host
    return result


def instrument_fastapi(app: FastAPI) -> None:
    """Trace every request without recording headers (bearer tokens)."""
    logfire.instrument_fastapi(
        app,
        capture_headers=False,
        request_attributes_mapper=_request_attributes,
    )


def instrument_sqlalchemy(engine: AsyncEngine) -> None:
    """Trace SQL statements on the engine's sync core."""
    logfire.instrument_sqlalchemy(engine=engine.sync_engine)


def mask_path(path: str) -> str:
    """Replace the segment after a token-bearing prefix with a placeholder."""
    segments = path.split("/")
    for i in range(1, len(segments)):
        if segments[i - 1] in TOKEN_PATH_PREFIXES and segments[i]:
            segments[i] = "{token}"
    return "/".join(segments)


def mask_token(token: str | None) -> str | None:
    """Shorten a secret token for log output."""
    if not token:
        return None
    return token[:8] + "..."
