#!/usr/bin/env python3
"""Serve the API with uvicorn, reporting startup failures to Logfire."""

import sys

import logfire
import uvicorn

from taskboard.config import Settings
from taskboard.util.logging import setup_logging
from taskboard.util.observability import configure_logfire


def main() -> int:
    settings = Settings()

    # Before the app module is imported, so its import errors are traced
    setup_logging(settings)
    configure_logfire(settings)

    logfire.info("Starting API", port=settings.port, environment=settings.environment)
    try:
        uvicorn.run(
            "taskboard.interface.api.app:app",
            host="0.0.0.0",
            port=settings.port,
            log_level="debug" if settings.debug else "info",
        )
    except Exception as e:
        logfire.error(
            "API startup failed",
            error=str(e),
            error_type=type(e).__name__,
            _exc_info=sys.exc_info(),
        )
        raise
    return 0


if __name__ == "__main__":
    sys.exit(main())
