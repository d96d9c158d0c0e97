"""Standard library logging setup.

Application events go through Logfire. This only shapes what uvicorn,
SQLAlchemy and other libraries print through ``logging``.
"""

import logging
import sys

from taskboard.config import Settings

# Libraries that are chatty at INFO
_QUIET_LOGGERS = ("httpx", "httpcore", "asyncio", "sqlalchemy.pool", "uvicorn.access")


def setup_logging(settings: Settings) -> None:
    """Configure the root logger for the current environment.

    Debug mode logs everything at DEBUG. Elsewhere library noise is held at
    WARNING, except access logs in development.
    """
    level = logging.DEBUG if settings.debug else logging.INFO

    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)-7s %(name)s: %(message)s",
        stream=sys.stdout,
        force=True,
    )

    if not settings.debug:
        for name in _QUIET_LOGGERS:
            if name == "uvicorn.access" and settings.environment == "development":
                continue
            logging.getLogger(name).setLevel(logging.WARNING)

    logging.getLogger(__name__).info(
        "Logging configured for %s at %s",
        settings.environment,
        logging.getLevelName(level),
    )
