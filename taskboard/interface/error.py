"""Interface layer errors.

Domain errors become 4xx ``HTTPException`` responses, with not-found and
forbidden kept distinct. Missing or malformed input is rejected with 400 by
:func:`validation_error_handler`. Anything else is logged and re-raised as
:class:`InternalRequestError`, which travels past the DI middleware (so the
request transaction rolls back) and is rendered by
:func:`internal_error_handler`.
"""

import logfire
from fastapi import HTTPException, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from taskboard.domain.error import (
    AuthenticationRequiredError,
    DomainError,
    ForbiddenError,
    NotFoundError,
)


class InterfaceError(Exception):
    """Base interface error."""

    pass


class InternalRequestError(InterfaceError):
    """Unexpected failure while serving a request."""

    def __init__(self, detail: str):
        self.detail = detail
        super().__init__(detail)


def to_http_exception(error: DomainError) -> HTTPException:
    """Translate a domain error to an HTTPException carrying its message."""
    if isinstance(error, NotFoundError):
        code = status.HTTP_404_NOT_FOUND
    elif isinstance(error, ForbiddenError):
        code = status.HTTP_403_FORBIDDEN
    elif isinstance(error, AuthenticationRequiredError):
        code = status.HTTP_401_UNAUTHORIZED
    else:
        # Validation and state errors
        code = status.HTTP_400_BAD_REQUEST

    logfire.warn(
        "Request rejected",
        error=str(error),
        error_type=type(error).__name__,
        status_code=code,
    )
    return HTTPException(status_code=code, detail=str(error))


def internal_error(action: str, error: Exception) -> InternalRequestError:
    """Log an unexpected failure and wrap it for the 500 handler.

    Args:
        action: What failed, e.g. "create project"
        error: The original exception
    """
    logfire.error(
        f"Unexpected error: {action}",
        error=str(error),
        error_type=type(error).__name__,
    )
    return InternalRequestError(f"Failed to {action}")


async def internal_error_handler(request: Request, exc: Exception) -> JSONResponse:
    """Render unhandled errors as a generic JSON 500."""
    detail = (
        exc.detail if isinstance(exc, InternalRequestError) else "Internal server error"
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": detail},
    )


async def validation_error_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Render malformed or missing input as 400 with the field errors."""
    errors = jsonable_encoder(exc.errors())
    logfire.warn(
        "Request validation failed",
        path=request.url.path,
        fields=[".".join(str(p) for p in e["loc"]) for e in errors],
    )
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": errors},
    )
