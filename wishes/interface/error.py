"""Interface layer error handling.

Maps domain errors to HTTP responses with an ``{error, code}`` body.
"""

import logfire
from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from wishes.domain.error import (
    AlreadyPostedError,
    AuthorizationError,
    DomainError,
    InvariantViolation,
    NotFoundError,
    RepositoryError,
    SelfSupportError,
    ValidationError,
)

STATUS_BY_ERROR: dict[type[DomainError], int] = {
    ValidationError: status.HTTP_400_BAD_REQUEST,
    InvariantViolation: status.HTTP_400_BAD_REQUEST,
    AlreadyPostedError: status.HTTP_400_BAD_REQUEST,
    NotFoundError: status.HTTP_404_NOT_FOUND,
    AuthorizationError: status.HTTP_401_UNAUTHORIZED,
    SelfSupportError: status.HTTP_403_FORBIDDEN,
    RepositoryError: status.HTTP_500_INTERNAL_SERVER_ERROR,
}

STORAGE_ERROR_MESSAGE = "A storage error occurred."


def status_for(error: DomainError) -> int:
    """HTTP status for a domain error; unknown errors collapse to 400."""
    for error_type in type(error).__mro__:
        if error_type in STATUS_BY_ERROR:
            return STATUS_BY_ERROR[error_type]
    return status.HTTP_400_BAD_REQUEST


async def domain_error_handler(request: Request, exc: DomainError) -> JSONResponse:
    """Render a DomainError as ``{error, code}``."""
    status_code = status_for(exc)

    if isinstance(exc, RepositoryError):
        logfire.error(
            "Storage error", path=request.url.path, code=exc.code, error=exc.message
        )
        message = STORAGE_ERROR_MESSAGE
    else:
        logfire.warn(
            "Request failed", path=request.url.path, code=exc.code, error=exc.message
        )
        message = exc.message

    return JSONResponse(
        status_code=status_code,
        content={"error": message, "code": exc.code},
    )


def register_error_handlers(app: FastAPI) -> None:
    """Register domain error handlers on the application."""
    app.add_exception_handler(DomainError, domain_error_handler)  # type: ignore[arg-type]
