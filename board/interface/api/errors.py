"""Error responses for the HTTP API.

Domain errors carry an ``ErrorKind`` tag that is mapped to a status code
here, so routes let them propagate instead of catching each one.
"""

import time

import logfire
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field

from board.domain.error import DomainError, ErrorKind

STATUS_BY_KIND: dict[ErrorKind, int] = {
    ErrorKind.NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorKind.BAD_REQUEST: status.HTTP_400_BAD_REQUEST,
    ErrorKind.FORBIDDEN: status.HTTP_403_FORBIDDEN,
    ErrorKind.UNAUTHORIZED: status.HTTP_401_UNAUTHORIZED,
    ErrorKind.CONFLICT: status.HTTP_409_CONFLICT,
}


class ErrorResponse(BaseModel):
    """Error body returned for every handled failure."""

    status: int
    message: str
    timestamp: int = Field(default_factory=lambda: int(time.time() * 1000))


def error_response(status_code: int, message: str) -> JSONResponse:
    body = ErrorResponse(status=status_code, message=message)
    return JSONResponse(status_code=status_code, content=body.model_dump())


async def handle_domain_error(request: Request, exc: DomainError) -> JSONResponse:
    """Translate a domain error into its HTTP status."""
    status_code = STATUS_BY_KIND[exc.kind]
    logfire.info(
        "Domain error",
        kind=exc.kind.value,
        status=status_code,
        path=request.url.path,
        error=str(exc),
    )
    return error_response(status_code, str(exc))


async def handle_validation_error(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Report malformed request bodies and parameters as bad requests."""
    errors = exc.errors()
    message = "; ".join(
        f"{'.'.join(str(part) for part in error['loc'])}: {error['msg']}"
        for error in errors
    )
    logfire.info("Request validation failed", path=request.url.path, errors=len(errors))
    return error_response(status.HTTP_400_BAD_REQUEST, message or "Invalid request")


def register_error_handlers(app: FastAPI) -> None:
    """Register exception handlers on the application.

    Args:
        app: FastAPI application
    """
    app.add_exception_handler(DomainError, handle_domain_error)
    app.add_exception_handler(RequestValidationError, handle_validation_error)
