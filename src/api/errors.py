"""
API error types and their JSON rendering.

Every error response uses the same body shape:

    {"error": {"message": "..."}}

Routers raise `NotFoundError` / `ValidationError`; the handlers registered by
`register_exception_handlers` turn them (and FastAPI's own request validation
errors) into responses.
"""
import logging
from collections.abc import Sequence
from typing import Any

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from core.config import get_settings

logger = logging.getLogger(__name__)

BOOKMARK_NOT_FOUND = "bookmark not found"
SERVER_ERROR = "server error"


class ApiError(Exception):
    """Base class for errors that map directly onto an HTTP response."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class NotFoundError(ApiError):
    """Raised when the requested resource does not exist."""

    status_code = status.HTTP_404_NOT_FOUND

    def __init__(self, message: str = BOOKMARK_NOT_FOUND) -> None:
        super().__init__(message)


class ValidationError(ApiError):
    """Raised when a request body or parameter fails validation."""

    status_code = status.HTTP_400_BAD_REQUEST


def error_body(message: str) -> dict[str, dict[str, str]]:
    """Build the standard error response body."""
    return {"error": {"message": message}}


def describe_validation_errors(errors: Sequence[dict[str, Any]]) -> str:
    """
    Turn pydantic/FastAPI validation errors into a single message.

    Missing fields take precedence over other errors, so a body lacking
    several required fields reports the first one in schema order.
    """
    if not errors:
        return "Invalid request"

    missing = [err for err in errors if err.get("type") == "missing"]
    err = missing[0] if missing else errors[0]
    loc = err.get("loc", ())
    field = loc[-1] if len(loc) > 1 else None

    if err.get("type") == "missing":
        if field is None:
            return "Missing request body"
        return f"Missing '{field}' in request body"
    if err.get("type") == "json_invalid":
        return "Request body must be valid JSON"
    if err.get("type") == "value_error" and "error" in err.get("ctx", {}):
        return str(err["ctx"]["error"])

    msg = err.get("msg", "invalid value")
    if field is None:
        return msg
    return f"Invalid '{field}': {msg}"


async def api_error_handler(_request: Request, exc: ApiError) -> JSONResponse:
    """Render an ApiError with its own status code."""
    return JSONResponse(status_code=exc.status_code, content=error_body(exc.message))


async def request_validation_error_handler(
    _request: Request, exc: RequestValidationError,
) -> JSONResponse:
    """Render FastAPI request validation failures as 400s instead of 422s."""
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=error_body(describe_validation_errors(exc.errors())),
    )


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    """Log unexpected failures and return a generic 500."""
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    message = str(exc) if get_settings().debug else SERVER_ERROR
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=error_body(message),
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Attach the error handlers to the application."""
    app.add_exception_handler(ApiError, api_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)
