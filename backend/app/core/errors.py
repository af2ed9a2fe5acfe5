"""
Error taxonomy and the FastAPI handlers that render it.

Every error reaching the request boundary becomes a JSON body of the form
``{"failure": "<message>"}`` with a matching status code.
"""
import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)


class ApiError(Exception):
    """Base class for errors that map onto a client-visible failure."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class MalformedIdentifier(ApiError):
    """A path identifier is not a valid ObjectId."""

    status_code = status.HTTP_400_BAD_REQUEST


class ValidationFailure(ApiError):
    """A payload or field name failed validation."""

    status_code = status.HTTP_400_BAD_REQUEST


class NotFound(ApiError):
    """No document (or nested element) matched the identifier."""

    status_code = status.HTTP_404_NOT_FOUND


class StorageFailure(ApiError):
    """MongoDB or object storage rejected the operation."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR


class StartupFailure(RuntimeError):
    """The document store could not be reached at boot."""


def failure_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"failure": message})


async def api_error_handler(request: Request, exc: ApiError) -> JSONResponse:
    if exc.status_code >= 500:
        logger.error(f"{request.method} {request.url.path} failed: {exc.message}")
    return failure_response(exc.status_code, exc.message)


async def request_validation_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    errors = exc.errors()
    if errors:
        first = errors[0]
        location = ".".join(str(part) for part in first.get("loc", ()))
        message = f"Invalid request ({location}): {first.get('msg', 'invalid value')}"
    else:
        message = "Invalid request"
    return failure_response(status.HTTP_400_BAD_REQUEST, message)


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception(f"Unhandled error on {request.method} {request.url.path}")
    return failure_response(
        status.HTTP_500_INTERNAL_SERVER_ERROR, f"Error occurred: {exc}"
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Attach the failure-body handlers to an application."""
    app.add_exception_handler(ApiError, api_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)
