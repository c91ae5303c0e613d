"""
Error taxonomy and HTTP translation.

Service operations raise subclasses of ``StudentServiceError``.  Each
carries the HTTP status to answer with and a message that is safe to
show to end users.  ``register_exception_handlers`` installs FastAPI
handlers that render every such error, as well as request validation
failures, as the uniform ``{"success": false, "message": ...}`` body.
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse


logger = logging.getLogger(__name__)

MISSING_FIELDS_MESSAGE = "All fields are required"
DUPLICATE_CODE_MESSAGE = "External code is already registered"
LIST_FAILED_MESSAGE = "Failed to retrieve student records"
SERVER_ERROR_MESSAGE = "Internal server error"


class StudentServiceError(Exception):
    """Base class for errors reported to API clients."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ValidationError(StudentServiceError):
    """A required field is missing or the payload has the wrong shape."""

    status_code = status.HTTP_400_BAD_REQUEST

    def __init__(self, message: str = MISSING_FIELDS_MESSAGE) -> None:
        super().__init__(message)


class ConflictError(StudentServiceError):
    """The external code is already used by another record."""

    status_code = status.HTTP_400_BAD_REQUEST

    def __init__(self, message: str = DUPLICATE_CODE_MESSAGE) -> None:
        super().__init__(message)


class StoreError(StudentServiceError):
    """The backing store could not be reached or the query failed."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str = SERVER_ERROR_MESSAGE) -> None:
        super().__init__(message)


def error_body(message: str) -> dict:
    return {"success": False, "message": message}


async def service_error_handler(request: Request, exc: StudentServiceError) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content=error_body(exc.message))


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Answer schema failures (bad JSON, wrong types) like a missing field."""
    logger.info("Rejected malformed payload on %s: %s", request.url.path, exc.errors())
    error = ValidationError()
    return JSONResponse(status_code=error.status_code, content=error_body(error.message))


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.error("Unhandled error on %s", request.url.path, exc_info=exc)
    return JSONResponse(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, content=error_body(SERVER_ERROR_MESSAGE))


def register_exception_handlers(app: FastAPI) -> None:
    """Attach the error handlers to ``app``."""
    app.add_exception_handler(StudentServiceError, service_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)
