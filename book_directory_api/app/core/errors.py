"""
Error types raised by the book service and their HTTP translation.

Services raise subclasses of ``BookStoreError``; the handlers
registered by ``register_exception_handlers`` turn them into a JSON
body of the form ``{"message": ...}`` with the matching status code,
so no exception leaves a request handler.
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)


class BookStoreError(Exception):
    """Base class for errors surfaced to API clients."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class InvalidInputError(BookStoreError):
    """A required field is missing or the isbn is not numeric."""

    status_code = status.HTTP_400_BAD_REQUEST


class ConflictError(BookStoreError):
    """A book with the same isbn already exists."""

    status_code = status.HTTP_409_CONFLICT


class NotFoundError(BookStoreError):
    """No book carries the requested isbn."""

    status_code = status.HTTP_404_NOT_FOUND


class StorageError(BookStoreError):
    """The collection file could not be read or parsed."""


async def book_store_error_handler(request: Request, exc: BookStoreError) -> JSONResponse:
    if exc.status_code >= 500:
        logger.error("%s %s failed: %s", request.method, request.url.path, exc.message, exc_info=exc)
    else:
        logger.info("%s %s -> %s: %s", request.method, request.url.path, exc.status_code, exc.message)
    return JSONResponse(status_code=exc.status_code, content={"message": exc.message})


async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    logger.warning("%s %s rejected: %s", request.method, request.url.path, exc.errors())
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"message": "Invalid request body"},
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Attach the JSON error handlers to ``app``."""
    app.add_exception_handler(BookStoreError, book_store_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
