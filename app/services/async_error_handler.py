"""
Error types and handlers for profile and plan operations.

Services raise ``NotFoundError`` when a profile lookup fails and
``PersistenceError`` for any other database failure. The handlers registered
on the FastAPI app translate them into HTTP responses.
"""

import logging
from typing import Any, Optional

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from sqlalchemy.exc import (
    DataError,
    IntegrityError,
    OperationalError,
    SQLAlchemyError,
    StatementError,
)

logger = logging.getLogger(__name__)


class AsyncDatabaseError(Exception):
    """Base exception for async database operations."""

    def __init__(self, message: str, original_error: Optional[Exception] = None):
        self.message = message
        self.original_error = original_error
        super().__init__(self.message)


class NotFoundError(AsyncDatabaseError):
    """Raised when an entity lookup by key finds nothing."""

    def __init__(self, entity: str, key: Any, original_error: Optional[Exception] = None):
        self.entity = entity
        self.key = key
        super().__init__(f"{entity} not found: {key}", original_error)


class PersistenceError(AsyncDatabaseError):
    """Opaque failure while reading or writing the database."""
    pass


class AsyncErrorHandler:
    """
    Classifies SQLAlchemy errors into persistence errors with a readable message.
    """

    # Checked in order, the first matching type wins
    ERROR_MESSAGES = (
        (IntegrityError, "Data integrity constraint violation"),
        (OperationalError, "Database operation failed"),
        (DataError, "Invalid data format"),
        (StatementError, "Invalid database query"),
        (SQLAlchemyError, "Database error occurred"),
    )

    @classmethod
    def classify_error(cls, error: Exception) -> str:
        for exc_type, message in cls.ERROR_MESSAGES:
            if isinstance(error, exc_type):
                return message
        return "An unexpected database error occurred"

    @classmethod
    def to_persistence_error(cls, error: Exception, operation_name: str = "database operation") -> PersistenceError:
        """
        Wrap a database error into a PersistenceError and log it.

        Args:
            error: The exception that occurred
            operation_name: Name of the operation for logging

        Returns:
            PersistenceError carrying the original error
        """
        message = cls.classify_error(error)
        logger.error(f"Error in {operation_name}: {error}")
        return PersistenceError(message, original_error=error)


async def not_found_handler(request: Request, exc: NotFoundError) -> JSONResponse:
    logger.info(f"{request.method} {request.url.path}: {exc.message}")
    return JSONResponse(
        status_code=status.HTTP_404_NOT_FOUND,
        content={"detail": exc.message},
    )


async def persistence_error_handler(request: Request, exc: PersistenceError) -> JSONResponse:
    logger.error(f"{request.method} {request.url.path} failed: {exc.message}")
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": exc.message},
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Attach the domain error handlers to the application."""
    app.add_exception_handler(NotFoundError, not_found_handler)
    app.add_exception_handler(PersistenceError, persistence_error_handler)
