# /app/exceptions.py

"""
Domain error taxonomy and the FastAPI exception handlers that turn it into
JSON responses.

Services raise these errors; routers let them propagate. Every error body has
the same shape as FastAPI's own `HTTPException` responses: `{"detail": msg}`.
"""

import logging
from typing import Optional

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic import ValidationError as PydanticValidationError
from sqlalchemy import exc as sa_exc

logger = logging.getLogger(__name__)


class AppError(Exception):
    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(AppError):
    """Missing or malformed fields, invalid scores, duplicate names."""
    status_code = status.HTTP_400_BAD_REQUEST


class NotFoundError(AppError):
    """The addressed entity does not exist."""
    status_code = status.HTTP_404_NOT_FOUND

    def __init__(self, resource: str, message: Optional[str] = None):
        super().__init__(message or f"{resource} not found")
        self.resource = resource


class MissingReferenceError(NotFoundError):
    """
    An entity referenced from the request body does not exist. The route
    itself resolved, so the client gets a 400 rather than a 404.
    """
    status_code = status.HTTP_400_BAD_REQUEST


class StoreUnavailableError(AppError):
    """The persistence layer is unreachable or timed out."""
    status_code = status.HTTP_503_SERVICE_UNAVAILABLE


# SQLAlchemy errors that mean "the database could not be reached", as
# opposed to a bad query or a constraint violation.
_UNAVAILABLE_ERRORS = (
    sa_exc.OperationalError,
    sa_exc.InterfaceError,
    sa_exc.DisconnectionError,
    sa_exc.TimeoutError,
)


def classify_store_error(exc: Exception) -> AppError:
    """Maps a raw persistence exception onto the domain taxonomy."""
    if isinstance(exc, AppError):
        return exc
    if isinstance(exc, _UNAVAILABLE_ERRORS):
        return StoreUnavailableError("Database connection unavailable")
    if isinstance(exc, sa_exc.IntegrityError):
        return ValidationError("The record conflicts with an existing one")
    return AppError(f"Unexpected error: {exc}")


def _error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"detail": message})


def _describe_validation_errors(errors) -> str:
    parts = []
    for err in errors:
        location = ".".join(str(p) for p in err.get("loc", ()) if p not in ("body", "query", "path"))
        parts.append(f"{location}: {err.get('msg')}" if location else err.get("msg", "invalid value"))
    return "; ".join(parts) or "Invalid request"


def add_error_handlers(app: FastAPI):
    @app.exception_handler(AppError)
    async def app_error_handler(request: Request, exc: AppError):
        if exc.status_code >= 500:
            logger.error("%s %s failed: %s", request.method, request.url.path, exc.message)
        return _error_response(exc.status_code, exc.message)

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError):
        return _error_response(status.HTTP_400_BAD_REQUEST, _describe_validation_errors(exc.errors()))

    @app.exception_handler(PydanticValidationError)
    async def payload_validation_handler(request: Request, exc: PydanticValidationError):
        # Raised when routers build payload models from multipart form fields.
        return _error_response(status.HTTP_400_BAD_REQUEST, _describe_validation_errors(exc.errors()))

    @app.exception_handler(sa_exc.SQLAlchemyError)
    async def store_error_handler(request: Request, exc: sa_exc.SQLAlchemyError):
        error = classify_store_error(exc)
        logger.error("%s %s store error: %s", request.method, request.url.path, exc)
        return _error_response(error.status_code, error.message)

    @app.exception_handler(Exception)
    async def unhandled_exception_handler(request: Request, exc: Exception):
        logger.exception("Unhandled error on %s %s", request.method, request.url.path)
        return _error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, "Something went wrong!")
