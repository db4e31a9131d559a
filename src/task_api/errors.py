"""Application-level exception handling helpers."""

from __future__ import annotations

import logging
from http import HTTPStatus
from typing import Any, Mapping

from fastapi import FastAPI, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic import ValidationError as PydanticValidationError
from pymongo.errors import DuplicateKeyError
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.requests import Request

from .core.middleware import REQUEST_ID_HEADER
from .schemas.system import ErrorResponse

logger = logging.getLogger(__name__)

VALIDATION_ERROR_MESSAGE = "Validation error"
INVALID_IDENTIFIER_MESSAGE = "Invalid identifier"


class ApplicationError(Exception):
    """Base class for domain-specific errors."""

    def __init__(
        self,
        message: str,
        *,
        status_code: int = status.HTTP_400_BAD_REQUEST,
        headers: Mapping[str, str] | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.headers = dict(headers) if headers else None


class BadRequestError(ApplicationError):
    """Missing or invalid input."""

    def __init__(self, message: str = VALIDATION_ERROR_MESSAGE) -> None:
        super().__init__(message, status_code=status.HTTP_400_BAD_REQUEST)


class UnauthenticatedError(ApplicationError):
    """Missing or invalid credentials; carries the authentication challenge."""

    def __init__(
        self,
        message: str = "Authentication required",
        *,
        headers: Mapping[str, str] | None = None,
    ) -> None:
        super().__init__(message, status_code=status.HTTP_401_UNAUTHORIZED, headers=headers)


class ForbiddenError(ApplicationError):
    """The acting identity lacks the role or ownership required."""

    def __init__(self, message: str = "Forbidden") -> None:
        super().__init__(message, status_code=status.HTTP_403_FORBIDDEN)


class NotFoundError(ApplicationError):
    """No matching record exists."""

    def __init__(self, message: str = "Not Found") -> None:
        super().__init__(message, status_code=status.HTTP_404_NOT_FOUND)


class ConflictError(ApplicationError):
    """A unique field would be duplicated."""

    def __init__(self, message: str = "Conflict") -> None:
        super().__init__(message, status_code=status.HTTP_409_CONFLICT)


def _error_response(
    request: Request,
    *,
    status_code: int,
    message: str,
    headers: Mapping[str, str] | None = None,
) -> JSONResponse:
    payload = ErrorResponse(message=message)
    response = JSONResponse(status_code=status_code, content=payload.model_dump())
    if headers:
        response.headers.update(headers)
    request_id = getattr(request.state, "request_id", None)
    if request_id:
        response.headers.setdefault(REQUEST_ID_HEADER, request_id)
    return response


def _http_exception_message(status_code: int, detail: Any) -> str:
    if isinstance(detail, str) and detail:
        return detail
    try:
        return HTTPStatus(status_code).phrase
    except ValueError:
        return "Error"


def _should_log_errors(request: Request) -> bool:
    settings = getattr(request.app.state, "settings", None)
    return bool(getattr(settings, "log_errors", True))


def register_exception_handlers(app: FastAPI) -> None:
    """Register exception handlers with the provided FastAPI app."""

    @app.exception_handler(ApplicationError)
    async def _handle_application_error(
        request: Request,
        exc: ApplicationError,
    ) -> JSONResponse:
        if exc.status_code >= status.HTTP_500_INTERNAL_SERVER_ERROR and _should_log_errors(request):
            logger.error("Application error encountered", extra={"status_code": exc.status_code})
        return _error_response(
            request,
            status_code=exc.status_code,
            message=exc.message,
            headers=exc.headers,
        )

    @app.exception_handler(RequestValidationError)
    async def _handle_request_validation_error(
        request: Request,
        exc: RequestValidationError,
    ) -> JSONResponse:
        logger.debug("Request validation failed", extra={"errors": exc.errors()})
        return _error_response(
            request,
            status_code=status.HTTP_400_BAD_REQUEST,
            message=VALIDATION_ERROR_MESSAGE,
        )

    @app.exception_handler(PydanticValidationError)
    async def _handle_model_validation_error(
        request: Request,
        exc: PydanticValidationError,
    ) -> JSONResponse:
        logger.debug("Document validation failed", extra={"errors": exc.errors()})
        return _error_response(
            request,
            status_code=status.HTTP_400_BAD_REQUEST,
            message=VALIDATION_ERROR_MESSAGE,
        )

    @app.exception_handler(DuplicateKeyError)
    async def _handle_duplicate_key_error(
        request: Request,
        exc: DuplicateKeyError,
    ) -> JSONResponse:
        logger.warning("Duplicate key rejected by the document store")
        return _error_response(
            request,
            status_code=status.HTTP_409_CONFLICT,
            message="Duplicate key",
        )

    @app.exception_handler(StarletteHTTPException)
    async def _handle_http_exception(
        request: Request,
        exc: StarletteHTTPException,
    ) -> JSONResponse:
        return _error_response(
            request,
            status_code=exc.status_code,
            message=_http_exception_message(exc.status_code, exc.detail),
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(Exception)
    async def _handle_unhandled_exception(
        request: Request,
        exc: Exception,
    ) -> JSONResponse:
        if _should_log_errors(request):
            logger.exception("Unhandled application error.", exc_info=exc)
        return _error_response(
            request,
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            message="Internal Server Error",
        )


__all__ = [
    "INVALID_IDENTIFIER_MESSAGE",
    "VALIDATION_ERROR_MESSAGE",
    "ApplicationError",
    "BadRequestError",
    "ConflictError",
    "ForbiddenError",
    "NotFoundError",
    "UnauthenticatedError",
    "register_exception_handlers",
]
