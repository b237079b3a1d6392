"""Application error taxonomy and the terminal exception handlers."""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)

SERVER_ERROR_MESSAGE = "An error occurred on the server"
NOT_FOUND_MESSAGE = "Requested resource not found"
VALIDATION_FAILED_MESSAGE = "Validation failed"


class AppError(Exception):
    """Base class for errors that map to an HTTP response."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_message = SERVER_ERROR_MESSAGE

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class BadRequestError(AppError):
    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Invalid data"


class UnauthorizedError(AppError):
    status_code = status.HTTP_401_UNAUTHORIZED
    default_message = "Authorization required"


class ForbiddenError(AppError):
    status_code = status.HTTP_403_FORBIDDEN
    default_message = "Access denied"


class NotFoundError(AppError):
    status_code = status.HTTP_404_NOT_FOUND
    default_message = NOT_FOUND_MESSAGE


class ConflictError(AppError):
    status_code = status.HTTP_409_CONFLICT
    default_message = "Resource already exists"


class InternalError(AppError):
    """Unexpected failure. The message is logged, never sent to the client."""


class InvalidTokenError(Exception):
    """Token signature, format or expiry check failed."""


def _message_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"message": message})


def _format_validation_errors(exc: RequestValidationError) -> list[dict]:
    errors = []
    for error in exc.errors():
        field = ".".join(str(part) for part in error.get("loc", ()))
        errors.append({"field": field, "message": error.get("msg", "")})
    return errors


async def app_error_handler(request: Request, exc: AppError) -> JSONResponse:
    """Render an AppError as ``{message}`` with its status code."""
    if exc.status_code >= status.HTTP_500_INTERNAL_SERVER_ERROR:
        logger.error(f"{request.method} {request.url.path} failed: {exc.message}")
        return _message_response(exc.status_code, SERVER_ERROR_MESSAGE)

    logger.warning(f"{request.method} {request.url.path} -> {exc.status_code}: {exc.message}")
    return _message_response(exc.status_code, exc.message)


async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Reject invalid bodies and path parameters with a field-level list."""
    errors = _format_validation_errors(exc)
    logger.warning(f"{request.method} {request.url.path} -> 400: {errors}")
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"message": VALIDATION_FAILED_MESSAGE, "errors": errors},
    )


async def http_error_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    """Handle framework errors such as unmatched routes or wrong methods."""
    logger.warning(f"{request.method} {request.url.path} -> {exc.status_code}: {exc.detail}")
    if exc.status_code == status.HTTP_404_NOT_FOUND:
        message = NOT_FOUND_MESSAGE
    elif exc.status_code >= status.HTTP_500_INTERNAL_SERVER_ERROR:
        message = SERVER_ERROR_MESSAGE
    else:
        message = str(exc.detail)
    return JSONResponse(
        status_code=exc.status_code,
        content={"message": message},
        headers=getattr(exc, "headers", None),
    )


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    """Last resort: log with traceback and hide the details."""
    logger.exception(f"Unhandled error on {request.method} {request.url.path}", exc_info=exc)
    return _message_response(status.HTTP_500_INTERNAL_SERVER_ERROR, SERVER_ERROR_MESSAGE)


def register_exception_handlers(app: FastAPI) -> None:
    """Install the handlers every error path funnels into."""
    app.add_exception_handler(AppError, app_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)
