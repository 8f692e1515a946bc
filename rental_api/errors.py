# rental_api/errors.py
from typing import Any, Dict, Optional
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from rental_api.config import get_settings
from rental_api.logger import get_logger

logger = get_logger("errors")


class AppError(Exception):
    """Base class for failures that map onto an HTTP status code."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str, details: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.details = details


class NotFound(AppError):
    status_code = status.HTTP_404_NOT_FOUND


class ValidationError(AppError):
    status_code = status.HTTP_400_BAD_REQUEST


class FileTooLarge(ValidationError):
    pass


class NoFileProvided(AppError):
    status_code = status.HTTP_400_BAD_REQUEST


class ServerError(AppError):
    """An unexpected failure already caught and described by a route."""


def create_error_response(message: str, details: Optional[str] = None) -> Dict[str, Any]:
    """Build the JSON error body; the underlying detail is hidden in production."""
    response: Dict[str, Any] = {"message": message}
    if details and not get_settings().is_production:
        response["error"] = details
    return response


def error_response(status_code: int, message: str, details: Optional[str] = None) -> JSONResponse:
    return JSONResponse(status_code=status_code, content=create_error_response(message, details))


def describe_validation_errors(errors) -> str:
    parts = []
    for error in errors:
        field = ".".join(str(loc) for loc in error["loc"] if loc != "body")
        parts.append(f"{field}: {error['msg']}" if field else error["msg"])
    return "; ".join(parts)


async def app_error_handler(request: Request, exc: AppError):
    return error_response(exc.status_code, exc.message, exc.details)


async def request_validation_handler(request: Request, exc: RequestValidationError):
    return error_response(
        status.HTTP_400_BAD_REQUEST,
        "Invalid request",
        describe_validation_errors(exc.errors()),
    )


async def unhandled_error_handler(request: Request, exc: Exception):
    logger.exception(f"Unhandled error on {request.method} {request.url.path}")
    return error_response(
        status.HTTP_500_INTERNAL_SERVER_ERROR,
        "Something went wrong!",
        str(exc),
    )


def register_exception_handlers(app: FastAPI):
    app.add_exception_handler(AppError, app_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)
