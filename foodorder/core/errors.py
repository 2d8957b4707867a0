"""
Food Ordering API — Error kinds and envelope rendering

Every failure a handler or service can report is an AppError subclass.
The exception handlers registered in main.py turn them into the uniform
envelope: {"success": false, "message": ..., "error": <kind>}.
"""
import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)


class AppError(Exception):
    kind = "Internal"
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class NotFound(AppError):
    kind = "NotFound"
    status_code = status.HTTP_404_NOT_FOUND


class ValidationFailed(AppError):
    kind = "ValidationFailed"
    status_code = status.HTTP_400_BAD_REQUEST


class ItemNotFound(ValidationFailed):
    """A referenced item is missing; reported as a bad request, not a 404."""
    kind = "NotFound"


class Unavailable(ValidationFailed):
    kind = "Unavailable"


class CrossRestaurantOrder(ValidationFailed):
    kind = "CrossRestaurantOrder"


class BelowMinimum(ValidationFailed):
    kind = "BelowMinimum"


class Unauthorized(AppError):
    kind = "Unauthorized"
    status_code = status.HTTP_401_UNAUTHORIZED


class Forbidden(AppError):
    kind = "Forbidden"
    status_code = status.HTTP_403_FORBIDDEN


class Conflict(AppError):
    kind = "Conflict"
    status_code = status.HTTP_409_CONFLICT


def error_body(message: str, kind: str, **extra) -> dict:
    body = {"success": False, "message": message, "error": kind}
    body.update(extra)
    return body


async def app_error_handler(request: Request, exc: AppError) -> JSONResponse:
    headers = {"WWW-Authenticate": "Bearer"} if isinstance(exc, Unauthorized) else None
    return JSONResponse(
        status_code=exc.status_code,
        content=error_body(exc.message, exc.kind),
        headers=headers,
    )


async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    errors = [
        {"field": ".".join(str(p) for p in err["loc"][1:]), "message": err["msg"]}
        for err in exc.errors()
    ]
    message = errors[0]["message"] if errors else "Invalid request"
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=error_body(message, ValidationFailed.kind, errors=errors),
    )


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=error_body("Internal server error", str(exc)),
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(AppError, app_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)
