"""
Exception handlers translating errors into the response envelope.

Domain exceptions carry their own HTTP status; request validation failures
become 400 with per-field errors; anything else is a logged 500 whose
exception text and stack trace are only exposed in development.

Dependencies: fastapi, qaboard.core.exceptions, qaboard.configs
System role: Central error translation for the HTTP API
"""

import logging
import traceback

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from qaboard.configs import get_settings
from qaboard.core.constants import Messages
from qaboard.core.exceptions import QABoardException, ValidationError
from qaboard.models.common import ErrorResponse, FieldError

logger = logging.getLogger(__name__)

# Request sections that are not part of a client-facing field name
_LOCATION_PREFIXES = {"body", "query", "path", "header", "cookie"}


def error_response(status_code: int, body: ErrorResponse) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content=body.model_dump(mode="json", by_alias=True, exclude_none=True),
    )


def field_errors(exc: RequestValidationError) -> list[FieldError]:
    """Flatten pydantic errors into ``{field, message, type}`` entries."""
    errors = []
    for error in exc.errors():
        loc = [str(part) for part in error.get("loc", ()) if part not in _LOCATION_PREFIXES]
        errors.append(
            FieldError(
                field=".".join(loc) or "request",
                message=error.get("msg", "Invalid value"),
                type=error.get("type", "value_error"),
            )
        )
    return errors


async def qaboard_exception_handler(request: Request, exc: QABoardException) -> JSONResponse:
    logger.warning(
        exc.message,
        extra={
            "path": request.url.path,
            "status_code": exc.status_code,
            "error_type": type(exc).__name__,
            "details": exc.details,
        },
    )
    errors = None
    if isinstance(exc, ValidationError) and "field" in exc.details:
        errors = [FieldError(field=exc.details["field"], message=exc.message, type="value_error")]
    return error_response(
        exc.status_code,
        ErrorResponse(message=exc.message, errors=errors, data=exc.data),
    )


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    errors = field_errors(exc)
    logger.warning(
        "Request validation failed",
        extra={"path": request.url.path, "fields": [e.field for e in errors]},
    )
    return error_response(
        status.HTTP_400_BAD_REQUEST,
        ErrorResponse(message=Messages.VALIDATION_ERROR, errors=errors),
    )


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    if exc.status_code == status.HTTP_404_NOT_FOUND:
        message = f"Route not found - {request.url.path}"
    else:
        message = str(exc.detail)
    return error_response(exc.status_code, ErrorResponse(message=message))


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception(
        "Unhandled error",
        extra={"path": request.url.path, "error_type": type(exc).__name__},
    )
    body = ErrorResponse(message=Messages.SERVER_ERROR)
    if get_settings().is_development:
        body.error = str(exc)
        body.stack = "".join(traceback.format_exception(type(exc), exc, exc.__traceback__))
    return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, body)


def register_exception_handlers(app: FastAPI) -> None:
    """Attach all exception handlers to the application."""
    app.add_exception_handler(QABoardException, qaboard_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
