"""
Exception handlers.

Maps module exceptions to JSON error responses. Clients only ever get the
short user-facing message; internal detail stays in the server log.
"""

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from shared.exceptions import ApptrackError
from ..models.errors import ErrorResponse


logger = logging.getLogger(__name__)


async def handle_apptrack_error(request: Request, exc: ApptrackError) -> JSONResponse:
    """Render any ApptrackError with the status its class declares."""
    if exc.status_code >= 500:
        logger.error(
            "%s %s failed: %s",
            request.method,
            request.url.path,
            exc.message,
            exc_info=exc.__cause__ or exc,
        )

    headers = {"WWW-Authenticate": "Bearer"} if exc.status_code == 401 else None
    return JSONResponse(
        status_code=exc.status_code,
        content=ErrorResponse(**exc.to_dict()).model_dump(),
        headers=headers,
    )


async def handle_request_validation_error(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Malformed or non-JSON bodies are plain 400s."""
    logger.debug("Rejected request body for %s: %s", request.url.path, exc.errors())
    return JSONResponse(
        status_code=400,
        content=ErrorResponse(error="INVALID_REQUEST", message="Invalid request body.").model_dump(),
    )


HTTP_ERROR_CODES = {
    404: "NOT_FOUND",
    405: "METHOD_NOT_ALLOWED",
}


async def handle_http_exception(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    """Routing errors (unknown path, wrong method) in the API error shape."""
    message = exc.detail if isinstance(exc.detail, str) else "Request failed."
    return JSONResponse(
        status_code=exc.status_code,
        content=ErrorResponse(
            error=HTTP_ERROR_CODES.get(exc.status_code, "HTTP_ERROR"),
            message=message,
        ).model_dump(),
        headers=getattr(exc, "headers", None),
    )


async def handle_unexpected_error(request: Request, exc: Exception) -> JSONResponse:
    """Last resort: log everything, reveal nothing."""
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return JSONResponse(
        status_code=500,
        content=ErrorResponse(error="INTERNAL_ERROR", message="Internal server error.").model_dump(),
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Attach the API's exception handlers to ``app``."""
    app.add_exception_handler(ApptrackError, handle_apptrack_error)
    app.add_exception_handler(RequestValidationError, handle_request_validation_error)
    app.add_exception_handler(StarletteHTTPException, handle_http_exception)
    app.add_exception_handler(Exception, handle_unexpected_error)
