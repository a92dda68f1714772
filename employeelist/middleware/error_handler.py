"""
Error handling middleware for FastAPI.
Provides centralized exception handling and error responses.

Every error response body is ``{"error": "<message>"}``. Store error
details are logged but never sent to the client.
"""
from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException
import logging

from employeelist.exceptions import AppError

logger = logging.getLogger(__name__)


def _request_context(request: Request) -> dict:
    return {"path": request.url.path, "method": request.method}


def _validation_message(exc: RequestValidationError) -> str:
    errors = exc.errors()
    if not errors:
        return "Request validation failed"

    first = errors[0]
    field = ".".join(str(part) for part in first.get("loc", ()) if part != "body")
    message = first.get("msg", "Request validation failed")
    return f"{field}: {message}" if field else message


def add_exception_handlers(app: FastAPI) -> None:
    """
    Add exception handlers to FastAPI application.

    Args:
        app: FastAPI application instance
    """

    @app.exception_handler(AppError)
    async def app_error_handler(request: Request, exc: AppError):
        """Handle custom AppError exceptions."""
        log = logger.error if exc.status_code >= 500 else logger.warning
        log(
            f"{exc.__class__.__name__}: {exc.message}",
            extra={**_request_context(request), "status_code": exc.status_code}
        )

        return JSONResponse(
            status_code=exc.status_code,
            content={"error": exc.message}
        )

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        """Handle malformed bodies and Pydantic validation errors."""
        logger.warning(
            f"Validation error: {exc.errors()}",
            extra=_request_context(request)
        )

        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"error": _validation_message(exc)}
        )

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        """Handle HTTP exceptions."""
        logger.warning(
            f"HTTP {exc.status_code}: {exc.detail}",
            extra=_request_context(request)
        )

        return JSONResponse(
            status_code=exc.status_code,
            content={"error": str(exc.detail)},
            headers=getattr(exc, "headers", None)
        )

    @app.exception_handler(Exception)
    async def general_exception_handler(request: Request, exc: Exception):
        """Handle all other unhandled exceptions."""
        logger.error(
            f"Unhandled exception: {str(exc)}",
            exc_info=True,
            extra=_request_context(request)
        )

        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"error": "An unexpected error occurred"}
        )
