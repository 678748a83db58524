"""Error Handlers: global exception handlers for the user API.

Invariants:
    - UserApiError -> failure envelope {success: false, error, message} with its http_status
    - RequestValidationError (malformed JSON) -> 400 InvalidField envelope
    - Unmatched path or method -> 404 {error: "Route not found"}
    - Exception (catch-all) -> 500 {error: "Internal server error", message}

Design Decisions:
    - Four-layer handler: domain, validation, routing, catch-all
    - Extracted from main.py (ADR: import fan-out stays small)
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from user_api.core.errors import InvalidFieldError, UserApiError

logger = logging.getLogger(__name__)

_ROUTING_MISSES = frozenset({
    status.HTTP_404_NOT_FOUND, status.HTTP_405_METHOD_NOT_ALLOWED,
})


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_user_api_error_handler(app)
    _register_validation_error_handler(app)
    _register_http_error_handler(app)
    _register_generic_error_handler(app)


def _register_user_api_error_handler(app: FastAPI) -> None:

    @app.exception_handler(UserApiError)
    async def user_api_error_handler(request: Request, exc: UserApiError):
        """Handle all user API domain/infrastructure errors."""
        level = logging.WARNING if exc.is_client_error else logging.ERROR
        logger.log(
            level,
            f"UserApiError: {exc.message}",
            extra={"error_code": exc.code, "path": request.url.path},
        )
        return JSONResponse(
            status_code=exc.http_status, content=exc.to_response(),
        )


def _register_validation_error_handler(app: FastAPI) -> None:

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError,
    ):
        """Bodies that fail to parse never reach the validator."""
        logger.warning(
            f"Validation error on {request.url.path}: {exc.errors()}",
        )
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=InvalidFieldError(_describe_validation_error(exc)).to_response(),
        )


def _register_http_error_handler(app: FastAPI) -> None:

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(
        request: Request, exc: StarletteHTTPException,
    ):
        if exc.status_code in _ROUTING_MISSES:
            return JSONResponse(
                status_code=status.HTTP_404_NOT_FOUND,
                content={"error": "Route not found"},
            )
        return JSONResponse(
            status_code=exc.status_code,
            content={"error": exc.detail},
            headers=getattr(exc, "headers", None),
        )


def _register_generic_error_handler(app: FastAPI) -> None:

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        logger.error(
            f"Unhandled exception on {request.url.path}: {exc}",
            exc_info=True,
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={
                "error": "Internal server error",
                "message": str(exc),
            },
        )


def _describe_validation_error(exc: RequestValidationError) -> str:
    if any(e.get("type") == "json_invalid" for e in exc.errors()):
        return "Request body is not valid JSON"
    return "Invalid request data"
