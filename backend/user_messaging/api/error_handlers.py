"""Error Handlers — global exception handlers for the messaging API.

Invariants:
    - MessagingError → exc.http_status with {"error": <public message>}
    - RequestValidationError → 400 with field-level details; request bodies are
      permissive (schemas/body.py), so in practice only unparseable JSON lands here
    - Exception (catch-all) → 500 {"error": "Internal server error"}, never leaks internals

Design Decisions:
    - Three-layer handler: domain (MessagingError), malformed JSON, catch-all (Exception)
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError

from user_messaging.core.errors import INTERNAL_SERVER_ERROR, MessagingError

logger = logging.getLogger(__name__)

INVALID_REQUEST_BODY = "Invalid request body"


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_messaging_error_handler(app)
    _register_validation_error_handler(app)
    _register_generic_error_handler(app)


def _register_messaging_error_handler(app: FastAPI) -> None:

    @app.exception_handler(MessagingError)
    async def messaging_error_handler(request: Request, exc: MessagingError):
        """Handle store and domain errors."""
        logger.error(
            f"MessagingError: {exc.message}",
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
        """Handle bodies that are not parseable JSON."""
        logger.warning(
            f"Validation error on {request.url.path}: {exc.errors()}",
        )
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=_build_validation_error_response(exc),
        )


def _register_generic_error_handler(app: FastAPI) -> None:

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all — never leaks internal details."""
        logger.error(
            f"Unhandled exception on {request.url.path}: {exc}",
            exc_info=True,
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"error": INTERNAL_SERVER_ERROR},
        )


def _build_validation_error_response(exc: RequestValidationError) -> dict:
    return {
        "error": INVALID_REQUEST_BODY,
        "details": [
            {
                "field": ".".join(str(loc) for loc in e["loc"]),
                "message": e["msg"],
                "type": e["type"],
            }
            for e in exc.errors()
        ],
    }
