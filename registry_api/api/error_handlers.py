"""Error Handlers — global exception handlers for the registry API.

Invariants:
    - Every failure body is exactly {"error": <message>}
    - RegistryError → its own http_status (400 input, 500 sheet missing, 503 database)
    - RequestValidationError (malformed JSON, wrong field types) → 400
    - HTTPException raised by routing or body decoding (404, 405, 400) → same
      status, body rewritten into the envelope
    - Exception (catch-all) → 500 with the exception message, traceback logged

Design Decisions:
    - Four-layer handler: domain (RegistryError), HTTP (Starlette), validation
      (Pydantic), catch-all (Exception)
    - Catch-all surfaces str(exc): clients of the registry already display the
      message of any failure (ADR: envelope compatibility with existing website)
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException

from registry_api.core.errors import RegistryError

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_registry_error_handler(app)
    _register_http_error_handler(app)
    _register_validation_error_handler(app)
    _register_generic_error_handler(app)


def _register_registry_error_handler(app: FastAPI) -> None:
    """Register registry domain/infrastructure error handler."""

    @app.exception_handler(RegistryError)
    async def registry_error_handler(request: Request, exc: RegistryError):
        """Handle all registry domain/infrastructure errors."""
        log = logger.warning if exc.http_status < 500 else logger.error
        log(
            f"RegistryError: {exc.message}",
            extra={
                "error_code": exc.code,
                "error_category": exc.category.value,
                "path": request.url.path,
            },
        )
        return JSONResponse(
            status_code=exc.http_status, content=exc.to_response(),
        )


def _register_http_error_handler(app: FastAPI) -> None:
    """Register handler for framework HTTP errors (unknown path, bad method, undecodable body)."""

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(request: Request, exc: StarletteHTTPException):
        logger.warning(
            f"HTTP {exc.status_code} on {request.url.path}: {exc.detail}",
            extra={"error_code": "HTTP_ERROR", "path": request.url.path},
        )
        return JSONResponse(
            status_code=exc.status_code,
            content={"error": str(exc.detail)},
            headers=getattr(exc, "headers", None),
        )


def _register_validation_error_handler(app: FastAPI) -> None:
    """Register Pydantic validation error handler."""

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError,
    ):
        """Handle malformed request bodies."""
        logger.warning(
            f"Validation error on {request.url.path}: {exc.errors()}",
            extra={"error_code": "VALIDATION_ERROR", "path": request.url.path},
        )
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"error": build_validation_message(exc.errors())},
        )


def _register_generic_error_handler(app: FastAPI) -> None:
    """Register catch-all error handler."""

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all for unexpected failures during sheet access."""
        logger.error(
            f"Unhandled exception on {request.url.path}: {exc}",
            exc_info=True,
            extra={"error_code": "INTERNAL_ERROR", "path": request.url.path},
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"error": str(exc) or "An unexpected error occurred"},
        )


def build_validation_message(errors: list[dict]) -> str:
    """Flatten Pydantic error details into one readable message."""
    parts = []
    for e in errors:
        loc = [str(part) for part in e.get("loc", ()) if part != "body"]
        msg = e.get("msg", "Invalid value")
        parts.append(f"{'.'.join(loc)}: {msg}" if loc else msg)
    return "; ".join(parts) or "Invalid request body"
