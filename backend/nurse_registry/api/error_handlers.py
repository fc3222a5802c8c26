"""Error Handlers — global exception handlers for the nurse registry API.

Invariants:
    - NurseRegistryError → structured JSON with error code, message, severity
    - RequestValidationError → 400 with field-level details
    - Exception (catch-all) → 500, never leaks internal details

Design Decisions:
    - Three-layer handler: domain (NurseRegistryError), validation (Pydantic), catch-all
    - Missing/empty fields get the "All fields are required" message the UI shows verbatim
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError

from nurse_registry.core.errors import NurseRegistryError, ErrorSeverity

logger = logging.getLogger(__name__)

MISSING_FIELDS_MESSAGE = "All fields are required"
INVALID_DATA_MESSAGE = "Invalid request data"

_MISSING_ERROR_TYPES = {"missing", "string_too_short"}


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_domain_error_handler(app)
    _register_validation_error_handler(app)
    _register_generic_error_handler(app)


def _register_domain_error_handler(app: FastAPI) -> None:
    """Register nurse registry domain/infrastructure error handler."""

    @app.exception_handler(NurseRegistryError)
    async def domain_error_handler(request: Request, exc: NurseRegistryError):
        """Handle all nurse registry errors."""
        log = logger.error if exc.http_status >= 500 else logger.warning
        log(
            f"NurseRegistryError: {exc.message}",
            extra={"error_code": exc.code, "path": request.url.path},
        )
        return JSONResponse(
            status_code=exc.http_status, content=exc.to_response(),
        )


def _register_validation_error_handler(app: FastAPI) -> None:
    """Register Pydantic validation error handler."""

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError,
    ):
        """Handle Pydantic validation errors."""
        logger.warning(
            f"Validation error on {request.url.path}: {exc.errors()}",
        )
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=build_validation_error_response(exc.errors()),
        )


def _register_generic_error_handler(app: FastAPI) -> None:
    """Register catch-all error handler."""

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all — never leaks internal details."""
        logger.error(
            f"Unhandled exception on {request.url.path}: {exc}",
            exc_info=True,
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={
                "error": {
                    "code": "INTERNAL_ERROR",
                    "message": "An unexpected error occurred",
                    "category": "internal",
                    "severity": ErrorSeverity.CRITICAL.value,
                },
            },
        )


def _is_missing(error: dict) -> bool:
    if error["type"] in _MISSING_ERROR_TYPES:
        return True
    value = error.get("input")
    return value is None or (isinstance(value, str) and not value.strip())


def build_validation_error_response(errors: list[dict]) -> dict:
    """Build structured validation error response."""
    missing = any(_is_missing(e) for e in errors)
    return {
        "error": {
            "code": "VALIDATION_ERROR",
            "message": MISSING_FIELDS_MESSAGE if missing else INVALID_DATA_MESSAGE,
            "category": "validation",
            "severity": ErrorSeverity.ERROR.value,
            "details": [
                {
                    "field": ".".join(str(loc) for loc in e["loc"]),
                    "message": e["msg"],
                    "type": e["type"],
                }
                for e in errors
            ],
        },
    }
