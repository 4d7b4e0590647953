"""
Global error handling for the FastAPI application.

Catches SoundSketchError subclasses, request validation errors, and
unhandled exceptions, converting them into a consistent JSON envelope::

    {"error": "<short message>", "code": "<CODE>", "timestamp": "<iso8601>"}
"""

import logging
from datetime import UTC, datetime

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from src.core.exceptions import SoundSketchError

logger = logging.getLogger(__name__)


def _envelope(status_code: int, message: str, code: str, timestamp: str | None = None):
    return JSONResponse(
        status_code=status_code,
        content={
            "error": message,
            "code": code,
            "timestamp": timestamp or datetime.now(UTC).isoformat(),
        },
    )


def register_error_handlers(app: FastAPI) -> None:
    """Attach exception handlers to the FastAPI application.

    Registers three handlers in priority order:
    1. ``SoundSketchError``: maps domain errors to structured JSON responses.
    2. ``RequestValidationError``: missing/malformed body fields (400).
    3. ``Exception``: catch-all for unexpected server errors (500).

    Args:
        app: The FastAPI application instance to register handlers on.
    """

    @app.exception_handler(SoundSketchError)
    async def soundsketch_error_handler(_request: Request, exc: SoundSketchError) -> JSONResponse:
        """Convert domain-specific errors into a JSON error envelope."""
        return _envelope(exc.status_code, exc.detail, exc.code, exc.timestamp)

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        _request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        """Missing or mistyped request fields are client errors."""
        fields = ", ".join(
            ".".join(str(part) for part in err.get("loc", ()) if part != "body")
            for err in exc.errors()
        )
        return _envelope(400, f"Invalid request: {fields or 'malformed body'}", "VALIDATION_ERROR")

    @app.exception_handler(Exception)
    async def generic_error_handler(_request: Request, exc: Exception) -> JSONResponse:
        """Catch-all handler; keeps stack traces from leaking to clients."""
        logger.error("Unhandled error: %r", exc)
        return _envelope(500, "An unexpected error occurred", "INTERNAL_ERROR")
