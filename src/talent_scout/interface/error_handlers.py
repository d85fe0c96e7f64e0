"""Global exception handlers — translate domain errors to HTTP responses.

Each domain exception maps to an HTTP status code plus a canonical
callable-protocol status, wrapped in the standard
``{"error": {"status": "...", "message": "..."}}`` envelope.
"""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from talent_scout.domain.exceptions import (
    GenerationError,
    InvalidUsernameError,
    SchemaValidationError,
    TalentScoutError,
    UpstreamHTTPError,
)
from talent_scout.interface.schemas import ErrorDetail, ErrorResponse

logger = logging.getLogger(__name__)

_EXCEPTION_STATUS: list[tuple[type[TalentScoutError], int, str]] = [
    (InvalidUsernameError, 400, "INVALID_ARGUMENT"),
    (UpstreamHTTPError, 502, "UNAVAILABLE"),
    (SchemaValidationError, 502, "INTERNAL"),
    (GenerationError, 502, "INTERNAL"),
]

_UNEXPECTED_MESSAGE = "An unexpected error occurred. Please try again later."


def error_envelope(status: str, message: str) -> ErrorResponse:
    return ErrorResponse(error=ErrorDetail(status=status, message=message))


def describe_error(exc: Exception) -> tuple[int, ErrorResponse]:
    """Return the HTTP status code and envelope for *exc*."""
    for exc_type, code, status in _EXCEPTION_STATUS:
        if isinstance(exc, exc_type):
            return code, error_envelope(status, str(exc))
    return 500, error_envelope("INTERNAL", _UNEXPECTED_MESSAGE)


def _error_json(status_code: int, body: ErrorResponse) -> JSONResponse:
    return JSONResponse(status_code=status_code, content=body.model_dump())


def register_error_handlers(app: FastAPI) -> None:
    """Attach exception handlers to the FastAPI application."""

    # ── Domain exceptions ───────────────────────────────────────────────

    for exc_type, _code, _status in _EXCEPTION_STATUS:

        async def handler(request: Request, exc: Exception) -> JSONResponse:
            logger.warning("%s: %s", type(exc).__name__, exc)
            return _error_json(*describe_error(exc))

        app.add_exception_handler(exc_type, handler)

    # ── Pydantic / FastAPI validation errors ────────────────────────────

    @app.exception_handler(RequestValidationError)
    async def validation_handler(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        messages = []
        for err in exc.errors():
            loc = " → ".join(str(p) for p in err.get("loc", []))
            messages.append(f"{loc}: {err.get('msg', 'validation error')}")
        return _error_json(400, error_envelope("INVALID_ARGUMENT", "; ".join(messages)))

    # ── Catch-all for unexpected errors ─────────────────────────────────

    @app.exception_handler(Exception)
    async def generic_handler(request: Request, exc: Exception) -> JSONResponse:
        logger.exception("Unhandled exception")
        return _error_json(*describe_error(exc))
