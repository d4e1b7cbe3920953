"""
===============================================================================
CRC CARD — api/exception_handlers.py (Centralized Exception Handling)
===============================================================================

Responsibilities:
  - Translate every exception into the {status_code, message, data} envelope.
  - Log unexpected failures with the failing handler, file and line.
  - Never leak internals: unexpected errors answer "Something went wrong".

Applied patterns:
  - Exception Mapping (Presentation Layer).
  - Fail-safe: any untyped exception -> status_code 500 (with logging).

Collaborators:
  - crosscutting.envelope: EnvelopeException, envelope_response, handlers
  - crosscutting.exceptions: WorkdeskError and subclasses
===============================================================================
"""

from __future__ import annotations

import traceback
from datetime import datetime, timezone
from typing import Any, Dict

from fastapi import Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from ..crosscutting.envelope import (
    GENERIC_ERROR_MESSAGE,
    EnvelopeException,
    envelope_exception_handler,
    envelope_response,
    validation_exception_handler,
)
from ..crosscutting.exceptions import (
    DatabaseError,
    InvalidInputError,
    MailDeliveryError,
    WorkdeskError,
)
from ..crosscutting.logger import logger


def _request_id_from(request: Request) -> str | None:
    return getattr(getattr(request, "state", None), "request_id", None)


def _handler_name(request: Request) -> str:
    endpoint = request.scope.get("endpoint")
    if endpoint is None:
        return f"{request.method} {request.url.path}"
    return getattr(endpoint, "__qualname__", repr(endpoint))


def describe_failure(request: Request, exc: BaseException) -> Dict[str, Any]:
    """
    Log payload for an unexpected failure.

    The location is the innermost traceback frame, i.e. where the error was
    raised rather than where it was caught.
    """
    frames = traceback.extract_tb(exc.__traceback__)
    last = frames[-1] if frames else None
    return {
        "method": _handler_name(request),
        "error": {
            "file": last.filename if last else None,
            "line": last.lineno if last else None,
            "message": str(exc),
        },
        "created_at": datetime.now(timezone.utc).isoformat(),
        "request_id": _request_id_from(request),
    }


async def http_exception_handler(
    request: Request, exc: StarletteHTTPException
) -> JSONResponse:
    # R: routing-level errors (404/405) share the envelope shape.
    return envelope_response(exc.status_code, str(exc.detail))


async def invalid_input_handler(
    request: Request, exc: InvalidInputError
) -> JSONResponse:
    return envelope_response(400, exc.message)


async def workdesk_error_handler(request: Request, exc: WorkdeskError) -> JSONResponse:
    logger.error(
        "Service error",
        extra={
            "code": exc.error_code,
            "error_id": exc.error_id,
            **describe_failure(request, exc),
        },
    )
    return envelope_response(500, GENERIC_ERROR_MESSAGE)


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """
    Fallback for untyped exceptions.

    - Full log (stacktrace + location).
    - Generic response body.
    """
    logger.error(
        "Unhandled exception",
        exc_info=True,
        extra=describe_failure(request, exc),
    )
    return envelope_response(500, GENERIC_ERROR_MESSAGE)


def register_exception_handlers(app) -> None:
    """
    Register handlers on the FastAPI app.

    Starlette resolves handlers along the exception MRO, so the specific
    classes win over WorkdeskError / HTTPException / Exception.
    """
    app.add_exception_handler(EnvelopeException, envelope_exception_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(InvalidInputError, invalid_input_handler)
    app.add_exception_handler(DatabaseError, workdesk_error_handler)
    app.add_exception_handler(MailDeliveryError, workdesk_error_handler)
    app.add_exception_handler(WorkdeskError, workdesk_error_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)


__all__ = ["register_exception_handlers", "describe_failure"]
