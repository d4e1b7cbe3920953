# workdesk/crosscutting/envelope.py
"""
===============================================================================
MODULE: Response envelope ({status_code, message, data})
===============================================================================

Goal
----
Every endpoint answers with the same JSON shape so that mobile and web clients
branch on a single field:

    {"status_code": 200, "message": "...", "data": ...}

The transport status is always HTTP 200; the outcome lives in status_code.

-------------------------------------------------------------------------------
CRC (Component Card)
-------------------------------------------------------------------------------
Component:
  Envelope + EnvelopeException + handlers

Responsibilities:
  - Build envelope payloads (envelope_response)
  - Provide factories for frequent errors (bad_request, unauthorized, ...)
  - Turn request-validation failures into a 400 envelope carrying the first
    error's message

Collaborators:
  - interfaces/api/http/routers (success envelopes)
  - interfaces/api/http/error_mapping.py (use-case errors)
  - api/exception_handlers.py (registration)
===============================================================================
"""

from __future__ import annotations

from typing import Any, Sequence

from fastapi import HTTPException, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic import BaseModel

GENERIC_ERROR_MESSAGE = "Something went wrong"


class Envelope(BaseModel):
    """Uniform response body."""

    status_code: int
    message: str
    data: Any = None


def envelope_response(
    status_code: int, message: str, data: Any = None
) -> JSONResponse:
    """Serialize an envelope on an HTTP 200 transport status."""
    body = Envelope(status_code=status_code, message=message, data=data)
    return JSONResponse(status_code=200, content=jsonable_encoder(body))


class EnvelopeException(HTTPException):
    """
    ----------------------------------------------------------------------------
    CRC (Class Card)
    ----------------------------------------------------------------------------
    Class:
      EnvelopeException

    Responsibilities:
      - Carry the envelope status_code/message/data out of a router
      - Let handlers stop early without building responses by hand

    Collaborators:
      - envelope_exception_handler()
    ----------------------------------------------------------------------------
    """

    def __init__(self, status_code: int, message: str, data: Any = None):
        super().__init__(status_code=status_code, detail=message)
        self.message = message
        self.data = data


# ---------------------------------------------------------------------------
# Error factories
# ---------------------------------------------------------------------------
def bad_request(message: str, data: Any = None) -> EnvelopeException:
    return EnvelopeException(400, message, data)


def unauthorized(message: str = "Unauthenticated.") -> EnvelopeException:
    return EnvelopeException(401, message)


def payload_too_large(max_bytes: int) -> EnvelopeException:
    return EnvelopeException(
        413, f"Request body too large. Maximum allowed: {max_bytes} bytes"
    )


def internal_error(
    message: str = GENERIC_ERROR_MESSAGE, data: Any = None
) -> EnvelopeException:
    return EnvelopeException(500, message, data)


# ---------------------------------------------------------------------------
# Validation message
# ---------------------------------------------------------------------------
def field_label(loc: Sequence[Any]) -> str:
    """
    Human label for a pydantic error location.

    ("body", "start_date_time") -> "Start Date Time"
    """
    parts = [str(p) for p in loc if not isinstance(p, int) and p != "body"]
    if not parts:
        return "Body"
    return " ".join(word.capitalize() for word in parts[-1].split("_"))


def first_validation_message(errors: Sequence[dict[str, Any]]) -> str:
    """Render the first validation error the way clients display it."""
    if not errors:
        return "Invalid request."

    err = errors[0]
    label = field_label(err.get("loc", ()))
    kind = err.get("type", "")
    msg = str(err.get("msg", "")).strip()

    if kind == "missing":
        return f"{label} is required."
    if kind == "value_error":
        # R: custom validators already phrase the full message.
        return msg.removeprefix("Value error, ")
    return f"{label}: {msg}."


# ---------------------------------------------------------------------------
# FastAPI handlers
# ---------------------------------------------------------------------------
async def envelope_exception_handler(
    request: Request, exc: EnvelopeException
) -> JSONResponse:
    return envelope_response(exc.status_code, exc.message, exc.data)


async def validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    return envelope_response(400, first_validation_message(exc.errors()))
