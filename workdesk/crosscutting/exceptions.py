# workdesk/crosscutting/exceptions.py
"""
===============================================================================
MODULE: Typed backend exceptions (internal errors)
===============================================================================

Goal
----
Internal exceptions that carry:
- a stable error_code
- an error_id to correlate with logs
- a human message (never secrets)

-------------------------------------------------------------------------------
CRC (Component Card)
-------------------------------------------------------------------------------
Component:
  WorkdeskError + subclasses

Responsibilities:
  - Standardize internal errors that are later mapped to envelopes
  - Generate an error_id for tracing

Collaborators:
  - api/exception_handlers.py (maps to EnvelopeException)
  - crosscutting/logger.py
===============================================================================
"""

from __future__ import annotations

from uuid import uuid4


class WorkdeskError(Exception):
    """
    ----------------------------------------------------------------------------
    CRC (Class Card)
    ----------------------------------------------------------------------------
    Class:
      WorkdeskError

    Responsibilities:
      - Base for internal system errors
      - Provide error_code + error_id + message

    Collaborators:
      - api/exception_handlers.py
    ----------------------------------------------------------------------------
    """

    error_code: str = "WORKDESK_ERROR"

    def __init__(
        self,
        message: str,
        error_id: str | None = None,
        original_error: Exception | None = None,
    ):
        self.message = message
        self.error_id = error_id or str(uuid4())
        self.original_error = original_error
        super().__init__(message)


class DatabaseError(WorkdeskError):
    """DB failures (connection, query, timeout, pool)."""

    error_code: str = "DATABASE_ERROR"


class InvalidInputError(WorkdeskError):
    """Caller-supplied values that cannot be interpreted (timestamps, timezones)."""

    error_code: str = "INVALID_INPUT"


class MailDeliveryError(WorkdeskError):
    """Outbound mail failures (SMTP refused, timeout, bad address)."""

    error_code: str = "MAIL_DELIVERY_ERROR"
