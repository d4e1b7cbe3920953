"""
===============================================================================
CRC CARD — error_mapping.py (UseCase Error -> Envelope)
===============================================================================

Responsibilities:
  - Translate use-case error codes into envelope exceptions.
  - Centralize the mapping so routers stay thin.
  - Keep the application layer free of HTTP.

Rules:
  - Client-caused outcomes -> status_code 400 with the use-case message.
  - Delivery failure of every recipient -> status_code 500.

Collaborators:
  - application.usecases.* (WorkHoursErrorCode, NoteErrorCode, UserErrorCode)
  - crosscutting.envelope (bad_request, internal_error)
===============================================================================
"""

from __future__ import annotations

from typing import Any, NoReturn

from ....application.usecases.notes import NoteError
from ....application.usecases.users import UserError
from ....application.usecases.work_hours import WorkHoursError, WorkHoursErrorCode
from ....crosscutting.envelope import bad_request, internal_error


def raise_work_hours_error(error: WorkHoursError, data: Any = None) -> NoReturn:
    if error.code == WorkHoursErrorCode.DELIVERY_FAILED:
        raise internal_error(error.message, data)
    raise bad_request(error.message, data)


def raise_note_error(error: NoteError) -> NoReturn:
    raise bad_request(error.message)


def raise_user_error(error: UserError) -> NoReturn:
    raise bad_request(error.message)
