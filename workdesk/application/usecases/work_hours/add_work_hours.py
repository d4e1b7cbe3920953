"""
===============================================================================
USE CASE: Add Work Hours
===============================================================================

Business Goal:
    Record one work period for the caller, computing its duration once.

Invariants:
    - start/end are parsed in the entry timezone when they carry no offset
    - end must not be earlier than start
    - total_hours is derived here and never recomputed afterwards

-------------------------------------------------------------------------------
CRC CARD
-------------------------------------------------------------------------------
Class:
    AddWorkHoursUseCase

Responsibilities:
    - Validate timezone and timestamps.
    - Compute the formatted duration.
    - Persist the entry and return its display view.

Collaborators:
    - WorkHoursRepository.create_entry
    - application.duration
    - work_hours_results
===============================================================================
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ....crosscutting.exceptions import InvalidInputError
from ....domain.entities import WorkHourEntry
from ....domain.repositories import WorkHoursRepository
from ...duration import compute_work_duration, parse_moment
from .work_hours_results import (
    WorkHoursError,
    WorkHoursErrorCode,
    WorkHoursResult,
    WorkHourView,
)


@dataclass
class AddWorkHoursInput:
    user_id: int
    start_date_time: str
    end_date_time: str
    timezone: str
    summary: Optional[str] = None


class AddWorkHoursUseCase:
    def __init__(self, repository: WorkHoursRepository) -> None:
        self._repository = repository

    def execute(self, input_data: AddWorkHoursInput) -> WorkHoursResult:
        tz_name = (input_data.timezone or "").strip()
        if not tz_name:
            return self._validation_error("Timezone is required.")
        if not (input_data.start_date_time or "").strip():
            return self._validation_error("Start Date Time is required.")
        if not (input_data.end_date_time or "").strip():
            return self._validation_error("End Date Time is required.")

        try:
            start_at = parse_moment(input_data.start_date_time, tz_name)
            end_at = parse_moment(input_data.end_date_time, tz_name)
            duration = compute_work_duration(start_at, end_at)
        except InvalidInputError as exc:
            return self._validation_error(exc.message)

        summary = input_data.summary
        entry = self._repository.create_entry(
            WorkHourEntry(
                user_id=input_data.user_id,
                start_at=start_at,
                end_at=end_at,
                timezone=tz_name,
                total_hours=duration.formatted,
                summary=summary if summary and summary.strip() else None,
            )
        )
        return WorkHoursResult(entry=WorkHourView.from_entry(entry))

    @staticmethod
    def _validation_error(message: str) -> WorkHoursResult:
        return WorkHoursResult(
            error=WorkHoursError(
                code=WorkHoursErrorCode.VALIDATION_ERROR, message=message
            )
        )
