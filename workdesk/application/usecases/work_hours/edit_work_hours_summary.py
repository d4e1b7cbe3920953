"""
===============================================================================
USE CASE: Edit Work Hours Summary
===============================================================================

Business Goal:
    Replace the free-text summary of an existing entry.

Invariants:
    - Only the summary changes; start, end and total_hours stay as stored.
    - A missing entry, or one owned by someone else, is NOT_FOUND and nothing
      is created.
    - summary=None (or blank) clears it.

-------------------------------------------------------------------------------
CRC CARD
-------------------------------------------------------------------------------
Class:
    EditWorkHoursSummaryUseCase

Collaborators:
    - WorkHoursRepository: get_entry, update_summary
===============================================================================
"""

from __future__ import annotations

from typing import Optional

from ....domain.repositories import WorkHoursRepository
from .work_hours_results import (
    WorkHoursError,
    WorkHoursErrorCode,
    WorkHoursResult,
    WorkHourView,
)

NOT_FOUND_MESSAGE = "Work Hours Not Found!"


class EditWorkHoursSummaryUseCase:
    def __init__(self, repository: WorkHoursRepository) -> None:
        self._repository = repository

    def execute(
        self, entry_id: int, summary: Optional[str], *, user_id: int
    ) -> WorkHoursResult:
        entry = self._repository.get_entry(entry_id)
        if entry is None or entry.user_id != user_id:
            return self._not_found()

        normalized = summary if summary and summary.strip() else None
        updated = self._repository.update_summary(entry_id, normalized)
        if updated is None:
            # Deleted between read and write.
            return self._not_found()

        return WorkHoursResult(entry=WorkHourView.from_entry(updated))

    @staticmethod
    def _not_found() -> WorkHoursResult:
        return WorkHoursResult(
            error=WorkHoursError(
                code=WorkHoursErrorCode.NOT_FOUND, message=NOT_FOUND_MESSAGE
            )
        )
