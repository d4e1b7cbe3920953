"""
===============================================================================
USE CASE: List Work Hours (by month)
===============================================================================

Business Goal:
    Return the caller's entries for a calendar month, newest first.

Why:
    - The month defaults to the current one (server-local clock), which is
      what the mobile client shows when it opens the screen.

-------------------------------------------------------------------------------
CRC CARD
-------------------------------------------------------------------------------
Class:
    ListWorkHoursUseCase

Collaborators:
    - WorkHoursRepository.list_entries_by_month
    - WorkHourView (display projection)
===============================================================================
"""

from __future__ import annotations

from datetime import datetime
from typing import Callable, Optional

from ....domain.repositories import WorkHoursRepository
from ....domain.value_objects import YearMonth
from .work_hours_results import WorkHoursListResult, WorkHourView


class ListWorkHoursUseCase:
    def __init__(
        self,
        repository: WorkHoursRepository,
        clock: Callable[[], datetime] = datetime.now,
    ) -> None:
        self._repository = repository
        self._clock = clock

    def execute(
        self, user_id: int, month: Optional[YearMonth] = None
    ) -> WorkHoursListResult:
        target = month or YearMonth.of(self._clock())
        entries = self._repository.list_entries_by_month([user_id], target)
        return WorkHoursListResult(
            entries=[WorkHourView.from_entry(e) for e in entries]
        )
