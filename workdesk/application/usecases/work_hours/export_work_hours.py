"""
===============================================================================
USE CASE: Export Work Hours (xlsx download)
===============================================================================

Business Goal:
    Give the caller a spreadsheet of their entries for one month.

-------------------------------------------------------------------------------
CRC CARD
-------------------------------------------------------------------------------
Class:
    ExportWorkHoursUseCase

Responsibilities:
    - Resolve the month (defaults to the current one).
    - Delegate rendering to the WorkHoursReportExporter port.
    - Name the download "Work_Hours_YYYY-MM.xlsx".

Collaborators:
    - domain.services.WorkHoursReportExporter
    - application.email_templates.attachment_filename
===============================================================================
"""

from __future__ import annotations

from datetime import datetime
from typing import Callable, Optional

from ....domain.services import WorkHoursReportExporter
from ....domain.value_objects import ExportScope, YearMonth
from ...email_templates import attachment_filename
from .work_hours_results import ExportWorkHoursResult


class ExportWorkHoursUseCase:
    def __init__(
        self,
        exporter: WorkHoursReportExporter,
        clock: Callable[[], datetime] = datetime.now,
    ) -> None:
        self._exporter = exporter
        self._clock = clock

    def execute(
        self, user_id: int, month: Optional[YearMonth] = None
    ) -> ExportWorkHoursResult:
        target = month or YearMonth.of(self._clock())
        content = self._exporter.export(ExportScope(user_ids=(user_id,), month=target))
        return ExportWorkHoursResult(
            content=content, filename=attachment_filename(target)
        )
