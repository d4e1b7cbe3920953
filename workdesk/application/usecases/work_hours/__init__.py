"""
===============================================================================
WORK HOURS USE CASES PACKAGE (Public API / Exports)
===============================================================================

Single import point for the work-hours use cases, their inputs and results.
===============================================================================
"""

from __future__ import annotations

from .add_work_hours import AddWorkHoursInput, AddWorkHoursUseCase
from .edit_work_hours_summary import EditWorkHoursSummaryUseCase
from .export_work_hours import ExportWorkHoursUseCase
from .list_work_hours import ListWorkHoursUseCase
from .send_work_hours_email import (
    SendWorkHoursEmailInput,
    SendWorkHoursEmailUseCase,
)
from .work_hours_results import (
    ExportWorkHoursResult,
    SendWorkHoursEmailResult,
    WorkHoursError,
    WorkHoursErrorCode,
    WorkHoursListResult,
    WorkHoursResult,
    WorkHourView,
)

__all__ = [
    "AddWorkHoursInput",
    "AddWorkHoursUseCase",
    "ListWorkHoursUseCase",
    "EditWorkHoursSummaryUseCase",
    "ExportWorkHoursUseCase",
    "SendWorkHoursEmailInput",
    "SendWorkHoursEmailUseCase",
    "WorkHoursError",
    "WorkHoursErrorCode",
    "WorkHoursResult",
    "WorkHoursListResult",
    "WorkHourView",
    "ExportWorkHoursResult",
    "SendWorkHoursEmailResult",
]
