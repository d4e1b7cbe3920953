"""
Name: Work Hours Use Case Tests

Responsibilities:
  - Creation computes and stores the duration token once
  - Monthly listing filters by month and orders by id descending
  - Summary edits are owner-scoped and never touch the duration
  - Export names the file after the month
"""

from datetime import datetime, timezone
from io import BytesIO

import pytest
from openpyxl import load_workbook

from workdesk.application.usecases.work_hours import (
    AddWorkHoursInput,
    AddWorkHoursUseCase,
    EditWorkHoursSummaryUseCase,
    ExportWorkHoursUseCase,
    ListWorkHoursUseCase,
    WorkHoursErrorCode,
)
from workdesk.domain.entities import WorkHourEntry
from workdesk.domain.value_objects import YearMonth
from workdesk.infrastructure.export import XlsxWorkHoursExporter

pytestmark = pytest.mark.unit


def _add(repo, user_id=1, start="2024-06-01 19:15:00", end="2024-06-01 21:15:00", **kw):
    return AddWorkHoursUseCase(repo).execute(
        AddWorkHoursInput(
            user_id=user_id,
            start_date_time=start,
            end_date_time=end,
            timezone=kw.get("tz", "Asia/Kolkata"),
            summary=kw.get("summary"),
        )
    )


class TestAddWorkHours:
    def test_stores_formatted_duration_and_local_view(self, work_hours_repo):
        result = _add(work_hours_repo, summary="Sprint review")

        assert result.error is None
        assert result.entry.total_hours == "02h00min"
        assert result.entry.start_date_time == "2024-06-01 19:15:00"
        assert result.entry.end_date_time == "2024-06-01 21:15:00"
        assert result.entry.summary == "Sprint review"

        stored = work_hours_repo.get_entry(result.entry.id)
        assert stored.total_hours == "02h00min"
        assert stored.start_at.astimezone(timezone.utc).hour == 13

    def test_blank_summary_is_stored_as_none(self, work_hours_repo):
        result = _add(work_hours_repo, summary="   ")
        assert result.entry.summary is None

    @pytest.mark.parametrize(
        "kwargs,message",
        [
            ({"tz": ""}, "Timezone is required."),
            ({"start": ""}, "Start Date Time is required."),
            ({"end": " "}, "End Date Time is required."),
        ],
    )
    def test_required_fields(self, work_hours_repo, kwargs, message):
        result = _add(work_hours_repo, **kwargs)
        assert result.error.code == WorkHoursErrorCode.VALIDATION_ERROR
        assert result.error.message == message

    def test_end_before_start_creates_nothing(self, work_hours_repo):
        result = _add(work_hours_repo, end="2024-06-01 18:00:00")
        assert result.error.code == WorkHoursErrorCode.VALIDATION_ERROR
        assert work_hours_repo.get_entry(1) is None

    def test_unknown_timezone_is_validation_error(self, work_hours_repo):
        result = _add(work_hours_repo, tz="Mars/Olympus")
        assert result.error.code == WorkHoursErrorCode.VALIDATION_ERROR
        assert "Unknown timezone" in result.error.message


class TestListWorkHours:
    def test_filters_month_and_orders_by_id_desc(self, work_hours_repo):
        first = _add(work_hours_repo, start="2024-06-02 09:00:00", end="2024-06-02 10:00:00")
        _add(work_hours_repo, start="2024-05-31 09:00:00", end="2024-05-31 10:00:00")
        third = _add(work_hours_repo, start="2024-06-01 09:00:00", end="2024-06-01 09:30:00")
        _add(work_hours_repo, user_id=2)

        result = ListWorkHoursUseCase(work_hours_repo).execute(1, YearMonth(2024, 6))

        assert [e.id for e in result.entries] == [third.entry.id, first.entry.id]

    def test_month_is_measured_in_entry_timezone(self, work_hours_repo):
        # 2024-07-01 01:00 in Kolkata is still June 30 in UTC.
        entry = _add(
            work_hours_repo, start="2024-07-01 01:00:00", end="2024-07-01 02:00:00"
        )
        use_case = ListWorkHoursUseCase(work_hours_repo)

        assert [e.id for e in use_case.execute(1, YearMonth(2024, 7)).entries] == [
            entry.entry.id
        ]
        assert use_case.execute(1, YearMonth(2024, 6)).entries == []

    def test_defaults_to_current_month(self, work_hours_repo, fixed_clock):
        entry = _add(work_hours_repo)
        result = ListWorkHoursUseCase(work_hours_repo, clock=fixed_clock).execute(1)
        assert [e.id for e in result.entries] == [entry.entry.id]

    def test_soft_deleted_entries_are_hidden(self, work_hours_repo):
        start = datetime(2024, 6, 3, 9, tzinfo=timezone.utc)
        stored = work_hours_repo.create_entry(
            WorkHourEntry(
                user_id=1,
                start_at=start,
                end_at=start,
                timezone="UTC",
                total_hours="00h00min",
                deleted_at=start,
            )
        )
        result = ListWorkHoursUseCase(work_hours_repo).execute(1, YearMonth(2024, 6))
        assert stored.id not in [e.id for e in result.entries]


class TestEditWorkHoursSummary:
    def test_overwrites_summary_only(self, work_hours_repo):
        created = _add(work_hours_repo, summary="old")
        result = EditWorkHoursSummaryUseCase(work_hours_repo).execute(
            created.entry.id, "new", user_id=1
        )

        assert result.error is None
        assert result.entry.summary == "new"
        assert result.entry.total_hours == created.entry.total_hours
        assert result.entry.start_date_time == created.entry.start_date_time

    def test_blank_summary_clears_it(self, work_hours_repo):
        created = _add(work_hours_repo, summary="old")
        result = EditWorkHoursSummaryUseCase(work_hours_repo).execute(
            created.entry.id, "", user_id=1
        )
        assert result.entry.summary is None

    def test_missing_entry_is_not_found_and_creates_nothing(self, work_hours_repo):
        result = EditWorkHoursSummaryUseCase(work_hours_repo).execute(
            99, "x", user_id=1
        )
        assert result.error.code == WorkHoursErrorCode.NOT_FOUND
        assert result.error.message == "Work Hours Not Found!"
        assert work_hours_repo.get_entry(99) is None

    def test_other_users_entry_is_not_found(self, work_hours_repo):
        created = _add(work_hours_repo, user_id=2, summary="theirs")
        result = EditWorkHoursSummaryUseCase(work_hours_repo).execute(
            created.entry.id, "mine", user_id=1
        )
        assert result.error.code == WorkHoursErrorCode.NOT_FOUND
        assert work_hours_repo.get_entry(created.entry.id).summary == "theirs"


def test_export_work_hours_returns_workbook_and_month_filename(
    work_hours_repo, fixed_clock
):
    _add(work_hours_repo, summary="Planning")
    use_case = ExportWorkHoursUseCase(
        XlsxWorkHoursExporter(work_hours_repo), clock=fixed_clock
    )

    result = use_case.execute(1)

    assert result.filename == "Work_Hours_2024-06.xlsx"
    ws = load_workbook(BytesIO(result.content)).active
    assert ws.max_row == 2
    assert ws["E2"].value == "Planning"
