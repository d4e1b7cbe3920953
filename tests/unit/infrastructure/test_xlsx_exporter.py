"""
Name: Xlsx Work Hours Exporter Tests

Responsibilities:
  - Header layout (single owner vs. several owners)
  - Rows in store order, local date/time columns
  - Store failures propagate before any bytes exist
  - Identical entries give identical bytes across clock ticks
"""

import time
from datetime import datetime, timezone
from io import BytesIO
from zipfile import ZipFile
from unittest.mock import MagicMock

import pytest
from openpyxl import load_workbook

from workdesk.crosscutting.exceptions import DatabaseError
from workdesk.domain.entities import WorkHourEntry
from workdesk.domain.value_objects import ExportScope, YearMonth
from workdesk.infrastructure.export import XlsxWorkHoursExporter
from workdesk.infrastructure.export.xlsx_exporter import BASE_HEADERS

pytestmark = pytest.mark.unit

JUNE = YearMonth(2024, 6)


def _entry(repo, user_id, day, summary=None):
    return repo.create_entry(
        WorkHourEntry(
            user_id=user_id,
            start_at=datetime(2024, 6, day, 3, 30, tzinfo=timezone.utc),
            end_at=datetime(2024, 6, day, 6, 0, tzinfo=timezone.utc),
            timezone="Asia/Kolkata",
            total_hours="02h30min",
            summary=summary,
        )
    )


def _sheet(content: bytes):
    return load_workbook(BytesIO(content)).active


def test_single_owner_layout(work_hours_repo):
    _entry(work_hours_repo, 1, 3, "Design review")
    _entry(work_hours_repo, 1, 4)

    ws = _sheet(
        XlsxWorkHoursExporter(work_hours_repo).export(
            ExportScope(user_ids=(1,), month=JUNE)
        )
    )

    assert ws.title == "June 2024"
    assert [c.value for c in ws[1]] == BASE_HEADERS
    assert ws["A1"].font.bold
    assert ws.freeze_panes == "A2"
    # newest entry first, matching the store listing
    assert [c.value for c in ws[2]] == [
        "2024-06-04",
        "09:00:00",
        "11:30:00",
        "02h30min",
        None,
    ]
    assert ws["E3"].value == "Design review"


def test_multi_owner_adds_user_column(work_hours_repo):
    _entry(work_hours_repo, 1, 3)
    _entry(work_hours_repo, 2, 5)
    _entry(work_hours_repo, 3, 6)

    ws = _sheet(
        XlsxWorkHoursExporter(work_hours_repo).export(
            ExportScope(user_ids=(1, 2), month=JUNE)
        )
    )

    assert ws["A1"].value == "User Id"
    assert [ws.cell(row=r, column=1).value for r in (2, 3)] == [2, 1]
    assert ws.max_row == 3


def test_empty_month_has_header_only(work_hours_repo):
    ws = _sheet(
        XlsxWorkHoursExporter(work_hours_repo).export(
            ExportScope(user_ids=(1,), month=YearMonth(2023, 1))
        )
    )
    assert ws.max_row == 1


def test_store_failure_propagates():
    repo = MagicMock()
    repo.list_entries_by_month.side_effect = DatabaseError("boom")

    with pytest.raises(DatabaseError):
        XlsxWorkHoursExporter(repo).export(ExportScope(user_ids=(1,), month=JUNE))


def test_same_entries_give_same_bytes_across_clock_ticks(work_hours_repo):
    _entry(work_hours_repo, 1, 3, "Design review")
    exporter = XlsxWorkHoursExporter(work_hours_repo)
    scope = ExportScope(user_ids=(1,), month=JUNE)

    first = exporter.export(scope)
    # zip timestamps have a two second resolution
    time.sleep(2.1)
    second = exporter.export(scope)

    assert first == second


def test_document_metadata_is_pinned_to_the_month(work_hours_repo):
    _entry(work_hours_repo, 1, 3)

    content = XlsxWorkHoursExporter(work_hours_repo).export(
        ExportScope(user_ids=(1,), month=JUNE)
    )

    props = load_workbook(BytesIO(content)).properties
    assert props.created == datetime(2024, 6, 1)
    assert props.modified == datetime(2024, 6, 1)
    with ZipFile(BytesIO(content)) as archive:
        assert {i.date_time for i in archive.infolist()} == {(2024, 6, 1, 0, 0, 0)}
