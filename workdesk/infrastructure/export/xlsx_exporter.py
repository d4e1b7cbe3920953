"""
Name: Work Hours XLSX Exporter

Responsibilities:
  - Query the entries of an ExportScope (owners + month)
  - Render them into one worksheet: header row, one row per entry
  - Return the workbook as bytes (built fully in memory)

Collaborators:
  - WorkHoursRepository.list_entries_by_month
  - application.duration (local wall-clock rendering)
  - openpyxl (Workbook, Font)

Constraints:
  - Store failures propagate before any bytes exist, so a partial file is
    never produced.
  - Row order is the store order (id descending).
  - A "User Id" column leads only when the scope covers several owners.
  - Same entries, same bytes: document properties and zip entry times are
    pinned to the first day of the scope month.
"""

from __future__ import annotations

from datetime import datetime
from io import BytesIO
from typing import List
from zipfile import ZIP_DEFLATED, ZipFile, ZipInfo

from openpyxl import Workbook
from openpyxl.styles import Font
from openpyxl.xml.functions import tostring

from ...application.duration import DATE_FORMAT, TIME_FORMAT, to_local
from ...crosscutting.logger import logger
from ...domain.entities import WorkHourEntry
from ...domain.repositories import WorkHoursRepository
from ...domain.value_objects import ExportScope

BASE_HEADERS = ["Date", "Start Time", "End Time", "Total Hours", "Summary"]
USER_ID_HEADER = "User Id"

# Excel caps sheet titles at 31 characters.
_MAX_SHEET_TITLE = 31
_COLUMN_WIDTHS = {"Date": 12, "Start Time": 11, "End Time": 11, "Total Hours": 12}
_SUMMARY_WIDTH = 60

_CORE_PROPS_PATH = "docProps/core.xml"
# Zip timestamps cannot predate 1980.
_MIN_ZIP_YEAR = 1980


class XlsxWorkHoursExporter:
    """R: openpyxl implementation of WorkHoursReportExporter."""

    def __init__(self, repository: WorkHoursRepository) -> None:
        self._repository = repository

    def export(self, scope: ExportScope) -> bytes:
        entries = self._repository.list_entries_by_month(
            list(scope.user_ids), scope.month
        )
        headers = self._headers(scope)

        wb = Workbook()
        ws = wb.active
        ws.title = scope.month.label()[:_MAX_SHEET_TITLE]

        ws.append(headers)
        for cell in ws[1]:
            cell.font = Font(bold=True)
        ws.freeze_panes = "A2"

        for entry in entries:
            ws.append(self._row(entry, multi_user=scope.is_multi_user))

        for idx, header in enumerate(headers, start=1):
            letter = ws.cell(row=1, column=idx).column_letter
            ws.column_dimensions[letter].width = _COLUMN_WIDTHS.get(
                header, _SUMMARY_WIDTH if header == "Summary" else 10
            )

        moment = datetime(scope.month.year, scope.month.month, 1)
        wb.properties.created = moment
        output = BytesIO()
        wb.save(output)
        # save() stamps "modified" with the wall clock
        wb.properties.modified = moment
        content = self._pin_archive(output.getvalue(), wb, moment)

        logger.info(
            "work hours report rendered",
            extra={
                "month": str(scope.month),
                "owners": len(set(scope.user_ids)),
                "rows": len(entries),
            },
        )
        return content

    @staticmethod
    def _pin_archive(content: bytes, wb: Workbook, moment: datetime) -> bytes:
        """Rewrite the archive with fixed entry times and core properties."""
        date_time = (max(moment.year, _MIN_ZIP_YEAR), moment.month, moment.day, 0, 0, 0)
        core_xml = tostring(wb.properties.to_tree())

        pinned = BytesIO()
        with ZipFile(BytesIO(content)) as src, ZipFile(
            pinned, "w", ZIP_DEFLATED, allowZip64=True
        ) as dst:
            for info in src.infolist():
                data = core_xml if info.filename == _CORE_PROPS_PATH else src.read(info)
                entry = ZipInfo(info.filename, date_time=date_time)
                entry.compress_type = ZIP_DEFLATED
                entry.external_attr = info.external_attr
                dst.writestr(entry, data)
        return pinned.getvalue()

    @staticmethod
    def _headers(scope: ExportScope) -> List[str]:
        if scope.is_multi_user:
            return [USER_ID_HEADER, *BASE_HEADERS]
        return list(BASE_HEADERS)

    @staticmethod
    def _row(entry: WorkHourEntry, *, multi_user: bool) -> list:
        start = to_local(entry.start_at, entry.timezone)
        end = to_local(entry.end_at, entry.timezone)
        row = [
            start.strftime(DATE_FORMAT),
            start.strftime(TIME_FORMAT),
            end.strftime(TIME_FORMAT),
            entry.total_hours,
            entry.summary,
        ]
        if multi_user:
            row.insert(0, entry.user_id)
        return row
