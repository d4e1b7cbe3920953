"""
============================================================
CRC CARD — infrastructure/repositories/postgres/work_hours.py
============================================================
Class: PostgresWorkHoursRepository

Responsibilities:
- Persist work-hour entries in PostgreSQL (raw SQL).
- Month listing measured in each entry's own timezone:
    start_at AT TIME ZONE timezone
- Summary-only updates; soft-deleted rows are never returned.

Collaborators:
- domain.entities.WorkHourEntry
- PostgresRepositoryBase (_fetchone/_fetchall + DatabaseError)
- Table: work_hours

Constraints:
- Parameterized queries only.
- Deterministic ordering: id DESC.
============================================================
"""

from __future__ import annotations

from typing import List, Optional, Sequence

from ....domain.entities import WorkHourEntry
from ....domain.value_objects import YearMonth
from .base import PostgresRepositoryBase


class PostgresWorkHoursRepository(PostgresRepositoryBase):
    """R: PostgreSQL implementation of WorkHoursRepository."""

    _SELECT_COLUMNS = """
        id, user_id, start_at, end_at, timezone, total_hours, summary,
        created_at, updated_at, deleted_at
    """

    @staticmethod
    def _row_to_entry(row: tuple) -> WorkHourEntry:
        (
            entry_id,
            user_id,
            start_at,
            end_at,
            tz_name,
            total_hours,
            summary,
            created_at,
            updated_at,
            deleted_at,
        ) = row
        return WorkHourEntry(
            id=entry_id,
            user_id=user_id,
            start_at=start_at,
            end_at=end_at,
            timezone=tz_name,
            total_hours=total_hours,
            summary=summary,
            created_at=created_at,
            updated_at=updated_at,
            deleted_at=deleted_at,
        )

    def create_entry(self, entry: WorkHourEntry) -> WorkHourEntry:
        query = f"""
            INSERT INTO work_hours
                (user_id, start_at, end_at, timezone, total_hours, summary)
            VALUES (%s, %s, %s, %s, %s, %s)
            RETURNING {self._SELECT_COLUMNS}
        """
        row = self._fetchone(
            query=query,
            params=[
                entry.user_id,
                entry.start_at,
                entry.end_at,
                entry.timezone,
                entry.total_hours,
                entry.summary,
            ],
            context_msg="PostgresWorkHoursRepository: Failed to create entry",
            extra={"user_id": entry.user_id},
        )
        return self._row_to_entry(row)

    def list_entries_by_month(
        self, user_ids: Sequence[int], month: YearMonth
    ) -> List[WorkHourEntry]:
        owners = list(dict.fromkeys(user_ids))
        if not owners:
            return []

        query = f"""
            SELECT {self._SELECT_COLUMNS}
            FROM work_hours
            WHERE user_id = ANY(%s)
              AND deleted_at IS NULL
              AND EXTRACT(YEAR FROM start_at AT TIME ZONE timezone) = %s
              AND EXTRACT(MONTH FROM start_at AT TIME ZONE timezone) = %s
            ORDER BY id DESC
        """
        rows = self._fetchall(
            query=query,
            params=[owners, month.year, month.month],
            context_msg="PostgresWorkHoursRepository: Failed to list entries",
            extra={"user_ids": owners, "month": str(month)},
        )
        return [self._row_to_entry(r) for r in rows]

    def get_entry(self, entry_id: int) -> Optional[WorkHourEntry]:
        query = f"""
            SELECT {self._SELECT_COLUMNS}
            FROM work_hours
            WHERE id = %s AND deleted_at IS NULL
        """
        row = self._fetchone(
            query=query,
            params=[entry_id],
            context_msg="PostgresWorkHoursRepository: Failed to get entry",
            extra={"entry_id": entry_id},
        )
        return self._row_to_entry(row) if row else None

    def update_summary(
        self, entry_id: int, summary: Optional[str]
    ) -> Optional[WorkHourEntry]:
        query = f"""
            UPDATE work_hours
            SET summary = %s, updated_at = NOW()
            WHERE id = %s AND deleted_at IS NULL
            RETURNING {self._SELECT_COLUMNS}
        """
        row = self._fetchone(
            query=query,
            params=[summary, entry_id],
            context_msg="PostgresWorkHoursRepository: Failed to update summary",
            extra={"entry_id": entry_id},
        )
        return self._row_to_entry(row) if row else None
