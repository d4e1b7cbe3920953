"""
============================================================
CRC CARD — infrastructure/repositories/in_memory/work_hours.py
============================================================
Class: InMemoryWorkHoursRepository

Responsibilities:
  - Store work-hour entries in memory (tests / local dev).
  - Mirror the Postgres ordering and month semantics:
      start measured in the entry's own timezone, ORDER BY id DESC.

Collaborators:
  - domain.entities.WorkHourEntry
  - domain.repositories.WorkHoursRepository (contract)
  - application.duration.to_local (month bucketing)

Constraints:
  - Thread-safe: every access under a Lock.
  - Defensive copies: callers never share stored instances.
============================================================
"""

from __future__ import annotations

from dataclasses import replace
from datetime import datetime, timezone
from threading import Lock
from typing import Dict, List, Optional, Sequence

from ....application.duration import to_local
from ....domain.entities import WorkHourEntry
from ....domain.repositories import WorkHoursRepository
from ....domain.value_objects import YearMonth


class InMemoryWorkHoursRepository(WorkHoursRepository):
    def __init__(self) -> None:
        self._lock = Lock()
        self._entries: Dict[int, WorkHourEntry] = {}
        self._next_id = 1

    @staticmethod
    def _now() -> datetime:
        return datetime.now(timezone.utc)

    def create_entry(self, entry: WorkHourEntry) -> WorkHourEntry:
        now = self._now()
        with self._lock:
            stored = replace(
                entry, id=self._next_id, created_at=now, updated_at=now
            )
            self._entries[stored.id] = stored
            self._next_id += 1
            return replace(stored)

    def list_entries_by_month(
        self, user_ids: Sequence[int], month: YearMonth
    ) -> List[WorkHourEntry]:
        owners = set(user_ids)
        if not owners:
            return []
        with self._lock:
            values = [replace(e) for e in self._entries.values()]

        matches = [
            e
            for e in values
            if e.user_id in owners
            and not e.is_deleted
            and month.contains(to_local(e.start_at, e.timezone))
        ]
        return sorted(matches, key=lambda e: e.id, reverse=True)

    def get_entry(self, entry_id: int) -> Optional[WorkHourEntry]:
        with self._lock:
            entry = self._entries.get(entry_id)
            if entry is None or entry.is_deleted:
                return None
            return replace(entry)

    def update_summary(
        self, entry_id: int, summary: Optional[str]
    ) -> Optional[WorkHourEntry]:
        with self._lock:
            entry = self._entries.get(entry_id)
            if entry is None or entry.is_deleted:
                return None
            entry.summary = summary
            entry.updated_at = self._now()
            return replace(entry)
