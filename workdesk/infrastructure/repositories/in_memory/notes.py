"""
============================================================
CRC CARD — infrastructure/repositories/in_memory/notes.py
============================================================
Class: InMemoryNoteRepository

Responsibilities:
  - Store notes in memory with soft-delete semantics.
  - Order listings by id ascending (same as Postgres).

Constraints:
  - Thread-safe (Lock) + defensive copies.
============================================================
"""

from __future__ import annotations

from dataclasses import replace
from datetime import datetime, timezone
from threading import Lock
from typing import Dict, List, Optional

from ....domain.entities import Note
from ....domain.repositories import NoteRepository


class InMemoryNoteRepository(NoteRepository):
    def __init__(self) -> None:
        self._lock = Lock()
        self._notes: Dict[int, Note] = {}
        self._next_id = 1

    @staticmethod
    def _now() -> datetime:
        return datetime.now(timezone.utc)

    def _live(self, note_id: int) -> Optional[Note]:
        note = self._notes.get(note_id)
        if note is None or note.is_deleted:
            return None
        return note

    def create_note(self, note: Note) -> Note:
        now = self._now()
        with self._lock:
            stored = replace(note, id=self._next_id, created_at=now, updated_at=now)
            self._notes[stored.id] = stored
            self._next_id += 1
            return replace(stored)

    def list_notes(self, user_id: int) -> List[Note]:
        with self._lock:
            values = [
                replace(n)
                for n in self._notes.values()
                if n.user_id == user_id and not n.is_deleted
            ]
        return sorted(values, key=lambda n: n.id)

    def get_note(self, note_id: int) -> Optional[Note]:
        with self._lock:
            note = self._live(note_id)
            return replace(note) if note else None

    def update_note(
        self, note_id: int, *, title: str, description: Optional[str]
    ) -> Optional[Note]:
        with self._lock:
            note = self._live(note_id)
            if note is None:
                return None
            note.title = title
            note.description = description
            note.updated_at = self._now()
            return replace(note)

    def delete_note(self, note_id: int) -> Optional[Note]:
        with self._lock:
            note = self._live(note_id)
            if note is None:
                return None
            note.mark_deleted(at=self._now())
            return replace(note)
