"""
============================================================
CRC CARD — infrastructure/repositories/postgres/notes.py
============================================================
Class: PostgresNoteRepository

Responsibilities:
- Persist notes in PostgreSQL (raw SQL) with soft delete via deleted_at.

Collaborators:
- domain.entities.Note
- PostgresRepositoryBase
- Table: notes
============================================================
"""

from __future__ import annotations

from typing import List, Optional

from ....domain.entities import Note
from .base import PostgresRepositoryBase


class PostgresNoteRepository(PostgresRepositoryBase):
    """R: PostgreSQL implementation of NoteRepository."""

    _SELECT_COLUMNS = (
        "id, user_id, title, description, created_at, updated_at, deleted_at"
    )

    @staticmethod
    def _row_to_note(row: tuple) -> Note:
        (
            note_id,
            user_id,
            title,
            description,
            created_at,
            updated_at,
            deleted_at,
        ) = row
        return Note(
            id=note_id,
            user_id=user_id,
            title=title,
            description=description,
            created_at=created_at,
            updated_at=updated_at,
            deleted_at=deleted_at,
        )

    def create_note(self, note: Note) -> Note:
        row = self._fetchone(
            query=f"""
                INSERT INTO notes (user_id, title, description)
                VALUES (%s, %s, %s)
                RETURNING {self._SELECT_COLUMNS}
            """,
            params=[note.user_id, note.title, note.description],
            context_msg="PostgresNoteRepository: Failed to create note",
            extra={"user_id": note.user_id},
        )
        return self._row_to_note(row)

    def list_notes(self, user_id: int) -> List[Note]:
        rows = self._fetchall(
            query=f"""
                SELECT {self._SELECT_COLUMNS}
                FROM notes
                WHERE user_id = %s AND deleted_at IS NULL
                ORDER BY id ASC
            """,
            params=[user_id],
            context_msg="PostgresNoteRepository: Failed to list notes",
            extra={"user_id": user_id},
        )
        return [self._row_to_note(r) for r in rows]

    def get_note(self, note_id: int) -> Optional[Note]:
        row = self._fetchone(
            query=f"""
                SELECT {self._SELECT_COLUMNS}
                FROM notes
                WHERE id = %s AND deleted_at IS NULL
            """,
            params=[note_id],
            context_msg="PostgresNoteRepository: Failed to get note",
            extra={"note_id": note_id},
        )
        return self._row_to_note(row) if row else None

    def update_note(
        self, note_id: int, *, title: str, description: Optional[str]
    ) -> Optional[Note]:
        row = self._fetchone(
            query=f"""
                UPDATE notes
                SET title = %s, description = %s, updated_at = NOW()
                WHERE id = %s AND deleted_at IS NULL
                RETURNING {self._SELECT_COLUMNS}
            """,
            params=[title, description, note_id],
            context_msg="PostgresNoteRepository: Failed to update note",
            extra={"note_id": note_id},
        )
        return self._row_to_note(row) if row else None

    def delete_note(self, note_id: int) -> Optional[Note]:
        row = self._fetchone(
            query=f"""
                UPDATE notes
                SET deleted_at = NOW()
                WHERE id = %s AND deleted_at IS NULL
                RETURNING {self._SELECT_COLUMNS}
            """,
            params=[note_id],
            context_msg="PostgresNoteRepository: Failed to delete note",
            extra={"note_id": note_id},
        )
        return self._row_to_note(row) if row else None
