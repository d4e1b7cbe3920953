"""
===============================================================================
USE CASE: Get Note
===============================================================================

Rules:
    - Only the owner can read a note.
    - A note owned by another user yields the same NOT_FOUND as a missing
      one, so ids cannot be probed.
===============================================================================
"""

from __future__ import annotations

from ....domain.repositories import NoteRepository
from .note_results import NoteResult, note_not_found


class GetNoteUseCase:
    def __init__(self, repository: NoteRepository) -> None:
        self._repository = repository

    def execute(self, note_id: int, *, user_id: int) -> NoteResult:
        note = self._repository.get_note(note_id)
        if note is None or note.user_id != user_id:
            return note_not_found()
        return NoteResult(note=note)
