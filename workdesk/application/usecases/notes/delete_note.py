"""
===============================================================================
USE CASE: Delete Note (soft)
===============================================================================

Rules:
    - Owner-scoped lookup (foreign note -> NOT_FOUND).
    - Soft delete; the deleted note is returned to the caller.
    - Deleting twice reports NOT_FOUND the second time.
===============================================================================
"""

from __future__ import annotations

from ....domain.repositories import NoteRepository
from .note_results import NoteResult, note_not_found


class DeleteNoteUseCase:
    def __init__(self, repository: NoteRepository) -> None:
        self._repository = repository

    def execute(self, note_id: int, *, user_id: int) -> NoteResult:
        existing = self._repository.get_note(note_id)
        if existing is None or existing.user_id != user_id:
            return note_not_found()

        deleted = self._repository.delete_note(note_id)
        if deleted is None:
            return note_not_found()
        return NoteResult(note=deleted)
