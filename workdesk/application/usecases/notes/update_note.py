"""
===============================================================================
USE CASE: Update Note
===============================================================================

Rules:
    - Title required (non-blank); description replaced as given.
    - Owner-scoped lookup (foreign note -> NOT_FOUND).
===============================================================================
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ....domain.repositories import NoteRepository
from .note_results import NoteResult, note_not_found, title_required


@dataclass
class UpdateNoteInput:
    note_id: int
    user_id: int
    title: str
    description: Optional[str] = None


class UpdateNoteUseCase:
    def __init__(self, repository: NoteRepository) -> None:
        self._repository = repository

    def execute(self, input_data: UpdateNoteInput) -> NoteResult:
        title = (input_data.title or "").strip()
        if not title:
            return title_required()

        existing = self._repository.get_note(input_data.note_id)
        if existing is None or existing.user_id != input_data.user_id:
            return note_not_found()

        updated = self._repository.update_note(
            input_data.note_id, title=title, description=input_data.description
        )
        if updated is None:
            return note_not_found()
        return NoteResult(note=updated)
