"""USE CASE: List the caller's notes (id ascending)."""

from __future__ import annotations

from ....domain.repositories import NoteRepository
from .note_results import NoteListResult


class ListNotesUseCase:
    def __init__(self, repository: NoteRepository) -> None:
        self._repository = repository

    def execute(self, user_id: int) -> NoteListResult:
        return NoteListResult(notes=self._repository.list_notes(user_id))
