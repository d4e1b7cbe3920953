"""
===============================================================================
USE CASE: Create Note
===============================================================================

Business Goal:
    Store a personal note for the caller. Title is required (non-blank);
    description is optional.
===============================================================================
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ....domain.entities import Note
from ....domain.repositories import NoteRepository
from .note_results import NoteResult, title_required


@dataclass
class CreateNoteInput:
    user_id: int
    title: str
    description: Optional[str] = None


class CreateNoteUseCase:
    def __init__(self, repository: NoteRepository) -> None:
        self._repository = repository

    def execute(self, input_data: CreateNoteInput) -> NoteResult:
        title = (input_data.title or "").strip()
        if not title:
            return title_required()

        note = self._repository.create_note(
            Note(
                user_id=input_data.user_id,
                title=title,
                description=input_data.description,
            )
        )
        return NoteResult(note=note)
