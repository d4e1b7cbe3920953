"""Notes use cases (public exports)."""

from __future__ import annotations

from .create_note import CreateNoteInput, CreateNoteUseCase
from .delete_note import DeleteNoteUseCase
from .get_note import GetNoteUseCase
from .list_notes import ListNotesUseCase
from .note_results import NoteError, NoteErrorCode, NoteListResult, NoteResult
from .update_note import UpdateNoteInput, UpdateNoteUseCase

__all__ = [
    "CreateNoteInput",
    "CreateNoteUseCase",
    "ListNotesUseCase",
    "GetNoteUseCase",
    "UpdateNoteInput",
    "UpdateNoteUseCase",
    "DeleteNoteUseCase",
    "NoteError",
    "NoteErrorCode",
    "NoteResult",
    "NoteListResult",
]
