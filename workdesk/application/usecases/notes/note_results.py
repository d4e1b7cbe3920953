"""
===============================================================================
NOTE USE CASE RESULTS (Shared Result / Error Models)
===============================================================================

Responsibilities:
    - NoteErrorCode / NoteError as the error contract for notes.
    - NoteResult (single note) and NoteListResult (owner's notes).

Collaborators:
    - domain.entities.Note
===============================================================================
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import List

from ....domain.entities import Note

NOTE_NOT_FOUND_MESSAGE = "The specified Note does not exist."
TITLE_REQUIRED_MESSAGE = "Title is required."


class NoteErrorCode(str, Enum):
    VALIDATION_ERROR = "VALIDATION_ERROR"
    NOT_FOUND = "NOT_FOUND"


@dataclass(frozen=True)
class NoteError:
    code: NoteErrorCode
    message: str


@dataclass
class NoteResult:
    note: Note | None = None
    error: NoteError | None = None


@dataclass
class NoteListResult:
    notes: List[Note] = field(default_factory=list)
    error: NoteError | None = None


def note_not_found() -> NoteResult:
    """Missing and foreign notes are reported identically."""
    return NoteResult(
        error=NoteError(code=NoteErrorCode.NOT_FOUND, message=NOTE_NOT_FOUND_MESSAGE)
    )


def title_required() -> NoteResult:
    return NoteResult(
        error=NoteError(
            code=NoteErrorCode.VALIDATION_ERROR, message=TITLE_REQUIRED_MESSAGE
        )
    )
