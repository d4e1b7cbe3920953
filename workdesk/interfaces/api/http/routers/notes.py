"""
===============================================================================
CRC CARD — interfaces/api/http/routers/notes.py
===============================================================================

Module:
    Notes Router

Responsibilities:
    - Expose owner-scoped note CRUD (add, list, details, edit, delete).
    - Serialize Note entities into the envelope data.
    - Translate NoteError into envelopes.

Collaborators:
    - application.usecases.notes
    - identity.auth_users.require_user
    - container (DI factories)
===============================================================================
"""

from __future__ import annotations

from typing import Any, Dict

from fastapi import APIRouter, Depends

from .....application.usecases.notes import (
    CreateNoteInput,
    CreateNoteUseCase,
    DeleteNoteUseCase,
    GetNoteUseCase,
    ListNotesUseCase,
    UpdateNoteInput,
    UpdateNoteUseCase,
)
from .....container import (
    get_create_note_use_case,
    get_delete_note_use_case,
    get_get_note_use_case,
    get_list_notes_use_case,
    get_update_note_use_case,
)
from .....crosscutting.envelope import envelope_response
from .....domain.entities import Note, UserRecord
from .....identity.auth_users import require_user
from ..error_mapping import raise_note_error
from ..schemas.notes import CreateNoteReq, NoteIdReq, UpdateNoteReq

router = APIRouter(tags=["notes"])


def note_to_dict(note: Note) -> Dict[str, Any]:
    return {
        "id": note.id,
        "user_id": note.user_id,
        "title": note.title,
        "description": note.description,
        "created_at": note.created_at,
        "updated_at": note.updated_at,
    }


@router.post("/add-note")
def add_note(
    req: CreateNoteReq,
    user: UserRecord = Depends(require_user()),
    use_case: CreateNoteUseCase = Depends(get_create_note_use_case),
):
    result = use_case.execute(
        CreateNoteInput(user_id=user.id, title=req.title, description=req.description)
    )
    if result.error:
        raise_note_error(result.error)
    return envelope_response(
        200, "Note Successfully Add!", {"note": note_to_dict(result.note)}
    )


@router.post("/note")
def list_notes(
    user: UserRecord = Depends(require_user()),
    use_case: ListNotesUseCase = Depends(get_list_notes_use_case),
):
    result = use_case.execute(user.id)
    return envelope_response(
        200, "Note get Successfully!", {"notes": [note_to_dict(n) for n in result.notes]}
    )


@router.post("/note-details")
def note_details(
    req: NoteIdReq,
    user: UserRecord = Depends(require_user()),
    use_case: GetNoteUseCase = Depends(get_get_note_use_case),
):
    result = use_case.execute(req.id, user_id=user.id)
    if result.error:
        raise_note_error(result.error)
    return envelope_response(
        200, "Note Successfully get!", {"note": note_to_dict(result.note)}
    )


@router.post("/edit-note")
def edit_note(
    req: UpdateNoteReq,
    user: UserRecord = Depends(require_user()),
    use_case: UpdateNoteUseCase = Depends(get_update_note_use_case),
):
    result = use_case.execute(
        UpdateNoteInput(
            note_id=req.id,
            user_id=user.id,
            title=req.title,
            description=req.description,
        )
    )
    if result.error:
        raise_note_error(result.error)
    return envelope_response(
        200, "Note Successfully Updated!", {"note": note_to_dict(result.note)}
    )


@router.post("/delete-note")
def delete_note(
    req: NoteIdReq,
    user: UserRecord = Depends(require_user()),
    use_case: DeleteNoteUseCase = Depends(get_delete_note_use_case),
):
    result = use_case.execute(req.id, user_id=user.id)
    if result.error:
        raise_note_error(result.error)
    return envelope_response(200, "Note Successfully Deleted!")
