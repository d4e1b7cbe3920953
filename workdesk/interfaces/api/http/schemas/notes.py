"""
===============================================================================
CRC CARD — schemas/notes.py
===============================================================================

Responsibilities:
    - Request DTOs for notes (create, details, edit, delete).
    - Title is required and non-blank on create/edit.
===============================================================================
"""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, Field, field_validator

from .common import require_text


class CreateNoteReq(BaseModel):
    title: str = Field(..., max_length=255)
    description: Optional[str] = Field(default=None, max_length=20_000)

    @field_validator("title")
    @classmethod
    def title_required(cls, v: str) -> str:
        return require_text(v, "Title")


class NoteIdReq(BaseModel):
    id: int = Field(..., ge=1)


class UpdateNoteReq(NoteIdReq):
    title: str = Field(..., max_length=255)
    description: Optional[str] = Field(default=None, max_length=20_000)

    @field_validator("title")
    @classmethod
    def title_required(cls, v: str) -> str:
        return require_text(v, "Title")
