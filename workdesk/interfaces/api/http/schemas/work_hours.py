"""
===============================================================================
CRC CARD — schemas/work_hours.py
===============================================================================

Module:
    HTTP schemas for work hours

Responsibilities:
    - Request DTOs for add / list / edit summary / export / send email.
    - Field validation with client-facing messages.

Collaborators:
    - schemas.common (shared validators)
    - domain.value_objects.YearMonth
===============================================================================
"""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, Field, field_validator

from .....domain.value_objects import YearMonth
from .common import blank_to_none, parse_month, require_text


class AddWorkHoursReq(BaseModel):
    start_date_time: str = Field(..., description="ISO-8601; naive values use timezone")
    end_date_time: str = Field(..., description="ISO-8601; naive values use timezone")
    timezone: str = Field(..., max_length=64, description="IANA timezone label")
    summary: Optional[str] = Field(default=None, max_length=10_000)

    @field_validator("start_date_time")
    @classmethod
    def start_required(cls, v: str) -> str:
        return require_text(v, "Start Date Time")

    @field_validator("end_date_time")
    @classmethod
    def end_required(cls, v: str) -> str:
        return require_text(v, "End Date Time")

    @field_validator("timezone")
    @classmethod
    def timezone_required(cls, v: str) -> str:
        return require_text(v, "Timezone")

    @field_validator("summary")
    @classmethod
    def summary_blank_is_none(cls, v: Optional[str]) -> Optional[str]:
        return blank_to_none(v)


class ListWorkHoursReq(BaseModel):
    month: Optional[str] = Field(default=None, description="YYYY-MM; defaults to now")

    @field_validator("month")
    @classmethod
    def month_format(cls, v: Optional[str]) -> Optional[str]:
        parse_month(v)
        return v

    def target_month(self) -> Optional[YearMonth]:
        return parse_month(self.month)


class EditWorkHoursSummaryReq(BaseModel):
    id: int = Field(..., ge=1)
    summary: Optional[str] = Field(default=None, max_length=10_000)


class SendWorkHoursEmailReq(BaseModel):
    id: str = Field(..., description="Comma-separated recipient user ids")
    month: str = Field(..., description="YYYY-MM")
    summary: Optional[str] = Field(default=None, max_length=10_000)

    @field_validator("id", mode="before")
    @classmethod
    def ids_required(cls, v):
        # R: a single numeric id may arrive as a JSON number.
        if v is None or not str(v).strip():
            raise ValueError("Id is required.")
        return str(v)

    @field_validator("month")
    @classmethod
    def month_required(cls, v: str) -> str:
        require_text(v, "Month")
        parse_month(v)
        return v

    def target_month(self) -> YearMonth:
        return parse_month(self.month)
