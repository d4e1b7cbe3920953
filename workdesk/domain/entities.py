"""
===============================================================================
CRC CARD — domain/entities.py
===============================================================================

Module:
    Domain entities (WorkHourEntry, Note, UserRecord, UserOtp, DeviceToken)

Responsibilities:
    - Define the core business structures (no infrastructure).
    - Offer minimal helpers to keep simple invariants (soft delete).
    - Keep clear types for use cases and repositories.

Collaborators:
    - domain.repositories: persist/retrieve these entities.
    - application/usecases: build/consume these entities.
    - interfaces/api: serialize DTOs based on these entities.

Principles:
    - No DB/SMTP/FastAPI dependencies.
===============================================================================
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone
from enum import Enum
from typing import Optional


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


# ---------------------------------------------------------------------------
# Work hours
# ---------------------------------------------------------------------------


@dataclass
class WorkHourEntry:
    """
    One logged work period.

    Notes:
      - start_at / end_at are timezone-aware instants.
      - total_hours is the formatted duration ("02h15min") computed once at
        creation; later edits never recompute it.
    """

    user_id: int
    start_at: datetime
    end_at: datetime
    timezone: str
    total_hours: str
    summary: Optional[str] = None
    id: Optional[int] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    deleted_at: Optional[datetime] = None

    @property
    def is_deleted(self) -> bool:
        return self.deleted_at is not None

    def mark_deleted(self, *, at: datetime | None = None) -> None:
        self.deleted_at = at or _utcnow()


# ---------------------------------------------------------------------------
# Notes
# ---------------------------------------------------------------------------


@dataclass
class Note:
    """Personal note owned by a single user."""

    user_id: int
    title: str
    description: Optional[str] = None
    id: Optional[int] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    deleted_at: Optional[datetime] = None

    @property
    def is_deleted(self) -> bool:
        return self.deleted_at is not None

    def mark_deleted(self, *, at: datetime | None = None) -> None:
        self.deleted_at = at or _utcnow()


# ---------------------------------------------------------------------------
# Users
# ---------------------------------------------------------------------------


class UserRole(str, Enum):
    USER = "User"
    ADMIN = "Admin"


class RecordStatus(str, Enum):
    ACTIVE = "Active"
    INACTIVE = "Inactive"


@dataclass
class UserRecord:
    """
    Account as seen by the work-hours features.

    Only the fields the features read: identity for the temp file name,
    email for delivery and the display name for the mail signature.
    """

    first_name: str
    last_name: Optional[str]
    country_code: str
    mobile: str
    account_id: str
    email: Optional[str] = None
    role: UserRole = UserRole.USER
    status: RecordStatus = RecordStatus.ACTIVE
    id: Optional[int] = None
    created_at: Optional[datetime] = None

    @property
    def display_name(self) -> str:
        return f"{self.first_name or ''} {self.last_name or ''}".strip()

    @property
    def is_active(self) -> bool:
        return self.status == RecordStatus.ACTIVE


@dataclass
class UserOtp:
    """One-time password issued to a mobile number."""

    country_code: str
    mobile: str
    otp: str
    status: RecordStatus = RecordStatus.ACTIVE
    id: Optional[int] = None


@dataclass
class DeviceToken:
    """Push/device token bound to a user session."""

    user_id: int
    token: str
    id: Optional[int] = None
