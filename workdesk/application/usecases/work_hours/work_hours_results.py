"""
===============================================================================
WORK HOURS USE CASE RESULTS (Shared Result / Error Models)
===============================================================================

Name:
    Work Hours Use Case Results

Business Goal:
    Shared result and error models for the work-hours use cases, with a
    stable contract for:
      - validation failures
      - missing entries / users
      - recipient resolution and mail delivery outcomes

Why:
    - Use cases return typed results instead of raising outward, which keeps
      the HTTP mapping in one place and the flows easy to unit test.

-------------------------------------------------------------------------------
CRC CARD (Class-Responsibility-Collaborator)
-------------------------------------------------------------------------------
Component:
    work_hours_results models (module)

Responsibilities:
    - WorkHoursErrorCode / WorkHoursError as the error contract.
    - WorkHourView: display projection of an entry (local wall-clock strings).
    - Results: WorkHoursResult, WorkHoursListResult, ExportWorkHoursResult,
      SendWorkHoursEmailResult.

Collaborators:
    - domain.entities.WorkHourEntry
    - application.duration (display formatting)
===============================================================================
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional

from ....domain.entities import WorkHourEntry
from ...duration import display_moment


class WorkHoursErrorCode(str, Enum):
    """
    Error codes for the work-hours use cases.

    Codes:
      - VALIDATION_ERROR: invalid or incomplete input.
      - NOT_FOUND: entry (or acting user) does not exist for the caller.
      - NO_VALID_RECIPIENTS: no recipient id resolved to a user.
      - DELIVERY_FAILED: every attempted delivery failed.
    """

    VALIDATION_ERROR = "VALIDATION_ERROR"
    NOT_FOUND = "NOT_FOUND"
    NO_VALID_RECIPIENTS = "NO_VALID_RECIPIENTS"
    DELIVERY_FAILED = "DELIVERY_FAILED"


@dataclass(frozen=True)
class WorkHoursError:
    code: WorkHoursErrorCode
    message: str


@dataclass(frozen=True)
class WorkHourView:
    """
    Entry as returned to clients.

    start/end are rendered "YYYY-MM-DD HH:MM:SS" in the entry timezone; the
    stored instants are never altered.
    """

    id: int
    user_id: int
    start_date_time: str
    end_date_time: str
    total_hours: str
    timezone: str
    summary: Optional[str] = None

    @classmethod
    def from_entry(cls, entry: WorkHourEntry) -> "WorkHourView":
        return cls(
            id=entry.id,
            user_id=entry.user_id,
            start_date_time=display_moment(entry.start_at, entry.timezone),
            end_date_time=display_moment(entry.end_at, entry.timezone),
            total_hours=entry.total_hours,
            timezone=entry.timezone,
            summary=entry.summary,
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "user_id": self.user_id,
            "start_date_time": self.start_date_time,
            "end_date_time": self.end_date_time,
            "total_hours": self.total_hours,
            "timezone": self.timezone,
            "summary": self.summary,
        }


@dataclass
class WorkHoursResult:
    """Single entry. error is None on success."""

    entry: WorkHourView | None = None
    error: WorkHoursError | None = None


@dataclass
class WorkHoursListResult:
    entries: List[WorkHourView] = field(default_factory=list)
    error: WorkHoursError | None = None


@dataclass
class ExportWorkHoursResult:
    """Spreadsheet bytes plus the download filename."""

    content: bytes = b""
    filename: str = ""
    error: WorkHoursError | None = None


@dataclass
class SendWorkHoursEmailResult:
    """
    Per-recipient outcome of a work-hours email dispatch.

    Fields:
      - sent: user ids that accepted the message
      - failed: user ids whose delivery raised or timed out
      - skipped: raw identifiers that did not resolve to a user
      - no_email: resolved user ids without an email address (never attempted)
      - error: NO_VALID_RECIPIENTS / DELIVERY_FAILED / NOT_FOUND
    """

    sent: List[int] = field(default_factory=list)
    failed: List[int] = field(default_factory=list)
    skipped: List[str] = field(default_factory=list)
    no_email: List[int] = field(default_factory=list)
    error: WorkHoursError | None = None

    @property
    def attempted(self) -> int:
        return len(self.sent) + len(self.failed)

    @property
    def is_partial(self) -> bool:
        return bool(self.sent) and bool(self.failed)
