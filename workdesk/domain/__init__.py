"""
===============================================================================
CRC CARD — domain/__init__.py
===============================================================================

Module:
    Domain layer exports (public surface of the domain)

Responsibilities:
    - Centralize exports for clean imports in application/interfaces.

Rules:
    - Only re-exports domain contracts/entities.
    - Never import infrastructure here.
===============================================================================
"""

from .entities import (
    DeviceToken,
    Note,
    RecordStatus,
    UserOtp,
    UserRecord,
    UserRole,
    WorkHourEntry,
)
from .repositories import NoteRepository, UserRepository, WorkHoursRepository
from .services import (
    MailAttachment,
    MailSender,
    OutgoingEmail,
    ScratchFileStore,
    WorkHoursReportExporter,
)
from .value_objects import ExportScope, WorkDuration, YearMonth

__all__ = [
    # Entities
    "WorkHourEntry",
    "Note",
    "UserRecord",
    "UserOtp",
    "DeviceToken",
    "UserRole",
    "RecordStatus",
    # Repository ports
    "WorkHoursRepository",
    "NoteRepository",
    "UserRepository",
    # Service ports
    "WorkHoursReportExporter",
    "MailSender",
    "OutgoingEmail",
    "MailAttachment",
    "ScratchFileStore",
    # Value objects
    "YearMonth",
    "WorkDuration",
    "ExportScope",
]
