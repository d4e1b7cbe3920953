"""
===============================================================================
CRC CARD — domain/services.py
===============================================================================

Module:
    External service ports (Protocols) and their message types

Responsibilities:
    - Define contracts for report rendering and mail delivery.
    - Keep application free of openpyxl / SMTP details.

Collaborators:
    - infrastructure/export, infrastructure/mail: concrete adapters.
    - application/usecases/work_hours: consume these ports.

Rules:
    - Interfaces and plain data only.
===============================================================================
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import ContextManager, Protocol

from .value_objects import ExportScope

XLSX_MEDIA_TYPE = "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"


@dataclass(frozen=True)
class MailAttachment:
    """File attached to an outgoing email."""

    filename: str
    content: bytes
    media_type: str = XLSX_MEDIA_TYPE


@dataclass(frozen=True)
class OutgoingEmail:
    """Transport-agnostic email (HTML body)."""

    to: str
    subject: str
    html_body: str
    attachments: tuple[MailAttachment, ...] = field(default_factory=tuple)


class WorkHoursReportExporter(Protocol):
    """Renders the entries of a scope into spreadsheet bytes."""

    def export(self, scope: ExportScope) -> bytes:
        """Build the whole workbook in memory; store errors propagate."""
        ...


class ScratchFileStore(Protocol):
    """Request-scoped files that are removed when the context exits."""

    def scoped(self, content: bytes, *, name: str, suffix: str) -> ContextManager[Path]:
        """Write content to a fresh file and yield its path; always deleted on exit."""
        ...


class MailSender(Protocol):
    """Delivers one email; raises MailDeliveryError on failure."""

    async def send(self, message: OutgoingEmail, *, timeout: float) -> None:
        ...
