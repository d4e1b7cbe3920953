"""
===============================================================================
USE CASE: Send Work Hours Email
===============================================================================

Business Goal:
    Mail the sender's monthly work-hours spreadsheet to a list of users.

Flow:
    1) split the raw recipient ids on ","
    2) export the sender's entries for the month
    3) store the bytes in a request-scoped file
       ("work_hours_{account_id}_{timestamp}_{year}_{month}...")
    4) resolve each id to a user; unparseable or missing ids are skipped
    5) no resolved user -> NO_VALID_RECIPIENTS, nothing sent
    6) send to each resolved user with an email, bounded by a timeout; a
       failure never blocks the remaining recipients. Users without an email
       are listed in no_email and never attempted
    7) the stored file is removed on every exit path

-------------------------------------------------------------------------------
CRC CARD
-------------------------------------------------------------------------------
Class:
    SendWorkHoursEmailUseCase

Collaborators:
    - UserRepository.get_user
    - WorkHoursReportExporter.export
    - ScratchFileStore.scoped
    - MailSender.send
    - application.email_templates
===============================================================================
"""

from __future__ import annotations

import asyncio
from dataclasses import dataclass
from datetime import datetime
from typing import Callable, List, Optional

from ....crosscutting.logger import logger
from ....domain.entities import UserRecord
from ....domain.repositories import UserRepository
from ....domain.services import (
    MailAttachment,
    MailSender,
    OutgoingEmail,
    ScratchFileStore,
    WorkHoursReportExporter,
)
from ....domain.value_objects import ExportScope, YearMonth
from ...email_templates import (
    attachment_filename,
    render_work_hours_email,
    work_hours_subject,
)
from .work_hours_results import (
    SendWorkHoursEmailResult,
    WorkHoursError,
    WorkHoursErrorCode,
)

NO_VALID_RECIPIENTS_MESSAGE = "No valid recipients found."
DELIVERY_FAILED_MESSAGE = "Work Hours email could not be delivered."
SENDER_NOT_FOUND_MESSAGE = "User Not Found!"


@dataclass
class SendWorkHoursEmailInput:
    sender_id: int
    recipient_ids: str
    month: Optional[YearMonth] = None
    summary: Optional[str] = None


class SendWorkHoursEmailUseCase:
    def __init__(
        self,
        users: UserRepository,
        exporter: WorkHoursReportExporter,
        files: ScratchFileStore,
        mail_sender: MailSender,
        *,
        timeout_seconds: float = 10.0,
        clock: Callable[[], datetime] = datetime.now,
    ) -> None:
        self._users = users
        self._exporter = exporter
        self._files = files
        self._mail_sender = mail_sender
        self._timeout = timeout_seconds
        self._clock = clock

    async def execute(
        self, input_data: SendWorkHoursEmailInput
    ) -> SendWorkHoursEmailResult:
        sender = self._users.get_user(input_data.sender_id)
        if sender is None:
            return self._error(WorkHoursErrorCode.NOT_FOUND, SENDER_NOT_FOUND_MESSAGE)

        now = self._clock()
        month = input_data.month or YearMonth.of(now)
        raw_ids = (input_data.recipient_ids or "").split(",")

        content = self._exporter.export(
            ExportScope(user_ids=(sender.id,), month=month)
        )

        with self._files.scoped(
            content, name=self._file_name(sender, now, month), suffix=".xlsx"
        ) as path:
            recipients, skipped = self._resolve_recipients(raw_ids)
            if not recipients:
                logger.info(
                    "work hours email: no valid recipients",
                    extra={"recipient_ids": input_data.recipient_ids},
                )
                return SendWorkHoursEmailResult(
                    skipped=skipped,
                    error=WorkHoursError(
                        code=WorkHoursErrorCode.NO_VALID_RECIPIENTS,
                        message=NO_VALID_RECIPIENTS_MESSAGE,
                    ),
                )

            attachment = MailAttachment(
                filename=attachment_filename(month), content=path.read_bytes()
            )
            body = render_work_hours_email(
                month, sender.display_name, input_data.summary
            )
            result = SendWorkHoursEmailResult(skipped=skipped)

            for user in recipients:
                if not (user.email or "").strip():
                    result.no_email.append(user.id)
                    continue
                message = OutgoingEmail(
                    to=user.email,
                    subject=work_hours_subject(month),
                    html_body=body,
                    attachments=(attachment,),
                )
                if await self._deliver(message, user):
                    result.sent.append(user.id)
                else:
                    result.failed.append(user.id)

        if result.failed and not result.sent:
            result.error = WorkHoursError(
                code=WorkHoursErrorCode.DELIVERY_FAILED,
                message=DELIVERY_FAILED_MESSAGE,
            )
        return result

    # =========================================================================
    # Private helpers
    # =========================================================================

    def _resolve_recipients(
        self, raw_ids: List[str]
    ) -> tuple[List[UserRecord], List[str]]:
        recipients: List[UserRecord] = []
        skipped: List[str] = []
        for raw in raw_ids:
            try:
                user_id = int(raw)
            except ValueError:
                skipped.append(raw)
                continue
            user = self._users.get_user(user_id)
            if user is None:
                skipped.append(raw)
                continue
            recipients.append(user)
        return recipients, skipped

    async def _deliver(self, message: OutgoingEmail, user: UserRecord) -> bool:
        try:
            await asyncio.wait_for(
                self._mail_sender.send(message, timeout=self._timeout),
                timeout=self._timeout,
            )
        except asyncio.TimeoutError:
            logger.warning(
                "work hours email timed out",
                extra={"recipient_id": user.id, "timeout_s": self._timeout},
            )
            return False
        except Exception as exc:
            logger.error(
                "work hours email failed",
                extra={"recipient_id": user.id, "error": str(exc)},
            )
            return False
        return True

    @staticmethod
    def _file_name(sender: UserRecord, now: datetime, month: YearMonth) -> str:
        stamp = now.strftime("%Y%m%d%H%M%S")
        return f"work_hours_{sender.account_id}_{stamp}_{month.year}_{month.month:02d}"

    @staticmethod
    def _error(code: WorkHoursErrorCode, message: str) -> SendWorkHoursEmailResult:
        return SendWorkHoursEmailResult(error=WorkHoursError(code=code, message=message))
