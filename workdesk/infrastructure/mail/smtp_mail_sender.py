"""
Name: SMTP Mail Sender (aiosmtplib)

Responsibilities:
  - Turn an OutgoingEmail into a MIME message (HTML body + attachments)
  - Deliver it through the configured SMTP relay, STARTTLS optional
  - Translate transport failures into MailDeliveryError

Collaborators:
  - aiosmtplib.send
  - email.message.EmailMessage
  - crosscutting.config (SMTP settings)

Constraints:
  - One connection per message; the per-recipient timeout bounds connect
    and every SMTP command.
  - Never logs credentials or message bodies.
"""

from __future__ import annotations

import asyncio
from email.message import EmailMessage
from email.utils import formataddr

import aiosmtplib

from ...crosscutting.exceptions import MailDeliveryError
from ...crosscutting.logger import logger
from ...domain.services import OutgoingEmail


class SmtpMailSender:
    """R: aiosmtplib implementation of MailSender."""

    def __init__(
        self,
        *,
        host: str,
        port: int,
        username: str = "",
        password: str = "",
        start_tls: bool = True,
        from_email: str,
        from_name: str = "",
    ) -> None:
        self._host = host
        self._port = port
        self._username = username or None
        self._password = password or None
        self._start_tls = start_tls
        self._from = formataddr((from_name, from_email)) if from_name else from_email

    def build_message(self, message: OutgoingEmail) -> EmailMessage:
        mime = EmailMessage()
        mime["From"] = self._from
        mime["To"] = message.to
        mime["Subject"] = message.subject
        mime.set_content("This message requires an HTML capable mail client.")
        mime.add_alternative(message.html_body, subtype="html")

        for attachment in message.attachments:
            maintype, _, subtype = attachment.media_type.partition("/")
            mime.add_attachment(
                attachment.content,
                maintype=maintype,
                subtype=subtype,
                filename=attachment.filename,
            )
        return mime

    async def send(self, message: OutgoingEmail, *, timeout: float) -> None:
        mime = self.build_message(message)
        try:
            await aiosmtplib.send(
                mime,
                hostname=self._host,
                port=self._port,
                username=self._username,
                password=self._password,
                start_tls=self._start_tls,
                timeout=timeout,
            )
        except (aiosmtplib.SMTPException, asyncio.TimeoutError, OSError) as exc:
            logger.error(
                "SMTP delivery failed",
                extra={"to": message.to, "smtp_host": self._host, "error": str(exc)},
            )
            raise MailDeliveryError(
                f"Could not deliver mail to {message.to}", original_error=exc
            ) from exc

        logger.info(
            "SMTP delivery ok",
            extra={"to": message.to, "subject": message.subject},
        )
