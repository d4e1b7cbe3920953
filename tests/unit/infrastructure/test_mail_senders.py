"""
Name: Mail Sender Adapter Tests

Responsibilities:
  - SMTP MIME layout (HTML alternative + attachment)
  - SMTP failures surface as MailDeliveryError
  - Fake sender records / fails on demand
"""

import asyncio
from unittest.mock import AsyncMock, patch

import aiosmtplib
import pytest

from workdesk.crosscutting.exceptions import MailDeliveryError
from workdesk.domain.services import XLSX_MEDIA_TYPE, MailAttachment, OutgoingEmail
from workdesk.infrastructure.mail import FakeMailSender, SmtpMailSender

pytestmark = pytest.mark.unit


def _message(to="ravi@example.com"):
    return OutgoingEmail(
        to=to,
        subject="Work Hours - June 2024",
        html_body="<html><body><p>Hi</p></body></html>",
        attachments=(
            MailAttachment(filename="Work_Hours_2024-06.xlsx", content=b"PK\x03\x04"),
        ),
    )


def _smtp():
    return SmtpMailSender(
        host="smtp.example.com",
        port=587,
        username="user",
        password="secret",
        from_email="no-reply@example.com",
        from_name="Workdesk",
    )


def test_build_message_layout():
    mime = _smtp().build_message(_message())

    assert mime["To"] == "ravi@example.com"
    assert mime["Subject"] == "Work Hours - June 2024"
    assert "Workdesk" in mime["From"]

    html = mime.get_body(preferencelist=("html",))
    assert "<p>Hi</p>" in html.get_content()

    (attachment,) = list(mime.iter_attachments())
    assert attachment.get_filename() == "Work_Hours_2024-06.xlsx"
    assert attachment.get_content_type() == XLSX_MEDIA_TYPE
    assert attachment.get_content() == b"PK\x03\x04"


def test_send_passes_timeout_to_aiosmtplib():
    with patch("aiosmtplib.send", new_callable=AsyncMock) as send:
        asyncio.run(_smtp().send(_message(), timeout=3.0))

    kwargs = send.await_args.kwargs
    assert kwargs["hostname"] == "smtp.example.com"
    assert kwargs["timeout"] == 3.0
    assert kwargs["start_tls"] is True


def test_send_wraps_smtp_errors():
    failing = AsyncMock(side_effect=aiosmtplib.SMTPException("relay denied"))
    with patch("aiosmtplib.send", failing):
        with pytest.raises(MailDeliveryError) as exc:
            asyncio.run(_smtp().send(_message(), timeout=1.0))

    assert isinstance(exc.value.original_error, aiosmtplib.SMTPException)


def test_fake_sender_records_and_fails_on_demand():
    fake = FakeMailSender(failing_addresses=["BOUNCE@example.com"])

    asyncio.run(fake.send(_message(), timeout=1.0))
    with pytest.raises(MailDeliveryError):
        asyncio.run(fake.send(_message("bounce@example.com"), timeout=1.0))

    assert [m.to for m in fake.sent] == ["ravi@example.com"]
    fake.clear()
    assert fake.sent == []
