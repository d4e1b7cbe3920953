"""
Name: Work Hours Email Template Tests

Responsibilities:
  - Default body references the month label
  - Custom summary replaces the default paragraphs (escaped)
  - Subject / attachment naming
"""

import pytest

from workdesk.application.email_templates import (
    CLOSING,
    DEFAULT_FOLLOW_UP,
    GREETING,
    attachment_filename,
    render_work_hours_email,
    work_hours_subject,
)
from workdesk.domain.value_objects import YearMonth

pytestmark = pytest.mark.unit

MAY = YearMonth(2024, 5)


def test_default_body_order():
    body = render_work_hours_email(MAY, "Asha Rao")

    assert body.startswith("<html><body>")
    assert body.index("Dear Sir / ma&#x27;am,") < body.index("May 2024")
    assert DEFAULT_FOLLOW_UP in body
    assert body.index(CLOSING) < body.index("Asha Rao")
    assert body.endswith("</body></html>")


def test_custom_summary_is_escaped_and_keeps_line_breaks():
    body = render_work_hours_email(MAY, "Asha", "Line one\n<b>two</b>")

    assert "Line one<br>&lt;b&gt;two&lt;/b&gt;" in body
    assert DEFAULT_FOLLOW_UP not in body


def test_blank_summary_falls_back_to_default():
    assert render_work_hours_email(MAY, "Asha", "  ") == render_work_hours_email(
        MAY, "Asha"
    )


def test_greeting_constant_is_plain_text():
    assert "<" not in GREETING


def test_subject_and_attachment_name():
    assert work_hours_subject(MAY) == "Work Hours - May 2024"
    assert attachment_filename(MAY) == "Work_Hours_2024-05.xlsx"
