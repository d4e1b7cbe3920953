"""
Name: Work Hours Email Templates

Responsibilities:
  - Render the subject and HTML body of the monthly work-hours email
  - Escape every caller-supplied value (summary, sender name)
  - Keep wording in one place so tests can assert it

Collaborators:
  - application/usecases/work_hours/send_work_hours_email.py

Notes:
  - Pure functions, no template engine: the body has a single optional block.
  - A non-blank summary replaces the two default paragraphs entirely.
"""

from __future__ import annotations

from html import escape
from typing import Optional

from ..domain.value_objects import YearMonth

GREETING = "Dear Sir / ma'am,"
OPENING = "I hope this email finds you well."
DEFAULT_PARAGRAPH = (
    "Please find attached my work hours for the month of {month}. "
    "The attached document includes a detailed breakdown of the hours worked "
    "each day, along with the tasks and projects I have been involved in "
    "during this period."
)
DEFAULT_FOLLOW_UP = (
    "If you have any questions or need further clarification, please do not "
    "hesitate to reach out."
)
CLOSING = "Thank you for your attention to this matter."
SIGN_OFF = "Best regards,"


def work_hours_subject(month: YearMonth) -> str:
    return f"Work Hours - {month.label()}"


def attachment_filename(month: YearMonth) -> str:
    return f"Work_Hours_{month}.xlsx"


def _paragraph(text: str) -> str:
    # R: newlines inside a summary are kept as visible line breaks.
    return "<p>" + escape(text).replace("\n", "<br>") + "</p>"


def render_work_hours_email(
    month: YearMonth, sender_name: str, summary: Optional[str] = None
) -> str:
    """
    Build the HTML body.

    Layout: greeting, opening line, then either the custom summary or the
    default paragraphs, closing line, sign-off and sender name.
    """
    blocks = [_paragraph(GREETING), _paragraph(OPENING)]

    if summary and summary.strip():
        blocks.append(_paragraph(summary))
    else:
        blocks.append(_paragraph(DEFAULT_PARAGRAPH.format(month=month.label())))
        blocks.append(_paragraph(DEFAULT_FOLLOW_UP))

    blocks.append(_paragraph(CLOSING))
    blocks.append(_paragraph(f"{SIGN_OFF}\n{sender_name}"))

    return "<html><body>" + "".join(blocks) + "</body></html>"
