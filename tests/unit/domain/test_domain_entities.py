"""
Name: Domain Entity Tests

Responsibilities:
  - Soft-delete flags on entries and notes
  - UserRecord derived properties
"""

from datetime import datetime, timezone

import pytest

from workdesk.domain.entities import (
    Note,
    RecordStatus,
    UserRecord,
    UserRole,
    WorkHourEntry,
)

pytestmark = pytest.mark.unit


def test_work_hour_entry_mark_deleted():
    start = datetime(2024, 6, 1, 9, 0, tzinfo=timezone.utc)
    entry = WorkHourEntry(
        user_id=1, start_at=start, end_at=start, timezone="UTC", total_hours="00h00min"
    )
    assert not entry.is_deleted

    at = datetime(2024, 6, 2, tzinfo=timezone.utc)
    entry.mark_deleted(at=at)
    assert entry.is_deleted
    assert entry.deleted_at == at


def test_note_mark_deleted_defaults_to_now():
    note = Note(user_id=1, title="Standup")
    note.mark_deleted()
    assert note.is_deleted
    assert note.deleted_at.tzinfo is not None


def test_user_display_name_and_status():
    user = UserRecord(
        first_name="Asha",
        last_name="",
        country_code="+91",
        mobile="9876543210",
        account_id="ACC1",
    )
    assert user.display_name == "Asha"
    assert user.role == UserRole.USER
    assert user.is_active

    user.status = RecordStatus.INACTIVE
    assert not user.is_active
