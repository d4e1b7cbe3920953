"""
===============================================================================
TARJETA CRC — application/duration.py
===============================================================================

Module:
    Work duration calculator + timestamp parsing

Responsibilities:
    - Compute elapsed whole minutes between two instants.
    - Format them as the "HHhMMmin" token stored on every entry.
    - Parse client timestamps, localizing naive values in the entry timezone.
    - Render stored instants for display in their own timezone.

Collaborators:
    - application/usecases/work_hours: add/list use cases.
    - infrastructure/export: report rows.

Constraints:
    - Pure functions; no clock, no I/O.
    - Elapsed time is measured on UTC instants, so DST shifts are counted.
===============================================================================
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Final
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from ..crosscutting.exceptions import InvalidInputError
from ..domain.value_objects import WorkDuration

DISPLAY_FORMAT: Final[str] = "%Y-%m-%d %H:%M:%S"
DATE_FORMAT: Final[str] = "%Y-%m-%d"
TIME_FORMAT: Final[str] = "%H:%M:%S"


def format_duration(total_minutes: int) -> str:
    """120 -> "02h00min"; hours grow past two digits ("123h05min")."""
    hours, minutes = divmod(total_minutes, 60)
    return f"{hours:02d}h{minutes:02d}min"


def compute_work_duration(start: datetime, end: datetime) -> WorkDuration:
    """
    Whole minutes between start and end, floored.

    Raises:
        InvalidInputError: end earlier than start, or naive instants.
    """
    if start.tzinfo is None or end.tzinfo is None:
        raise InvalidInputError("Start and End Date Time must carry a timezone.")

    elapsed = end.astimezone(timezone.utc) - start.astimezone(timezone.utc)
    seconds = elapsed.total_seconds()
    if seconds < 0:
        raise InvalidInputError(
            "End Date Time must not be earlier than Start Date Time."
        )

    total_minutes = int(seconds // 60)
    return WorkDuration(
        total_minutes=total_minutes, formatted=format_duration(total_minutes)
    )


def resolve_timezone(name: str) -> ZoneInfo:
    """IANA label -> ZoneInfo; unknown labels are an input error."""
    try:
        return ZoneInfo((name or "").strip())
    except (ZoneInfoNotFoundError, ValueError) as exc:
        raise InvalidInputError(f"Unknown timezone: {name!r}.") from exc


def parse_moment(text: str, tz_name: str) -> datetime:
    """
    Parse an ISO-8601 timestamp ("2024-06-01 19:15:00", "2024-06-01T19:15Z").

    Naive values are read as wall-clock time in tz_name; values with an
    explicit offset keep it.
    """
    tz = resolve_timezone(tz_name)
    raw = (text or "").strip()
    # fromisoformat only accepts a "Z" suffix from 3.11 on
    if raw[-1:] in ("Z", "z"):
        raw = raw[:-1] + "+00:00"
    try:
        moment = datetime.fromisoformat(raw)
    except ValueError as exc:
        raise InvalidInputError(f"Invalid date time: {text!r}.") from exc

    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=tz)
    return moment


def to_local(moment: datetime, tz_name: str) -> datetime:
    """Express an instant in the entry's timezone (falls back to UTC)."""
    try:
        tz = resolve_timezone(tz_name)
    except InvalidInputError:
        tz = ZoneInfo("UTC")
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    return moment.astimezone(tz)


def display_moment(moment: datetime, tz_name: str) -> str:
    return to_local(moment, tz_name).strftime(DISPLAY_FORMAT)
