# =============================================================================
# FILE: domain/value_objects.py
# =============================================================================
"""
===============================================================================
DOMAIN: Value Objects (Immutable Domain Primitives)
===============================================================================

Contents:
    - YearMonth: calendar month used to filter, title and name reports
    - WorkDuration: whole-minute duration plus its formatted token
    - ExportScope: which owners and which month a report covers

Principles:
    - Immutability (frozen dataclasses)
    - Validation in the constructor
    - No side effects
===============================================================================
"""

from __future__ import annotations

import calendar
import re
from dataclasses import dataclass
from datetime import datetime
from typing import Final, Tuple

_MONTH_PATTERN: Final = re.compile(r"^(\d{4})-(\d{1,2})$")


# -----------------------------------------------------------------------------
# YearMonth
# -----------------------------------------------------------------------------
@dataclass(frozen=True, slots=True)
class YearMonth:
    """
    Calendar month.

    Accepts "YYYY-MM" (also "YYYY-M") through parse(); label() renders the
    human form used in sheet titles and mail text ("June 2024").
    """

    year: int
    month: int

    def __post_init__(self) -> None:
        if not 1 <= self.month <= 12:
            raise ValueError(f"month must be between 1 and 12, got {self.month}")
        if not 1 <= self.year <= 9999:
            raise ValueError(f"year out of range: {self.year}")

    @classmethod
    def parse(cls, text: str) -> "YearMonth":
        match = _MONTH_PATTERN.match((text or "").strip())
        if not match:
            raise ValueError("Month must use the YYYY-MM format.")
        return cls(year=int(match.group(1)), month=int(match.group(2)))

    @classmethod
    def of(cls, moment: datetime) -> "YearMonth":
        return cls(year=moment.year, month=moment.month)

    def contains(self, moment: datetime) -> bool:
        return moment.year == self.year and moment.month == self.month

    def label(self) -> str:
        return f"{calendar.month_name[self.month]} {self.year}"

    def __str__(self) -> str:
        return f"{self.year:04d}-{self.month:02d}"


# -----------------------------------------------------------------------------
# WorkDuration
# -----------------------------------------------------------------------------
@dataclass(frozen=True, slots=True)
class WorkDuration:
    """Elapsed whole minutes and the "HHhMMmin" token derived from them."""

    total_minutes: int
    formatted: str

    def __post_init__(self) -> None:
        if self.total_minutes < 0:
            raise ValueError("total_minutes must be >= 0")


# -----------------------------------------------------------------------------
# ExportScope
# -----------------------------------------------------------------------------
@dataclass(frozen=True, slots=True)
class ExportScope:
    """Owners and month covered by a work-hours report."""

    user_ids: Tuple[int, ...]
    month: YearMonth

    def __post_init__(self) -> None:
        if not self.user_ids:
            raise ValueError("ExportScope requires at least one user id")

    @property
    def is_multi_user(self) -> bool:
        return len(set(self.user_ids)) > 1
