"""
===============================================================================
CRC CARD — schemas/common.py
===============================================================================

Responsibilities:
    - Shared validators for request DTOs (required text, optional month).

Notes:
    - Validators raise ValueError with the full client-facing message; the
      validation handler forwards it unchanged.
===============================================================================
"""

from __future__ import annotations

from typing import Optional

from .....domain.value_objects import YearMonth


def require_text(value: Optional[str], label: str) -> str:
    if value is None or not str(value).strip():
        raise ValueError(f"{label} is required.")
    return str(value).strip()


def blank_to_none(value: Optional[str]) -> Optional[str]:
    if value is None or not str(value).strip():
        return None
    return value


def parse_month(value: Optional[str]) -> Optional[YearMonth]:
    if value is None or not str(value).strip():
        return None
    try:
        return YearMonth.parse(value)
    except ValueError as exc:
        raise ValueError("Month must use the YYYY-MM format.") from exc
