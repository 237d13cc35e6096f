"""Date utilities for outlay.

Pure functions for deriving calendar fields from expense dates.
"""

from __future__ import annotations

from datetime import date, datetime, timezone


def month_and_year(value: date) -> tuple[int, int]:
    """Derive the calendar (month, year) of a date.

    Args:
        value: Expense date. A datetime is accepted and its date part is used.

    Returns:
        Tuple of (month, year), with month in 1-12.
    """
    if isinstance(value, datetime):
        value = value.date()
    return value.month, value.year


def utc_now() -> datetime:
    """Current instant as a timezone-aware UTC datetime."""
    return datetime.now(timezone.utc)
