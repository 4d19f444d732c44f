"""Calendar-day arithmetic and formatting helpers."""

from __future__ import annotations

from datetime import date, datetime, timedelta
from typing import Any, List, Optional

import pandas as pd

WEEKDAYS_JP = ["日", "月", "火", "水", "木", "金", "土"]


def to_calendar_date(value: Any) -> Optional[date]:
    """Normalize a date-like value to a calendar date; empty input means absent."""
    if value is None:
        return None
    if isinstance(value, str):
        value = value.strip()
        if not value:
            return None
    elif pd.isna(value):
        return None

    if isinstance(value, pd.Timestamp):
        return value.normalize().date()
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value

    parsed = pd.to_datetime(value, errors="coerce")
    if pd.isna(parsed):
        raise ValueError(f"Unrecognized date: {value!r}")
    return parsed.normalize().date()


def _require_date(value: Any) -> date:
    day = to_calendar_date(value)
    if day is None:
        raise ValueError("A date is required.")
    return day


def add_days(value: Any, days: int) -> date:
    """Return the calendar date ``days`` after ``value`` (negative goes back)."""
    return _require_date(value) + timedelta(days=int(days))


def day_difference(a: Any, b: Any) -> int:
    """Whole calendar days from ``b`` to ``a``; negative when ``a`` is earlier."""
    return (_require_date(a) - _require_date(b)).days


def date_range(start: Any, end: Any) -> List[date]:
    """Inclusive list of consecutive dates from start to end."""
    first = _require_date(start)
    span = day_difference(end, first)
    return [first + timedelta(days=offset) for offset in range(span + 1)]


def format_date_jp(value: Any) -> str:
    """Render a date as e.g. ``1月16日(火)``."""
    day = _require_date(value)
    # date.weekday() is Monday=0; the table is Sunday-first.
    weekday = WEEKDAYS_JP[(day.weekday() + 1) % 7]
    return f"{day.month}月{day.day}日({weekday})"
