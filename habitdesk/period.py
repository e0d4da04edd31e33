"""Recurrence period windows for habits.

All windows are half-open ``[start, end_exclusive)`` ranges of calendar dates.
Weeks start on Monday.
"""

from datetime import date, datetime, timedelta, timezone
from typing import Any, Iterable, Optional, Tuple

from habitdesk.models import DAILY, WEEKLY

FREQUENCIES = (DAILY, WEEKLY)

Window = Tuple[date, date]


def normalize_frequency(value: Optional[Any]) -> str:
    """Coerce any input to ``"Daily"`` or ``"Weekly"``; unknown values become ``"Daily"``."""
    raw = str(value or "").strip().lower()
    if raw == WEEKLY.lower():
        return WEEKLY
    return DAILY


def utc_today() -> date:
    return datetime.now(timezone.utc).date()


def resolve_period(frequency: str, today: date) -> Window:
    if frequency not in FREQUENCIES:
        raise ValueError(f"unsupported frequency: {frequency!r}")

    if frequency == DAILY:
        return today, today + timedelta(days=1)

    # Sunday=0 .. Saturday=6, then distance back to the most recent Monday.
    day_of_week = (today.weekday() + 1) % 7
    delta = (day_of_week + 6) % 7
    start = today - timedelta(days=delta)
    return start, start + timedelta(days=7)


def union_window(windows: Iterable[Window]) -> Window:
    windows = list(windows)
    return min(start for start, _ in windows), max(end for _, end in windows)
