from __future__ import annotations

from datetime import date, datetime, time
from typing import Union

from ..core.exceptions import ValidationError

DateLike = Union[date, str]
TimeLike = Union[time, str]


def parse_iso_date(value: DateLike) -> date:
    """Parse YYYY-MM-DD string into date (dates pass through)."""
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    try:
        return datetime.strptime(value, "%Y-%m-%d").date()
    except (TypeError, ValueError) as exc:
        raise ValidationError(f"invalid date {value!r}, expected YYYY-MM-DD") from exc


def parse_clock_time(value: TimeLike) -> time:
    """Parse HH:MM (24h) string into time (times pass through)."""
    if isinstance(value, time):
        return value
    try:
        return datetime.strptime(value, "%H:%M").time()
    except (TypeError, ValueError) as exc:
        raise ValidationError(f"invalid time {value!r}, expected HH:MM") from exc


def period_key(year: int, month: int) -> str:
    return f"{year:04d}-{month:02d}"


def now_local() -> datetime:
    """Current local time.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return datetime.now()
