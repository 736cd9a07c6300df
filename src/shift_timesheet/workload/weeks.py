"""Calendar week helpers. Weeks start on Sunday."""

from __future__ import annotations

from calendar import monthrange
from datetime import date, timedelta

from ..common.validators import require_month
from .model import WeekSpan


def week_start(d: date) -> date:
    """Get the Sunday that starts the week containing date d."""
    # Sunday = 6 in weekday()
    days_since_sunday = (d.weekday() + 1) % 7
    return d - timedelta(days=days_since_sunday)


def week_dates(d: date) -> list[date]:
    """The seven dates, Sunday to Saturday, of the week containing d."""
    start = week_start(d)
    return [start + timedelta(days=i) for i in range(7)]


def month_bounds(year: int, month: int) -> tuple[date, date]:
    year, month = require_month(year, month)
    return date(year, month, 1), date(year, month, monthrange(year, month)[1])


def weeks_in_month(year: int, month: int) -> list[WeekSpan]:
    """Get the unclipped weeks that overlap with the month, in calendar order."""
    first_day, last_day = month_bounds(year, month)

    weeks = []
    current = week_start(first_day)

    while current <= last_day:
        weeks.append(WeekSpan(start_date=current, end_date=current + timedelta(days=6)))
        current = current + timedelta(days=7)

    return weeks
