"""24h-on / 72h-off duty rotation."""

from __future__ import annotations

from datetime import date

from ..core.constants import DUTY_ROTATION_DAYS
from ..workload.weeks import month_bounds

_EPOCH = date(1970, 1, 1)


def is_work_day(d: date) -> bool:
    """Every fourth day counted from 1970-01-01 is a duty day."""
    return (d - _EPOCH).days % DUTY_ROTATION_DAYS == 0


def work_days_in_month(year: int, month: int) -> list[date]:
    first_day, last_day = month_bounds(year, month)
    return [
        date(year, month, day)
        for day in range(first_day.day, last_day.day + 1)
        if is_work_day(date(year, month, day))
    ]
