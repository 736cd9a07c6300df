"""Shift duration and overtime rules.

All functions here are pure: they read their arguments and return fresh values.
"""

from __future__ import annotations

from datetime import datetime, timedelta
from fractions import Fraction
from typing import Optional

from ..common.datetime_utils import DateLike, TimeLike, parse_clock_time, parse_iso_date
from ..common.numbers import Number, ZERO_HOURS, round_hours, to_fraction
from ..common.validators import require_positive_hours
from ..core.constants import DEFAULT_REGULAR_HOURS_LIMIT, OVERTIME_BONUS_RATE
from ..core.exceptions import ValidationError
from .model import HoursBreakdown

SHIFT_ORDER_MESSAGE = "clock-out must be after clock-in"

_BONUS_RATE = to_fraction(OVERTIME_BONUS_RATE)
_MICROSECONDS_PER_HOUR = 3600 * 10**6


def resolve_interval(
    clock_in_time: TimeLike,
    clock_out_time: TimeLike,
    clock_in_date: DateLike,
    clock_out_date: Optional[DateLike] = None,
) -> tuple[datetime, datetime]:
    """Turn wall-clock inputs into naive local (start, end) instants."""
    in_date = parse_iso_date(clock_in_date)
    start = datetime.combine(in_date, parse_clock_time(clock_in_time))

    out_date = parse_iso_date(clock_out_date) if clock_out_date else in_date
    end = datetime.combine(out_date, parse_clock_time(clock_out_time))

    # Overnight shift: only when clock-out date was left for us to infer.
    if not clock_out_date and end < start:
        end += timedelta(days=1)

    if end <= start:
        raise ValidationError(SHIFT_ORDER_MESSAGE)
    return start, end


def elapsed_hours(start: datetime, end: datetime) -> Fraction:
    return Fraction((end - start) // timedelta(microseconds=1), _MICROSECONDS_PER_HOUR)


def calculate_hours(
    clock_in_time: TimeLike,
    clock_out_time: TimeLike,
    clock_in_date: DateLike,
    clock_out_date: Optional[DateLike] = None,
    regular_threshold_hours: Number = DEFAULT_REGULAR_HOURS_LIMIT,
) -> HoursBreakdown:
    """Split a shift into regular hours and overtime paid with a 50% bonus.

    Raises ``ValidationError`` when clock-out does not come after clock-in; an
    explicit ``clock_out_date`` is never rolled forward.
    """
    limit = to_fraction(require_positive_hours(regular_threshold_hours, "regular_threshold_hours"))
    start, end = resolve_interval(clock_in_time, clock_out_time, clock_in_date, clock_out_date)

    total = elapsed_hours(start, end)
    regular = min(total, limit)
    overtime = max(Fraction(0), total - limit)
    overtime_with_bonus = overtime * _BONUS_RATE
    total_final = regular + overtime_with_bonus

    return HoursBreakdown(
        total_hours=round_hours(total),
        regular_hours=round_hours(regular),
        overtime_hours=round_hours(overtime),
        overtime_with_bonus=round_hours(overtime_with_bonus),
        total_final=round_hours(total_final),
    )


def apply_extraordinary_override(breakdown: HoursBreakdown) -> HoursBreakdown:
    """Extraordinary call-in: every hour is overtime with the bonus applied."""
    total = breakdown.total_hours
    with_bonus = round_hours(to_fraction(total) * _BONUS_RATE)
    return HoursBreakdown(
        total_hours=total,
        regular_hours=ZERO_HOURS,
        overtime_hours=total,
        overtime_with_bonus=with_bonus,
        total_final=with_bonus,
    )
