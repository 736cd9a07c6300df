from __future__ import annotations

from datetime import date
from decimal import Decimal
from typing import Optional, Sequence

from ..common.numbers import Number, ZERO_HOURS, hours_to_minutes, to_decimal
from .model import MonthlyBalance, WeekSpan
from .proportional import proportional_hours
from .weeks import month_bounds, weeks_in_month


def _in_month(d: date, year: int, month: int) -> bool:
    return d.year == year and d.month == month


def clip_to_month(span: WeekSpan, year: int, month: int) -> WeekSpan:
    """Pull each end of the span back into the month, independently of the other."""
    first_day, last_day = month_bounds(year, month)
    start = span.start_date if _in_month(span.start_date, year, month) else first_day
    end = span.end_date if _in_month(span.end_date, year, month) else last_day
    return WeekSpan(start_date=start, end_date=end)


def monthly_workload(year: int, month: int, weeks: Optional[Sequence[WeekSpan]] = None) -> Decimal:
    """Expected hours for the month: proportional hours of each clipped week, summed.

    Weeks that do not overlap the month are ignored.
    """
    if weeks is None:
        weeks = weeks_in_month(year, month)

    first_day, last_day = month_bounds(year, month)
    total = ZERO_HOURS
    for span in weeks:
        if span.end_date < first_day or span.start_date > last_day:
            continue
        clipped = clip_to_month(span, year, month)
        total += proportional_hours(clipped.start_date, clipped.end_date)
    return total


def balance_minutes(final_total_hours: Number, workload: Number) -> int:
    return hours_to_minutes(final_total_hours) - hours_to_minutes(workload)


def hours_balance(final_total_hours: Number, workload: Number) -> Decimal:
    """Signed worked-minus-expected hours.

    Both operands are quantized to whole minutes first and subtracted as integers;
    plain subtraction of the decimal values gives different results.
    """
    return Decimal(balance_minutes(final_total_hours, workload)) / 60


def monthly_balance(
    year: int,
    month: int,
    final_total_hours: Number,
    weeks: Optional[Sequence[WeekSpan]] = None,
) -> MonthlyBalance:
    workload = monthly_workload(year, month, weeks)
    minutes = balance_minutes(final_total_hours, workload)
    return MonthlyBalance(
        year=year,
        month=month,
        monthly_workload=workload,
        final_total_hours=to_decimal(final_total_hours),
        hours_balance=Decimal(minutes) / 60,
        balance_minutes=minutes,
    )
