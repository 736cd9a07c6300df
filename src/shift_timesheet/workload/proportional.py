from __future__ import annotations

from decimal import Decimal
from fractions import Fraction

from ..common.datetime_utils import DateLike, parse_iso_date
from ..common.numbers import round_hours
from ..core.constants import DAILY_WORKLOAD_HOURS, DAILY_WORKLOAD_MINUTES

# 5h43min per calendar day, kept exact instead of 40/7.
HOURS_PER_DAY = Fraction(DAILY_WORKLOAD_HOURS * 60 + DAILY_WORKLOAD_MINUTES, 60)


def inclusive_day_count(span_start: DateLike, span_end: DateLike) -> int:
    start = parse_iso_date(span_start)
    end = parse_iso_date(span_end)
    return (end - start).days + 1


def proportional_hours(span_start: DateLike, span_end: DateLike) -> Decimal:
    """Expected workload for the days from ``span_start`` to ``span_end`` inclusive."""
    return round_hours(inclusive_day_count(span_start, span_end) * HOURS_PER_DAY)
