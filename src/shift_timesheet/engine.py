"""Time-accounting engine.

Pure functions only: no I/O, no shared state. Callers supply raw shift data and
settings and store whatever they get back.
"""

from __future__ import annotations

from typing import Optional

from .common.formatting import format_duration, format_hours
from .common.numbers import Number
from .core.constants import DEFAULT_REGULAR_HOURS_LIMIT
from .hours.duration import apply_extraordinary_override, calculate_hours
from .hours.factory import HoursCalculatorFactory
from .hours.model import HoursBreakdown, ShiftInput
from .workload.model import MonthlyBalance, WeekSpan
from .workload.monthly import clip_to_month, hours_balance, monthly_balance, monthly_workload
from .workload.proportional import proportional_hours
from .workload.weeks import weeks_in_month

__all__ = [
    "HoursBreakdown",
    "MonthlyBalance",
    "ShiftInput",
    "WeekSpan",
    "apply_extraordinary_override",
    "calculate_hours",
    "calculate_shift",
    "clip_to_month",
    "format_duration",
    "format_hours",
    "hours_balance",
    "monthly_balance",
    "monthly_workload",
    "proportional_hours",
    "weeks_in_month",
]


def calculate_shift(
    shift: ShiftInput,
    regular_threshold_hours: Number = DEFAULT_REGULAR_HOURS_LIMIT,
    *,
    factory: Optional[HoursCalculatorFactory] = None,
) -> HoursBreakdown:
    """Breakdown for a shift, using the calculator matching its entry type."""
    calculator = (factory or HoursCalculatorFactory()).for_entry_type(shift.entry_type)
    return calculator.breakdown(shift, regular_threshold_hours=regular_threshold_hours)
