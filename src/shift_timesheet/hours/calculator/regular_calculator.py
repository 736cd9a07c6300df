from __future__ import annotations

from ...common.numbers import Number
from ..duration import calculate_hours
from ..model import HoursBreakdown, ShiftInput
from .base import HoursCalculator


class RegularHoursCalculator(HoursCalculator):
    """Regular shift: hours up to the limit are regular, the rest overtime."""

    def breakdown(self, shift: ShiftInput, *, regular_threshold_hours: Number) -> HoursBreakdown:
        return calculate_hours(
            shift.clock_in_time,
            shift.clock_out_time,
            shift.clock_in_date,
            shift.clock_out_date,
            regular_threshold_hours=regular_threshold_hours,
        )
