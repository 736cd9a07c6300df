from __future__ import annotations

from ...common.numbers import Number
from ..duration import apply_extraordinary_override
from ..model import HoursBreakdown, ShiftInput
from .base import HoursCalculator
from .regular_calculator import RegularHoursCalculator


class ExtraordinaryHoursCalculator(HoursCalculator):
    """Extraordinary call-in: the whole shift is paid as bonus overtime."""

    def __init__(self, base: HoursCalculator | None = None):
        self._base = base or RegularHoursCalculator()

    def breakdown(self, shift: ShiftInput, *, regular_threshold_hours: Number) -> HoursBreakdown:
        raw = self._base.breakdown(shift, regular_threshold_hours=regular_threshold_hours)
        return apply_extraordinary_override(raw)
