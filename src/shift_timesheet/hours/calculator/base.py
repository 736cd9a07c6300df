from __future__ import annotations

from abc import ABC, abstractmethod

from ...common.numbers import Number
from ..model import HoursBreakdown, ShiftInput


class HoursCalculator(ABC):
    """Calculator interface (Strategy Pattern per entry type)."""

    @abstractmethod
    def breakdown(self, shift: ShiftInput, *, regular_threshold_hours: Number) -> HoursBreakdown:
        raise NotImplementedError
