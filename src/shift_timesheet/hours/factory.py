from __future__ import annotations

from dataclasses import dataclass

from ..core.enums import EntryType
from .calculator.base import HoursCalculator
from .calculator.extraordinary_calculator import ExtraordinaryHoursCalculator
from .calculator.regular_calculator import RegularHoursCalculator


@dataclass
class HoursCalculatorFactory:
    """Factory Pattern: choose the hours calculator for an entry type."""

    def for_entry_type(self, entry_type: EntryType) -> HoursCalculator:
        if entry_type == EntryType.EXTRAORDINARY:
            return ExtraordinaryHoursCalculator()
        return RegularHoursCalculator()
