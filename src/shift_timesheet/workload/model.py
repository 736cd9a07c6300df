from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from decimal import Decimal

from .proportional import inclusive_day_count, proportional_hours


@dataclass(frozen=True)
class WeekSpan:
    """A Sunday-to-Saturday week, possibly clipped to a month. Both ends inclusive."""

    start_date: date
    end_date: date

    @property
    def day_count(self) -> int:
        return inclusive_day_count(self.start_date, self.end_date)

    @property
    def expected_hours(self) -> Decimal:
        return proportional_hours(self.start_date, self.end_date)


@dataclass(frozen=True)
class MonthlyBalance:
    year: int
    month: int
    monthly_workload: Decimal
    final_total_hours: Decimal
    hours_balance: Decimal
    balance_minutes: int

    @property
    def is_negative(self) -> bool:
        return self.balance_minutes < 0
