from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from ..entries.model import TimeEntry


@dataclass(frozen=True)
class MonthlyReport:
    """Read-model: one user's month of entries with summed hour fields."""

    year: int
    month: int
    entries: list[TimeEntry]
    total_hours: Decimal
    regular_hours: Decimal
    overtime_hours: Decimal
    overtime_with_bonus: Decimal
    total_final: Decimal
    extraordinary_hours: Decimal
    completed_shifts: int
    contractual_hours: Decimal
    scheduled_duty_days: int
