from __future__ import annotations

import logging
from decimal import Decimal

from ..common.datetime_utils import period_key
from ..common.numbers import ZERO_HOURS
from ..common.validators import require_month
from ..core.constants import COMPLETED_SHIFT_HOURS
from ..core.enums import EntryType
from ..entries.model import sorted_by_date
from ..entries.repository import EntryRepository
from ..schedules.rotation import work_days_in_month
from ..workload.model import MonthlyBalance, WeekSpan
from ..workload.monthly import clip_to_month, monthly_balance
from ..workload.weeks import weeks_in_month
from .model import MonthlyReport

logger = logging.getLogger(__name__)


class MonthlyReportService:
    def __init__(self, entries: EntryRepository):
        self._entries = entries

    def build_monthly_report(self, user_id: str, year: int, month: int) -> MonthlyReport:
        year, month = require_month(year, month)
        entries = sorted_by_date(self._entries.get(user_id, period_key(year, month)))

        total_hours = regular_hours = overtime_hours = ZERO_HOURS
        overtime_with_bonus = total_final = extraordinary_hours = ZERO_HOURS
        completed_shifts = 0

        for e in entries:
            b = e.breakdown
            total_hours += b.total_hours
            regular_hours += b.regular_hours
            overtime_hours += b.overtime_hours
            overtime_with_bonus += b.overtime_with_bonus
            total_final += b.total_final
            if e.entry_type == EntryType.EXTRAORDINARY:
                extraordinary_hours += b.total_hours
            if b.total_hours >= COMPLETED_SHIFT_HOURS:
                completed_shifts += 1

        logger.debug("Monthly report for user %s %s: %d entries", user_id, period_key(year, month), len(entries))
        return MonthlyReport(
            year=year,
            month=month,
            entries=entries,
            total_hours=total_hours,
            regular_hours=regular_hours,
            overtime_hours=overtime_hours,
            overtime_with_bonus=overtime_with_bonus,
            total_final=total_final,
            extraordinary_hours=extraordinary_hours,
            completed_shifts=completed_shifts,
            contractual_hours=Decimal(completed_shifts * COMPLETED_SHIFT_HOURS),
            scheduled_duty_days=len(work_days_in_month(year, month)),
        )

    def weekly_workload(self, year: int, month: int) -> list[WeekSpan]:
        """Weeks of the month clipped to it; each carries its expected hours."""
        return [clip_to_month(span, year, month) for span in weeks_in_month(year, month)]

    def monthly_balance(self, user_id: str, year: int, month: int) -> MonthlyBalance:
        report = self.build_monthly_report(user_id, year, month)
        return monthly_balance(report.year, report.month, report.total_final)
