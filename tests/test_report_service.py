from __future__ import annotations

from datetime import date, datetime, time
from decimal import Decimal

from shift_timesheet.core.enums import EntryType
from shift_timesheet.entries.model import TimeEntry
from shift_timesheet.hours.model import HoursBreakdown
from shift_timesheet.reports.service import MonthlyReportService


class FakeEntryRepo:
    def __init__(self, entries):
        self._entries = entries
        self.last_args = None

    def get(self, user_id: str, period: str):
        self.last_args = {"user_id": user_id, "period": period}
        return [e for e in self._entries if e.user_id == user_id and e.period == period]


def _entry(entry_id, day, entry_type, total, regular, overtime, bonus, final, user_id="u1"):
    d = date.fromisoformat(day)
    return TimeEntry(
        entry_id=entry_id,
        user_id=user_id,
        work_date=d,
        clock_in=time(8, 0),
        clock_out=time(8, 0),
        entry_type=entry_type,
        breakdown=HoursBreakdown(
            total_hours=Decimal(total),
            regular_hours=Decimal(regular),
            overtime_hours=Decimal(overtime),
            overtime_with_bonus=Decimal(bonus),
            total_final=Decimal(final),
        ),
        created_at=datetime(2026, 2, 1),
    )


ENTRIES = [
    _entry(1, "2026-01-05", EntryType.REGULAR, "24.00", "24.00", "0.00", "0.00", "24.00"),
    _entry(2, "2026-01-09", EntryType.REGULAR, "26.00", "24.00", "2.00", "3.00", "27.00"),
    _entry(3, "2026-01-03", EntryType.EXTRAORDINARY, "12.00", "0.00", "12.00", "18.00", "18.00"),
    _entry(4, "2026-02-02", EntryType.REGULAR, "24.00", "24.00", "0.00", "0.00", "24.00"),
    _entry(5, "2026-01-07", EntryType.REGULAR, "24.00", "24.00", "0.00", "0.00", "24.00", user_id="u2"),
]


def test_monthly_report_totals():
    svc = MonthlyReportService(FakeEntryRepo(ENTRIES))

    report = svc.build_monthly_report("u1", 2026, 1)

    assert [e.entry_id for e in report.entries] == [3, 1, 2]
    assert report.total_hours == Decimal("62.00")
    assert report.regular_hours == Decimal("48.00")
    assert report.overtime_hours == Decimal("14.00")
    assert report.overtime_with_bonus == Decimal("21.00")
    assert report.total_final == Decimal("69.00")
    assert report.extraordinary_hours == Decimal("12.00")
    assert report.completed_shifts == 2
    assert report.contractual_hours == Decimal("48")
    assert report.scheduled_duty_days == 8


def test_report_queries_month_period():
    repo = FakeEntryRepo(ENTRIES)
    svc = MonthlyReportService(repo)

    svc.build_monthly_report("u1", 2026, 2)

    assert repo.last_args == {"user_id": "u1", "period": "2026-02"}


def test_empty_month():
    report = MonthlyReportService(FakeEntryRepo([])).build_monthly_report("u1", 2026, 3)

    assert report.entries == []
    assert report.total_final == Decimal("0")
    assert report.completed_shifts == 0


def test_weekly_workload_is_clipped_to_month():
    weeks = MonthlyReportService(FakeEntryRepo([])).weekly_workload(2026, 1)

    assert len(weeks) == 5
    assert weeks[0].start_date == date(2026, 1, 1)
    assert weeks[0].day_count == 3
    assert weeks[0].expected_hours == Decimal("17.15")
    assert sum(w.expected_hours for w in weeks) == Decimal("177.23")


def test_monthly_balance_against_workload():
    balance = MonthlyReportService(FakeEntryRepo(ENTRIES)).monthly_balance("u1", 2026, 1)

    assert balance.final_total_hours == Decimal("69.00")
    assert balance.monthly_workload == Decimal("177.23")
    assert balance.balance_minutes == 69 * 60 - (177 * 60 + 14)
    assert balance.is_negative


def test_scheduled_duty_days_follow_rotation():
    svc = MonthlyReportService(FakeEntryRepo([]))

    # February 2026 has 28 days: exactly 7 duty days on a 4-day rotation
    assert svc.build_monthly_report("u1", 2026, 2).scheduled_duty_days == 7
