from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime, time
from typing import Iterable, Optional

from ..core.enums import EntryType
from ..hours.model import HoursBreakdown


@dataclass(frozen=True)
class TimeEntry:
    """Stored shift record with the breakdown computed when it was saved."""

    entry_id: int
    user_id: str
    work_date: date
    clock_in: time
    clock_out: time
    entry_type: EntryType
    breakdown: HoursBreakdown
    created_at: datetime
    clock_out_date: Optional[date] = None
    description: Optional[str] = None

    @property
    def period(self) -> str:
        return self.work_date.strftime("%Y-%m")


def sorted_by_date(entries: Iterable[TimeEntry]) -> list[TimeEntry]:
    return sorted(entries, key=lambda e: (e.work_date, e.clock_in))
