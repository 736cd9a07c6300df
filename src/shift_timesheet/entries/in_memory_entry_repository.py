from __future__ import annotations

from dataclasses import replace
from datetime import datetime
from typing import Optional, Sequence

from ..hours.model import HoursBreakdown, ShiftInput
from .model import TimeEntry
from .repository import EntryRepository


class InMemoryEntryRepository(EntryRepository):
    """Dict-backed entry store, keyed by entry id."""

    def __init__(self):
        self._by_id: dict[int, TimeEntry] = {}
        self._id = 0

    def get(self, user_id: str, period: str) -> Sequence[TimeEntry]:
        return [
            e
            for e in self._by_id.values()
            if e.user_id == user_id and e.work_date.isoformat().startswith(period)
        ]

    def get_by_id(self, entry_id: int) -> Optional[TimeEntry]:
        return self._by_id.get(entry_id)

    def create(
        self,
        *,
        user_id: str,
        shift: ShiftInput,
        breakdown: HoursBreakdown,
        created_at: datetime,
        description: Optional[str] = None,
    ) -> int:
        self._id += 1
        self._by_id[self._id] = TimeEntry(
            entry_id=self._id,
            user_id=user_id,
            work_date=shift.clock_in_date,
            clock_in=shift.clock_in_time,
            clock_out=shift.clock_out_time,
            clock_out_date=shift.clock_out_date,
            entry_type=shift.entry_type,
            breakdown=breakdown,
            created_at=created_at,
            description=description,
        )
        return self._id

    def update(
        self,
        *,
        entry_id: int,
        shift: ShiftInput,
        breakdown: HoursBreakdown,
        description: Optional[str] = None,
    ) -> bool:
        existing = self._by_id.get(entry_id)
        if not existing:
            return False
        self._by_id[entry_id] = replace(
            existing,
            work_date=shift.clock_in_date,
            clock_in=shift.clock_in_time,
            clock_out=shift.clock_out_time,
            clock_out_date=shift.clock_out_date,
            entry_type=shift.entry_type,
            breakdown=breakdown,
            description=description,
        )
        return True

    def delete(self, entry_id: int) -> bool:
        return self._by_id.pop(entry_id, None) is not None
