from __future__ import annotations

from datetime import datetime
from typing import Optional, Protocol, Sequence

from ..hours.model import HoursBreakdown, ShiftInput
from .model import TimeEntry


class EntryRepository(Protocol):
    def get(self, user_id: str, period: str) -> Sequence[TimeEntry]:
        """Entries of a user whose clock-in date falls in ``period`` (YYYY-MM)."""

        raise NotImplementedError

    def get_by_id(self, entry_id: int) -> Optional[TimeEntry]:
        raise NotImplementedError

    def create(
        self,
        *,
        user_id: str,
        shift: ShiftInput,
        breakdown: HoursBreakdown,
        created_at: datetime,
        description: Optional[str] = None,
    ) -> int:
        raise NotImplementedError

    def update(
        self,
        *,
        entry_id: int,
        shift: ShiftInput,
        breakdown: HoursBreakdown,
        description: Optional[str] = None,
    ) -> bool:
        raise NotImplementedError

    def delete(self, entry_id: int) -> bool:
        raise NotImplementedError
