from __future__ import annotations

import logging
from datetime import datetime
from typing import Optional

from ..common.datetime_utils import now_local, period_key
from ..common.validators import require_month
from ..core.exceptions import ValidationError
from ..engine import calculate_shift
from ..hours.factory import HoursCalculatorFactory
from ..hours.model import HoursBreakdown, ShiftInput
from ..settings.service import SettingsService
from .model import TimeEntry, sorted_by_date
from .repository import EntryRepository

logger = logging.getLogger(__name__)


class TimeEntryService:
    """Use case: record, correct and list clock-in/clock-out entries.

    The breakdown is computed here with the user's configured regular hours
    limit and stored next to the raw times; editing an entry always recomputes it.
    """

    def __init__(
        self,
        entries: EntryRepository,
        settings: SettingsService,
        *,
        calculator_factory: Optional[HoursCalculatorFactory] = None,
    ):
        self._entries = entries
        self._settings = settings
        self._factory = calculator_factory or HoursCalculatorFactory()

    def preview(self, user_id: str, shift: ShiftInput) -> HoursBreakdown:
        """Breakdown for a shift without storing it."""
        try:
            return calculate_shift(
                shift,
                self._settings.regular_hours_limit(user_id),
                factory=self._factory,
            )
        except ValidationError as exc:
            logger.warning("Rejected shift for user %s on %s: %s", user_id, shift.clock_in_date, exc)
            raise

    def record_entry(
        self,
        user_id: str,
        shift: ShiftInput,
        *,
        description: Optional[str] = None,
        now: Optional[datetime] = None,
    ) -> TimeEntry:
        breakdown = self.preview(user_id, shift)
        entry_id = self._entries.create(
            user_id=user_id,
            shift=shift,
            breakdown=breakdown,
            created_at=now or now_local(),
            description=description,
        )
        logger.info("Recorded %s entry %s for user %s on %s", shift.entry_type.value, entry_id, user_id, shift.clock_in_date)
        return self._get_or_fail(entry_id)

    def update_entry(self, entry_id: int, shift: ShiftInput, *, description: Optional[str] = None) -> TimeEntry:
        """Replace the times of an entry. The description is kept unless a new one is given."""
        existing = self._get_or_fail(entry_id)
        breakdown = self.preview(existing.user_id, shift)
        if description is None:
            description = existing.description

        self._entries.update(entry_id=entry_id, shift=shift, breakdown=breakdown, description=description)
        logger.info("Updated entry %s for user %s", entry_id, existing.user_id)
        return self._get_or_fail(entry_id)

    def delete_entry(self, entry_id: int) -> None:
        if not self._entries.delete(entry_id):
            raise ValidationError(f"time entry {entry_id} does not exist")
        logger.info("Deleted entry %s", entry_id)

    def list_month(self, user_id: str, year: int, month: int) -> list[TimeEntry]:
        year, month = require_month(year, month)
        return sorted_by_date(self._entries.get(user_id, period_key(year, month)))

    def _get_or_fail(self, entry_id: int) -> TimeEntry:
        entry = self._entries.get_by_id(entry_id)
        if not entry:
            raise ValidationError(f"time entry {entry_id} does not exist")
        return entry
