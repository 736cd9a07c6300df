from __future__ import annotations

from dataclasses import dataclass
from datetime import date, time
from decimal import Decimal
from typing import Optional

from ..common.datetime_utils import parse_clock_time, parse_iso_date
from ..core.enums import EntryType
from ..core.exceptions import ValidationError


@dataclass(frozen=True)
class ShiftInput:
    """A single worked interval as entered by the user.

    ``clock_out_date`` left empty means "same day as clock-in", rolling over to
    the next day when clock-out is earlier than clock-in.
    """

    clock_in_date: date
    clock_in_time: time
    clock_out_time: time
    clock_out_date: Optional[date] = None
    entry_type: EntryType = EntryType.REGULAR

    @classmethod
    def from_strings(
        cls,
        *,
        clock_in_date: str,
        clock_in_time: str,
        clock_out_time: str,
        clock_out_date: Optional[str] = None,
        entry_type: str = EntryType.REGULAR.value,
    ) -> "ShiftInput":
        try:
            kind = EntryType(entry_type)
        except ValueError as exc:
            raise ValidationError(f"unknown entry type {entry_type!r}") from exc

        return cls(
            clock_in_date=parse_iso_date(clock_in_date),
            clock_in_time=parse_clock_time(clock_in_time),
            clock_out_time=parse_clock_time(clock_out_time),
            clock_out_date=parse_iso_date(clock_out_date) if clock_out_date else None,
            entry_type=kind,
        )


@dataclass(frozen=True)
class HoursBreakdown:
    """Hours split of one shift. Every field carries 2 decimal places."""

    total_hours: Decimal
    regular_hours: Decimal
    overtime_hours: Decimal
    overtime_with_bonus: Decimal
    total_final: Decimal
