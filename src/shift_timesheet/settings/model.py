from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from decimal import Decimal
from typing import Optional

from ..core.constants import DEFAULT_PROJECT_NAME, DEFAULT_REGULAR_HOURS_LIMIT


@dataclass(frozen=True)
class Settings:
    """Per-user timesheet settings."""

    project_name: str = DEFAULT_PROJECT_NAME
    regular_hours_limit: Decimal = Decimal(DEFAULT_REGULAR_HOURS_LIMIT)
    start_date: Optional[date] = None
    end_date: Optional[date] = None
    updated_at: Optional[datetime] = None
