from __future__ import annotations

import logging
from datetime import datetime
from decimal import Decimal
from typing import Optional, Union

from ..common.datetime_utils import DateLike, now_local, parse_iso_date
from ..common.validators import require_non_empty, require_positive_hours
from ..core.exceptions import ValidationError
from .model import Settings
from .repository import SettingsRepository

logger = logging.getLogger(__name__)


class SettingsService:
    """Use case: read and change a user's timesheet settings."""

    def __init__(self, settings: SettingsRepository, *, defaults: Optional[Settings] = None):
        self._settings = settings
        self._defaults = defaults or Settings()

    def get_settings(self, user_id: str) -> Settings:
        return self._settings.get(user_id) or self._defaults

    def regular_hours_limit(self, user_id: str) -> Decimal:
        return self.get_settings(user_id).regular_hours_limit

    def update_settings(
        self,
        user_id: str,
        *,
        project_name: str,
        regular_hours_limit: Union[int, float, Decimal],
        start_date: Optional[DateLike] = None,
        end_date: Optional[DateLike] = None,
        now: Optional[datetime] = None,
    ) -> Settings:
        try:
            name = require_non_empty(project_name, "project_name")
            limit = require_positive_hours(regular_hours_limit, "regular_hours_limit")
            start = parse_iso_date(start_date) if start_date else None
            end = parse_iso_date(end_date) if end_date else None
            if start and end and end < start:
                raise ValidationError("project end date must not be before its start date")
        except ValidationError as exc:
            logger.warning("Rejected settings for user %s: %s", user_id, exc)
            raise

        updated = Settings(
            project_name=name,
            regular_hours_limit=limit,
            start_date=start,
            end_date=end,
            updated_at=now or now_local(),
        )
        self._settings.save(user_id, updated)
        logger.info("Settings updated for user %s (regular hours limit %s)", user_id, limit)
        return updated
