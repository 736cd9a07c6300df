from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .common.validators import require_non_empty, require_positive_hours
from .core.constants import DEFAULT_PROJECT_NAME, DEFAULT_REGULAR_HOURS_LIMIT
from .entries.in_memory_entry_repository import InMemoryEntryRepository
from .entries.repository import EntryRepository
from .entries.service import TimeEntryService
from .reports.service import MonthlyReportService
from .settings.in_memory_settings_repository import InMemorySettingsRepository
from .settings.model import Settings
from .settings.repository import SettingsRepository
from .settings.service import SettingsService


@dataclass(frozen=True)
class Container:
    entries_repo: EntryRepository
    settings_repo: SettingsRepository

    settings_service: SettingsService
    entry_service: TimeEntryService
    report_service: MonthlyReportService


def build_container(
    *,
    app_config: Optional[dict] = None,
    entries_repo: Optional[EntryRepository] = None,
    settings_repo: Optional[SettingsRepository] = None,
) -> Container:
    """Wire services. Repositories default to in-memory stores."""
    app_config = app_config or {}
    defaults = Settings(
        project_name=require_non_empty(str(app_config.get("project_name", DEFAULT_PROJECT_NAME)), "project_name"),
        regular_hours_limit=require_positive_hours(
            app_config.get("regular_hours_limit", DEFAULT_REGULAR_HOURS_LIMIT), "regular_hours_limit"
        ),
    )

    entries_repo = entries_repo or InMemoryEntryRepository()
    settings_repo = settings_repo or InMemorySettingsRepository()

    settings_service = SettingsService(settings_repo, defaults=defaults)
    entry_service = TimeEntryService(entries_repo, settings_service)
    report_service = MonthlyReportService(entries_repo)

    return Container(
        entries_repo=entries_repo,
        settings_repo=settings_repo,
        settings_service=settings_service,
        entry_service=entry_service,
        report_service=report_service,
    )
