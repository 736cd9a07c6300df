from __future__ import annotations

import importlib
import os
from types import ModuleType

from dotenv import load_dotenv


def get_settings_module() -> str:
    # APP_ENV picks the settings module, 'development' by default
    env = os.getenv("APP_ENV", "development").lower()

    if env in {"prod", "production"}:
        return "shift_timesheet.config.production"

    if env in {"test", "testing"}:
        return "shift_timesheet.config.testing"

    return "shift_timesheet.config.development"


def load_settings() -> ModuleType:
    """Read .env (without overriding the real environment) and import the settings module."""
    load_dotenv(override=False)
    return importlib.import_module(get_settings_module())
