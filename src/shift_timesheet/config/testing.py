import os

from ..core.constants import DEFAULT_PROJECT_NAME, DEFAULT_REGULAR_HOURS_LIMIT

PROJECT_NAME = os.getenv("PROJECT_NAME", f"{DEFAULT_PROJECT_NAME} (teste)")

REGULAR_HOURS_LIMIT = os.getenv("REGULAR_HOURS_LIMIT", str(DEFAULT_REGULAR_HOURS_LIMIT))

LOG_LEVEL = os.getenv("LOG_LEVEL", "WARNING")
