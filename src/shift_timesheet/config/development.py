import os

from ..core.constants import DEFAULT_PROJECT_NAME, DEFAULT_REGULAR_HOURS_LIMIT

PROJECT_NAME = os.getenv("PROJECT_NAME", DEFAULT_PROJECT_NAME)

# Hours of a single shift paid at the regular rate
REGULAR_HOURS_LIMIT = os.getenv("REGULAR_HOURS_LIMIT", str(DEFAULT_REGULAR_HOURS_LIMIT))

LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")
