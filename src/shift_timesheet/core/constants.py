"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

from decimal import Decimal

DEFAULT_REGULAR_HOURS_LIMIT = 24
OVERTIME_BONUS_RATE = Decimal("1.5")

# 40h / 7 days, fixed once at minute precision: 5h43min.
DAILY_WORKLOAD_HOURS = 5
DAILY_WORKLOAD_MINUTES = 43

# A shift counts as a completed duty shift from this many hours on.
COMPLETED_SHIFT_HOURS = 24

# 24h on duty followed by 72h off.
DUTY_ROTATION_DAYS = 4

DEFAULT_PROJECT_NAME = "Plantões"
