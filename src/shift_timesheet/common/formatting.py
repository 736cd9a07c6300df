from __future__ import annotations

import math

from .numbers import Number, round_half_up, to_fraction


def format_duration(hours: Number) -> str:
    """Render decimal hours as a clock duration, e.g. ``-3:05``.

    The sign is only emitted for negative values.
    """
    exact = to_fraction(hours)
    magnitude = abs(exact)
    whole = math.floor(magnitude)
    minutes = round_half_up((magnitude - whole) * 60)
    sign = "-" if exact < 0 else ""
    return f"{sign}{whole}:{minutes:02d}"


def format_hours(hours: Number) -> str:
    """Render decimal hours as ``5h 43min`` (``8h`` when there are no minutes)."""
    exact = to_fraction(hours)
    whole = math.floor(exact)
    minutes = round_half_up((exact - whole) * 60)
    if minutes > 0:
        return f"{whole}h {minutes:02d}min"
    return f"{whole}h"
