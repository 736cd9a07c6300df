"""Exact decimal-hours arithmetic.

Hour values are carried as ``Fraction`` while they are computed and only turned
into two-place ``Decimal`` at the end, so rounding ties are decided on the exact
value and never on a float approximation of it.
"""

from __future__ import annotations

import math
from decimal import Decimal
from fractions import Fraction
from typing import Union

Number = Union[int, float, Decimal, Fraction]

TWO_PLACES = Decimal("0.01")
ZERO_HOURS = Decimal("0.00")


def to_fraction(value: Number) -> Fraction:
    if isinstance(value, float):
        # Through str() so 10.05 means 10.05, not its binary neighbour.
        return Fraction(str(value))
    return Fraction(value)


def round_half_up(value: Number) -> int:
    """Round to the nearest integer, ties away from zero."""
    exact = to_fraction(value)
    magnitude = math.floor(abs(exact) + Fraction(1, 2))
    return -magnitude if exact < 0 else magnitude


def round_hours(value: Number) -> Decimal:
    """Round an hours value to 2 decimal places, ties away from zero."""
    hundredths = round_half_up(to_fraction(value) * 100)
    return (Decimal(hundredths) / 100).quantize(TWO_PLACES)


def hours_to_minutes(value: Number) -> int:
    """Whole hours plus the fractional part rounded to the nearest minute."""
    exact = to_fraction(value)
    whole = math.floor(exact)
    return whole * 60 + round_half_up((exact - whole) * 60)


def to_decimal(value: Number) -> Decimal:
    if isinstance(value, Decimal):
        return value
    if isinstance(value, Fraction):
        return Decimal(value.numerator) / value.denominator
    return Decimal(str(value))
