from __future__ import annotations

from datetime import MAXYEAR, MINYEAR
from decimal import Decimal
from typing import Union

from ..core.exceptions import ValidationError


def require_positive_hours(value: Union[int, float, Decimal], field_name: str) -> Decimal:
    try:
        hours = Decimal(str(value))
    except ArithmeticError as exc:
        raise ValidationError(f"{field_name} must be a number") from exc
    if not hours.is_finite() or hours <= 0:
        raise ValidationError(f"{field_name} must be greater than zero")
    return hours


def require_month(year: int, month: int) -> tuple[int, int]:
    if not 1 <= int(month) <= 12:
        raise ValidationError(f"month must be between 1 and 12, got {month}")
    # weeks spill into the neighbouring years
    if not MINYEAR < int(year) < MAXYEAR:
        raise ValidationError(f"year out of range: {year}")
    return int(year), int(month)


def require_non_empty(value: str, field_name: str) -> str:
    if not value or not value.strip():
        raise ValidationError(f"{field_name} must not be empty")
    return value.strip()
