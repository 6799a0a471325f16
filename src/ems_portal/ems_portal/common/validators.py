from __future__ import annotations

from decimal import Decimal, InvalidOperation
from typing import Any

from ..core.exceptions import ValidationError


def require_non_empty(value: str, field_name: str) -> str:
    if not value or not value.strip():
        raise ValidationError(f"{field_name} is required")
    return value.strip()


def require_min_length(value: str, field_name: str, min_len: int) -> str:
    if value is None or len(value) < min_len:
        raise ValidationError(f"{field_name} must be at least {min_len} characters")
    return value


def require_decimal_in_range(value: Any, field_name: str, low: int, high: int) -> Decimal:
    try:
        number = Decimal(str(value).strip())
    except (InvalidOperation, ValueError):
        raise ValidationError(f"{field_name} must be a number")
    if not number.is_finite() or number < low or number > high:
        raise ValidationError(f"{field_name} must be between {low} and {high}")
    return number


def to_decimal(value: Any) -> Decimal:
    """Convert API numbers (int, float, str, Decimal, None) to Decimal."""
    if value is None or value == "":
        return Decimal("0")
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))
