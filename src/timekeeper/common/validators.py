from __future__ import annotations

from decimal import Decimal, InvalidOperation

from ..core.constants import MAX_HOURLY_RATE
from ..core.exceptions import ValidationError


def require_non_empty(value: str, field_name: str) -> str:
    if not value or not str(value).strip():
        raise ValidationError(f"{field_name} is required")
    return str(value).strip()


def require_rate(value, field_name: str = "Hourly rate") -> float:
    """Parse a non-negative numeric rate, rejecting anything else."""
    try:
        rate = Decimal(str(value).strip())
    except (InvalidOperation, ValueError):
        raise ValidationError(f"{field_name} must be a number")
    if not rate.is_finite():
        raise ValidationError(f"{field_name} must be a number")
    if rate < 0:
        raise ValidationError(f"{field_name} cannot be negative")
    if rate > Decimal(MAX_HOURLY_RATE):
        raise ValidationError(f"{field_name} cannot exceed {MAX_HOURLY_RATE}")
    return float(rate)


def lenient_minutes(value) -> int:
    """Parse a minute count, coercing non-numeric or negative input to 0."""
    try:
        minutes = int(float(str(value).strip()))
    except (TypeError, ValueError, OverflowError):
        return 0
    return minutes if minutes > 0 else 0
