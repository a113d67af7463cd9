from __future__ import annotations

from decimal import Decimal

from ..core.constants import MINUTES_PER_HOUR
from .formatting import two_places


def time_to_minutes(value: str) -> int:
    """Convert "HH:MM" into minutes after midnight.

    Inputs come from clock reads or stored logs, so the range is not checked.
    """
    hours, minutes = value.split(":")
    return int(hours) * MINUTES_PER_HOUR + int(minutes)


def minutes_to_time(minutes: int) -> str:
    hours, rest = divmod(int(minutes), MINUTES_PER_HOUR)
    return f"{hours:02d}:{rest:02d}"


def minutes_to_hours(minutes: int) -> Decimal:
    return Decimal(int(minutes)) / Decimal(MINUTES_PER_HOUR)


def format_hours(minutes: int) -> str:
    """Minutes as decimal hours with two places, e.g. 450 -> "7.50"."""
    return two_places(minutes_to_hours(minutes))
