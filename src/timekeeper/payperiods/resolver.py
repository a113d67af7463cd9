"""Pay period boundaries.

A pay period starts on every configured day of month. Start days that do not
exist in a month (e.g. 31 in April) fall on that month's last day, so every
month yields exactly one well-defined start per configured day.
"""

from __future__ import annotations

import calendar
from datetime import date
from typing import Iterable

from ..core.constants import MAX_START_DAY, MIN_START_DAY


def normalize_start_days(start_days: Iterable[int]) -> list[int]:
    """De-duplicate and sort start days; reject empty or out-of-range sets."""
    days = sorted({int(d) for d in start_days})
    if not days:
        raise ValueError("At least one pay period start day is required")
    if days[0] < MIN_START_DAY or days[-1] > MAX_START_DAY:
        raise ValueError(f"Pay period start days must be within {MIN_START_DAY}..{MAX_START_DAY}")
    return days


def _days_in_month(year: int, month: int) -> int:
    return calendar.monthrange(year, month)[1]


def _previous_month(year: int, month: int) -> tuple[int, int]:
    if month == 1:
        return year - 1, 12
    return year, month - 1


def period_start_date(day: date, start_days: Iterable[int]) -> date:
    days = normalize_start_days(start_days)

    month_len = _days_in_month(day.year, day.month)
    candidates = [min(d, month_len) for d in days if min(d, month_len) <= day.day]
    if candidates:
        return day.replace(day=max(candidates))

    year, month = _previous_month(day.year, day.month)
    return date(year, month, min(days[-1], _days_in_month(year, month)))


def resolve_period_start(day: date, start_days: Iterable[int]) -> str:
    """ISO date (YYYY-MM-DD) of the start of the pay period containing ``day``."""
    return period_start_date(day, start_days).isoformat()
