from __future__ import annotations

from datetime import date, datetime


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    return datetime.strptime(value, "%Y-%m-%d").date()


def now_local() -> datetime:
    """Current local wall-clock time.

    Note: Wrapped so tests can patch/mock it easier.
    """
    return datetime.now()


def clock_time(moment: datetime) -> str:
    """HH:MM of a moment, seconds dropped."""
    return moment.strftime("%H:%M")
