from __future__ import annotations

from dataclasses import dataclass
from datetime import date


@dataclass(frozen=True)
class PunchSession:
    """Open punch-in of one employee, kept until the matching punch-out."""

    date: str
    punch_in: str

    def is_for(self, day: date) -> bool:
        return self.date == day.isoformat()
