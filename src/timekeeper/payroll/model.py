from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class SummaryRow:
    """Read-model: total hours and pay of one employee in one pay period."""

    pay_period_start: str
    username: str
    total_minutes: int
    total_hours: str
    total_pay: str

    def to_dict(self) -> dict:
        return {
            "pay_period_start": self.pay_period_start,
            "username": self.username,
            "total_minutes": self.total_minutes,
            "total_hours": self.total_hours,
            "total_pay": self.total_pay,
        }
