from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..core.enums import Role


@dataclass(frozen=True)
class Account:
    """Domain entity: login account.

    Plain data object, no storage access. ``hourly_rate`` is only meaningful
    for employees.
    """

    username: str
    password_hash: str
    role: Role
    hourly_rate: Optional[float] = None

    @property
    def is_employee(self) -> bool:
        return self.role == Role.EMPLOYEE

    @property
    def effective_rate(self) -> float:
        if not self.is_employee:
            return 0.0
        return float(self.hourly_rate or 0)


@dataclass(frozen=True)
class SessionUser:
    """What we store into the Flask session after login."""

    username: str
    role: Role
