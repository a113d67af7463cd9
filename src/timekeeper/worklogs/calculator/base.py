from __future__ import annotations

from abc import ABC, abstractmethod


class WorkedTimeCalculator(ABC):
    """Calculator interface (Strategy Pattern for payable minutes)."""

    @abstractmethod
    def worked_minutes(self, punch_in: str, punch_out: str, deduction: int = 0) -> int:
        raise NotImplementedError
