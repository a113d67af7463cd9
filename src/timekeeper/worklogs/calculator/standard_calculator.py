from __future__ import annotations

from ...common.time_utils import time_to_minutes
from .base import WorkedTimeCalculator


class StandardWorkedTimeCalculator(WorkedTimeCalculator):
    """Standard rule: (out - in) - deduction, not below 0.

    A punch-out earlier than the punch-in (shift crossing midnight) counts as
    zero minutes; there is no rollover to the next day.
    """

    def worked_minutes(self, punch_in: str, punch_out: str, deduction: int = 0) -> int:
        minutes = time_to_minutes(punch_out) - time_to_minutes(punch_in)
        if minutes < 0:
            minutes = 0
        minutes -= max(int(deduction or 0), 0)
        return max(minutes, 0)


_default = StandardWorkedTimeCalculator()


def compute_worked_minutes(punch_in: str, punch_out: str, deduction: int = 0) -> int:
    return _default.worked_minutes(punch_in, punch_out, deduction)
