from __future__ import annotations

from typing import Optional

from ..common.validators import lenient_minutes
from ..core.exceptions import ValidationError
from ..core.logging import get_logger
from ..storage.repository import Storage
from .calculator.base import WorkedTimeCalculator
from .calculator.standard_calculator import StandardWorkedTimeCalculator
from .model import WorkLog

logger = get_logger(__name__)


class WorkLogService:
    def __init__(self, storage: Storage, *, calculator: Optional[WorkedTimeCalculator] = None):
        self._storage = storage
        self._calculator = calculator or StandardWorkedTimeCalculator()

    def list_logs(self) -> list[WorkLog]:
        return sorted(self._storage.get_logs(), key=lambda log: log.date)

    def history_for(self, username: str) -> list[WorkLog]:
        return [log for log in self.list_logs() if log.username == username]

    def get(self, log_id: str) -> WorkLog:
        for log in self._storage.get_logs():
            if log.log_id == str(log_id):
                return log
        raise ValidationError("Work log does not exist")

    def update_deduction(self, *, log_id: str, deduction) -> WorkLog:
        """Set the unpaid minutes of a log and recompute its payable minutes.

        Non-numeric or negative input counts as no deduction.
        """
        log = self.get(log_id)
        minutes_off = lenient_minutes(deduction)
        minutes = self._calculator.worked_minutes(log.punch_in, log.punch_out, minutes_off)

        self._storage.update_log(log.log_id, deduction=minutes_off, minutes_worked=minutes)
        logger.info("deduction_updated", log_id=log.log_id, username=log.username, deduction=minutes_off, minutes=minutes)
        return WorkLog(
            log_id=log.log_id,
            username=log.username,
            date=log.date,
            punch_in=log.punch_in,
            punch_out=log.punch_out,
            minutes_worked=minutes,
            pay_period_start=log.pay_period_start,
            deduction=minutes_off,
        )
