from __future__ import annotations

import threading
from collections import defaultdict
from datetime import datetime
from typing import Optional

from ..accounts.service import find_account
from ..common.datetime_utils import clock_time, now_local
from ..core.constants import NO_PUNCH_MESSAGE
from ..core.exceptions import AuthorizationError, ValidationError
from ..core.logging import get_logger
from ..payperiods.resolver import resolve_period_start
from ..storage.repository import Storage
from ..worklogs.calculator.base import WorkedTimeCalculator
from ..worklogs.calculator.standard_calculator import StandardWorkedTimeCalculator
from ..worklogs.model import NewWorkLog, WorkLog
from .model import PunchSession

logger = get_logger(__name__)


class PunchService:
    """Tracks open punch-ins and turns each punch-out into a work log.

    Punch-in and punch-out of the same user are serialized by a per-user lock
    so two clients cannot both open, or both close, one session.
    """

    def __init__(self, storage: Storage, *, calculator: Optional[WorkedTimeCalculator] = None):
        self._storage = storage
        self._calculator = calculator or StandardWorkedTimeCalculator()
        self._locks: defaultdict[str, threading.Lock] = defaultdict(threading.Lock)
        self._locks_guard = threading.Lock()

    def _lock_for(self, username: str) -> threading.Lock:
        with self._locks_guard:
            return self._locks[username]

    def current_session(self, username: str, *, now: datetime | None = None) -> Optional[PunchSession]:
        now = now or now_local()
        session = self._storage.get_current_punch().get(username)
        if session and session.is_for(now.date()):
            return session
        return None

    def punch_in(self, username: str, *, now: datetime | None = None) -> PunchSession:
        now = now or now_local()

        account = find_account(self._storage, username)
        if not account:
            raise ValidationError("Employee does not exist")
        if not account.is_employee:
            raise AuthorizationError("Only employees can punch in or out.")

        with self._lock_for(username):
            existing = self.current_session(username, now=now)
            if existing:
                raise ValidationError(f"You already punched in at {existing.punch_in}.")

            session = PunchSession(date=now.date().isoformat(), punch_in=clock_time(now))
            self._storage.set_current_punch(username, session)

        logger.info("punch_in", username=username, date=session.date, punch_in=session.punch_in)
        return session

    def punch_out(self, username: str, *, now: datetime | None = None) -> WorkLog:
        now = now or now_local()

        with self._lock_for(username):
            session = self.current_session(username, now=now)
            if not session:
                raise ValidationError(NO_PUNCH_MESSAGE)

            punch_out = clock_time(now)
            minutes = self._calculator.worked_minutes(session.punch_in, punch_out)
            settings = self._storage.get_pay_settings()

            log = self._storage.add_log(
                NewWorkLog(
                    username=username,
                    date=session.date,
                    punch_in=session.punch_in,
                    punch_out=punch_out,
                    minutes_worked=minutes,
                    pay_period_start=resolve_period_start(now.date(), settings.start_days),
                )
            )
            self._storage.set_current_punch(username, None)

        logger.info(
            "punch_out",
            username=username,
            log_id=log.log_id,
            minutes=log.minutes_worked,
            pay_period_start=log.pay_period_start,
        )
        return log
