from __future__ import annotations

from typing import Optional

import pytest
from werkzeug.security import generate_password_hash

from timekeeper.accounts.model import Account
from timekeeper.core.enums import Role
from timekeeper.core.exceptions import StorageError
from timekeeper.payperiods.model import PaySettings
from timekeeper.punch.model import PunchSession
from timekeeper.worklogs.model import NewWorkLog, WorkLog


class InMemoryStorage:
    def __init__(self):
        self.accounts: dict[str, Account] = {}
        self.logs: list[WorkLog] = []
        self.settings = PaySettings()
        self.current_punch: dict[str, PunchSession] = {}
        self.fail_writes = False
        self._next_id = 0

    def _check_write(self):
        if self.fail_writes:
            raise StorageError("backend unavailable")

    def get_accounts(self):
        return list(self.accounts.values())

    def upsert_account(self, account: Account) -> None:
        self._check_write()
        self.accounts[account.username] = account

    def delete_account(self, username: str) -> None:
        self._check_write()
        self.accounts.pop(username, None)
        self.logs = [log for log in self.logs if log.username != username]
        self.current_punch.pop(username, None)

    def get_logs(self):
        return list(self.logs)

    def add_log(self, log: NewWorkLog) -> WorkLog:
        self._check_write()
        self._next_id += 1
        created = WorkLog.from_new(str(self._next_id), log)
        self.logs.append(created)
        return created

    def update_log(self, log_id: str, **fields) -> None:
        self._check_write()
        for i, log in enumerate(self.logs):
            if log.log_id == log_id:
                self.logs[i] = WorkLog(**{**log.__dict__, **fields})
                return
        raise StorageError(f"Work log {log_id} does not exist")

    def get_pay_settings(self) -> PaySettings:
        return self.settings

    def set_pay_settings(self, settings: PaySettings) -> None:
        self._check_write()
        self.settings = settings

    def get_current_punch(self):
        return dict(self.current_punch)

    def set_current_punch(self, username: str, session: Optional[PunchSession]) -> None:
        self._check_write()
        if session is None:
            self.current_punch.pop(username, None)
        else:
            self.current_punch[username] = session


def _make_employee(username: str, rate: float = 20.0, password: str = "secret") -> Account:
    return Account(
        username=username,
        password_hash=generate_password_hash(password),
        role=Role.EMPLOYEE,
        hourly_rate=rate,
    )


def _make_log(log_id: str, username: str, period: str, minutes: int, *, day: Optional[str] = None) -> WorkLog:
    return WorkLog(
        log_id=log_id,
        username=username,
        date=day or period,
        punch_in="09:00",
        punch_out="17:00",
        minutes_worked=minutes,
        pay_period_start=period,
    )


@pytest.fixture
def storage() -> InMemoryStorage:
    return InMemoryStorage()


@pytest.fixture
def make_employee():
    return _make_employee


@pytest.fixture
def make_log():
    return _make_log
