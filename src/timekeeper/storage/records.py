"""Conversion between raw rows/documents and domain records.

Every backend goes through these helpers so malformed data is rejected at the
storage boundary rather than deep inside the services.
"""

from __future__ import annotations

from typing import Any, Mapping

from ..accounts.model import Account
from ..core.enums import Role
from ..core.exceptions import StorageError
from ..payperiods.model import PaySettings
from ..punch.model import PunchSession
from ..worklogs.model import WorkLog


def account_from_row(row: Mapping[str, Any]) -> Account:
    try:
        rate = row.get("hourly_rate")
        return Account(
            username=str(row["username"]),
            password_hash=str(row["password_hash"]),
            role=Role(row["role"]),
            hourly_rate=float(rate) if rate is not None else None,
        )
    except (KeyError, TypeError, ValueError) as e:
        raise StorageError(f"Malformed account record: {e}") from e


def account_to_row(account: Account) -> dict:
    return {
        "username": account.username,
        "password_hash": account.password_hash,
        "role": account.role.value,
        "hourly_rate": account.hourly_rate,
    }


def log_from_row(row: Mapping[str, Any]) -> WorkLog:
    try:
        return WorkLog(
            log_id=str(row["log_id"]),
            username=str(row["username"]),
            date=str(row["date"]),
            punch_in=str(row["punch_in"])[:5],
            punch_out=str(row["punch_out"])[:5],
            minutes_worked=int(row["minutes_worked"]),
            pay_period_start=str(row["pay_period_start"]),
            deduction=int(row.get("deduction") or 0),
        )
    except (KeyError, TypeError, ValueError) as e:
        raise StorageError(f"Malformed work log record: {e}") from e


def log_to_row(log: WorkLog) -> dict:
    return {
        "log_id": log.log_id,
        "username": log.username,
        "date": log.date,
        "punch_in": log.punch_in,
        "punch_out": log.punch_out,
        "minutes_worked": log.minutes_worked,
        "pay_period_start": log.pay_period_start,
        "deduction": log.deduction,
    }


def settings_from_row(row: Mapping[str, Any] | None) -> PaySettings:
    if not row:
        return PaySettings()
    try:
        return PaySettings(start_days=tuple(int(d) for d in row["start_days"]))
    except (KeyError, TypeError, ValueError) as e:
        raise StorageError(f"Malformed pay settings: {e}") from e


def session_from_row(row: Mapping[str, Any]) -> PunchSession:
    try:
        return PunchSession(date=str(row["date"]), punch_in=str(row["punch_in"])[:5])
    except (KeyError, TypeError) as e:
        raise StorageError(f"Malformed punch session: {e}") from e
