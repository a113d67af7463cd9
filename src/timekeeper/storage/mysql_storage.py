from __future__ import annotations

from typing import Optional

from ..accounts.model import Account
from ..core.exceptions import StorageError
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone, hhmm
from ..payperiods.model import PaySettings
from ..punch.model import PunchSession
from ..worklogs.model import EDITABLE_LOG_FIELDS, NewWorkLog, WorkLog
from .records import account_from_row, log_from_row, session_from_row, settings_from_row
from .repository import Storage

_SETTINGS_ROW_ID = 1


def _log_row(r: dict) -> dict:
    return {
        "log_id": r["log_id"],
        "username": r["username"],
        "date": r["work_date"].isoformat(),
        "punch_in": hhmm(r["punch_in"]),
        "punch_out": hhmm(r["punch_out"]),
        "minutes_worked": r["minutes_worked"],
        "pay_period_start": r["pay_period_start"].isoformat(),
        "deduction": r.get("deduction"),
    }


class MySQLStorage(Storage):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_accounts(self) -> list[Account]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT username, password_hash, role, hourly_rate FROM accounts ORDER BY username")
            return [account_from_row(r) for r in fetchall(cur)]

    def upsert_account(self, account: Account) -> None:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO accounts(username, password_hash, role, hourly_rate)
                VALUES(%s,%s,%s,%s)
                ON DUPLICATE KEY UPDATE
                    password_hash=VALUES(password_hash),
                    role=VALUES(role),
                    hourly_rate=VALUES(hourly_rate)
                """,
                (account.username, account.password_hash, account.role.value, account.hourly_rate),
            )

    def delete_account(self, username: str) -> None:
        # Single transaction: logs, open session and account go together.
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM work_logs WHERE username=%s", (username,))
            cur.execute("DELETE FROM punch_sessions WHERE username=%s", (username,))
            cur.execute("DELETE FROM accounts WHERE username=%s", (username,))

    def get_logs(self) -> list[WorkLog]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT log_id, username, work_date, punch_in, punch_out,
                       minutes_worked, pay_period_start, deduction
                FROM work_logs
                ORDER BY work_date ASC, log_id ASC
                """
            )
            return [log_from_row(_log_row(r)) for r in fetchall(cur)]

    def add_log(self, log: NewWorkLog) -> WorkLog:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO work_logs(username, work_date, punch_in, punch_out,
                                      minutes_worked, pay_period_start, deduction)
                VALUES(%s,%s,%s,%s,%s,%s,%s)
                """,
                (
                    log.username,
                    log.date,
                    log.punch_in,
                    log.punch_out,
                    int(log.minutes_worked),
                    log.pay_period_start,
                    int(log.deduction),
                ),
            )
            return WorkLog.from_new(str(cur.lastrowid), log)

    def update_log(self, log_id: str, **fields) -> None:
        unknown = set(fields) - EDITABLE_LOG_FIELDS
        if unknown:
            raise StorageError(f"Work log fields are not editable: {sorted(unknown)}")
        if not fields:
            return
        columns = sorted(fields)
        assignments = ", ".join(f"{c}=%s" for c in columns)
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT log_id FROM work_logs WHERE log_id=%s", (log_id,))
            if not fetchone(cur):
                raise StorageError(f"Work log {log_id} does not exist")
            cur.execute(
                f"UPDATE work_logs SET {assignments} WHERE log_id=%s",
                tuple(int(fields[c]) for c in columns) + (log_id,),
            )

    def get_pay_settings(self) -> PaySettings:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT start_days FROM pay_settings WHERE settings_id=%s", (_SETTINGS_ROW_ID,))
            row = fetchone(cur)
        if not row:
            return PaySettings()
        days = [d for d in str(row["start_days"]).split(",") if d.strip()]
        return settings_from_row({"start_days": days})

    def set_pay_settings(self, settings: PaySettings) -> None:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO pay_settings(settings_id, start_days) VALUES(%s,%s)
                ON DUPLICATE KEY UPDATE start_days=VALUES(start_days)
                """,
                (_SETTINGS_ROW_ID, ",".join(str(d) for d in settings.start_days)),
            )

    def get_current_punch(self) -> dict[str, PunchSession]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT username, work_date, punch_in FROM punch_sessions")
            return {
                r["username"]: session_from_row({"date": r["work_date"].isoformat(), "punch_in": hhmm(r["punch_in"])})
                for r in fetchall(cur)
            }

    def set_current_punch(self, username: str, session: Optional[PunchSession]) -> None:
        with db_cursor(self._conn_factory) as (_, cur):
            if session is None:
                cur.execute("DELETE FROM punch_sessions WHERE username=%s", (username,))
                return
            cur.execute(
                """
                INSERT INTO punch_sessions(username, work_date, punch_in) VALUES(%s,%s,%s)
                ON DUPLICATE KEY UPDATE work_date=VALUES(work_date), punch_in=VALUES(punch_in)
                """,
                (username, session.date, session.punch_in),
            )
