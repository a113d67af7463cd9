from __future__ import annotations

import json
import os
import threading
from pathlib import Path
from typing import Optional
from uuid import uuid4

from ..accounts.model import Account
from ..core.constants import DEFAULT_START_DAYS
from ..core.exceptions import StorageError
from ..core.logging import get_logger
from ..payperiods.model import PaySettings
from ..punch.model import PunchSession
from ..worklogs.model import EDITABLE_LOG_FIELDS, NewWorkLog, WorkLog
from .records import (
    account_from_row,
    account_to_row,
    log_from_row,
    log_to_row,
    session_from_row,
    settings_from_row,
)
from .repository import Storage

logger = get_logger(__name__)


def _empty_document() -> dict:
    return {
        "accounts": [],
        "logs": [],
        "pay_settings": {"start_days": list(DEFAULT_START_DAYS)},
        "current_punch": {},
    }


class JSONFileStorage(Storage):
    """Single-document JSON file backend for local or offline use.

    Every operation reads the file, applies its change and writes it back
    through a temp file, so an account and its logs disappear in one write.
    """

    def __init__(self, path: Path | str):
        self.path = Path(path)
        self._lock = threading.RLock()

    def _load(self) -> dict:
        if not self.path.exists():
            return _empty_document()
        try:
            content = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as e:
            raise StorageError(f"Cannot read data file {self.path}: {e}") from e
        if content is None:
            content = {}
        if not isinstance(content, dict):
            raise StorageError(f"Data file {self.path} does not hold a JSON object")
        document = _empty_document()
        document.update(content)
        return document

    def _save(self, document: dict) -> None:
        tmp = self.path.with_name(self.path.name + ".tmp")
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            tmp.write_text(json.dumps(document, indent=2), encoding="utf-8")
            os.replace(tmp, self.path)
        except OSError as e:
            raise StorageError(f"Cannot write data file {self.path}: {e}") from e

    def get_accounts(self) -> list[Account]:
        with self._lock:
            return [account_from_row(a) for a in self._load()["accounts"]]

    def upsert_account(self, account: Account) -> None:
        with self._lock:
            document = self._load()
            row = account_to_row(account)
            accounts = document["accounts"]
            for i, existing in enumerate(accounts):
                if existing.get("username") == account.username:
                    accounts[i] = row
                    break
            else:
                accounts.append(row)
            self._save(document)

    def delete_account(self, username: str) -> None:
        with self._lock:
            document = self._load()
            document["accounts"] = [a for a in document["accounts"] if a.get("username") != username]
            before = len(document["logs"])
            document["logs"] = [log for log in document["logs"] if log.get("username") != username]
            document["current_punch"].pop(username, None)
            self._save(document)
            logger.debug("json_account_deleted", username=username, logs_removed=before - len(document["logs"]))

    def get_logs(self) -> list[WorkLog]:
        with self._lock:
            logs = [log_from_row(row) for row in self._load()["logs"]]
        return sorted(logs, key=lambda log: log.date)

    def add_log(self, log: NewWorkLog) -> WorkLog:
        with self._lock:
            document = self._load()
            created = WorkLog.from_new(uuid4().hex, log)
            document["logs"].append(log_to_row(created))
            self._save(document)
            return created

    def update_log(self, log_id: str, **fields) -> None:
        unknown = set(fields) - EDITABLE_LOG_FIELDS
        if unknown:
            raise StorageError(f"Work log fields are not editable: {sorted(unknown)}")
        with self._lock:
            document = self._load()
            for row in document["logs"]:
                if str(row.get("log_id")) == str(log_id):
                    row.update({k: int(v) for k, v in fields.items()})
                    break
            else:
                raise StorageError(f"Work log {log_id} does not exist")
            self._save(document)

    def get_pay_settings(self) -> PaySettings:
        with self._lock:
            return settings_from_row(self._load().get("pay_settings"))

    def set_pay_settings(self, settings: PaySettings) -> None:
        with self._lock:
            document = self._load()
            document["pay_settings"] = {"start_days": list(settings.start_days)}
            self._save(document)

    def get_current_punch(self) -> dict[str, PunchSession]:
        with self._lock:
            return {u: session_from_row(s) for u, s in self._load()["current_punch"].items()}

    def set_current_punch(self, username: str, session: Optional[PunchSession]) -> None:
        with self._lock:
            document = self._load()
            if session is None:
                document["current_punch"].pop(username, None)
            else:
                document["current_punch"][username] = {"date": session.date, "punch_in": session.punch_in}
            self._save(document)
