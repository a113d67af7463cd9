from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from .accounts.service import AccountService, AuthService
from .core.enums import StorageBackend
from .database.connection import DBConfig, DatabaseConnection
from .payperiods.service import PaySettingsService
from .payroll.service import PayrollSummaryService
from .punch.service import PunchService
from .storage.json_storage import JSONFileStorage
from .storage.mysql_storage import MySQLStorage
from .storage.repository import Storage
from .worklogs.calculator.standard_calculator import StandardWorkedTimeCalculator
from .worklogs.service import WorkLogService


@dataclass(frozen=True)
class Container:
    storage: Storage

    auth_service: AuthService
    account_service: AccountService
    pay_settings_service: PaySettingsService
    punch_service: PunchService
    worklog_service: WorkLogService
    payroll_summary_service: PayrollSummaryService


def build_storage(*, backend: str, data_path: str | Path | None = None, db_config: dict | None = None) -> Storage:
    kind = StorageBackend(str(backend).lower())
    if kind == StorageBackend.MYSQL:
        if not db_config:
            raise ValueError("DB_CONFIG is required for the mysql storage backend")
        return MySQLStorage(DatabaseConnection.get_instance(DBConfig.from_dict(db_config)))
    if not data_path:
        raise ValueError("DATA_PATH is required for the json storage backend")
    return JSONFileStorage(Path(data_path))


def build_container(*, storage: Storage) -> Container:
    calculator = StandardWorkedTimeCalculator()

    return Container(
        storage=storage,
        auth_service=AuthService(storage),
        account_service=AccountService(storage),
        pay_settings_service=PaySettingsService(storage),
        punch_service=PunchService(storage, calculator=calculator),
        worklog_service=WorkLogService(storage, calculator=calculator),
        payroll_summary_service=PayrollSummaryService(storage),
    )
