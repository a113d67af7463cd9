from __future__ import annotations

import importlib
from typing import Optional

from dotenv import load_dotenv
from flask import Flask

from .accounts.controller import register as register_accounts
from .config import get_settings_module
from .container import build_container, build_storage
from .core.enums import StorageBackend
from .core.logging import configure_logging, get_logger
from .database.bootstrap import apply_schema, list_tables
from .payperiods.controller import register as register_pay_settings
from .payroll.controller import register as register_payroll
from .punch.controller import register as register_punch
from .storage.repository import Storage
from .worklogs.controller import register as register_worklogs

logger = get_logger(__name__)


def create_app(*, storage: Optional[Storage] = None, overrides: Optional[dict] = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    config = {
        name: getattr(settings, name)
        for name in dir(settings)
        if name.isupper()
    }
    config.update(overrides or {})

    configure_logging(str(config.get("LOG_LEVEL", "INFO")))

    app.secret_key = config["SECRET_KEY"]
    app.config["DEBUG"] = bool(config.get("DEBUG", False))
    app.config["TESTING"] = bool(config.get("TESTING", False))

    if storage is None:
        backend = str(config.get("STORAGE_BACKEND", StorageBackend.JSON.value))
        db_config = config.get("DB_CONFIG")
        if backend == StorageBackend.MYSQL.value and config.get("AUTO_INIT_DB"):
            apply_schema(db_config)
            logger.info("schema_ready", tables=len(list_tables(db_config)))
        storage = build_storage(backend=backend, data_path=config.get("DATA_PATH"), db_config=db_config)

    container = build_container(storage=storage)
    container.account_service.ensure_defaults(
        admin_username=config.get("DEFAULT_ADMIN_USERNAME", "admin"),
        admin_password=config.get("DEFAULT_ADMIN_PASSWORD", "admin"),
    )
    app.extensions["timekeeper"] = container

    register_accounts(app, container)
    register_punch(app, container)
    register_worklogs(app, container)
    register_pay_settings(app, container)
    register_payroll(app, container)

    logger.info("startup_complete", settings=settings_module, storage=type(storage).__name__)
    return app
