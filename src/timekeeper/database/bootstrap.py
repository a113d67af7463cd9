"""Create the MySQL database and tables from schema.sql."""

from __future__ import annotations

from contextlib import closing
from pathlib import Path

from ..core.logging import get_logger
from .connection import DBConfig, DatabaseConnection

logger = get_logger(__name__)

SCHEMA_PATH = Path(__file__).resolve().parent / "schema.sql"


def split_statements(sql: str) -> list[str]:
    """Split a schema script on ';'.

    Line comments are dropped; the schema holds no string literals.
    """
    lines = [line for line in sql.splitlines() if not line.strip().startswith("--")]
    return [stmt.strip() for stmt in "\n".join(lines).split(";") if stmt.strip()]


def ensure_database_exists(db_config: dict) -> None:
    target = DBConfig.from_dict(db_config)
    with closing(DatabaseConnection(target).connect(with_database=False)) as conn:
        cur = conn.cursor()
        cur.execute(
            f"CREATE DATABASE IF NOT EXISTS `{target.database}` "
            "CHARACTER SET utf8mb4 COLLATE utf8mb4_unicode_ci"
        )
        conn.commit()


def apply_schema(db_config: dict, *, schema_path: str | Path = SCHEMA_PATH) -> None:
    ensure_database_exists(db_config)

    statements = split_statements(Path(schema_path).read_text(encoding="utf-8"))
    with closing(DatabaseConnection(DBConfig.from_dict(db_config)).connect()) as conn:
        cur = conn.cursor()
        for stmt in statements:
            cur.execute(stmt)
        conn.commit()
    logger.info("schema_applied", database=db_config.get("database"), statements=len(statements))


def list_tables(db_config: dict) -> list[str]:
    with closing(DatabaseConnection(DBConfig.from_dict(db_config)).connect()) as conn:
        cur = conn.cursor()
        cur.execute("SHOW TABLES")
        return [str(row[0]) for row in cur.fetchall()]
