"""Create the MySQL database and the `kv_store` table for the mysql backend."""

from __future__ import annotations

import logging
from pathlib import Path

from .connection import DatabaseConnection
from .mysql_base import db_cursor

logger = logging.getLogger(__name__)

KV_TABLE = "kv_store"


def schema_statements(sql: str) -> list[str]:
    """Split a schema file into statements; `--` comment lines are dropped.

    The schema holds plain DDL only, so a semicolon always ends a statement.
    """
    lines = [line for line in sql.splitlines() if not line.lstrip().startswith("--")]
    return [stmt.strip() for stmt in "\n".join(lines).split(";") if stmt.strip()]


def ensure_database_exists(connection: DatabaseConnection) -> None:
    name = connection.config.database
    conn = connection.connect(with_database=False)
    try:
        cur = conn.cursor()
        cur.execute(f"CREATE DATABASE IF NOT EXISTS `{name}` CHARACTER SET utf8mb4 COLLATE utf8mb4_unicode_ci")
        conn.commit()
        cur.close()
    finally:
        conn.close()


def apply_schema(connection: DatabaseConnection, *, schema_path: str | Path) -> None:
    ensure_database_exists(connection)
    statements = schema_statements(Path(schema_path).read_text(encoding="utf-8"))
    with db_cursor(connection) as cur:
        for stmt in statements:
            cur.execute(stmt)
    cfg = connection.config
    logger.info("Applied %s (%d statements) to %s@%s/%s", schema_path, len(statements), cfg.user, cfg.host, cfg.database)


def kv_table_exists(connection: DatabaseConnection) -> bool:
    with db_cursor(connection) as cur:
        cur.execute("SHOW TABLES LIKE %s", (KV_TABLE,))
        return cur.fetchone() is not None
