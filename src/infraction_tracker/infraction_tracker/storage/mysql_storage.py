from __future__ import annotations

from typing import Optional

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, first_value


class MySQLKeyValueStorage:
    """Key-value slots stored as rows of the `kv_store` table."""

    def __init__(self, connection: DatabaseConnection):
        self._connection = connection

    def get_item(self, key: str) -> Optional[str]:
        with db_cursor(self._connection) as cur:
            cur.execute("SELECT item_value FROM kv_store WHERE item_key=%s", (key,))
            value = first_value(cur)
        if value is None:
            return None
        return value.decode("utf-8") if isinstance(value, (bytes, bytearray)) else str(value)

    def set_item(self, key: str, value: str) -> None:
        with db_cursor(self._connection) as cur:
            cur.execute(
                "INSERT INTO kv_store (item_key, item_value) VALUES (%s, %s) "
                "ON DUPLICATE KEY UPDATE item_value=VALUES(item_value)",
                (key, str(value)),
            )

    def remove_item(self, key: str) -> None:
        with db_cursor(self._connection) as cur:
            cur.execute("DELETE FROM kv_store WHERE item_key=%s", (key,))
