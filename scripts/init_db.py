"""Create the MySQL database and the kv_store table from database/schema.sql."""

from __future__ import annotations

import importlib
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from config import get_settings_module

from src.infraction_tracker.infraction_tracker.database.bootstrap import apply_schema, kv_table_exists
from src.infraction_tracker.infraction_tracker.database.connection import connection_from_settings


def main() -> None:
    settings = importlib.import_module(get_settings_module())
    connection = connection_from_settings(getattr(settings, "DB_CONFIG", None))

    apply_schema(connection, schema_path=REPO_ROOT / "database" / "schema.sql")
    if not kv_table_exists(connection):
        raise SystemExit("kv_store table is missing after applying the schema")

    cfg = connection.config
    print(f"OK: kv_store ready on {cfg.user}@{cfg.host}:{cfg.port}/{cfg.database}")


if __name__ == "__main__":
    main()
