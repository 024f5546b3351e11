import os
from pathlib import Path

BASE_DIR = Path(__file__).resolve().parents[1]


class Config:
    SECRET_KEY = os.environ.get("SECRET_KEY") or "infraction-tracker-secret"

    # Storage: "file" keeps every slot in one JSON file, "mysql" uses the kv_store table.
    STORAGE_BACKEND = os.environ.get("STORAGE_BACKEND", "file").lower()
    DATA_FILE = os.environ.get("DATA_FILE", str(BASE_DIR / "data" / "tracker.json"))

    DB_USER = os.environ.get("DB_USER", "root")
    DB_PASSWORD = os.environ.get("DB_PASSWORD", "")
    DB_HOST = os.environ.get("DB_HOST", "localhost")
    DB_PORT = int(os.environ.get("DB_PORT", "3306"))
    DB_NAME = os.environ.get("DB_NAME", "infraction_tracker")

    AUTO_INIT_DB = bool(int(os.environ.get("AUTO_INIT_DB", "0")))

    REQUIRE_EXTERNAL_ID = bool(int(os.environ.get("REQUIRE_EXTERNAL_ID", "1")))
    RETENTION_ENABLED = bool(int(os.environ.get("RETENTION_ENABLED", "1")))
    RETENTION_DAYS = int(os.environ.get("RETENTION_DAYS", "180"))
    SWEEP_INTERVAL_SECONDS = int(os.environ.get("SWEEP_INTERVAL_SECONDS", "3600"))

    LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")


DB_CONFIG = {
    "host": Config.DB_HOST,
    "port": Config.DB_PORT,
    "user": Config.DB_USER,
    "password": Config.DB_PASSWORD,
    "database": Config.DB_NAME,
}
