import os

from .config import DB_CONFIG, Config

SECRET_KEY = Config.SECRET_KEY

STORAGE_BACKEND = Config.STORAGE_BACKEND
DATA_FILE = Config.DATA_FILE
DB_CONFIG = dict(DB_CONFIG)

DEBUG = True
LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")

# If enabled with the mysql backend, schema.sql is applied on startup (idempotent).
AUTO_INIT_DB = Config.AUTO_INIT_DB

REQUIRE_EXTERNAL_ID = Config.REQUIRE_EXTERNAL_ID
RETENTION_ENABLED = Config.RETENTION_ENABLED
RETENTION_DAYS = Config.RETENTION_DAYS
SWEEP_INTERVAL_SECONDS = Config.SWEEP_INTERVAL_SECONDS
