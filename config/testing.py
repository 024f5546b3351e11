import os
import tempfile

SECRET_KEY = "test-secret"

STORAGE_BACKEND = "file"
DATA_FILE = os.getenv("DATA_FILE", os.path.join(tempfile.gettempdir(), "infraction_tracker_test.json"))
DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "infraction_tracker_test"),
}

DEBUG = False
TESTING = True
LOG_LEVEL = "WARNING"

AUTO_INIT_DB = False

REQUIRE_EXTERNAL_ID = True
RETENTION_ENABLED = True
RETENTION_DAYS = 180
SWEEP_INTERVAL_SECONDS = 3600
