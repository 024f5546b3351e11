from __future__ import annotations

import atexit
import importlib
import logging
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from flask import Flask

from config import get_settings_module

from .container import Container, build_container, build_storage
from .database.bootstrap import apply_schema
from .database.connection import connection_from_settings
from .policy.controller import register as register_policy
from .records.controller import register as register_records
from .reports.controller import register as register_reports
from .settings.controller import register as register_settings
from .stores.controller import register as register_stores

logger = logging.getLogger(__name__)


def _configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, str(level).upper(), logging.INFO),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )


def create_app(*, container: Optional[Container] = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__, template_folder="../../../templates")

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))
    _configure_logging(getattr(settings, "LOG_LEVEL", "INFO"))

    if container is None:
        backend = getattr(settings, "STORAGE_BACKEND", "file")
        db_config = getattr(settings, "DB_CONFIG", None)
        logger.info("settings=%s storage=%s", settings_module, backend)

        if backend == "mysql" and bool(getattr(settings, "AUTO_INIT_DB", False)):
            schema_path = Path(__file__).resolve().parents[3] / "database" / "schema.sql"
            apply_schema(connection_from_settings(db_config), schema_path=schema_path)

        storage = build_storage(backend=backend, data_file=getattr(settings, "DATA_FILE", None), db_config=db_config)
        container = build_container(
            storage=storage,
            require_external_id=bool(getattr(settings, "REQUIRE_EXTERNAL_ID", True)),
            retention_enabled=bool(getattr(settings, "RETENTION_ENABLED", True)),
            retention_days=int(getattr(settings, "RETENTION_DAYS", 180)),
            sweep_interval_seconds=int(getattr(settings, "SWEEP_INTERVAL_SECONDS", 3600)),
        )
        atexit.register(container.close)

    app.extensions["infraction_tracker"] = container

    if container.sweeper is not None:
        sweeper = container.sweeper

        @app.before_request
        def _sweep_expired_infractions():
            sweeper.tick()

    register_policy(app)
    register_records(app, container)
    register_stores(app, container)
    register_settings(app, container)
    register_reports(app, container)

    return app
