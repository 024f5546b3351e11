from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path
from typing import Callable, Optional

from .common.datetime_utils import now_local
from .core.constants import DEFAULT_RETENTION_DAYS, DEFAULT_SWEEP_INTERVAL_SECONDS
from .database.connection import connection_from_settings
from .records.kv_record_repository import KeyValueRecordRepository
from .records.service import EmployeeService
from .records.store import RecordStore
from .reports.service import EmployeeReportService
from .retention.sweeper import RetentionSweeper
from .settings.theme import ThemeService
from .settings.updates import UpdateBridge, UpdateService
from .storage.base import KeyValueStorage
from .storage.json_file_storage import JsonFileStorage
from .storage.mysql_storage import MySQLKeyValueStorage
from .stores.service import StoreTagService

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Container:
    storage: KeyValueStorage
    record_store: RecordStore
    sweeper: Optional[RetentionSweeper]

    employee_service: EmployeeService
    store_tag_service: StoreTagService
    theme_service: ThemeService
    update_service: UpdateService
    report_service: EmployeeReportService

    def close(self) -> None:
        """Flush records to storage and drop the update subscription."""
        self.update_service.stop()
        self.record_store.close()


def build_storage(*, backend: str, data_file: str | Path | None = None, db_config: Optional[dict] = None) -> KeyValueStorage:
    backend = (backend or "file").lower()
    if backend == "file":
        if not data_file:
            raise ValueError("DATA_FILE is required for the file storage backend")
        return JsonFileStorage(data_file)
    if backend == "mysql":
        if not db_config:
            raise ValueError("DB_CONFIG is required for the mysql storage backend")
        return MySQLKeyValueStorage(connection_from_settings(db_config))
    raise ValueError(f"Unknown storage backend: {backend!r}")


def build_container(
    *,
    storage: KeyValueStorage,
    require_external_id: bool = True,
    retention_enabled: bool = True,
    retention_days: int = DEFAULT_RETENTION_DAYS,
    sweep_interval_seconds: int = DEFAULT_SWEEP_INTERVAL_SECONDS,
    update_bridge: Optional[UpdateBridge] = None,
    clock: Callable[[], datetime] = now_local,
) -> Container:
    record_repo = KeyValueRecordRepository(storage, clock=clock)
    record_store = RecordStore(record_repo, require_external_id=require_external_id, clock=clock).init()

    sweeper = None
    if retention_enabled:
        sweeper = RetentionSweeper(
            record_store,
            retention_days=retention_days,
            interval_seconds=sweep_interval_seconds,
            clock=clock,
        )
        sweeper.run_once()

    update_service = UpdateService(update_bridge)
    update_service.start()

    return Container(
        storage=storage,
        record_store=record_store,
        sweeper=sweeper,
        employee_service=EmployeeService(record_store),
        store_tag_service=StoreTagService(record_store),
        theme_service=ThemeService(storage),
        update_service=update_service,
        report_service=EmployeeReportService(record_store, clock=clock),
    )
