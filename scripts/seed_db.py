"""Seed demo employees and stores into the configured storage."""

from __future__ import annotations

import importlib
import sys
from datetime import date, timedelta
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from config import get_settings_module

from src.infraction_tracker.infraction_tracker.container import build_container, build_storage
from src.infraction_tracker.infraction_tracker.core.enums import InfractionType

DEMO_STORES = ["Downtown", "Eastside", "Airport"]
DEMO_EMPLOYEES = [
    ("Jane Doe", "4471", [(InfractionType.NO_CALL_NO_SHOW, 3), (InfractionType.TARDY_UNDER_HOUR, 10)]),
    ("Sam Rivera", "1020", [(InfractionType.CALL_OUT_PRIOR, 20), (InfractionType.EARLY_DEPARTURE_OVER_HOUR, 40)]),
    ("Lee Park", "3318", []),
]


def main() -> None:
    settings = importlib.import_module(get_settings_module())
    storage = build_storage(
        backend=settings.STORAGE_BACKEND,
        data_file=getattr(settings, "DATA_FILE", None),
        db_config=getattr(settings, "DB_CONFIG", None),
    )
    container = build_container(storage=storage, retention_enabled=False)
    store = container.record_store

    for tag in DEMO_STORES:
        store.add_store_tag(tag)

    today = date.today()
    added = 0
    for name, employee_id, infractions in DEMO_EMPLOYEES:
        outcome = store.add_employee(name, employee_id)
        if not outcome.applied:
            print(f"skip {name}: {outcome.result.value}")
            continue
        added += 1
        for infraction_type, days_ago in infractions:
            store.add_infraction(outcome.record.row_id, infraction_type, today - timedelta(days=days_ago), DEMO_STORES[0])

    container.close()
    print(f"OK: Seeded {added} employees and {len(DEMO_STORES)} stores ({settings.STORAGE_BACKEND})")


if __name__ == "__main__":
    main()
