"""Snapshot every storage slot (employees, store tags, theme) to backups/.

Works the same for the file and mysql backends: the slots are read through
the configured KeyValueStorage and written as one JSON document.
"""

from __future__ import annotations

import importlib
import json
import sys
from datetime import datetime
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from config import get_settings_module

from src.infraction_tracker.infraction_tracker.container import build_storage
from src.infraction_tracker.infraction_tracker.core.constants import EMPLOYEES_KEY, STORES_KEY, THEME_MODE_KEY

SLOTS = (EMPLOYEES_KEY, STORES_KEY, THEME_MODE_KEY)


def main() -> None:
    settings = importlib.import_module(get_settings_module())
    storage = build_storage(
        backend=settings.STORAGE_BACKEND,
        data_file=getattr(settings, "DATA_FILE", None),
        db_config=getattr(settings, "DB_CONFIG", None),
    )

    snapshot = {key: storage.get_item(key) for key in SLOTS}
    if all(value is None for value in snapshot.values()):
        raise SystemExit("Nothing to back up: every storage slot is empty.")

    out_dir = REPO_ROOT / "backups"
    out_dir.mkdir(parents=True, exist_ok=True)
    out_file = out_dir / f"tracker_{datetime.now().strftime('%Y%m%d_%H%M%S')}.json"
    out_file.write_text(json.dumps(snapshot, ensure_ascii=False, indent=2), encoding="utf-8")
    print(f"OK: Backup created: {out_file} ({settings.STORAGE_BACKEND})")


if __name__ == "__main__":
    main()
