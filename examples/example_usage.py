"""Example: use the service layer directly (without Flask).

Controllers are a thin layer; the business rules live in the services and the
record store.
"""

import importlib

from config import get_settings_module

from src.infraction_tracker.infraction_tracker.container import build_container, build_storage


def main():
    settings = importlib.import_module(get_settings_module())
    storage = build_storage(backend=settings.STORAGE_BACKEND, data_file=settings.DATA_FILE, db_config=settings.DB_CONFIG)
    container = build_container(storage=storage, retention_days=settings.RETENTION_DAYS)
    for summary in container.employee_service.list_summaries():
        print(f"{summary.employee_id or '-':>6}  {summary.name:<24} {summary.total_points:>3} pts  {summary.status.value}")
    container.close()


if __name__ == "__main__":
    main()
