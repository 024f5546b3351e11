from __future__ import annotations

from datetime import date

import pytest

from src.infraction_tracker.infraction_tracker.core.enums import DisciplinaryStatus, InfractionType
from src.infraction_tracker.infraction_tracker.core.exceptions import NotFoundError
from src.infraction_tracker.infraction_tracker.records.kv_record_repository import KeyValueRecordRepository
from src.infraction_tracker.infraction_tracker.records.store import RecordStore
from src.infraction_tracker.infraction_tracker.reports.service import EmployeeReportService


@pytest.fixture
def store(storage, clock):
    return RecordStore(KeyValueRecordRepository(storage, clock=clock), clock=clock).init()


def test_report_sorted_by_date_desc(store, clock):
    emp = store.add_employee("Jane O'Doe!", "4471").record
    store.add_infraction(emp.row_id, InfractionType.TARDY_UNDER_HOUR, date(2026, 3, 10), "Airport")
    store.add_infraction(emp.row_id, InfractionType.NO_CALL_NO_SHOW, date(2026, 3, 12))
    store.add_infraction(emp.row_id, InfractionType.CALL_OUT_PRIOR, date(2026, 1, 5), reason="sick")

    report = EmployeeReportService(store, clock=clock).build_employee_report(emp.row_id)

    assert [r["date"] for r in report.rows] == ["2026-03-12", "2026-03-10", "2026-01-05"]
    assert report.rows[0]["store"] == "-"
    assert report.rows[1]["type"] == "Tardy (over 15 min, under 1 hr)"
    assert report.rows[2]["reason"] == "sick"
    assert report.total_points == 12
    assert report.status == DisciplinaryStatus.TERMINATION
    assert report.file_stem == "attendance-4471-Jane ODoe-2026-03-15"


def test_report_unknown_employee(store, clock):
    with pytest.raises(NotFoundError):
        EmployeeReportService(store, clock=clock).build_employee_report("missing")
