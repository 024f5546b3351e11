from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import datetime
from typing import Callable

from ..common.datetime_utils import format_iso_date, now_local
from ..core.enums import BadgeTone, DisciplinaryStatus
from ..core.exceptions import NotFoundError
from ..policy.status import tone_for
from ..records.service import to_row
from ..records.store import RecordStore

_UNSAFE_NAME_CHARS = re.compile(r"[^a-z0-9\- _]", re.IGNORECASE)


@dataclass(frozen=True)
class EmployeeReport:
    """Read-model for the printable / CSV history of one employee."""

    row_id: str
    employee_id: str
    name: str
    total_points: int
    status: DisciplinaryStatus
    tone: BadgeTone
    generated_on: str
    file_stem: str
    rows: list[dict]


class EmployeeReportService:
    def __init__(self, store: RecordStore, *, clock: Callable[[], datetime] = now_local):
        self._store = store
        self._clock = clock

    def build_employee_report(self, row_id: str) -> EmployeeReport:
        emp = self._store.get_employee(row_id)
        if not emp:
            raise NotFoundError("Employee not found")

        stamp = format_iso_date(self._clock().date())
        safe_name = _UNSAFE_NAME_CHARS.sub("", emp.name).strip() or "employee"
        employee_id = emp.employee_id or ""

        ordered = sorted(emp.infractions, key=lambda i: i.date, reverse=True)
        rows = []
        for inf in ordered:
            r = to_row(inf)
            rows.append(
                {
                    "date": r.date,
                    "type": r.label,
                    "points": r.points,
                    "store": r.store or "-",
                    "reason": r.reason or "-",
                }
            )

        status = emp.status
        return EmployeeReport(
            row_id=emp.row_id,
            employee_id=employee_id,
            name=emp.name,
            total_points=emp.total_points,
            status=status,
            tone=tone_for(status),
            generated_on=stamp,
            file_stem=f"attendance-{employee_id}-{safe_name}-{stamp}",
            rows=rows,
        )
