from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional

from ..common.datetime_utils import format_iso_date, parse_iso_date
from ..common.validators import clean_text
from ..core.enums import BadgeTone, DisciplinaryStatus, InfractionType, MutationResult
from ..core.exceptions import NotFoundError, ValidationError
from ..policy.status import tone_for
from ..policy.table import label_for
from .model import Employee, Infraction, MutationOutcome
from .store import RecordStore


@dataclass(frozen=True)
class InfractionRow:
    infraction_id: str
    type: str
    label: str
    points: int
    date: str
    store: str
    reason: str


@dataclass(frozen=True)
class EmployeeSummary:
    row_id: str
    employee_id: Optional[str]
    name: str
    total_points: int
    status: DisciplinaryStatus
    tone: BadgeTone
    infraction_count: int


@dataclass(frozen=True)
class EmployeeDetail:
    summary: EmployeeSummary
    infractions: list[InfractionRow]


_EMPLOYEE_MESSAGES = {
    MutationResult.EMPTY_REQUIRED_FIELD: "Employee name and employee ID are required",
    MutationResult.INVALID_IDENTIFIER: "Employee ID must contain digits",
    MutationResult.DUPLICATE_IDENTIFIER: "That employee ID already exists",
}


def to_summary(emp: Employee) -> EmployeeSummary:
    status = emp.status
    return EmployeeSummary(
        row_id=emp.row_id,
        employee_id=emp.employee_id,
        name=emp.name,
        total_points=emp.total_points,
        status=status,
        tone=tone_for(status),
        infraction_count=len(emp.infractions),
    )


def to_row(inf: Infraction) -> InfractionRow:
    return InfractionRow(
        infraction_id=inf.infraction_id,
        type=inf.infraction_type.value,
        label=label_for(inf.infraction_type),
        points=inf.points,
        date=format_iso_date(inf.date),
        store=inf.store,
        reason=inf.reason,
    )


def parse_infraction_type(value: object) -> InfractionType:
    try:
        return InfractionType(clean_text(value))
    except ValueError:
        raise ValidationError("Unknown infraction type") from None


def parse_infraction_date(value: object) -> Optional[date]:
    if isinstance(value, date):
        return value
    text = clean_text(value)
    if not text:
        return None
    try:
        return parse_iso_date(text)
    except ValueError:
        raise ValidationError("Date must be in YYYY-MM-DD format") from None


class EmployeeService:
    """Use case: manage employees and their infractions.

    Turns rejected store mutations into ValidationError / NotFoundError so the
    controller layer can show a message.
    """

    def __init__(self, store: RecordStore):
        self._store = store

    def _check(self, outcome: MutationOutcome, *, not_found: str = "Employee not found") -> MutationOutcome:
        if outcome.result in (MutationResult.APPLIED, MutationResult.UNCHANGED):
            return outcome
        if outcome.result == MutationResult.NOT_FOUND:
            raise NotFoundError(not_found)
        raise ValidationError(_EMPLOYEE_MESSAGES.get(outcome.result, "Invalid employee data"))

    def _require(self, row_id: str) -> Employee:
        emp = self._store.get_employee(row_id)
        if not emp:
            raise NotFoundError("Employee not found")
        return emp

    def list_summaries(self, *, query: str = "") -> list[EmployeeSummary]:
        q = clean_text(query).lower()
        out = []
        for emp in self._store.employees():
            if q and q not in emp.name.lower() and q not in (emp.employee_id or ""):
                continue
            out.append(to_summary(emp))
        return out

    def get_employee(self, row_id: str) -> Employee:
        return self._require(row_id)

    def get_detail(self, row_id: str) -> EmployeeDetail:
        emp = self._require(row_id)
        return EmployeeDetail(summary=to_summary(emp), infractions=[to_row(i) for i in emp.infractions])

    def add_employee(self, *, name: str, employee_id: Optional[str] = None) -> Employee:
        if not clean_text(name):
            raise ValidationError("Employee name is required")
        outcome = self._check(self._store.add_employee(name, employee_id))
        return outcome.record

    def update_employee(self, row_id: str, *, name: Optional[str] = None, employee_id: Optional[str] = None) -> Employee:
        """Apply a name and/or employee id change; the id is checked first."""
        self._require(row_id)
        if name is not None and not clean_text(name):
            raise ValidationError("Employee name is required")
        if employee_id is not None:
            self._check(self._store.set_external_id(row_id, employee_id))
        if name is not None:
            self._check(self._store.rename_employee(row_id, name))
        return self._require(row_id)

    def delete_employee(self, row_id: str) -> Employee:
        return self._check(self._store.delete_employee(row_id)).record

    def add_infraction(
        self,
        row_id: str,
        *,
        infraction_type: object,
        on: object = None,
        store: str = "",
        reason: str = "",
    ) -> Infraction:
        self._require(row_id)
        outcome = self._check(
            self._store.add_infraction(
                row_id,
                parse_infraction_type(infraction_type),
                parse_infraction_date(on),
                store,
                reason,
            )
        )
        return outcome.record

    def delete_infraction(self, row_id: str, infraction_id: str) -> Infraction:
        self._require(row_id)
        outcome = self._store.delete_infraction(row_id, infraction_id)
        return self._check(outcome, not_found="Infraction not found").record
