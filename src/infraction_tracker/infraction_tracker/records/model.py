from __future__ import annotations

import uuid
from dataclasses import dataclass, field
from datetime import date
from typing import Optional

from ..core.enums import DisciplinaryStatus, InfractionType, MutationResult
from ..policy.status import classify, total_points


def new_id() -> str:
    return str(uuid.uuid4())


@dataclass(frozen=True)
class Infraction:
    """Domain entity: one recorded attendance violation.

    `points` is captured when the infraction is recorded and never recomputed,
    so history stays stable if the policy table changes.
    """

    infraction_id: str
    infraction_type: InfractionType
    points: int
    date: date
    store: str = ""
    reason: str = ""


@dataclass(frozen=True)
class Employee:
    """Domain entity: an employee and the infractions it owns (newest first)."""

    row_id: str
    name: str
    employee_id: Optional[str] = None
    infractions: tuple[Infraction, ...] = field(default_factory=tuple)

    @property
    def total_points(self) -> int:
        return total_points(self.infractions)

    @property
    def status(self) -> DisciplinaryStatus:
        return classify(self.total_points)

    def find_infraction(self, infraction_id: str) -> Optional[Infraction]:
        return next((i for i in self.infractions if i.infraction_id == infraction_id), None)


@dataclass(frozen=True)
class MutationOutcome:
    """What a record store mutation did; `record` is the affected entity."""

    result: MutationResult
    record: Optional[object] = None

    @property
    def applied(self) -> bool:
        return self.result == MutationResult.APPLIED
