from __future__ import annotations

import dataclasses
import functools
import logging
import threading
from datetime import date, datetime
from typing import Callable, Optional

from ..common.datetime_utils import is_older_than_days, now_local
from ..common.validators import clean_text, digits_only
from ..core.enums import InfractionType, MutationResult
from ..policy.table import points_for
from .codec import normalize_employees
from .model import Employee, Infraction, MutationOutcome, new_id
from .repository import RecordRepository

logger = logging.getLogger(__name__)


def _synchronized(method):
    @functools.wraps(method)
    def wrapper(self, *args, **kwargs):
        with self._lock:
            return method(self, *args, **kwargs)

    return wrapper


class RecordStore:
    """In-memory employee collection; the only writer of persisted records.

    Lifecycle: `init()` loads from the repository, every applied mutation is
    persisted right away, `close()` flushes on shutdown.

    Business rule violations never raise: each mutation returns a
    `MutationOutcome` and leaves the state untouched unless it was applied.

    Flask serves requests on several threads, so every public method holds
    one re-entrant lock for its whole read-modify-persist sequence.
    """

    def __init__(
        self,
        repository: RecordRepository,
        *,
        require_external_id: bool = True,
        clock: Callable[[], datetime] = now_local,
    ):
        self._repo = repository
        self._require_external_id = bool(require_external_id)
        self._clock = clock
        self._employees: list[Employee] = []
        self._store_tags: list[str] = []
        self._lock = threading.RLock()

    @property
    def require_external_id(self) -> bool:
        return self._require_external_id

    # ---------- lifecycle ----------
    @_synchronized
    def init(self) -> "RecordStore":
        loaded = list(self._repo.load_employees())
        self._employees = normalize_employees(loaded, require_external_id=self._require_external_id)
        self._store_tags = list(self._repo.load_store_tags())
        # Write back right away: ids and dates filled in while decoding must
        # survive a restart that skips close().
        self._repo.save_employees(self._employees)
        logger.info("Loaded %d employees and %d store tags", len(self._employees), len(self._store_tags))
        return self

    @_synchronized
    def close(self) -> None:
        self._repo.save_employees(self._employees)
        self._repo.save_store_tags(self._store_tags)

    # ---------- reads ----------
    @_synchronized
    def employees(self) -> tuple[Employee, ...]:
        return tuple(self._employees)

    @_synchronized
    def get_employee(self, row_id: str) -> Optional[Employee]:
        return next((e for e in self._employees if e.row_id == row_id), None)

    @_synchronized
    def find_by_external_id(self, employee_id: str) -> Optional[Employee]:
        eid = digits_only(employee_id)
        if not eid:
            return None
        return next((e for e in self._employees if e.employee_id == eid), None)

    @_synchronized
    def store_tags(self) -> tuple[str, ...]:
        return tuple(self._store_tags)

    # ---------- helpers ----------
    def _index_of(self, row_id: str) -> Optional[int]:
        return next((i for i, e in enumerate(self._employees) if e.row_id == row_id), None)

    def _replace(self, index: int, employee: Employee) -> None:
        self._employees[index] = employee
        self._repo.save_employees(self._employees)

    def _id_taken(self, employee_id: str, *, except_row_id: Optional[str] = None) -> bool:
        return any(e.employee_id == employee_id and e.row_id != except_row_id for e in self._employees)

    def _reject(self, op: str, result: MutationResult) -> MutationOutcome:
        logger.debug("%s rejected: %s", op, result.value)
        return MutationOutcome(result)

    # ---------- employees ----------
    @_synchronized
    def add_employee(self, name: str, employee_id: Optional[str] = None) -> MutationOutcome:
        clean_name = clean_text(name)
        if not clean_name:
            return self._reject("add_employee", MutationResult.EMPTY_REQUIRED_FIELD)

        eid: Optional[str] = None
        if clean_text(employee_id):
            eid = digits_only(employee_id)
            if not eid:
                return self._reject("add_employee", MutationResult.INVALID_IDENTIFIER)
            if self._id_taken(eid):
                return self._reject("add_employee", MutationResult.DUPLICATE_IDENTIFIER)
        elif self._require_external_id:
            return self._reject("add_employee", MutationResult.EMPTY_REQUIRED_FIELD)

        employee = Employee(row_id=new_id(), name=clean_name, employee_id=eid)
        self._employees.insert(0, employee)
        self._repo.save_employees(self._employees)
        return MutationOutcome(MutationResult.APPLIED, employee)

    @_synchronized
    def rename_employee(self, row_id: str, name: str) -> MutationOutcome:
        clean_name = clean_text(name)
        if not clean_name:
            return self._reject("rename_employee", MutationResult.EMPTY_REQUIRED_FIELD)
        index = self._index_of(row_id)
        if index is None:
            return self._reject("rename_employee", MutationResult.NOT_FOUND)

        current = self._employees[index]
        if current.name == clean_name:
            return MutationOutcome(MutationResult.UNCHANGED, current)
        updated = dataclasses.replace(current, name=clean_name)
        self._replace(index, updated)
        return MutationOutcome(MutationResult.APPLIED, updated)

    @_synchronized
    def set_external_id(self, row_id: str, raw: Optional[str]) -> MutationOutcome:
        index = self._index_of(row_id)
        if index is None:
            return self._reject("set_external_id", MutationResult.NOT_FOUND)

        current = self._employees[index]
        eid = digits_only(raw) or None
        # Clearing is refused while ids are required; normalization would drop
        # the employee on the next load.
        if eid is None and self._require_external_id:
            return self._reject("set_external_id", MutationResult.EMPTY_REQUIRED_FIELD)
        if eid is not None and self._id_taken(eid, except_row_id=row_id):
            return self._reject("set_external_id", MutationResult.DUPLICATE_IDENTIFIER)
        if current.employee_id == eid:
            return MutationOutcome(MutationResult.UNCHANGED, current)

        updated = dataclasses.replace(current, employee_id=eid)
        self._replace(index, updated)
        return MutationOutcome(MutationResult.APPLIED, updated)

    @_synchronized
    def delete_employee(self, row_id: str) -> MutationOutcome:
        index = self._index_of(row_id)
        if index is None:
            return self._reject("delete_employee", MutationResult.NOT_FOUND)

        removed = self._employees.pop(index)
        self._repo.save_employees(self._employees)
        return MutationOutcome(MutationResult.APPLIED, removed)

    # ---------- infractions ----------
    @_synchronized
    def add_infraction(
        self,
        row_id: str,
        infraction_type: InfractionType,
        on: Optional[date] = None,
        store: str = "",
        reason: str = "",
    ) -> MutationOutcome:
        index = self._index_of(row_id)
        if index is None:
            return self._reject("add_infraction", MutationResult.NOT_FOUND)

        infraction_type = InfractionType(infraction_type)
        infraction = Infraction(
            infraction_id=new_id(),
            infraction_type=infraction_type,
            points=points_for(infraction_type),
            date=on or self._clock().date(),
            store=clean_text(store),
            reason=clean_text(reason),
        )
        current = self._employees[index]
        self._replace(index, dataclasses.replace(current, infractions=(infraction, *current.infractions)))
        return MutationOutcome(MutationResult.APPLIED, infraction)

    @_synchronized
    def delete_infraction(self, row_id: str, infraction_id: str) -> MutationOutcome:
        index = self._index_of(row_id)
        if index is None:
            return self._reject("delete_infraction", MutationResult.NOT_FOUND)

        current = self._employees[index]
        removed = current.find_infraction(infraction_id)
        if removed is None:
            return self._reject("delete_infraction", MutationResult.NOT_FOUND)

        kept = tuple(i for i in current.infractions if i.infraction_id != infraction_id)
        self._replace(index, dataclasses.replace(current, infractions=kept))
        return MutationOutcome(MutationResult.APPLIED, removed)

    @_synchronized
    def sweep_expired(self, retention_days: int) -> bool:
        """Drop infractions dated strictly before today minus `retention_days`.

        Returns whether anything was removed; nothing is persisted otherwise.
        """

        today = self._clock().date()
        changed = False
        removed = 0
        for index, emp in enumerate(self._employees):
            kept = tuple(i for i in emp.infractions if not is_older_than_days(i.date, retention_days, today=today))
            if len(kept) != len(emp.infractions):
                removed += len(emp.infractions) - len(kept)
                self._employees[index] = dataclasses.replace(emp, infractions=kept)
                changed = True

        if changed:
            self._repo.save_employees(self._employees)
            logger.info("Retention sweep removed %d infractions older than %d days", removed, retention_days)
        return changed

    # ---------- store tags ----------
    @_synchronized
    def add_store_tag(self, raw: str) -> MutationOutcome:
        tag = clean_text(raw)
        if not tag:
            return self._reject("add_store_tag", MutationResult.EMPTY_REQUIRED_FIELD)
        if tag in self._store_tags:
            return self._reject("add_store_tag", MutationResult.DUPLICATE_IDENTIFIER)

        self._store_tags.insert(0, tag)
        self._repo.save_store_tags(self._store_tags)
        return MutationOutcome(MutationResult.APPLIED, tag)

    @_synchronized
    def delete_store_tag(self, raw: str) -> MutationOutcome:
        tag = clean_text(raw)
        if not tag:
            return self._reject("delete_store_tag", MutationResult.EMPTY_REQUIRED_FIELD)
        if tag not in self._store_tags:
            return self._reject("delete_store_tag", MutationResult.NOT_FOUND)

        self._store_tags.remove(tag)
        self._repo.save_store_tags(self._store_tags)
        return MutationOutcome(MutationResult.APPLIED, tag)
