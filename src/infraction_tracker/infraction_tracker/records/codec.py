"""JSON codec for the persisted employee collection and store tags.

Decoding is schema-checked field by field: every field that is missing or of
the wrong shape falls back to a documented default instead of failing the
whole load.

Employee payload::

    {"id": str, "employeeId": str?, "name": str,
     "infractions": [{"id", "type", "points", "date", "store", "reason"}]}
"""

from __future__ import annotations

import dataclasses
import json
import logging
from datetime import date
from typing import Any, Iterable, Optional, Sequence

from ..common.datetime_utils import format_iso_date, parse_iso_date
from ..common.validators import clean_text, digits_only
from ..core.constants import DEFAULT_EMPLOYEE_NAME
from ..core.enums import DEFAULT_INFRACTION_TYPE, InfractionType
from ..policy.table import points_for
from .model import Employee, Infraction, new_id

logger = logging.getLogger(__name__)


def _parse_json_list(raw: Optional[str], *, what: str) -> list:
    if not raw:
        return []
    try:
        parsed = json.loads(raw)
    except (TypeError, ValueError):
        logger.warning("Ignoring malformed %s payload", what)
        return []
    if not isinstance(parsed, list):
        logger.warning("Ignoring %s payload: expected a list, got %s", what, type(parsed).__name__)
        return []
    return parsed


def _as_text(value: Any) -> str:
    # Mirrors stringification of scalar values; containers are not text.
    if value is None or isinstance(value, (dict, list)):
        return ""
    return str(value)


def decode_id(value: Any) -> str:
    text = _as_text(value).strip()
    return text or new_id()


def decode_infraction_type(value: Any) -> InfractionType:
    try:
        return InfractionType(_as_text(value))
    except ValueError:
        return DEFAULT_INFRACTION_TYPE


def decode_points(value: Any, infraction_type: InfractionType) -> int:
    """Keep a stored integral point value, otherwise recompute from policy."""
    if value is None or isinstance(value, bool):
        return points_for(infraction_type)
    try:
        number = float(value)
    except (TypeError, ValueError):
        return points_for(infraction_type)
    if not number.is_integer() or number < 0:
        return points_for(infraction_type)
    return int(number)


def decode_date(value: Any, *, today: date) -> date:
    if isinstance(value, date):
        return value
    text = _as_text(value).strip()
    if not text:
        return today
    try:
        return parse_iso_date(text[:10])
    except ValueError:
        return today


def decode_infraction(payload: Any, *, today: date) -> Optional[Infraction]:
    if not isinstance(payload, dict):
        return None

    infraction_type = decode_infraction_type(payload.get("type"))
    return Infraction(
        infraction_id=decode_id(payload.get("id")),
        infraction_type=infraction_type,
        points=decode_points(payload.get("points"), infraction_type),
        date=decode_date(payload.get("date"), today=today),
        store=_as_text(payload.get("store")),
        reason=_as_text(payload.get("reason")),
    )


def decode_employee(payload: Any, *, today: date) -> Optional[Employee]:
    if not isinstance(payload, dict):
        return None

    raw_infractions = payload.get("infractions")
    infractions: list[Infraction] = []
    if isinstance(raw_infractions, list):
        for item in raw_infractions:
            inf = decode_infraction(item, today=today)
            if inf is not None:
                infractions.append(inf)

    return Employee(
        row_id=decode_id(payload.get("id")),
        employee_id=digits_only(_as_text(payload.get("employeeId"))) or None,
        name=_as_text(payload.get("name")).strip() or DEFAULT_EMPLOYEE_NAME,
        infractions=tuple(infractions),
    )


def decode_employees(raw: Optional[str], *, today: date) -> list[Employee]:
    out: list[Employee] = []
    for item in _parse_json_list(raw, what="employees"):
        emp = decode_employee(item, today=today)
        if emp is not None:
            out.append(emp)
    return out


def normalize_employees(employees: Iterable[Employee], *, require_external_id: bool = True) -> list[Employee]:
    """Deduplicate by external id, keeping the first occurrence.

    When external ids are required, records without one are dropped as well.
    """

    seen: set[str] = set()
    out: list[Employee] = []
    for emp in employees:
        eid = digits_only(emp.employee_id)
        if not eid:
            if require_external_id:
                logger.info("Dropping employee %s without an employee id", emp.row_id)
                continue
            out.append(emp)
            continue
        if eid in seen:
            logger.info("Dropping employee %s with duplicate employee id %s", emp.row_id, eid)
            continue
        seen.add(eid)
        out.append(emp if emp.employee_id == eid else dataclasses.replace(emp, employee_id=eid))
    return out


def infraction_to_payload(inf: Infraction) -> dict:
    return {
        "id": inf.infraction_id,
        "type": inf.infraction_type.value,
        "points": inf.points,
        "date": format_iso_date(inf.date),
        "store": inf.store,
        "reason": inf.reason,
    }


def employee_to_payload(emp: Employee) -> dict:
    payload: dict[str, Any] = {"id": emp.row_id}
    if emp.employee_id:
        payload["employeeId"] = emp.employee_id
    payload["name"] = emp.name
    payload["infractions"] = [infraction_to_payload(i) for i in emp.infractions]
    return payload


def encode_employees(employees: Sequence[Employee]) -> str:
    return json.dumps([employee_to_payload(e) for e in employees], ensure_ascii=False)


def decode_store_tags(raw: Optional[str]) -> list[str]:
    out: list[str] = []
    for item in _parse_json_list(raw, what="store tags"):
        if not isinstance(item, str):
            continue
        tag = clean_text(item)
        if tag and tag not in out:
            out.append(tag)
    return out


def encode_store_tags(tags: Sequence[str]) -> str:
    return json.dumps(list(tags), ensure_ascii=False)
