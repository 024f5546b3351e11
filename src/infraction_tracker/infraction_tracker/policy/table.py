from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping

from ..core.enums import InfractionType


@dataclass(frozen=True)
class PolicyEntry:
    infraction_type: InfractionType
    points: int
    label: str


_ENTRIES = (
    PolicyEntry(InfractionType.CALL_OUT_PRIOR, 3, "Call Out (prior to shift)"),
    PolicyEntry(InfractionType.CALL_OUT_AFTER_START, 8, "Call Out (after shift starts)"),
    PolicyEntry(InfractionType.NO_CALL_NO_SHOW, 8, "No Call / No Show"),
    PolicyEntry(InfractionType.TARDY_UNDER_HOUR, 1, "Tardy (over 15 min, under 1 hr)"),
    PolicyEntry(InfractionType.TARDY_OVER_HOUR, 2, "Tardy (over 1 hr)"),
    PolicyEntry(InfractionType.EARLY_DEPARTURE_UNDER_HOUR, 1, "Early Departure (over 15 min, under 1 hr)"),
    PolicyEntry(InfractionType.EARLY_DEPARTURE_OVER_HOUR, 2, "Early Departure (over 1 hr)"),
    PolicyEntry(InfractionType.LATE_RETURN_UNDER_HOUR, 1, "Late Return (over 15 min, under 1 hr)"),
    PolicyEntry(InfractionType.LATE_RETURN_OVER_HOUR, 2, "Late Return (over 1 hr)"),
)

POLICY: Mapping[InfractionType, PolicyEntry] = MappingProxyType({e.infraction_type: e for e in _ENTRIES})


def points_for(infraction_type: InfractionType) -> int:
    return POLICY[InfractionType(infraction_type)].points


def label_for(infraction_type: InfractionType) -> str:
    return POLICY[InfractionType(infraction_type)].label


def policy_entries() -> tuple[PolicyEntry, ...]:
    """Policy rows in display order."""
    return _ENTRIES
