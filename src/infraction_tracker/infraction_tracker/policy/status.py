from __future__ import annotations

from typing import Iterable

from ..core.constants import FINAL_WARNING_POINTS, FIRST_WARNING_POINTS, TERMINATION_POINTS
from ..core.enums import BadgeTone, DisciplinaryStatus

# Highest threshold first; each bound is inclusive.
THRESHOLDS: tuple[tuple[int, DisciplinaryStatus], ...] = (
    (TERMINATION_POINTS, DisciplinaryStatus.TERMINATION),
    (FINAL_WARNING_POINTS, DisciplinaryStatus.FINAL_WRITTEN_WARNING),
    (FIRST_WARNING_POINTS, DisciplinaryStatus.FIRST_WRITTEN_WARNING),
)

_TONES = {
    DisciplinaryStatus.TERMINATION: BadgeTone.DANGER,
    DisciplinaryStatus.FINAL_WRITTEN_WARNING: BadgeTone.WARN,
    DisciplinaryStatus.FIRST_WRITTEN_WARNING: BadgeTone.NEUTRAL,
    DisciplinaryStatus.OK: BadgeTone.OK,
}


def classify(total: int) -> DisciplinaryStatus:
    for threshold, status in THRESHOLDS:
        if total >= threshold:
            return status
    return DisciplinaryStatus.OK


def tone_for(status: DisciplinaryStatus) -> BadgeTone:
    return _TONES[DisciplinaryStatus(status)]


def total_points(infractions: Iterable) -> int:
    """Sum the captured point values of a sequence of infractions."""
    return sum(int(i.points) for i in infractions)
