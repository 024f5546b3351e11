from types import SimpleNamespace

import pytest

from src.infraction_tracker.infraction_tracker.core.enums import BadgeTone, DisciplinaryStatus
from src.infraction_tracker.infraction_tracker.policy.status import classify, tone_for, total_points


@pytest.mark.parametrize(
    "total, expected",
    [
        (-1, DisciplinaryStatus.OK),
        (0, DisciplinaryStatus.OK),
        (5, DisciplinaryStatus.OK),
        (6, DisciplinaryStatus.FIRST_WRITTEN_WARNING),
        (7, DisciplinaryStatus.FIRST_WRITTEN_WARNING),
        (8, DisciplinaryStatus.FINAL_WRITTEN_WARNING),
        (11, DisciplinaryStatus.FINAL_WRITTEN_WARNING),
        (12, DisciplinaryStatus.TERMINATION),
        (40, DisciplinaryStatus.TERMINATION),
    ],
)
def test_classify_thresholds(total, expected):
    assert classify(total) == expected


@pytest.mark.parametrize(
    "status, tone",
    [
        (DisciplinaryStatus.TERMINATION, BadgeTone.DANGER),
        (DisciplinaryStatus.FINAL_WRITTEN_WARNING, BadgeTone.WARN),
        (DisciplinaryStatus.FIRST_WRITTEN_WARNING, BadgeTone.NEUTRAL),
        (DisciplinaryStatus.OK, BadgeTone.OK),
    ],
)
def test_tone_for_status(status, tone):
    assert tone_for(status) == tone


def test_status_values_are_display_text():
    assert DisciplinaryStatus.FINAL_WRITTEN_WARNING.value == "Final Written Warning"


def test_total_points_sums_captured_values():
    items = [SimpleNamespace(points=8), SimpleNamespace(points=1), SimpleNamespace(points=3)]
    assert total_points(items) == 12
    assert total_points([]) == 0
