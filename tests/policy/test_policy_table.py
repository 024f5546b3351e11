import pytest

from src.infraction_tracker.infraction_tracker.core.enums import InfractionType
from src.infraction_tracker.infraction_tracker.policy.table import label_for, points_for, policy_entries


@pytest.mark.parametrize(
    "infraction_type, points",
    [
        (InfractionType.CALL_OUT_PRIOR, 3),
        (InfractionType.CALL_OUT_AFTER_START, 8),
        (InfractionType.NO_CALL_NO_SHOW, 8),
        (InfractionType.TARDY_UNDER_HOUR, 1),
        (InfractionType.TARDY_OVER_HOUR, 2),
        (InfractionType.EARLY_DEPARTURE_UNDER_HOUR, 1),
        (InfractionType.EARLY_DEPARTURE_OVER_HOUR, 2),
        (InfractionType.LATE_RETURN_UNDER_HOUR, 1),
        (InfractionType.LATE_RETURN_OVER_HOUR, 2),
    ],
)
def test_points_for_every_category(infraction_type, points):
    assert points_for(infraction_type) == points


def test_points_for_accepts_persisted_tag():
    assert points_for("No Call / No Show") == 8


def test_policy_covers_all_categories_once():
    types = [e.infraction_type for e in policy_entries()]
    assert sorted(types) == sorted(InfractionType)
    assert len(types) == len(set(types)) == 9


def test_labels():
    assert label_for(InfractionType.TARDY_UNDER_HOUR) == "Tardy (over 15 min, under 1 hr)"
    assert label_for(InfractionType.LATE_RETURN_OVER_HOUR) == "Late Return (over 1 hr)"
    assert label_for(InfractionType.CALL_OUT_PRIOR) == "Call Out (prior to shift)"


def test_unknown_category_is_rejected():
    with pytest.raises(ValueError):
        points_for("Sick Day")
