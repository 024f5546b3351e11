import pytest

from src.infraction_tracker.infraction_tracker.core.constants import THEME_MODE_KEY
from src.infraction_tracker.infraction_tracker.core.enums import ThemeMode
from src.infraction_tracker.infraction_tracker.core.exceptions import ValidationError
from src.infraction_tracker.infraction_tracker.settings.theme import ThemeService


def test_theme_defaults_to_dark(storage):
    assert ThemeService(storage).get_theme() == ThemeMode.DARK
    storage.items[THEME_MODE_KEY] = "purple"
    assert ThemeService(storage).get_theme() == ThemeMode.DARK


def test_set_theme(storage):
    svc = ThemeService(storage)
    assert svc.set_theme(" Light ") == ThemeMode.LIGHT
    assert storage.items[THEME_MODE_KEY] == "light"
    assert svc.get_theme() == ThemeMode.LIGHT

    with pytest.raises(ValidationError):
        svc.set_theme("purple")
    assert svc.get_theme() == ThemeMode.LIGHT
