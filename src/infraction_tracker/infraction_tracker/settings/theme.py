from __future__ import annotations

from ..common.validators import clean_text
from ..core.constants import THEME_MODE_KEY
from ..core.enums import ThemeMode
from ..core.exceptions import ValidationError
from ..storage.base import KeyValueStorage


def decode_theme(raw: object) -> ThemeMode:
    return ThemeMode.LIGHT if raw == ThemeMode.LIGHT.value else ThemeMode.DARK


class ThemeService:
    """Theme preference stored in its own key-value slot (dark by default)."""

    def __init__(self, storage: KeyValueStorage):
        self._storage = storage

    def get_theme(self) -> ThemeMode:
        return decode_theme(self._storage.get_item(THEME_MODE_KEY))

    def set_theme(self, value: object) -> ThemeMode:
        try:
            mode = ThemeMode(clean_text(value).lower())
        except ValueError:
            raise ValidationError("Theme must be 'dark' or 'light'") from None
        self._storage.set_item(THEME_MODE_KEY, mode.value)
        return mode
