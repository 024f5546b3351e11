from __future__ import annotations

import re

_NON_DIGITS = re.compile(r"[^0-9]+")


def digits_only(value: object) -> str:
    """Strip everything except ASCII digits ('#44-71' -> '4471')."""
    if value is None:
        return ""
    return _NON_DIGITS.sub("", str(value))


def clean_text(value: object) -> str:
    if value is None:
        return ""
    return str(value).strip()
