from __future__ import annotations

from datetime import datetime
from typing import Optional

import pytest


class InMemoryStorage:
    """KeyValueStorage fake that counts writes."""

    def __init__(self, items: Optional[dict] = None):
        self.items: dict[str, str] = dict(items or {})
        self.writes = 0

    def get_item(self, key: str) -> Optional[str]:
        return self.items.get(key)

    def set_item(self, key: str, value: str) -> None:
        self.items[key] = value
        self.writes += 1

    def remove_item(self, key: str) -> None:
        self.items.pop(key, None)


class MutableClock:
    def __init__(self, now: datetime):
        self.now = now

    def __call__(self) -> datetime:
        return self.now


@pytest.fixture
def fixed_now() -> datetime:
    return datetime(2026, 3, 15, 9, 30, 0)


@pytest.fixture
def clock(fixed_now) -> MutableClock:
    return MutableClock(fixed_now)


@pytest.fixture
def storage() -> InMemoryStorage:
    return InMemoryStorage()
