from __future__ import annotations

from datetime import datetime
from typing import Callable, Sequence

from ..common.datetime_utils import now_local
from ..core.constants import EMPLOYEES_KEY, STORES_KEY
from ..storage.base import KeyValueStorage
from .codec import decode_employees, decode_store_tags, encode_employees, encode_store_tags
from .model import Employee


class KeyValueRecordRepository:
    """RecordRepository backed by two JSON slots of a key-value storage."""

    def __init__(self, storage: KeyValueStorage, *, clock: Callable[[], datetime] = now_local):
        self._storage = storage
        self._clock = clock

    def load_employees(self) -> list[Employee]:
        return decode_employees(self._storage.get_item(EMPLOYEES_KEY), today=self._clock().date())

    def save_employees(self, employees: Sequence[Employee]) -> None:
        self._storage.set_item(EMPLOYEES_KEY, encode_employees(employees))

    def load_store_tags(self) -> list[str]:
        return decode_store_tags(self._storage.get_item(STORES_KEY))

    def save_store_tags(self, tags: Sequence[str]) -> None:
        self._storage.set_item(STORES_KEY, encode_store_tags(tags))
