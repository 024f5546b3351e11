from __future__ import annotations

from typing import Protocol, Sequence

from .model import Employee


class RecordRepository(Protocol):
    """Repository interface for the employee collection and store tags.

    Note: `load_*` must never raise on bad persisted data; they fall back to
    empty collections instead.
    """

    def load_employees(self) -> Sequence[Employee]:
        raise NotImplementedError

    def save_employees(self, employees: Sequence[Employee]) -> None:
        raise NotImplementedError

    def load_store_tags(self) -> Sequence[str]:
        raise NotImplementedError

    def save_store_tags(self, tags: Sequence[str]) -> None:
        raise NotImplementedError
