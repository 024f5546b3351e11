from __future__ import annotations

from ..core.enums import MutationResult
from ..core.exceptions import NotFoundError, ValidationError
from ..records.store import RecordStore


class StoreTagService:
    """Use case: maintain the list of store locations offered on infractions."""

    def __init__(self, store: RecordStore):
        self._store = store

    def list_tags(self) -> list[str]:
        return list(self._store.store_tags())

    def add_tag(self, raw: str) -> str:
        outcome = self._store.add_store_tag(raw)
        if outcome.result == MutationResult.EMPTY_REQUIRED_FIELD:
            raise ValidationError("Store name is required")
        if outcome.result == MutationResult.DUPLICATE_IDENTIFIER:
            raise ValidationError("That store already exists")
        return outcome.record

    def delete_tag(self, raw: str) -> str:
        outcome = self._store.delete_store_tag(raw)
        if outcome.result == MutationResult.EMPTY_REQUIRED_FIELD:
            raise ValidationError("Store name is required")
        if outcome.result == MutationResult.NOT_FOUND:
            raise NotFoundError("Store not found")
        return outcome.record
