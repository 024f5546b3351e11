from __future__ import annotations

from typing import Optional, Protocol


class KeyValueStorage(Protocol):
    """Durable local key-value slots (string keys, string values)."""

    def get_item(self, key: str) -> Optional[str]:
        raise NotImplementedError

    def set_item(self, key: str, value: str) -> None:
        raise NotImplementedError

    def remove_item(self, key: str) -> None:
        raise NotImplementedError
