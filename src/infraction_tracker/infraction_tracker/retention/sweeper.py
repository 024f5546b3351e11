from __future__ import annotations

import logging
from datetime import datetime, timedelta
from typing import Callable, Optional

from ..common.datetime_utils import now_local
from ..core.constants import DEFAULT_RETENTION_DAYS, DEFAULT_SWEEP_INTERVAL_SECONDS
from ..records.store import RecordStore

logger = logging.getLogger(__name__)


class RetentionSweeper:
    """Expires infractions older than the retention window.

    `run_once()` is called at startup before the store is used; `tick()` is
    called on every incoming request and sweeps again once the interval has
    elapsed. Everything runs on the caller's thread.
    """

    def __init__(
        self,
        store: RecordStore,
        *,
        retention_days: int = DEFAULT_RETENTION_DAYS,
        interval_seconds: int = DEFAULT_SWEEP_INTERVAL_SECONDS,
        clock: Callable[[], datetime] = now_local,
    ):
        if int(retention_days) < 0:
            raise ValueError("retention_days must be >= 0")
        self._store = store
        self._retention_days = int(retention_days)
        self._interval = timedelta(seconds=max(int(interval_seconds), 1))
        self._clock = clock
        self._last_run: Optional[datetime] = None

    @property
    def retention_days(self) -> int:
        return self._retention_days

    @property
    def last_run(self) -> Optional[datetime]:
        return self._last_run

    def run_once(self) -> bool:
        self._last_run = self._clock()
        return self._store.sweep_expired(self._retention_days)

    def due(self) -> bool:
        if self._last_run is None:
            return True
        return self._clock() - self._last_run >= self._interval

    def tick(self) -> bool:
        """Sweep if the interval elapsed; returns whether anything was removed."""
        if not self.due():
            return False
        changed = self.run_once()
        if changed:
            logger.debug("Periodic retention sweep changed records")
        return changed
