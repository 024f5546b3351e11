"""Settings-facing consumer of the host shell's auto-update bridge.

The bridge is optional: desktop builds provide one, a plain web deployment
does not. Every failure ends up as an `error` status, never an exception.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Callable, Optional, Protocol

from ..core.enums import UpdateState

logger = logging.getLogger(__name__)

UNKNOWN_VERSION = "(unknown)"
OFFLINE_VERSION = "(offline build)"


class UpdateBridge(Protocol):
    def get_version(self) -> str:
        raise NotImplementedError

    def check(self) -> dict:
        """Returns {ok, currentVersion?, latestVersion?, message?}."""
        raise NotImplementedError

    def install_now(self) -> dict:
        """Returns {ok, message?}."""
        raise NotImplementedError

    def on_status(self, callback: Callable[[dict], None]) -> Callable[[], None]:
        """Subscribe to status payloads; returns an unsubscribe function."""
        raise NotImplementedError


@dataclass(frozen=True)
class UpdateStatus:
    state: UpdateState
    message: Optional[str] = None
    current_version: Optional[str] = None
    latest_version: Optional[str] = None
    percent: Optional[float] = None

    @classmethod
    def from_payload(cls, payload: Any) -> Optional["UpdateStatus"]:
        """Decode a bridge status payload; None when it is not one."""
        if not isinstance(payload, dict) or not isinstance(payload.get("state"), str):
            return None
        try:
            state = UpdateState(payload["state"])
        except ValueError:
            return None

        percent = payload.get("percent")
        if isinstance(percent, bool) or not isinstance(percent, (int, float)):
            percent = None

        def _opt(key: str) -> Optional[str]:
            value = payload.get(key)
            return str(value) if value is not None else None

        return cls(
            state=state,
            message=_opt("message"),
            current_version=_opt("currentVersion"),
            latest_version=_opt("latestVersion"),
            percent=percent,
        )

    def text(self) -> str:
        if self.state == UpdateState.IDLE:
            return "-"
        if self.state == UpdateState.CHECKING:
            return "Checking for updates..."
        if self.state == UpdateState.AVAILABLE:
            return f"Update available: {self.latest_version or ''}".strip()
        if self.state == UpdateState.NONE:
            return self.message or "Up to date."
        if self.state == UpdateState.DOWNLOADING:
            pct = self.percent if self.percent is not None else 0
            return self.message or f"Downloading... {pct:g}%"
        if self.state == UpdateState.READY:
            return self.message or "Ready to install."
        return self.message or "Updater error."

    def to_dict(self) -> dict:
        return {
            "state": self.state.value,
            "message": self.message,
            "currentVersion": self.current_version,
            "latestVersion": self.latest_version,
            "percent": self.percent,
            "text": self.text(),
        }


class UpdateService:
    def __init__(self, bridge: Optional[UpdateBridge] = None):
        self._bridge = bridge
        self._status = UpdateStatus(UpdateState.IDLE)
        self._unsubscribe: Optional[Callable[[], None]] = None

    @property
    def available(self) -> bool:
        return self._bridge is not None

    @property
    def status(self) -> UpdateStatus:
        return self._status

    def start(self) -> None:
        if self._bridge is None:
            self._status = UpdateStatus(UpdateState.NONE, message="Updater not available in this build.")
            return
        try:
            self._unsubscribe = self._bridge.on_status(self._on_status)
        except Exception as e:
            logger.warning("Could not subscribe to update status: %s", e)
            self._status = UpdateStatus(UpdateState.ERROR, message=str(e) or "Updater error.")

    def stop(self) -> None:
        if self._unsubscribe is not None:
            try:
                self._unsubscribe()
            finally:
                self._unsubscribe = None

    def _on_status(self, payload: Any) -> None:
        status = UpdateStatus.from_payload(payload)
        if status is not None:
            self._status = status

    def version(self) -> str:
        if self._bridge is None:
            return OFFLINE_VERSION
        try:
            return str(self._bridge.get_version()) or UNKNOWN_VERSION
        except Exception as e:
            logger.warning("Could not read app version: %s", e)
            return UNKNOWN_VERSION

    def check(self) -> UpdateStatus:
        if self._bridge is None:
            self._status = UpdateStatus(UpdateState.ERROR, message="Updater not available.")
            return self._status

        self._status = UpdateStatus(UpdateState.CHECKING)
        try:
            res = self._bridge.check()
        except Exception as e:
            logger.warning("Update check failed: %s", e)
            self._status = UpdateStatus(UpdateState.ERROR, message=str(e) or "Update check failed.")
            return self._status

        if not isinstance(res, dict) or not res.get("ok"):
            message = res.get("message") if isinstance(res, dict) else None
            self._status = UpdateStatus(UpdateState.ERROR, message=message or "Update check failed.")
            return self._status

        cur = res.get("currentVersion")
        latest = res.get("latestVersion")
        if latest and cur and latest != cur:
            self._status = UpdateStatus(
                UpdateState.AVAILABLE,
                message="Update available.",
                current_version=cur,
                latest_version=latest,
            )
        else:
            self._status = UpdateStatus(UpdateState.NONE, message="Up to date.", current_version=cur)
        return self._status

    def install_now(self) -> UpdateStatus:
        if self._bridge is None:
            self._status = UpdateStatus(UpdateState.ERROR, message="Updater not available.")
            return self._status
        try:
            res = self._bridge.install_now()
        except Exception as e:
            logger.warning("Update install failed: %s", e)
            self._status = UpdateStatus(UpdateState.ERROR, message=str(e) or "Install failed.")
            return self._status

        if not isinstance(res, dict) or not res.get("ok"):
            message = res.get("message") if isinstance(res, dict) else None
            self._status = UpdateStatus(UpdateState.ERROR, message=message or "Install failed.")
        return self._status
