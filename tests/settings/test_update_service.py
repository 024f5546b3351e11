from __future__ import annotations

from src.infraction_tracker.infraction_tracker.core.enums import UpdateState
from src.infraction_tracker.infraction_tracker.settings.updates import UpdateService, UpdateStatus


class FakeBridge:
    def __init__(self, *, check_result=None, install_result=None, error=None):
        self.check_result = check_result or {"ok": True, "currentVersion": "1.0.0", "latestVersion": "1.0.0"}
        self.install_result = install_result or {"ok": True}
        self.error = error
        self.callback = None
        self.unsubscribed = False

    def get_version(self):
        if self.error:
            raise self.error
        return "1.0.0"

    def check(self):
        if self.error:
            raise self.error
        return self.check_result

    def install_now(self):
        if self.error:
            raise self.error
        return self.install_result

    def on_status(self, callback):
        self.callback = callback

        def _off():
            self.unsubscribed = True

        return _off


def test_missing_bridge_is_reported_not_raised():
    svc = UpdateService(None)
    svc.start()

    assert svc.status.state == UpdateState.NONE
    assert svc.status.text() == "Updater not available in this build."
    assert svc.version() == "(offline build)"

    assert svc.check().state == UpdateState.ERROR
    assert svc.status.message == "Updater not available."
    assert svc.install_now().state == UpdateState.ERROR


def test_check_up_to_date_and_available():
    bridge = FakeBridge()
    svc = UpdateService(bridge)

    assert svc.check().state == UpdateState.NONE
    assert svc.status.text() == "Up to date."

    bridge.check_result = {"ok": True, "currentVersion": "1.0.0", "latestVersion": "1.1.0"}
    status = svc.check()
    assert status.state == UpdateState.AVAILABLE
    assert status.text() == "Update available: 1.1.0"


def test_check_failures_become_error_status():
    svc = UpdateService(FakeBridge(check_result={"ok": False, "message": "offline"}))
    assert svc.check().message == "offline"

    svc = UpdateService(FakeBridge(check_result={"ok": False}))
    assert svc.check().text() == "Update check failed."

    svc = UpdateService(FakeBridge(error=RuntimeError("network down")))
    assert svc.check().message == "network down"
    assert svc.version() == "(unknown)"
    assert svc.install_now().state == UpdateState.ERROR


def test_install_failure():
    svc = UpdateService(FakeBridge(install_result={"ok": False}))
    assert svc.install_now().text() == "Install failed."


def test_status_subscription():
    bridge = FakeBridge()
    svc = UpdateService(bridge)
    svc.start()

    bridge.callback({"state": "downloading", "percent": 42})
    assert svc.status.state == UpdateState.DOWNLOADING
    assert svc.status.text() == "Downloading... 42%"

    bridge.callback({"state": "bogus"})
    bridge.callback("not a payload")
    assert svc.status.state == UpdateState.DOWNLOADING

    bridge.callback({"state": "ready", "latestVersion": "1.1.0"})
    assert svc.status.text() == "Ready to install."

    svc.stop()
    assert bridge.unsubscribed is True


def test_status_to_dict():
    data = UpdateStatus(UpdateState.IDLE).to_dict()
    assert data["state"] == "idle"
    assert data["text"] == "-"


def test_non_dict_bridge_results_become_error_status():
    svc = UpdateService(FakeBridge(check_result="yes", install_result=["ok"]))

    status = svc.check()
    assert status.state == UpdateState.ERROR
    assert status.text() == "Update check failed."

    status = svc.install_now()
    assert status.state == UpdateState.ERROR
    assert status.text() == "Install failed."
