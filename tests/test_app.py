from __future__ import annotations

import pytest

from src.infraction_tracker.infraction_tracker.container import build_container
from src.infraction_tracker.infraction_tracker.main import create_app


@pytest.fixture
def app(monkeypatch, storage, clock):
    monkeypatch.setenv("APP_ENV", "testing")
    container = build_container(storage=storage, clock=clock)
    return create_app(container=container)


@pytest.fixture
def client(app):
    return app.test_client()


def _add_employee(client, name="Jane Doe", employee_id="4471"):
    resp = client.post("/api/employees", json={"name": name, "employeeId": employee_id})
    assert resp.status_code == 201
    return resp.get_json()["employee"]


def test_policy_endpoint(client):
    data = client.get("/api/policy").get_json()
    assert len(data["infractions"]) == 9
    assert data["thresholds"][0] == {"points": 12, "status": "Termination"}


def test_employee_crud(client):
    emp = _add_employee(client)
    assert emp["employeeId"] == "4471"
    assert emp["status"] == "OK"

    listed = client.get("/api/employees?q=jane").get_json()["employees"]
    assert [e["id"] for e in listed] == [emp["id"]]
    assert client.get("/api/employees?q=nobody").get_json()["employees"] == []

    resp = client.patch(f"/api/employees/{emp['id']}", json={"name": "Jane Smith"})
    assert resp.status_code == 200
    assert resp.get_json()["employee"]["name"] == "Jane Smith"

    resp = client.delete(f"/api/employees/{emp['id']}")
    assert resp.status_code == 200
    assert client.get(f"/api/employees/{emp['id']}").status_code == 404


def test_employee_validation_errors(client):
    _add_employee(client)

    resp = client.post("/api/employees", json={"name": "Sam", "employeeId": "4471"})
    assert resp.status_code == 400
    assert resp.get_json()["message"] == "That employee ID already exists"

    resp = client.post("/api/employees", json={"name": "", "employeeId": "1"})
    assert resp.status_code == 400

    assert client.patch("/api/employees/missing", json={"name": "X"}).status_code == 404


def test_infraction_flow_escalates_status(client):
    emp = _add_employee(client)
    url = f"/api/employees/{emp['id']}/infractions"

    resp = client.post(url, json={"type": "No Call / No Show", "date": "2026-03-01", "store": "Airport"})
    assert resp.status_code == 201
    body = resp.get_json()
    assert body["infraction"]["points"] == 8
    assert body["employee"]["status"] == "Final Written Warning"

    resp = client.post(url, json={"type": "Tardy (16-59 min)"})
    assert resp.get_json()["infraction"]["date"] == "2026-03-15"

    detail = client.get(f"/api/employees/{emp['id']}").get_json()["employee"]
    assert detail["totalPoints"] == 9
    assert [i["points"] for i in detail["infractions"]] == [1, 8]

    resp = client.delete(f"{url}/{detail['infractions'][1]['id']}")
    assert resp.get_json()["employee"]["totalPoints"] == 1
    assert client.delete(f"{url}/missing").status_code == 404


def test_infraction_bad_input(client):
    emp = _add_employee(client)
    url = f"/api/employees/{emp['id']}/infractions"

    assert client.post(url, json={"type": "Nap"}).get_json()["message"] == "Unknown infraction type"
    resp = client.post(url, json={"type": "Tardy (60+ min)", "date": "03/01/2026"})
    assert resp.status_code == 400


def test_store_tags(client):
    assert client.post("/api/stores", json={"name": " Airport "}).status_code == 201
    assert client.post("/api/stores", json={"name": "Airport"}).status_code == 400
    assert client.get("/api/stores").get_json()["stores"] == ["Airport"]

    assert client.delete("/api/stores?name=Airport").status_code == 200
    assert client.delete("/api/stores?name=Airport").status_code == 404


def test_theme_settings(client):
    assert client.get("/api/settings/theme").get_json()["theme"] == "dark"
    assert client.put("/api/settings/theme", json={"theme": "light"}).get_json()["theme"] == "light"
    assert client.put("/api/settings/theme", json={"theme": "blue"}).status_code == 400


def test_updates_without_bridge(client):
    data = client.get("/api/settings/updates").get_json()
    assert data["version"] == "(offline build)"
    assert data["status"]["state"] == "none"

    data = client.post("/api/settings/updates/check").get_json()
    assert data["status"]["state"] == "error"
    assert data["status"]["message"] == "Updater not available."


def test_reports(client):
    emp = _add_employee(client)
    client.post(f"/api/employees/{emp['id']}/infractions", json={"type": "Call Out (Prior to shift)", "date": "2026-02-02"})

    resp = client.get(f"/employees/{emp['id']}/report.csv")
    assert resp.status_code == 200
    assert resp.mimetype == "text/csv"
    assert "attendance-4471-Jane Doe-2026-03-15.csv" in resp.headers["Content-Disposition"]
    text = resp.data.decode("utf-8-sig")
    assert text.splitlines()[0] == "date,type,points,store,reason"
    assert "2026-02-02" in text

    resp = client.get(f"/employees/{emp['id']}/report")
    assert resp.status_code == 200
    assert b"Jane Doe" in resp.data
    assert b"window.print" in resp.data

    assert client.get("/employees/missing/report.csv").status_code == 404


def test_update_check_with_malformed_bridge_reply_is_not_a_server_error(monkeypatch, storage, clock):
    class OddBridge:
        def get_version(self):
            return "1.0.0"

        def check(self):
            return "unexpected"

        def install_now(self):
            return 1

        def on_status(self, callback):
            return lambda: None

    monkeypatch.setenv("APP_ENV", "testing")
    app = create_app(container=build_container(storage=storage, clock=clock, update_bridge=OddBridge()))
    client = app.test_client()

    resp = client.post("/api/settings/updates/check")
    assert resp.status_code == 200
    assert resp.get_json()["status"]["state"] == "error"
    assert client.post("/api/settings/updates/install").get_json()["status"]["state"] == "error"
