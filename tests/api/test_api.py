from datetime import datetime

import pytest

from timekeeper.main import create_app
from timekeeper.storage.json_storage import JSONFileStorage


@pytest.fixture
def app(monkeypatch, storage):
    monkeypatch.setenv("APP_ENV", "testing")
    return create_app(storage=storage)


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def clock(monkeypatch):
    moments = {"now": datetime(2024, 1, 20, 9, 0)}
    monkeypatch.setattr("timekeeper.punch.service.now_local", lambda: moments["now"])
    return moments


def _login(client, username, password, role=None):
    body = {"username": username, "password": password}
    if role:
        body["role"] = role
    return client.post("/api/login", json=body)


def _as_admin(client):
    assert _login(client, "admin", "admin", "admin").status_code == 200


def _add_employee(client, username="alice", rate=20):
    _as_admin(client)
    resp = client.post("/api/admin/employees", json={"username": username, "password": "pw", "hourly_rate": rate})
    assert resp.status_code == 201
    client.post("/api/logout")


def test_default_admin_is_seeded(storage):
    create_app(storage=storage, overrides={"DEFAULT_ADMIN_USERNAME": "boss", "DEFAULT_ADMIN_PASSWORD": "pw"})
    assert list(storage.accounts) == ["boss"]


def test_login_rejects_wrong_role(client):
    resp = _login(client, "admin", "admin", "employee")
    assert resp.status_code == 401
    assert resp.get_json()["success"] is False


def test_admin_routes_require_admin(client):
    assert client.get("/api/admin/employees").status_code == 401

    _add_employee(client)
    _login(client, "alice", "pw")
    assert client.get("/api/admin/employees").status_code == 403


def test_admin_cannot_punch(client):
    _as_admin(client)
    assert client.post("/api/punch/in").status_code == 403


def test_punch_flow(client, clock):
    _add_employee(client)
    _login(client, "alice", "pw", "employee")

    assert client.get("/api/punch").get_json()["punched_in"] is False

    resp = client.post("/api/punch/in")
    assert resp.get_json()["punch_in"] == "09:00"
    assert client.post("/api/punch/in").status_code == 400

    clock["now"] = datetime(2024, 1, 20, 16, 30)
    body = client.post("/api/punch/out").get_json()
    assert body["log"]["minutes_worked"] == 450
    assert body["log"]["hours"] == "7.50"
    assert body["log"]["pay_period_start"] == "2024-01-15"

    again = client.post("/api/punch/out")
    assert again.status_code == 400
    assert again.get_json()["message"] == "No punch in record found for today."

    logs = client.get("/api/me/logs").get_json()["logs"]
    assert len(logs) == 1


def test_deduction_and_summary(client, clock):
    _add_employee(client, rate=20)
    _login(client, "alice", "pw")
    client.post("/api/punch/in")
    clock["now"] = datetime(2024, 1, 20, 17, 0)
    client.post("/api/punch/out")
    client.post("/api/logout")

    _as_admin(client)
    (log,) = client.get("/api/admin/logs").get_json()["logs"]

    resp = client.patch(f"/api/admin/logs/{log['id']}", json={"deduction": "30"})
    assert resp.get_json()["log"]["minutes_worked"] == 450

    rows = client.get("/api/admin/summary").get_json()["rows"]
    assert rows == [
        {
            "pay_period_start": "2024-01-15",
            "username": "alice",
            "total_minutes": 450,
            "total_hours": "7.50",
            "total_pay": "150.00",
        }
    ]

    csv_resp = client.get("/api/admin/summary.csv")
    assert csv_resp.mimetype == "text/csv"
    assert "timekeeper_summary.csv" in csv_resp.headers["Content-Disposition"]
    assert csv_resp.get_data(as_text=True).splitlines() == [
        "Pay Period Start,Employee,Total Hours,Total Pay",
        "2024-01-15,alice,7.50,150.00",
    ]


def test_empty_summary_export_is_rejected(client):
    _as_admin(client)
    resp = client.get("/api/admin/summary.csv")
    assert resp.status_code == 400
    assert resp.get_json()["message"] == "No summary data to export."


def test_pay_settings_endpoints(client):
    _as_admin(client)
    assert client.get("/api/admin/pay-settings").get_json()["start_days"] == [1, 15]

    resp = client.put("/api/admin/pay-settings", json={"start_days": "25, 10, 10"})
    assert resp.get_json()["start_days"] == [10, 25]

    bad = client.put("/api/admin/pay-settings", json={"start_days": "abc"})
    assert bad.status_code == 400
    assert client.get("/api/admin/pay-settings").get_json()["start_days"] == [10, 25]

    numeric = client.put("/api/admin/pay-settings", json={"start_days": 15})
    assert numeric.status_code == 200
    assert numeric.get_json()["start_days"] == [15]


def test_employee_management(client, storage):
    _add_employee(client, "alice")
    _as_admin(client)

    dup = client.post("/api/admin/employees", json={"username": "alice", "password": "x", "hourly_rate": 5})
    assert dup.status_code == 400

    resp = client.patch("/api/admin/employees/alice", json={"hourly_rate": "abc"})
    assert resp.status_code == 400
    resp = client.patch("/api/admin/employees/alice", json={"hourly_rate": "31.5"})
    assert resp.get_json()["employee"]["hourly_rate"] == 31.5

    employees = client.get("/api/admin/employees").get_json()["employees"]
    assert [e["username"] for e in employees] == ["alice"]

    assert client.delete("/api/admin/employees/admin").status_code == 400
    assert client.delete("/api/admin/employees/alice").get_json()["success"] is True
    assert "alice" not in storage.accounts


def test_storage_failure_is_reported(client, storage):
    _as_admin(client)
    storage.fail_writes = True
    resp = client.put("/api/admin/pay-settings", json={"start_days": "1"})
    assert resp.status_code == 500
    assert resp.get_json()["message"] == "System error while saving pay period settings"


def test_json_backend_end_to_end(monkeypatch, tmp_path, clock):
    monkeypatch.setenv("APP_ENV", "testing")
    path = tmp_path / "store.json"
    app = create_app(overrides={"STORAGE_BACKEND": "json", "DATA_PATH": str(path)})
    client = app.test_client()

    _add_employee(client, "bob", rate=10)
    _login(client, "bob", "pw")
    client.post("/api/punch/in")
    clock["now"] = datetime(2024, 1, 20, 10, 0)
    client.post("/api/punch/out")

    (log,) = JSONFileStorage(path).get_logs()
    assert (log.username, log.minutes_worked) == ("bob", 60)


def test_oversized_rate_is_rejected_and_summary_keeps_working(client, storage, make_log):
    _as_admin(client)
    resp = client.post("/api/admin/employees", json={"username": "bob", "password": "pw", "hourly_rate": "1e30"})
    assert resp.status_code == 400
    assert "bob" not in storage.accounts

    _add_employee(client, "bob", rate="99999999.99")
    storage.logs = [make_log("1", "bob", "2024-01-01", 600)]
    _as_admin(client)
    rows = client.get("/api/admin/summary").get_json()["rows"]
    assert rows[0]["total_pay"] == "999999999.90"
