from __future__ import annotations

from datetime import date

import pytest

from src.crew_payroll.crew_payroll.container import wire
from src.crew_payroll.crew_payroll.core.enums import EntryKind
from src.crew_payroll.crew_payroll.main import create_app
from tests.fakes import FakeSync, InMemoryEntries, InMemoryWorkers, make_entry, make_worker


@pytest.fixture
def repos():
    workers = InMemoryWorkers(make_worker(1, salary=30000, name="Ravi"))
    entries = InMemoryEntries(make_entry(date(2026, 3, 5), kind=EntryKind.REJECTED_LEAVE))
    return workers, entries


@pytest.fixture
def client(monkeypatch, repos):
    monkeypatch.setenv("APP_ENV", "testing")
    workers, entries = repos
    app = create_app(container=wire(workers_repo=workers, entries_repo=entries))
    return app.test_client()


def test_create_and_list_workers(client):
    res = client.post("/api/workers", json={"name": "Sunil", "monthlySalary": 24000, "trade": "Helper"})
    assert res.status_code == 201
    assert res.get_json()["baseHours"] == 10

    names = [w["name"] for w in client.get("/api/workers").get_json()]
    assert names == ["Ravi", "Sunil"]


def test_create_worker_validation_error(client):
    res = client.post("/api/workers", json={"name": "X", "monthlySalary": -5})
    assert res.status_code == 400
    assert res.get_json()["success"] is False


def test_save_entry_and_payroll(client):
    res = client.post(
        "/api/entries",
        json={
            "workerId": 1,
            "date": "2026-03-02",
            "checkIn": "08:00 AM",
            "checkOut": "08:00 PM",
            "breakMinutes": 60,
            "advancePayment": 500,
        },
    )
    assert res.status_code == 201
    body = res.get_json()
    assert (body["workingHours"], body["otHours"], body["otPay"]) == (11.0, 1.0, 150.0)

    payroll = client.get("/api/payroll/workers/1?month=2026-03").get_json()["payroll"]
    assert payroll["leaveDeduction"] == 1000.0
    assert payroll["totalAdvances"] == 500.0
    assert payroll["finalPayable"] == 30000 + 150 - 1000 - 500


def test_save_entry_invalid_time(client):
    res = client.post(
        "/api/entries",
        json={"workerId": 1, "date": "2026-03-02", "checkIn": "later", "checkOut": "18:00"},
    )
    assert res.status_code == 400
    assert res.get_json()["message"] == "Invalid time format."


def test_save_entry_both_leave_flags_rejected(client):
    res = client.post(
        "/api/entries",
        json={"workerId": 1, "date": "2026-03-02", "isApprovedLeave": True, "isRejectedLeave": True},
    )
    assert res.status_code == 400


def test_save_entry_unknown_worker(client):
    res = client.post("/api/entries", json={"workerId": 9, "checkIn": "8", "checkOut": "18"})
    assert res.status_code == 404


def test_preview(client):
    res = client.post("/api/entries/preview", json={"workerId": 1, "checkIn": "22:00", "checkOut": "06:00"})
    assert res.get_json() == {"workingHours": 8.0, "otHours": 0.0, "otPay": 0.0}


def test_monthly_report(client):
    body = client.get("/api/payroll/monthly?month=2026-03").get_json()
    assert body["month"] == "2026-03"
    assert body["rows"][0]["finalPayable"] == 29000.0


def test_bad_month_param(client):
    assert client.get("/api/payroll/monthly?month=March").status_code == 400


def test_delete_worker_preserves_entries(client, repos):
    _, entries = repos
    assert client.delete("/api/workers/1").status_code == 200
    assert len(entries.all()) == 1

    listed = client.get("/api/entries?start=2026-03-01&end=2026-03-31").get_json()
    assert listed[0]["workerId"] == 1


def test_dashboard(client):
    body = client.get("/api/dashboard?date=2026-03-05").get_json()
    assert body["todayOnLeave"] == 1
    assert body["workerCount"] == 1
    assert len(body["last7Days"]) == 7


@pytest.mark.parametrize(
    "payload",
    [
        {"name": "Sunil", "monthlySalary": "nan"},
        {"name": "Sunil", "monthlySalary": "inf"},
        {"name": "Sunil", "monthlySalary": 24000, "baseHours": "inf"},
    ],
)
def test_create_worker_rejects_non_finite_numbers(client, payload):
    res = client.post("/api/workers", json=payload)
    assert res.status_code == 400
    assert "finite" in res.get_json()["message"]


@pytest.mark.parametrize("advance", ["nan", "inf", "-inf"])
def test_save_entry_rejects_non_finite_advance(client, repos, advance):
    res = client.post(
        "/api/entries",
        json={"workerId": 1, "date": "2026-03-02", "checkIn": "8", "checkOut": "18", "advancePayment": advance},
    )
    assert res.status_code == 400
    assert len(repos[1].all()) == 1


def test_non_text_trade_is_a_validation_error(client):
    res = client.post("/api/workers", json={"name": "Sunil", "monthlySalary": 24000, "trade": 7})
    assert res.status_code == 400
    assert res.get_json()["message"] == "trade must be text"

    res = client.put("/api/workers/1", json={"trade": 7})
    assert res.status_code == 400


def test_non_text_notes_is_a_validation_error(client):
    res = client.post(
        "/api/entries",
        json={"workerId": 1, "date": "2026-03-02", "checkIn": "8", "checkOut": "18", "notes": 5},
    )
    assert res.status_code == 400
    assert res.get_json()["message"] == "notes must be text"


def test_overlong_notes_rejected(client):
    res = client.post(
        "/api/entries",
        json={"workerId": 1, "date": "2026-03-02", "checkIn": "8", "checkOut": "18", "notes": "n" * 501},
    )
    assert res.status_code == 400
    assert "at most 500" in res.get_json()["message"]


def test_remote_entries(monkeypatch, repos):
    monkeypatch.setenv("APP_ENV", "testing")
    workers, entries = repos
    sync = FakeSync()
    client = create_app(container=wire(workers_repo=workers, entries_repo=entries, sheet_client=sync)).test_client()

    client.post("/api/entries", json={"workerId": 1, "date": "2026-03-02", "checkIn": "8", "checkOut": "18"})

    rows = client.get("/api/entries/remote?worker_id=1").get_json()
    assert [(r["date"], r["workingHours"]) for r in rows] == [("2026-03-02", 9.0)]


def test_remote_entries_without_sync(client):
    assert client.get("/api/entries/remote").status_code == 400


def test_dashboard_worker_count_includes_inactive(client):
    client.post("/api/workers", json={"name": "Sunil", "monthlySalary": 24000})
    assert client.post("/api/workers/2/status", json={"status": "inactive"}).status_code == 200

    body = client.get("/api/dashboard?date=2026-03-05").get_json()
    assert body["workerCount"] == 2
