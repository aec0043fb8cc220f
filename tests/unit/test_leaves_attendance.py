"""
请假审批与考勤签到/签退单元测试。
"""
from __future__ import annotations

from datetime import datetime

import pytest

from hrm_cell.routes import attendance
from tests.unit.conftest import h


# ---------- Leaves ----------
def test_create_leave_request_forces_pending(client):
    r = client.post("/leaves/requests", json={"employeeId": "2", "leaveTypeId": "1", "days": 3, "status": "APPROVED"})
    assert r.status_code == 201
    assert r.json["status"] == "PENDING"


def test_approve_leave(client):
    r = client.post("/leaves/requests/1/approve", json={})
    assert r.status_code == 200
    assert r.json["status"] == "APPROVED"
    assert r.json["reason"] == "Férias planejadas"
    assert r.json["days"] == 5


def test_reject_leave_sets_reason(client):
    r = client.post("/leaves/requests/1/reject", json={"rejectedReason": "Período crítico"})
    assert r.status_code == 200
    assert r.json["status"] == "REJECTED"
    assert r.json["rejectedReason"] == "Período crítico"


def test_cancel_leave_returns_no_content(client):
    r = client.post("/leaves/requests/1/cancel")
    assert r.status_code == 204
    assert client.get("/leaves/requests/1").json["status"] == "CANCELLED"


@pytest.mark.parametrize("action", ["approve", "reject", "cancel"])
def test_leave_action_on_missing_request(client, action):
    r = client.post(f"/leaves/requests/missing/{action}", json={})
    assert r.status_code == 404
    assert r.json["message"] == "Leave request not found"


def test_balances_joined_with_leave_type(client, store):
    store.insert("leaveBalances", {"employeeId": "1", "leaveTypeId": "99", "balance": 2, "year": 2023})
    r = client.get("/leaves/balances/1")
    assert r.status_code == 200
    names = sorted(b["leaveType"]["name"] for b in r.json)
    assert names == ["Férias", "Tipo Desconhecido"]
    only_2024 = client.get("/leaves/balances/1?year=2024").json
    assert len(only_2024) == 1 and only_2024[0]["balance"] == 25


def test_strict_transitions_reject_illegal_move(client, settings):
    settings.STRICT_TRANSITIONS = True
    assert client.post("/leaves/requests/1/reject", json={}).status_code == 200
    r = client.post("/leaves/requests/1/approve", json={})
    assert r.status_code == 400
    assert r.json["code"] == "BUSINESS_RULE_VIOLATION"
    r = client.patch("/leaves/requests/1", json={"status": "PENDING"})
    assert r.status_code == 400


def test_free_transitions_by_default(client):
    assert client.post("/leaves/requests/1/reject", json={}).status_code == 200
    assert client.post("/leaves/requests/1/approve", json={}).json["status"] == "APPROVED"


# ---------- Attendance ----------
@pytest.fixture
def clock(monkeypatch):
    state = {"now": datetime(2024, 3, 1, 9, 0, 0)}
    monkeypatch.setattr(attendance, "_now", lambda: state["now"])
    return state


def test_check_in_creates_then_updates(client, clock):
    r = client.post("/attendance/check-in", json={}, headers=h(user_id="7"))
    assert r.status_code == 201
    assert r.json["employeeId"] == "7"
    assert r.json["date"] == "2024-03-01"
    assert r.json["checkIn"] == "09:00:00"
    assert r.json["status"] == "PRESENT"

    clock["now"] = datetime(2024, 3, 1, 9, 5, 30)
    r2 = client.post("/attendance/check-in", json={}, headers=h(user_id="7"))
    assert r2.status_code == 200
    assert r2.json["id"] == r.json["id"]
    assert r2.json["checkIn"] == "09:05:30"


def test_check_out_computes_work_hours(client, clock):
    client.post("/attendance/check-in", json={"employeeId": "8"})
    clock["now"] = datetime(2024, 3, 1, 17, 30, 0)
    r = client.post("/attendance/check-out", json={"employeeId": "8"})
    assert r.status_code == 200
    assert r.json["checkOut"] == "17:30:00"
    assert r.json["workHours"] == pytest.approx(8.5)


def test_check_out_without_check_in(client, clock):
    r = client.post("/attendance/check-out", json={"employeeId": "nobody"})
    assert r.status_code == 400
    assert r.json["message"] == "No check-in found for today"


def test_work_hours_formula():
    assert attendance.work_hours("2024-03-01", "09:00:00", "18:00:00") == 9
    assert attendance.work_hours("2024-03-01", "09:00:00", "09:00:36") == pytest.approx(0.01)
    assert attendance.work_hours("2024-03-01", "09:00", "17:00:00") == 8
    assert attendance.work_hours("2024-03-01", "09:00:00.500", "09:00:36.500") == pytest.approx(0.01)
    assert attendance.work_hours("2024-03-01", "nove horas", "17:00:00") is None


def test_check_out_accepts_short_check_in(client, clock):
    client.post("/attendance", json={"employeeId": "9", "date": "2024-03-01", "checkIn": "09:00"})
    clock["now"] = datetime(2024, 3, 1, 17, 0, 0)
    r = client.post("/attendance/check-out", json={"employeeId": "9"})
    assert r.status_code == 200
    assert r.json["workHours"] == 8


def test_check_out_skips_hours_for_unreadable_check_in(client, clock):
    client.post("/attendance", json={"employeeId": "10", "date": "2024-03-01", "checkIn": "manhã"})
    clock["now"] = datetime(2024, 3, 1, 17, 0, 0)
    r = client.post("/attendance/check-out", json={"employeeId": "10"})
    assert r.status_code == 200
    assert r.json["checkOut"] == "17:00:00"
    assert "workHours" not in r.json


def test_attendance_summary(client, store):
    for status, hours in (("PRESENT", 8), ("LATE", 6), ("ABSENT", None)):
        store.insert("attendance", {"employeeId": "5", "status": status, "workHours": hours})
    r = client.get("/attendance/summary/5")
    assert r.status_code == 200
    s = r.json
    assert s["totalDays"] == 3
    assert s["present"] == 1 and s["late"] == 1 and s["absent"] == 1
    assert s["totalWorkHours"] == 14
    assert s["averageWorkHours"] == pytest.approx(14 / 3)
    assert client.get("/attendance/summary/none").json["averageWorkHours"] == 0
