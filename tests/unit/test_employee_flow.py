"""
端到端员工场景：创建员工 → 请假 → 审批 → 签到/签退 → 更新 → 删除，并验证重启后数据一致。
"""
from __future__ import annotations

from datetime import datetime

import pytest

from hrm_cell.app import create_app
from hrm_cell.routes import attendance
from hrm_cell.store import JsonStore
from tests.unit.conftest import h


def test_employee_scenario(client, monkeypatch):
    r = client.post("/employees", json={
        "name": "Lucas Lima", "email": "lucas@company.com", "department": "TI", "salary": 7000,
    }, headers=h(request_id="flow-1"))
    assert r.status_code == 201
    emp = r.json
    eid = emp["id"]

    r = client.post("/leaves/requests", json={"employeeId": eid, "leaveTypeId": "1", "days": 3})
    leave = r.json
    assert leave["status"] == "PENDING"
    assert client.post(f"/leaves/requests/{leave['id']}/approve").json["status"] == "APPROVED"

    monkeypatch.setattr(attendance, "_now", lambda: datetime(2024, 4, 2, 8, 30, 0))
    assert client.post("/attendance/check-in", json={"employeeId": eid}).status_code == 201
    monkeypatch.setattr(attendance, "_now", lambda: datetime(2024, 4, 2, 17, 0, 0))
    out = client.post("/attendance/check-out", json={"employeeId": eid}).json
    assert out["workHours"] == pytest.approx(8.5)

    r = client.patch(f"/employees/{eid}", json={"position": "Tech Lead"})
    assert r.json["position"] == "Tech Lead" and r.json["email"] == "lucas@company.com"

    slips = client.post("/payroll/process", json={"period": "2024-04"}).json
    assert [p["grossSalary"] for p in slips if p["employeeId"] == eid] == [7000]

    assert client.delete(f"/employees/{eid}").status_code == 204
    assert client.get(f"/employees/{eid}").status_code == 404
    # 关联记录不做级联删除
    assert client.get(f"/leaves/requests/{leave['id']}").status_code == 200


def test_restart_serves_same_data(client, db_path, settings):
    created = client.post("/departments", json={"name": "Logística"}).json
    client.patch("/employees/3", json={"status": "INACTIVE"})
    before = {name: client.get(url).json for name, url in (("departments", "/departments"), ("employees", "/employees"))}

    reloaded = JsonStore(str(db_path))
    reloaded.load()
    app2 = create_app(store=reloaded, settings=settings)
    app2.config["TESTING"] = True
    with app2.test_client() as c2:
        assert c2.get("/departments").json == before["departments"]
        assert c2.get("/employees").json == before["employees"]
        assert c2.get(f"/departments/{created['id']}").json == created
