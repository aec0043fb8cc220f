"""
客户端数据访问层单元测试：HRMClient 经假连接池转发到 Flask test_client，
覆盖服务封装、错误映射、登录 token 与数据获取状态。
"""
from __future__ import annotations

from urllib.parse import urlsplit

import pytest

from hrm_cell.client import ApiClientError, CollectionHook, HRMClient, ResourceHook
from hrm_cell.client.schemas import Attendance, Employee, LeaveRequest, Payroll
from hrm_cell.client.services import (
    AnalyticsService,
    AttendanceService,
    EmployeeService,
    LeaveService,
    NotificationService,
    PayrollService,
    SelfService,
)


class _Resp:
    def __init__(self, status, data):
        self.status = status
        self.data = data


class FakePool:
    """模拟 urllib3.PoolManager.request，记录请求头并转发到 Flask 测试客户端。"""

    def __init__(self, test_client):
        self.test_client = test_client
        self.calls = []

    def request(self, method, url, body=None, headers=None, timeout=None, retries=None):
        parts = urlsplit(url)
        self.calls.append((method, parts.path, dict(headers or {})))
        r = self.test_client.open(
            parts.path, method=method, data=body, headers=headers or {}, query_string=parts.query
        )
        return _Resp(r.status_code, r.get_data())


@pytest.fixture
def pool(client):
    return FakePool(client)


@pytest.fixture
def api(pool):
    return HRMClient(base_url="http://hrm.test", token=None, timeout=5, pool=pool)


def test_get_returns_decoded_json(api):
    employees = api.get("/employees")
    assert [e["id"] for e in employees] == ["1", "2", "3"]


def test_delete_returns_none_on_no_content(api):
    created = api.post("/departments", {"name": "Jurídico"})
    assert api.delete(f"/departments/{created['id']}") is None


def test_non_2xx_raises_api_client_error(api):
    with pytest.raises(ApiClientError) as exc:
        api.get("/employees/nope")
    assert exc.value.status == 404
    assert str(exc.value) == "Employee not found"
    assert exc.value.body["code"] == "NOT_FOUND"


def test_login_attaches_bearer(api, pool, settings):
    settings.AUTH_STRICT = True
    with pytest.raises(ApiClientError) as exc:
        api.get("/employees")
    assert exc.value.status == 401
    result = api.login("user@company.com", "secret")
    assert result["user"]["email"] == "user@company.com"
    assert api.token == "mock-token-123"
    assert len(api.get("/employees")) == 3
    assert pool.calls[-1][2]["Authorization"] == "Bearer mock-token-123"


def test_query_params_drop_none(api, pool):
    leaves = LeaveService(api).my_leaves(status=None)
    assert pool.calls[-1][1] == "/employee/me/leaves"
    assert len(leaves) == 1
    assert LeaveService(api).my_leaves(status="APPROVED") == []


def test_employee_service_typed(api):
    svc = EmployeeService(api)
    employees = svc.list()
    assert all(isinstance(e, Employee) for e in employees)
    created = svc.create({"name": "Bia", "email": "bia@company.com", "badge": "B-1"})
    assert isinstance(created, Employee)
    assert created.badge == "B-1"
    updated = svc.update(created.id, {"position": "Analista"})
    assert updated.position == "Analista" and updated.name == "Bia"
    svc.delete(created.id)
    with pytest.raises(ApiClientError):
        svc.get(created.id)


def test_leave_service_actions(api):
    svc = LeaveService(api)
    req = svc.create({"employeeId": "1", "leaveTypeId": "1", "days": 2})
    assert isinstance(req, LeaveRequest) and req.status == "PENDING"
    assert svc.approve(req.id).status == "APPROVED"
    assert svc.reject(req.id, "Conflito").rejectedReason == "Conflito"
    assert svc.cancel(req.id) is None
    assert svc.get(req.id).status == "CANCELLED"
    balances = svc.balances("1")
    assert balances[0].balance == 25
    assert [t["name"] for t in svc.types()] == ["Férias", "Licença Médica"]


def test_attendance_and_payroll_services(api):
    att = AttendanceService(api)
    rec = att.check_in("42")
    assert isinstance(rec, Attendance) and rec.status == "PRESENT"
    assert att.summary("42")["totalDays"] == 1
    assert att.work_schedules()[0]["isDefault"] is True

    pay = PayrollService(api)
    processed = pay.process("2024-05")
    assert len(processed) == 3 and all(isinstance(p, Payroll) for p in processed)
    assert [p.employeeId for p in pay.my_payslips()] == ["1"]


def test_notification_analytics_self_service(api):
    notes = NotificationService(api)
    assert len(notes.unread("1")) == 1
    notes.mark_as_read("1")
    assert notes.unread("1") == []
    analytics = AnalyticsService(api)
    assert analytics.overview()["totalEmployees"] == 3
    assert analytics.deib()["inclusionScore"] == 7.8
    assert analytics.predictive()["flightRisk"][0]["riskScore"] == 75
    me = SelfService(api)
    assert me.profile().id == "1"
    assert me.dashboard()["profile"]["id"] == "1"


# ---------- Hooks ----------
def test_resource_hook_success_and_refetch(api):
    calls = []

    def fetch():
        calls.append(1)
        return api.get("/departments")

    hook = ResourceHook(fetch)
    assert hook.loading is False and hook.error is None
    assert len(hook.data) == 2
    api.post("/departments", {"name": "Compras"})
    hook.refetch()
    assert len(hook.data) == 3 and len(calls) == 2


def test_resource_hook_error_keeps_previous_data(api):
    state = {"path": "/departments"}
    hook = ResourceHook(lambda: api.get(state["path"]))
    previous = hook.data
    state["path"] = "/departments/missing"
    hook.refetch()
    assert hook.error == "Department not found"
    assert hook.data is previous
    assert hook.loading is False


def test_resource_hook_lazy(api):
    hook = ResourceHook(lambda: api.get("/skills"), immediate=False)
    assert hook.data is None
    assert len(hook.refetch()) == 2


def test_collection_hook_mutations(api):
    hook = CollectionHook(EmployeeService(api))
    assert len(hook.data) == 3
    created = hook.create({"name": "Caio"})
    assert hook.data[-1] is created
    hook.update(created.id, {"department": "RH"})
    assert hook.data[-1].department == "RH"
    hook.remove(created.id)
    assert [e.id for e in hook.data] == ["1", "2", "3"]


def test_collection_hook_employee_without_name(api):
    api.post("/employees", {"email": "a@b.c"})
    hook = CollectionHook(EmployeeService(api))
    assert hook.error is None
    assert len(hook.data) == 4 and hook.data[-1].name is None


def test_collection_hook_malformed_record_sets_error(api):
    api.post("/employees", {"name": "X", "salary": "muito"})
    hook = CollectionHook(EmployeeService(api))
    assert hook.data is None and hook.loading is False
    assert "Employee" in hook.error


def test_collection_hook_with_filters(api):
    hook = CollectionHook(LeaveService(api), status="PENDING")
    assert [r.id for r in hook.data] == ["1"]
    with pytest.raises(ApiClientError):
        hook.update("missing", {"days": 1})
