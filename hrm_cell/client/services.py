"""
按资源划分的薄封装：每个方法对应一个 HTTP 调用，返回解码后的 JSON。
声明了 model 的服务在 list/get/create/update 上返回 pydantic 模型。
"""
from __future__ import annotations

from typing import Any, Dict, List, Optional, Type

from pydantic import BaseModel

from .http import HRMClient
from .schemas import Attendance, Employee, LeaveBalance, LeaveRequest, Payroll


class ResourceService:
    path: str = ""
    model: Optional[Type[BaseModel]] = None

    def __init__(self, client: HRMClient) -> None:
        self.client = client

    def _wrap(self, data: Any) -> Any:
        if self.model is None or data is None:
            return data
        if isinstance(data, list):
            return [self.model.model_validate(item) for item in data]
        return self.model.model_validate(data)

    def list(self, **filters: Any) -> List[Any]:
        return self._wrap(self.client.get(self.path, params=filters or None))

    def get(self, record_id: str) -> Any:
        return self._wrap(self.client.get(f"{self.path}/{record_id}"))

    def create(self, data: Dict[str, Any]) -> Any:
        return self._wrap(self.client.post(self.path, data))

    def update(self, record_id: str, data: Dict[str, Any]) -> Any:
        return self._wrap(self.client.patch(f"{self.path}/{record_id}", data))

    def delete(self, record_id: str) -> None:
        self.client.delete(f"{self.path}/{record_id}")


class EmployeeService(ResourceService):
    path = "/employees"
    model = Employee


class DepartmentService(ResourceService):
    path = "/departments"


class ProjectService(ResourceService):
    path = "/projects"

    def allocations(self, project_id: str) -> List[dict]:
        return self.client.get(f"/projects/{project_id}/allocations")


class PositionService(ResourceService):
    path = "/positions"


class SkillService(ResourceService):
    path = "/skills"

    def evaluate(self, employee_id: str, skill_id: str, proficiency: Any) -> dict:
        return self.client.post("/skill-proficiency", {"employeeId": employee_id, "skillId": skill_id, "proficiency": proficiency})

    def proficiencies(self, employee_id: str) -> List[dict]:
        return self.client.get(f"/skill-proficiency/employee/{employee_id}")


class LeaveService(ResourceService):
    path = "/leaves/requests"
    model = LeaveRequest

    def types(self) -> List[dict]:
        return self.client.get("/leaves/types")

    def create_type(self, data: Dict[str, Any]) -> dict:
        return self.client.post("/leaves/types", data)

    def approve(self, request_id: str, notes: Optional[str] = None) -> LeaveRequest:
        return self._wrap(self.client.post(f"{self.path}/{request_id}/approve", {"notes": notes}))

    def reject(self, request_id: str, reason: str) -> LeaveRequest:
        return self._wrap(self.client.post(f"{self.path}/{request_id}/reject", {"rejectedReason": reason}))

    def cancel(self, request_id: str) -> None:
        self.client.post(f"{self.path}/{request_id}/cancel")

    def balances(self, employee_id: str, year: Optional[int] = None) -> List[LeaveBalance]:
        data = self.client.get(f"/leaves/balances/{employee_id}", params={"year": year})
        return [LeaveBalance.model_validate(b) for b in data]

    def my_leaves(self, status: Optional[str] = None) -> List[LeaveRequest]:
        return self._wrap(self.client.get("/employee/me/leaves", params={"status": status}))


class AttendanceService(ResourceService):
    path = "/attendance"
    model = Attendance

    def check_in(self, employee_id: Optional[str] = None) -> Attendance:
        return self._wrap(self.client.post("/attendance/check-in", {"employeeId": employee_id} if employee_id else {}))

    def check_out(self, employee_id: Optional[str] = None) -> Attendance:
        return self._wrap(self.client.post("/attendance/check-out", {"employeeId": employee_id} if employee_id else {}))

    def summary(self, employee_id: str) -> dict:
        return self.client.get(f"/attendance/summary/{employee_id}")

    def mine(self) -> List[Attendance]:
        return self._wrap(self.client.get("/employee/me/attendance"))

    def work_schedules(self) -> List[dict]:
        return self.client.get("/attendance/work-schedules")


class PayrollService(ResourceService):
    path = "/payroll"
    model = Payroll

    def process(self, period: str) -> List[Payroll]:
        return self._wrap(self.client.post("/payroll/process", {"period": period}))

    def my_payslips(self) -> List[Payroll]:
        return self._wrap(self.client.get("/payroll/my/payslips"))


class PerformanceService(ResourceService):
    path = "/performance"


class FeedbackService(ResourceService):
    path = "/feedback"


class GoalService(ResourceService):
    path = "/goals"


class TrainingService(ResourceService):
    path = "/trainings"


class KnowledgeBaseService(ResourceService):
    path = "/knowledge-base"


class MentoringService(ResourceService):
    path = "/mentoring"


class AllocationService(ResourceService):
    path = "/allocations/projects"

    def by_employee(self, employee_id: str) -> List[dict]:
        return self.client.get(f"/employees/{employee_id}/project-allocations")


class TaskAllocationService(ResourceService):
    path = "/allocations/tasks"

    def by_task(self, task_id: str) -> List[dict]:
        return self.client.get(f"/tasks/{task_id}/allocations")

    def by_employee(self, employee_id: str) -> List[dict]:
        return self.client.get(f"/employees/{employee_id}/task-allocations")


class NotificationService(ResourceService):
    path = "/notifications"

    def unread(self, user_id: str) -> List[dict]:
        return self.client.get(f"/notifications/user/{user_id}/unread")

    def mark_as_read(self, notification_id: str) -> dict:
        return self.client.patch(f"/notifications/{notification_id}/read")


class PolicyService(ResourceService):
    path = "/policies"

    def acknowledge(self, policy_id: str) -> dict:
        return self.client.post(f"/policies/{policy_id}/acknowledge")

    def acknowledgments(self, policy_id: str) -> List[dict]:
        return self.client.get(f"/policies/{policy_id}/acknowledgments")

    def my_acknowledgments(self) -> List[dict]:
        return self.client.get("/policies/my/acknowledgments")


class SeparationService(ResourceService):
    path = "/separations"

    def approve(self, separation_id: str) -> dict:
        return self.client.post(f"/separations/{separation_id}/approve")


class ExpenseService(ResourceService):
    path = "/expenses"

    def mine(self) -> List[dict]:
        return self.client.get("/expenses/my")

    def approve(self, expense_id: str) -> dict:
        return self.client.post(f"/expenses/{expense_id}/approve")

    def reject(self, expense_id: str, reason: str) -> dict:
        return self.client.post(f"/expenses/{expense_id}/reject", {"reason": reason})

    def reports(self) -> List[dict]:
        return self.client.get("/expenses/reports")

    def submit_report(self, data: Dict[str, Any]) -> dict:
        return self.client.post("/expenses/reports", data)


class FacilityService(ResourceService):
    path = "/facilities/rooms"

    def bookings(self) -> List[dict]:
        return self.client.get("/facilities/bookings")

    def book(self, data: Dict[str, Any]) -> dict:
        return self.client.post("/facilities/bookings", data)

    def my_bookings(self) -> List[dict]:
        return self.client.get("/facilities/my/bookings")

    def approve_booking(self, booking_id: str) -> dict:
        return self.client.post(f"/facilities/bookings/{booking_id}/approve")


class TravelService(ResourceService):
    path = "/travel"

    def mine(self) -> List[dict]:
        return self.client.get("/travel/my")

    def approve(self, travel_id: str) -> dict:
        return self.client.post(f"/travel/{travel_id}/approve")


class SurveyService(ResourceService):
    path = "/surveys"

    def available(self) -> List[dict]:
        return self.client.get("/surveys/available")

    def respond(self, survey_id: str, answers: Dict[str, Any]) -> dict:
        return self.client.post(f"/surveys/{survey_id}/responses", answers)

    def results(self, survey_id: str) -> dict:
        return self.client.get(f"/surveys/{survey_id}/results")

    def my_responses(self) -> List[dict]:
        return self.client.get("/surveys/my/responses")


class ContractLaborService(ResourceService):
    path = "/contract-labor"

    def contractors(self) -> List[dict]:
        return self.client.get("/contract-labor/contractors")

    def create_contractor(self, data: Dict[str, Any]) -> dict:
        return self.client.post("/contract-labor/contractors", data)

    def attendance(self, labor_id: str) -> List[dict]:
        return self.client.get(f"/contract-labor/{labor_id}/attendance")

    def record_attendance(self, labor_id: str, data: Dict[str, Any]) -> dict:
        return self.client.post(f"/contract-labor/{labor_id}/attendance", data)


class AnalyticsService:
    def __init__(self, client: HRMClient) -> None:
        self.client = client

    def overview(self) -> dict:
        return self.client.get("/analytics/overview")

    def employee(self, employee_id: str) -> dict:
        return self.client.get(f"/analytics/employee/{employee_id}")

    def performance_trend(self) -> List[dict]:
        return self.client.get("/analytics/performance-trend")

    def workforce(self) -> dict:
        return self.client.get("/analytics/workforce-monitoring")

    def deib(self) -> dict:
        return self.client.get("/analytics/deib")

    def predictive(self) -> dict:
        return self.client.get("/analytics/predictive")


class SelfService:
    """当前登录员工视角（/employee/me/*）。"""

    def __init__(self, client: HRMClient) -> None:
        self.client = client

    def profile(self) -> Employee:
        return Employee.model_validate(self.client.get("/employee/me/profile"))

    def update_profile(self, data: Dict[str, Any]) -> Employee:
        return Employee.model_validate(self.client.patch("/employee/me/profile", data))

    def dashboard(self) -> dict:
        return self.client.get("/employee/me/dashboard")

    def attendance_summary(self) -> dict:
        return self.client.get("/employee/me/attendance/summary")

    def leave_balances(self, year: Optional[int] = None) -> List[LeaveBalance]:
        data = self.client.get("/employee/me/leave-balances", params={"year": year})
        return [LeaveBalance.model_validate(b) for b in data]

    def goals(self) -> List[dict]:
        return self.client.get("/employee/me/goals")
