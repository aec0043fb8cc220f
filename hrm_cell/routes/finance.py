"""
费用与薪资：
- 报销单 CRUD（创建时归属当前用户、状态 DRAFT），审批/驳回，报销报告
- 工资单列表/详情/创建（DRAFT），我的工资条
- 薪资处理：为每名员工生成一条 CALCULATED 工资单，扣除按固定比例
"""
from __future__ import annotations

from typing import List

from flask import Blueprint, jsonify

from ..crud import approve, register_crud, set_status
from ..dependencies import current_settings, current_store, current_user_id, human_audit, json_body
from ..store import new_id, now_iso
from ..validators import as_number

bp = Blueprint("finance", __name__)

EXPENSE_DRAFT = "DRAFT"
EXPENSE_REJECTED = "REJECTED"
REPORT_SUBMITTED = "SUBMITTED"
PAYROLL_DRAFT = "DRAFT"
PAYROLL_CALCULATED = "CALCULATED"


def _own_draft(body: dict) -> dict:
    return {"employeeId": current_user_id(), "status": EXPENSE_DRAFT}


def _submitted_report(body: dict) -> dict:
    return {"employeeId": current_user_id(), "status": REPORT_SUBMITTED, "submittedAt": now_iso()}


register_crud(bp, "/expenses", "expenses", "Expense", overrides=_own_draft)
register_crud(
    bp, "/expenses/reports", "expenseReports", "Expense report",
    ops=("list", "get", "create"), overrides=_submitted_report,
)


@bp.route("/expenses/my", methods=["GET"])
def my_expenses():
    return jsonify(current_store().filter("expenses", employeeId=current_user_id())), 200


@bp.route("/expenses/<expense_id>/approve", methods=["POST"])
def expense_approve(expense_id: str):
    return jsonify(approve("expenses", expense_id, "Expense")), 200


@bp.route("/expenses/<expense_id>/reject", methods=["POST"])
def expense_reject(expense_id: str):
    reason = json_body().get("reason")
    return jsonify(set_status("expenses", expense_id, "Expense", EXPENSE_REJECTED, rejectedReason=reason)), 200


# ---------- Payroll ----------
register_crud(
    bp, "/payroll", "payrolls", "Payroll",
    ops=("list", "get", "create"), overrides=lambda body: {"status": PAYROLL_DRAFT},
)


@bp.route("/payroll/my/payslips", methods=["GET"])
def my_payslips():
    return jsonify(current_store().filter("payrolls", employeeId=current_user_id())), 200


def calculate_payrolls(employees: List[dict], period, default_salary: float, deduction_rate: float) -> List[dict]:
    """每名员工一条工资单：gross = salary 或缺省值，deductions = gross * 固定比例。"""
    out = []
    now = now_iso()
    for emp in employees:
        # salary 为 0 或缺失都按缺省工资处理
        gross = as_number(emp.get("salary")) or default_salary
        deductions = round(gross * deduction_rate, 2)
        out.append({
            "id": new_id(),
            "employeeId": emp.get("id"),
            "period": period,
            "baseSalary": gross,
            "items": [],
            "grossSalary": gross,
            "totalDeductions": deductions,
            "netSalary": gross - deductions,
            "status": PAYROLL_CALCULATED,
            "createdAt": now,
            "updatedAt": now,
        })
    return out


@bp.route("/payroll/process", methods=["POST"])
def payroll_process():
    cfg = current_settings()
    store = current_store()
    period = json_body().get("period")
    processed = calculate_payrolls(
        store.collection("employees"), period, cfg.DEFAULT_SALARY, cfg.PAYROLL_DEDUCTION_RATE
    )
    store.extend("payrolls", processed)
    human_audit(f"processed payroll for period {period} ({len(processed)} employees)")
    return jsonify(processed), 200
