"""
看板数据构建单元测试：出勤统计、请假汇总、工资周期聚合、统计卡片与表格行。
"""
from __future__ import annotations

import pytest

from hrm_cell.client.dashboards import (
    attendance_stats,
    department_distribution,
    employee_rows,
    leave_rows,
    leave_summary,
    payroll_cycles,
    stat_cards,
)
from hrm_cell.client.schemas import Attendance, PayrollCycleStatus


def test_attendance_stats_counts_late_as_present():
    records = [
        {"status": "PRESENT", "workHours": 8},
        {"status": "LATE", "workHours": 7, "lateMinutes": 20},
        {"status": "ABSENT"},
        {"status": "HALF_DAY", "workHours": 4},
    ]
    s = attendance_stats(records)
    assert s["totalRecords"] == 4
    assert s["present"] == 2
    assert s["late"] == 1 and s["absent"] == 1 and s["halfDay"] == 1
    assert s["presentPercentage"] == 50
    assert s["punctualityRate"] == 25
    assert s["totalWorkHours"] == 19
    assert s["avgWorkHours"] == pytest.approx(4.75)
    assert s["avgLateMinutes"] == 20


def test_attendance_stats_accepts_models_and_empty():
    models = [Attendance(id="a", status="PRESENT", workHours=9), Attendance(id="b", status="ON_LEAVE")]
    s = attendance_stats(models)
    assert s["onLeave"] == 1 and s["totalWorkHours"] == 9
    empty = attendance_stats([])
    assert empty["presentPercentage"] == 0 and empty["avgWorkHours"] == 0


def test_leave_summary_and_rows():
    requests = [
        {"id": "1", "status": "APPROVED", "days": 5, "startDate": "2024-02-15", "endDate": "2024-02-20",
         "leaveType": {"name": "Férias"}},
        {"id": "2", "status": "PENDING", "days": 2},
        {"id": "3", "status": "APPROVED", "days": 1},
    ]
    summary = leave_summary(requests, balances=[{"balance": 25}, {"balance": 5}])
    assert summary["total"] == 3
    assert summary["byStatus"]["APPROVED"] == 2 and summary["pending"] == 1
    assert summary["approvedDays"] == 6
    assert summary["availableDays"] == 30

    rows = leave_rows(requests)
    assert rows[0]["statusLabel"] == "Aprovada" and rows[0]["type"] == "Férias"
    assert rows[0]["period"] == "2024-02-15 - 2024-02-20"
    assert rows[1]["canCancel"] is True and rows[1]["type"] == "-"


def test_payroll_cycles_grouped_by_reference_month():
    payrolls = [
        {"employeeId": "1", "period": "2024-03", "grossSalary": 8000, "totalDeductions": 800, "netSalary": 7200, "status": "CALCULATED"},
        {"employeeId": "2", "period": "2024-03", "grossSalary": 12000, "totalDeductions": 1200, "netSalary": 10800, "status": "PAID"},
        {"employeeId": "1", "period": "2024-02", "grossSalary": 8000, "totalDeductions": 0, "netSalary": 8000, "status": "PAID"},
        {"employeeId": "9"},
    ]
    cycles = payroll_cycles(payrolls)
    assert [c.referenceMonth for c in cycles] == ["2024-02", "2024-03"]
    march = cycles[1]
    assert march.totalEmployees == 2
    assert march.totalGross == 20000 and march.totalDeductions == 2000 and march.totalNet == 18000
    assert march.status == PayrollCycleStatus.CALCULATED
    assert cycles[0].status == PayrollCycleStatus.PAID


def test_stat_cards_fallback_and_overview():
    cards = stat_cards(None, employees=[{}, {}], departments=[{}])
    assert [c["value"] for c in cards] == [2, 1]
    cards = stat_cards({"totalEmployees": 3, "totalDepartments": 2, "activeProjects": 1, "averagePerformance": 4.2})
    assert [c["title"] for c in cards][-1] == "Média de Performance"
    assert cards[-1]["value"] == "4.2"
    assert cards[0]["trend"]["data"][-1] == 3


def test_department_distribution_and_employee_rows():
    departments = [{"id": "1", "name": "TI"}, {"id": "2", "name": "RH"}]
    employees = [
        {"id": "1", "name": "A", "departmentId": "1", "hireDate": "2020-01-15", "status": "ACTIVE"},
        {"id": "2", "name": "B", "departmentId": "1", "department": {"name": "TI"}, "position": {"title": "Dev"}, "status": "INACTIVE"},
    ]
    assert department_distribution(departments, employees) == [{"label": "TI", "value": 2}, {"label": "RH", "value": 0}]
    rows = employee_rows(employees)
    assert rows[0]["hireDate"] == "15/01/2020" and rows[0]["department"] == "N/A" and rows[0]["phone"] == "-"
    assert rows[1]["department"] == "TI" and rows[1]["position"] == "Dev"
    assert rows[1]["statusVariant"] == "secondary" and rows[1]["hireDate"] == "-"
