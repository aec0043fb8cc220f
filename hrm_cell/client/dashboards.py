"""
看板数据构建：只基于已拉取的数组在客户端重新计算统计，不发请求。
输入既可以是 dict 也可以是 client.schemas 中的模型。
"""
from __future__ import annotations

from collections import OrderedDict
from datetime import date
from typing import Any, Dict, Iterable, List, Optional

from .schemas import PayrollCycle, PayrollCycleStatus

LEAVE_STATUS_LABELS = {
    "APPROVED": ("Aprovada", "success"),
    "PENDING": ("Pendente", "warning"),
    "REJECTED": ("Rejeitada", "error"),
    "CANCELLED": ("Cancelada", "secondary"),
}

# 周期内各工资单状态取推进最慢者作为周期状态
_CYCLE_ORDER = list(PayrollCycleStatus)


def _get(item: Any, key: str, default: Any = None) -> Any:
    if isinstance(item, dict):
        value = item.get(key, default)
    else:
        value = getattr(item, key, default)
    return default if value is None else value


def _status(item: Any) -> Optional[str]:
    value = _get(item, "status")
    return getattr(value, "value", value)


# ---------- Attendance ----------
def attendance_stats(records: Iterable[Any]) -> Dict[str, float]:
    """出勤率把 LATE 计为出勤；准时率 = (出勤 - 迟到) / 总数。"""
    records = list(records)
    total = len(records)

    def count(*statuses: str) -> int:
        return sum(1 for r in records if _status(r) in statuses)

    present = count("PRESENT", "LATE")
    late = count("LATE")
    total_hours = sum(_get(r, "workHours", 0) for r in records)
    late_minutes = sum(_get(r, "lateMinutes", 0) for r in records)
    return {
        "totalRecords": total,
        "present": present,
        "absent": count("ABSENT"),
        "late": late,
        "onLeave": count("ON_LEAVE"),
        "halfDay": count("HALF_DAY"),
        "totalWorkHours": total_hours,
        "avgWorkHours": total_hours / total if total else 0,
        "totalLateMinutes": late_minutes,
        "avgLateMinutes": late_minutes / late if late else 0,
        "presentPercentage": present / total * 100 if total else 0,
        "punctualityRate": (present - late) / total * 100 if total else 0,
    }


# ---------- Leaves ----------
def leave_summary(requests: Iterable[Any], balances: Iterable[Any] = ()) -> Dict[str, Any]:
    requests = list(requests)
    by_status: Dict[str, int] = {s: 0 for s in LEAVE_STATUS_LABELS}
    for r in requests:
        status = _status(r) or "PENDING"
        by_status[status] = by_status.get(status, 0) + 1
    approved_days = sum(_get(r, "days", 0) for r in requests if _status(r) == "APPROVED")
    return {
        "total": len(requests),
        "byStatus": by_status,
        "pending": by_status.get("PENDING", 0),
        "approvedDays": approved_days,
        "availableDays": sum(_get(b, "balance", 0) for b in balances),
    }


def leave_rows(requests: Iterable[Any]) -> List[Dict[str, Any]]:
    rows = []
    for r in requests:
        status = _status(r)
        label, variant = LEAVE_STATUS_LABELS.get(status, (status, "secondary"))
        leave_type = _get(r, "leaveType", {})
        rows.append({
            "id": _get(r, "id"),
            "type": _get(leave_type, "name", "-"),
            "period": f"{_get(r, 'startDate', '-')} - {_get(r, 'endDate', '-')}",
            "days": _get(r, "days", 0),
            "statusLabel": label,
            "statusVariant": variant,
            "canCancel": status == "PENDING",
        })
    return rows


# ---------- Payroll ----------
def _reference_month(payroll: Any) -> Optional[str]:
    period = _get(payroll, "period") or _get(payroll, "referenceMonth")
    return str(period)[:7] if period else None


def _cycle_status(statuses: List[str]) -> PayrollCycleStatus:
    known = [PayrollCycleStatus(s) for s in statuses if s in PayrollCycleStatus.__members__]
    if not known:
        return PayrollCycleStatus.DRAFT
    return min(known, key=_CYCLE_ORDER.index)


def payroll_cycles(payrolls: Iterable[Any]) -> List[PayrollCycle]:
    """按参考月份（YYYY-MM）聚合工资单，月份升序。"""
    groups: "OrderedDict[str, List[Any]]" = OrderedDict()
    for p in payrolls:
        month = _reference_month(p)
        if month is None:
            continue
        groups.setdefault(month, []).append(p)
    cycles = []
    for month in sorted(groups):
        items = groups[month]
        gross = sum(_get(p, "grossSalary", 0) for p in items)
        deductions = sum(_get(p, "totalDeductions", 0) for p in items)
        cycles.append(PayrollCycle(
            id=month,
            referenceMonth=month,
            status=_cycle_status([_status(p) for p in items]),
            totalEmployees=len({_get(p, "employeeId") for p in items}),
            totalGross=gross,
            totalDeductions=deductions,
            totalNet=sum(_get(p, "netSalary", 0) for p in items),
            createdAt=min((_get(p, "createdAt", "") for p in items), default=None) or None,
            updatedAt=max((_get(p, "updatedAt", "") for p in items), default=None) or None,
        ))
    return cycles


# ---------- Dashboard ----------
def stat_cards(
    overview: Optional[Dict[str, Any]],
    employees: Iterable[Any] = (),
    departments: Iterable[Any] = (),
) -> List[Dict[str, Any]]:
    """总览卡片；overview 缺失时用本地数组长度兜底。"""
    employees, departments = list(employees), list(departments)
    total = (overview or {}).get("totalEmployees") or len(employees)
    cards = [
        {"title": "Total de Funcionários", "value": total,
         "trend": {"label": "Últimos 6 meses", "data": [10, 15, 20, 25, 30, total]}},
        {"title": "Total de Departamentos", "value": (overview or {}).get("totalDepartments") or len(departments)},
    ]
    if overview:
        cards.append({"title": "Projetos Ativos", "value": overview.get("activeProjects") or 0})
        cards.append({"title": "Média de Performance", "value": f"{overview.get('averagePerformance') or 0:.1f}"})
    return cards


def department_distribution(departments: Iterable[Any], employees: Iterable[Any]) -> List[Dict[str, Any]]:
    employees = list(employees)
    return [
        {"label": _get(d, "name"), "value": sum(1 for e in employees if _get(e, "departmentId") == _get(d, "id"))}
        for d in departments
    ]


def _format_day(value: Any) -> str:
    try:
        return date.fromisoformat(str(value)[:10]).strftime("%d/%m/%Y")
    except ValueError:
        return "-"


def employee_rows(employees: Iterable[Any]) -> List[Dict[str, Any]]:
    rows = []
    for e in employees:
        department = _get(e, "department")
        position = _get(e, "position")
        status = _get(e, "status", "ACTIVE")
        rows.append({
            "id": _get(e, "id"),
            "name": _get(e, "name"),
            "email": _get(e, "email"),
            "department": _get(department, "name") if isinstance(department, dict) else (department or "N/A"),
            "position": _get(position, "title") if isinstance(position, dict) else (position or "N/A"),
            "phone": _get(e, "phone") or "-",
            "hireDate": _format_day(_get(e, "hireDate", "")),
            "status": status,
            "statusVariant": "success" if status == "ACTIVE" else "secondary",
        })
    return rows
