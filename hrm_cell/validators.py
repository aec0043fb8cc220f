"""
HRM 请求校验：登录必填项、考勤前置条件、状态流转表，以及数值字段的宽松读取。
返回 None 表示通过，否则返回错误描述；由 handler 决定错误码。
状态流转表只在 HRM_STRICT_TRANSITIONS=1 时生效，默认保持自由字符串状态。
"""
from __future__ import annotations

from typing import Any, Dict, FrozenSet, Optional

_ANY: FrozenSet[str] = frozenset()


def _t(*targets: str) -> FrozenSet[str]:
    return frozenset(targets)


# 实体 -> 当前状态 -> 允许的目标状态；未列出的当前状态视为终态
TRANSITIONS: Dict[str, Dict[str, FrozenSet[str]]] = {
    "leaveRequests": {
        "PENDING": _t("APPROVED", "REJECTED", "CANCELLED"),
        "APPROVED": _t("CANCELLED"),
    },
    "expenses": {
        "DRAFT": _t("SUBMITTED", "APPROVED", "REJECTED"),
        "SUBMITTED": _t("APPROVED", "REJECTED"),
        "APPROVED": _t("REIMBURSED"),
    },
    "separations": {
        "INITIATED": _t("APPROVED", "CANCELLED"),
        "APPROVED": _t("COMPLETED"),
    },
    "roomBookings": {
        "PENDING": _t("APPROVED", "REJECTED", "CANCELLED"),
        "APPROVED": _t("CANCELLED"),
    },
    "travelRequests": {
        "DRAFT": _t("SUBMITTED", "APPROVED", "REJECTED"),
        "SUBMITTED": _t("APPROVED", "REJECTED"),
        "APPROVED": _t("COMPLETED", "CANCELLED"),
    },
    "payrollCycles": {
        "DRAFT": _t("CALCULATING"),
        "CALCULATING": _t("CALCULATED"),
        "CALCULATED": _t("PENDING_APPROVAL", "CALCULATING"),
        "PENDING_APPROVAL": _t("APPROVED", "CALCULATED"),
        "APPROVED": _t("PROCESSING"),
        "PROCESSING": _t("PROCESSED"),
        "PROCESSED": _t("PAID"),
        "PAID": _t("CLOSED"),
    },
}


def validate_transition(entity: str, current: Any, target: str) -> Optional[str]:
    """校验 entity 从 current 到 target 的状态流转。未登记的实体不受限制。"""
    table = TRANSITIONS.get(entity)
    if table is None:
        return None
    if current is None or current == target:
        return None
    allowed = table.get(current, _ANY)
    if target not in allowed:
        return f"illegal status transition for {entity}: {current} -> {target}"
    return None


def validate_login(body: Dict[str, Any]) -> Optional[str]:
    if not body.get("email") or not body.get("password"):
        return "Invalid credentials"
    return None


def validate_check_out(record: Optional[dict]) -> Optional[str]:
    if record is None:
        return "No check-in found for today"
    return None


def as_number(value: Any, default: float = 0) -> float:
    """记录字段不做类型校验：数值原样返回，数字字符串转换，其余取 default。"""
    if isinstance(value, bool):
        return default
    if isinstance(value, (int, float)):
        return value
    if isinstance(value, str):
        text = value.strip()
        for cast in (int, float):
            try:
                return cast(text)
            except ValueError:
                continue
    return default
