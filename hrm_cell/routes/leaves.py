"""请假：假期类型、请假申请（审批/驳回/撤销）、余额。"""
from __future__ import annotations

from typing import List

from flask import Blueprint, jsonify, request

from ..crud import register_crud, set_status
from ..dependencies import current_store, json_body
from ..store import JsonStore

bp = Blueprint("leaves", __name__)

LEAVE_PENDING = "PENDING"
LEAVE_APPROVED = "APPROVED"
LEAVE_REJECTED = "REJECTED"
LEAVE_CANCELLED = "CANCELLED"

# 假期类型不打时间戳
register_crud(bp, "/leaves/types", "leaveTypes", "Leave type", timestamps=False)
register_crud(bp, "/leaves/requests", "leaveRequests", "Leave request", overrides=lambda body: {"status": LEAVE_PENDING})


def balances_with_types(store: JsonStore, employee_id: str, unknown_name: str = "Tipo Desconhecido") -> List[dict]:
    out = []
    for balance in store.filter("leaveBalances", employeeId=employee_id):
        leave_type = store.find("leaveTypes", balance.get("leaveTypeId"))
        out.append({**balance, "leaveType": leave_type or {"id": balance.get("leaveTypeId"), "name": unknown_name}})
    return out


def requests_with_types(store: JsonStore, employee_id: str) -> List[dict]:
    out = []
    for leave in store.filter("leaveRequests", employeeId=employee_id):
        leave_type = store.find("leaveTypes", leave.get("leaveTypeId"))
        out.append({**leave, "leaveType": leave_type or {"id": leave.get("leaveTypeId"), "name": "Tipo não encontrado"}})
    return out


def filter_year(balances: List[dict]) -> List[dict]:
    year = request.args.get("year")
    return [b for b in balances if str(b.get("year")) == year] if year else balances


@bp.route("/leaves/balances/<employee_id>", methods=["GET"])
def leave_balances(employee_id: str):
    return jsonify(filter_year(balances_with_types(current_store(), employee_id))), 200


@bp.route("/leaves/requests/<request_id>/approve", methods=["POST"])
def leave_approve(request_id: str):
    return jsonify(set_status("leaveRequests", request_id, "Leave request", LEAVE_APPROVED)), 200


@bp.route("/leaves/requests/<request_id>/reject", methods=["POST"])
def leave_reject(request_id: str):
    reason = json_body().get("rejectedReason")
    return jsonify(set_status("leaveRequests", request_id, "Leave request", LEAVE_REJECTED, rejectedReason=reason)), 200


@bp.route("/leaves/requests/<request_id>/cancel", methods=["POST"])
def leave_cancel(request_id: str):
    set_status("leaveRequests", request_id, "Leave request", LEAVE_CANCELLED)
    return "", 204
