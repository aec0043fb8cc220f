# 外包用工：承包商、外包人员（创建时内嵌承包商快照）、外包考勤
from __future__ import annotations

from flask import Blueprint, jsonify

from ..crud import register_crud
from ..dependencies import current_store, human_audit, json_body

bp = Blueprint("contract_labor", __name__, url_prefix="/contract-labor")

LABOR_ACTIVE = "ACTIVE"

register_crud(bp, "/contractors", "contractors", "Contractor", overrides=lambda body: {"isActive": True})
register_crud(
    bp, "", "contractLabor", "Contract labor",
    overrides=lambda body: {
        "status": LABOR_ACTIVE,
        "contractor": current_store().find("contractors", body.get("contractorId")),
    },
)


@bp.route("/<labor_id>/attendance", methods=["GET"])
def labor_attendance(labor_id: str):
    return jsonify(current_store().filter("contractLaborAttendance", laborId=labor_id)), 200


@bp.route("/<labor_id>/attendance", methods=["POST"])
def labor_attendance_create(labor_id: str):
    fields = {"laborId": labor_id}
    fields.update(json_body())
    record = current_store().insert("contractLaborAttendance", fields, timestamps=False)
    human_audit(f"recorded attendance {record['id']} for contract labor {labor_id}")
    return jsonify(record), 201
