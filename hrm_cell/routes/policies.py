"""制度与离职：制度 CRUD 与确认阅读；离职流程（无删除）与审批。"""
from __future__ import annotations

from flask import Blueprint, jsonify

from ..crud import approve, get_or_404, register_crud
from ..dependencies import current_store, current_user_id, human_audit
from ..store import now_iso

bp = Blueprint("policies", __name__)

SEPARATION_INITIATED = "INITIATED"

register_crud(bp, "/policies", "policies", "Policy")


@bp.route("/policies/<policy_id>/acknowledge", methods=["POST"])
def acknowledge(policy_id: str):
    get_or_404("policies", policy_id, "Policy")
    ack = current_store().insert(
        "policyAcknowledgments",
        timestamps=False,
        policyId=policy_id,
        employeeId=current_user_id(),
        acknowledgedAt=now_iso(),
    )
    human_audit(f"acknowledged policy {policy_id}")
    return jsonify(ack), 201


@bp.route("/policies/<policy_id>/acknowledgments", methods=["GET"])
def policy_acknowledgments(policy_id: str):
    return jsonify(current_store().filter("policyAcknowledgments", policyId=policy_id)), 200


@bp.route("/policies/my/acknowledgments", methods=["GET"])
def my_acknowledgments():
    return jsonify(current_store().filter("policyAcknowledgments", employeeId=current_user_id())), 200


# ---------- Separations ----------
def _separation_fields(body: dict) -> dict:
    return {
        "status": SEPARATION_INITIATED,
        "exitInterviewCompleted": False,
        "checklist": [],
        "initiatedBy": current_user_id(),
    }


register_crud(
    bp, "/separations", "separations", "Separation",
    ops=("list", "get", "create", "update"), overrides=_separation_fields,
)


@bp.route("/separations/<separation_id>/approve", methods=["POST"])
def separation_approve(separation_id: str):
    return jsonify(approve("separations", separation_id, "Separation")), 200
