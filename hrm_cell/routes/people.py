"""员工、部门、项目、岗位、技能、项目/任务分配与导师关系。"""
from __future__ import annotations

import copy

from flask import Blueprint, jsonify

from ..crud import register_crud
from ..dependencies import current_store, human_audit, json_body

bp = Blueprint("people", __name__)

# /employee 为旧前端使用的单数别名
register_crud(bp, "/employees", "employees", "Employee")
register_crud(bp, "/employee", "employees", "Employee", endpoint="employee_alias")
register_crud(bp, "/departments", "departments", "Department")
register_crud(bp, "/projects", "projects", "Project")
register_crud(bp, "/positions", "positions", "Position")
register_crud(bp, "/skills", "skills", "Skill")
register_crud(bp, "/allocations/projects", "projectAllocations", "Project allocation")
register_crud(bp, "/allocations/tasks", "taskAllocations", "Task allocation")


@bp.route("/projects/<project_id>/allocations", methods=["GET"])
def project_allocations(project_id: str):
    return jsonify(current_store().filter("projectAllocations", projectId=project_id)), 200


@bp.route("/employees/<employee_id>/project-allocations", methods=["GET"])
def employee_project_allocations(employee_id: str):
    return jsonify(current_store().filter("projectAllocations", employeeId=employee_id)), 200


@bp.route("/tasks/<task_id>/allocations", methods=["GET"])
def task_allocations(task_id: str):
    return jsonify(current_store().filter("taskAllocations", taskId=task_id)), 200


@bp.route("/employees/<employee_id>/task-allocations", methods=["GET"])
def employee_task_allocations(employee_id: str):
    return jsonify(current_store().filter("taskAllocations", employeeId=employee_id)), 200


# ---------- Mentoring ----------
def _with_people(rel: dict) -> dict:
    """响应中的 mentor/mentee 取员工当前数据；存储里保留创建时的快照。"""
    store = current_store()
    return {**rel, "mentor": store.find("employees", rel.get("mentorId")), "mentee": store.find("employees", rel.get("menteeId"))}


def _mentoring_create_fields(body: dict) -> dict:
    store = current_store()
    mentor = store.find("employees", body.get("mentorId"))
    mentee = store.find("employees", body.get("menteeId"))
    return {
        "status": body.get("status") or "ACTIVE",
        "endDate": body.get("endDate") or None,
        "mentor": copy.deepcopy(mentor),
        "mentee": copy.deepcopy(mentee),
    }


register_crud(bp, "/mentoring", "mentoringRelationships", "Mentoring relationship", ops=("list", "get", "update", "delete"), serialize=_with_people)


@bp.route("/mentoring", methods=["POST"])
def mentoring_create():
    body = json_body()
    fields = {k: body.get(k) for k in ("mentorId", "menteeId", "startDate")}
    fields.update(_mentoring_create_fields(body))
    rel = current_store().insert("mentoringRelationships", fields)
    human_audit(f"created mentoring relationship {rel['id']} mentor={rel['mentorId']} mentee={rel['menteeId']}")
    return jsonify(rel), 201
