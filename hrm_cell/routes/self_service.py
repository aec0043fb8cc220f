"""员工自助：/employee/me/*，当前用户取 X-User-Id 或配置的默认用户。"""
from __future__ import annotations

from flask import Blueprint, jsonify, request

from ..dependencies import current_store, current_user_id, human_audit, json_body
from ..errors import not_found
from .attendance import summarize
from .leaves import balances_with_types, filter_year, requests_with_types

bp = Blueprint("self_service", __name__, url_prefix="/employee/me")

RECENT_ATTENDANCE = 5


def _filter_status(records):
    status = request.args.get("status")
    return [r for r in records if r.get("status") == status] if status else records


@bp.route("/profile", methods=["GET"])
def my_profile():
    profile = current_store().find("employees", current_user_id())
    if profile is None:
        raise not_found("Profile")
    return jsonify(profile), 200


@bp.route("/profile", methods=["PATCH"])
def my_profile_update():
    uid = current_user_id()
    profile = current_store().update("employees", uid, json_body())
    if profile is None:
        raise not_found("Profile")
    human_audit("updated own profile")
    return jsonify(profile), 200


@bp.route("/attendance", methods=["GET"])
def my_attendance():
    return jsonify(current_store().filter("attendance", employeeId=current_user_id())), 200


@bp.route("/attendance/summary", methods=["GET"])
def my_attendance_summary():
    return jsonify(summarize(current_store().filter("attendance", employeeId=current_user_id()))), 200


@bp.route("/leaves", methods=["GET"])
def my_leaves():
    return jsonify(_filter_status(requests_with_types(current_store(), current_user_id()))), 200


@bp.route("/leave-balances", methods=["GET"])
def my_leave_balances():
    balances = balances_with_types(current_store(), current_user_id(), unknown_name="Tipo não encontrado")
    return jsonify(filter_year(balances)), 200


@bp.route("/goals", methods=["GET"])
def my_goals():
    return jsonify(current_store().filter("goals", employeeId=current_user_id())), 200


@bp.route("/trainings", methods=["GET"])
def my_trainings():
    return jsonify(current_store().collection("trainings")), 200


@bp.route("/performance-reviews", methods=["GET"])
def my_performance_reviews():
    return jsonify(current_store().filter("performanceReviews", employeeId=current_user_id())), 200


@bp.route("/dashboard", methods=["GET"])
def my_dashboard():
    store = current_store()
    uid = current_user_id()
    profile = store.find("employees", uid)
    if profile is None:
        raise not_found("Employee profile")
    return jsonify({
        "profile": profile,
        "leaveBalances": balances_with_types(store, uid, unknown_name="Tipo não encontrado"),
        "recentAttendance": store.filter("attendance", employeeId=uid)[:RECENT_ATTENDANCE],
        "goals": store.filter("goals", employeeId=uid),
        "trainings": store.collection("trainings"),
        "performanceReviews": store.filter("performanceReviews", employeeId=uid),
        "achievements": store.filter("achievements", employeeId=uid),
    }), 200
