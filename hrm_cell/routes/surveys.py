# 调查问卷：CRUD、当前可参与的问卷、提交答卷、结果汇总
from __future__ import annotations

from flask import Blueprint, jsonify

from ..crud import get_or_404, register_crud
from ..dependencies import current_store, current_user_id, human_audit, json_body
from ..store import now_iso

bp = Blueprint("surveys", __name__)

SURVEY_DRAFT = "DRAFT"
SURVEY_ACTIVE = "ACTIVE"

register_crud(
    bp, "/surveys", "surveys", "Survey",
    overrides=lambda body: {"status": SURVEY_DRAFT, "createdBy": current_user_id(), "responses": []},
)


def is_available(survey: dict, now: str) -> bool:
    """ACTIVE 且 startDate <= now <= endDate（ISO 字符串比较）。"""
    start, end = survey.get("startDate"), survey.get("endDate")
    if survey.get("status") != SURVEY_ACTIVE or not start or not end:
        return False
    return start <= now <= end


@bp.route("/surveys/available", methods=["GET"])
def available_surveys():
    now = now_iso()
    return jsonify([s for s in current_store().collection("surveys") if is_available(s, now)]), 200


@bp.route("/surveys/<survey_id>/responses", methods=["POST"])
def submit_response(survey_id: str):
    get_or_404("surveys", survey_id, "Survey")
    body = json_body()
    fields = {"surveyId": survey_id, "employeeId": current_user_id()}
    fields.update(body)
    response = current_store().insert("surveyResponses", fields, timestamps=False, submittedAt=now_iso())
    human_audit(f"submitted response {response['id']} to survey {survey_id}")
    return jsonify(response), 201


@bp.route("/surveys/my/responses", methods=["GET"])
def my_responses():
    return jsonify(current_store().filter("surveyResponses", employeeId=current_user_id())), 200


@bp.route("/surveys/<survey_id>/results", methods=["GET"])
def survey_results(survey_id: str):
    responses = current_store().filter("surveyResponses", surveyId=survey_id)
    return jsonify({"totalResponses": len(responses), "responses": responses}), 200
