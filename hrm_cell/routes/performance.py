"""
绩效与发展：绩效评估、反馈、目标、培训、知识库、技能熟练度。
洞察 / 绩效洞察 / 聊天机器人 / 职业发展为固定内容的 Mock。
"""
from __future__ import annotations

from flask import Blueprint, jsonify, request

from ..crud import register_crud
from ..dependencies import current_store, human_audit, json_body
from ..store import new_id, now_iso

bp = Blueprint("performance", __name__)

register_crud(bp, "/performance", "performanceReviews", "Performance review")
register_crud(bp, "/feedback", "feedback", "Feedback")
register_crud(bp, "/goals", "goals", "Goal")
register_crud(bp, "/trainings", "trainings", "Training")
register_crud(bp, "/knowledge-base", "knowledgeArticles", "Knowledge article")


# ---------- Skill proficiency ----------
@bp.route("/skill-proficiency", methods=["POST"])
def skill_proficiency_create():
    body = json_body()
    record = current_store().insert(
        "skillProficiencies",
        {k: body.get(k) for k in ("employeeId", "skillId", "proficiency")},
        timestamps=False,
        lastEvaluated=now_iso(),
    )
    human_audit(f"evaluated skill {record['skillId']} for employee {record['employeeId']}")
    return jsonify(record), 201


@bp.route("/skill-proficiency/employee/<employee_id>", methods=["GET"])
def skill_proficiency_by_employee(employee_id: str):
    return jsonify(current_store().filter("skillProficiencies", employeeId=employee_id)), 200


# ---------- Mock 内容 ----------
@bp.route("/insights", methods=["GET"])
def insights():
    now = now_iso()
    return jsonify([
        {
            "id": "1",
            "title": "Alta rotatividade no departamento de TI",
            "description": "Taxa de rotatividade aumentou 15% no último trimestre",
            "type": "WARNING",
            "priority": "HIGH",
            "createdAt": now,
        },
        {
            "id": "2",
            "title": "Performance acima da média",
            "description": "Equipe de vendas apresentou excelente desempenho",
            "type": "SUCCESS",
            "priority": "MEDIUM",
            "createdAt": now,
        },
    ]), 200


@bp.route("/insights/<insight_id>", methods=["GET"])
def insight_detail(insight_id: str):
    return jsonify({
        "id": insight_id,
        "title": "Insight Específico",
        "description": "Descrição detalhada do insight",
        "type": "INFO",
        "priority": "MEDIUM",
        "createdAt": now_iso(),
    }), 200


@bp.route("/performance-insights/employee/<employee_id>", methods=["GET"])
def employee_insights(employee_id: str):
    return jsonify({
        "employeeId": employee_id,
        "insights": [{
            "id": "1",
            "title": "Performance acima da média",
            "description": "Funcionário apresenta performance consistente",
            "type": "SUCCESS",
            "priority": "MEDIUM",
        }],
        "trends": {"performance": [4.0, 4.2, 4.5, 4.3], "engagement": [3.5, 3.7, 3.8, 3.9]},
    }), 200


@bp.route("/performance-insights/team/<team_id>", methods=["GET"])
def team_insights(team_id: str):
    return jsonify({
        "teamId": team_id,
        "insights": [{
            "id": "1",
            "title": "Equipe de alta performance",
            "description": "Equipe apresenta resultados consistentes",
            "type": "SUCCESS",
            "priority": "HIGH",
        }],
        "metrics": {"averagePerformance": 4.3, "teamSize": 5, "satisfaction": 4.5},
    }), 200


@bp.route("/performance-insights/department/<department_id>", methods=["GET"])
def department_insights(department_id: str):
    return jsonify({
        "departmentId": department_id,
        "insights": [{
            "id": "1",
            "title": "Departamento em crescimento",
            "description": "Departamento apresenta crescimento consistente",
            "type": "SUCCESS",
            "priority": "MEDIUM",
        }],
        "metrics": {"totalEmployees": 10, "averagePerformance": 4.2, "retentionRate": 85},
    }), 200


@bp.route("/chatbot/interact", methods=["POST"])
def chatbot_interact():
    return jsonify({
        "id": new_id(),
        "message": json_body().get("message") or "",
        "response": "Esta é uma resposta mockada do chatbot. O mock server está funcionando!",
        "context": request.args.get("context"),
        "createdAt": now_iso(),
    }), 200


@bp.route("/chatbot/analyze-performance", methods=["POST"])
def chatbot_analyze_performance():
    return jsonify({
        "employeeId": request.args.get("employeeId"),
        "analysis": "Análise de performance mockada",
        "score": 4.5,
        "recommendations": ["Melhorar comunicação", "Desenvolver liderança"],
    }), 200


@bp.route("/career/overview/<employee_id>", methods=["GET"])
def career_overview(employee_id: str):
    employee = current_store().find("employees", employee_id) or {}
    return jsonify({
        "currentPosition": employee.get("position") or "Desenvolvedor",
        "level": "SENIOR",
        "yearsInCompany": 3,
        "nextPositions": ["Tech Lead", "Arquiteto de Software"],
    }), 200


@bp.route("/career/progression/<employee_id>", methods=["GET"])
def career_progression(employee_id: str):
    return jsonify([
        {"position": "Desenvolvedor Júnior", "date": "2021-01-15"},
        {"position": "Desenvolvedor Pleno", "date": "2022-06-01"},
        {"position": "Desenvolvedor Sênior", "date": "2023-12-01"},
    ]), 200
