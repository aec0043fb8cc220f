"""
分析：全局概览、员工维度、绩效趋势、人力监控由 store 实时计算；
DEIB 与预测分析为固定内容的 Mock。
"""
from __future__ import annotations

from collections import OrderedDict
from datetime import date
from typing import Dict, List, Optional

from flask import Blueprint, jsonify

from ..dependencies import current_store
from ..store import now_iso
from ..validators import as_number

bp = Blueprint("analytics", __name__, url_prefix="/analytics")

AVERAGE_PERFORMANCE = 4.2
RECENT_HIRE_MONTHS = 6


def _today() -> date:
    return date.today()


def months_ago(day: date, months: int) -> date:
    """按自然月回退，月末溢出时取目标月最后一天。"""
    year, month = divmod(day.year * 12 + day.month - 1 - months, 12)
    month += 1
    for d in (day.day, 30, 29, 28):
        try:
            return date(year, month, d)
        except ValueError:
            continue
    return date(year, month, 28)


def _parse_day(value) -> Optional[date]:
    if not isinstance(value, str) or len(value) < 10:
        return None
    try:
        return date.fromisoformat(value[:10])
    except ValueError:
        return None


def _mean(values: List) -> float:
    numbers = [as_number(v) for v in values]
    return sum(numbers) / len(numbers) if numbers else 0


@bp.route("/overview", methods=["GET"])
def overview():
    store = current_store()
    employees = store.collection("employees")
    projects = store.collection("projects")
    cutoff = months_ago(_today(), RECENT_HIRE_MONTHS)
    recent = [e for e in employees if (_parse_day(e.get("hireDate")) or date.min) >= cutoff]
    return jsonify({
        "totalEmployees": len(employees),
        "totalDepartments": len(store.collection("departments")),
        "totalProjects": len(projects),
        "activeProjects": sum(1 for p in projects if p.get("status") == "IN_PROGRESS"),
        "totalTrainings": len(store.collection("trainings")),
        "averagePerformance": AVERAGE_PERFORMANCE,
        "recentHires": len(recent),
    }), 200


@bp.route("/employee/<employee_id>", methods=["GET"])
def employee_analytics(employee_id: str):
    store = current_store()
    goals = store.filter("goals", employeeId=employee_id)
    reviews = store.filter("performanceReviews", employeeId=employee_id)
    return jsonify({
        "employee": store.find("employees", employee_id),
        "goals": {
            "total": len(goals),
            "completed": sum(1 for g in goals if g.get("status") == "COMPLETED"),
            "inProgress": sum(1 for g in goals if g.get("status") == "IN_PROGRESS"),
        },
        "performance": {
            "averageRating": _mean([r.get("overallRating") for r in reviews]),
            "totalReviews": len(reviews),
        },
    }), 200


def _review_month(review: dict) -> Optional[str]:
    for key in ("periodEnd", "reviewDate", "createdAt"):
        day = _parse_day(review.get(key))
        if day:
            return day.strftime("%Y-%m")
    return None


@bp.route("/performance-trend", methods=["GET"])
def performance_trend():
    by_month: Dict[str, List[float]] = {}
    for review in current_store().collection("performanceReviews"):
        month = _review_month(review)
        if month is None or review.get("overallRating") is None:
            continue
        by_month.setdefault(month, []).append(as_number(review["overallRating"]))
    return jsonify([
        {"month": m, "averageRating": round(_mean(by_month[m]), 2), "reviews": len(by_month[m])}
        for m in sorted(by_month)
    ]), 200


@bp.route("/workforce-monitoring", methods=["GET"])
def workforce_monitoring():
    store = current_store()
    employees = store.collection("employees")
    departments: "OrderedDict[str, dict]" = OrderedDict()
    for e in employees:
        name = e.get("department") or "N/A"
        row = departments.setdefault(name, {"department": name, "headcount": 0, "totalCost": 0})
        row["headcount"] += 1
        row["totalCost"] += as_number(e.get("salary"))
    total_cost = sum(as_number(e.get("salary")) for e in employees)
    cutoff = months_ago(_today(), RECENT_HIRE_MONTHS)
    return jsonify({
        "totalHeadcount": len(employees),
        "activeHeadcount": sum(1 for e in employees if e.get("status") == "ACTIVE"),
        "headcountChange": sum(1 for e in employees if (_parse_day(e.get("hireDate")) or date.min) >= cutoff),
        "totalCost": total_cost,
        "averageCost": total_cost / len(employees) if employees else 0,
        "departments": list(departments.values()),
        "organizationalStructure": {
            "totalDepartments": len(store.collection("departments")),
            "avgTeamSize": len(employees) / len(departments) if departments else 0,
        },
    }), 200


# ---------- Mock 内容 ----------
@bp.route("/predictive", methods=["GET"])
def predictive():
    return jsonify({
        "flightRisk": [
            {
                "id": "1",
                "name": "João Silva",
                "department": "TI",
                "position": "Desenvolvedor Senior",
                "riskScore": 75,
                "reason": "Baixa satisfação no trabalho, sem promoção há 2 anos",
                "lastReviewDate": "2024-01-15",
                "engagementScore": 3.2,
            },
            {
                "id": "3",
                "name": "Pedro Oliveira",
                "department": "TI",
                "position": "Desenvolvedor Pleno",
                "riskScore": 65,
                "reason": "Baixa participação em projetos recentes",
                "lastReviewDate": "2024-02-01",
                "engagementScore": 3.5,
            },
        ],
        "highPerformers": [
            {
                "id": "2",
                "name": "Maria Santos",
                "department": "TI",
                "position": "Gerente de Projetos",
                "performanceScore": 9.2,
                "strengths": ["Liderança", "Comunicação", "Gestão de equipe"],
                "potential": "Alto potencial para diretoria",
                "lastPromotionDate": "2023-06-01",
            },
        ],
        "turnoverPrediction": [
            {
                "period": "Próximos 3 meses",
                "predictedRate": 12.5,
                "description": "Taxa de rotatividade prevista baseada em tendências históricas",
                "factors": ["Baixa satisfação", "Falta de crescimento", "Mercado aquecido"],
            },
            {
                "period": "Próximos 6 meses",
                "predictedRate": 18.3,
                "description": "Previsão de médio prazo considerando fatores sazonais",
                "factors": ["Sazonalidade", "Ciclo de avaliações", "Mercado de trabalho"],
            },
        ],
        "lastUpdated": now_iso(),
    }), 200


@bp.route("/deib", methods=["GET"])
def deib():
    return jsonify({
        "genderDistribution": [
            {"gender": "Masculino", "count": 18, "percentage": 60},
            {"gender": "Feminino", "count": 12, "percentage": 40},
        ],
        "ethnicityDistribution": [
            {"ethnicity": "Branco", "count": 20, "percentage": 66.7},
            {"ethnicity": "Pardo", "count": 7, "percentage": 23.3},
            {"ethnicity": "Negro", "count": 3, "percentage": 10},
        ],
        "ageDistribution": [
            {"ageGroup": "18-25", "count": 5, "percentage": 16.7},
            {"ageGroup": "26-35", "count": 15, "percentage": 50},
            {"ageGroup": "36-45", "count": 8, "percentage": 26.7},
            {"ageGroup": "46+", "count": 2, "percentage": 6.6},
        ],
        "payEquity": [
            {"category": "Gênero", "gap": 8.5, "averageSalary": 8500, "benchmark": 9200},
            {"category": "Etnia", "gap": 12.3, "averageSalary": 8200, "benchmark": 9350},
            {"category": "Idade", "gap": 5.2, "averageSalary": 8800, "benchmark": 9300},
        ],
        "genderDiversityIndex": 72.5,
        "payEquityIndex": 87.5,
        "inclusionScore": 7.8,
        "diverseLeadership": 35.0,
        "recommendations": [
            {
                "title": "Aumentar diversidade de gênero em posições de liderança",
                "description": "Atualmente apenas 35% das posições de liderança são ocupadas por grupos diversos",
                "priority": "HIGH",
                "expectedImpact": "Aumento de 15% na satisfação e retenção",
                "category": "DIVERSITY",
            },
            {
                "title": "Reduzir gap salarial por gênero",
                "description": "Gap de 8.5% identificado entre gêneros para posições similares",
                "priority": "HIGH",
                "expectedImpact": "Melhoria na equidade e compliance",
                "category": "EQUITY",
            },
            {
                "title": "Programa de mentoria para grupos sub-representados",
                "description": "Criar programa estruturado de mentoria para desenvolvimento de carreira",
                "priority": "MEDIUM",
                "expectedImpact": "Aumento de 20% em promoções internas",
                "category": "INCLUSION",
            },
        ],
    }), 200
