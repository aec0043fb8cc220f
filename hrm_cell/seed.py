"""HRM 种子数据：数据库文件不存在或损坏时生成的固定数据集。"""
from __future__ import annotations

import copy
from datetime import date
from typing import Dict, List

from .store import now_iso


def _employees() -> List[dict]:
    return [
        {
            "id": "1",
            "name": "João Silva",
            "email": "joao.silva@company.com",
            "position": "Desenvolvedor Senior",
            "department": "TI",
            "hireDate": "2020-01-15",
            "status": "ACTIVE",
            "avatar": "",
            "phone": "(11) 99999-9999",
            "salary": 8000,
            "skills": ["React", "TypeScript", "Node.js"],
            "createdAt": "2020-01-15",
            "updatedAt": "2024-01-15",
        },
        {
            "id": "2",
            "name": "Maria Santos",
            "email": "maria.santos@company.com",
            "position": "Gerente de Projetos",
            "department": "TI",
            "hireDate": "2019-03-20",
            "status": "ACTIVE",
            "avatar": "",
            "phone": "(11) 88888-8888",
            "salary": 12000,
            "skills": ["Gestão", "Scrum", "Agile"],
            "createdAt": "2019-03-20",
            "updatedAt": "2024-01-15",
        },
        {
            "id": "3",
            "name": "Pedro Oliveira",
            "email": "pedro.oliveira@company.com",
            "position": "Desenvolvedor Pleno",
            "department": "TI",
            "hireDate": "2021-06-10",
            "status": "ACTIVE",
            "avatar": "",
            "phone": "(11) 77777-7777",
            "salary": 6000,
            "skills": ["Vue.js", "Python", "Django"],
            "createdAt": "2021-06-10",
            "updatedAt": "2024-01-15",
        },
    ]


def _mentoring(employees: List[dict]) -> List[dict]:
    # 导师关系内嵌创建时的员工快照
    def rel(rid, mentor, mentee, status, start, end, created, updated):
        return {
            "id": rid,
            "mentorId": mentor["id"],
            "menteeId": mentee["id"],
            "status": status,
            "startDate": start,
            "endDate": end,
            "mentor": copy.deepcopy(mentor),
            "mentee": copy.deepcopy(mentee),
            "createdAt": created,
            "updatedAt": updated,
        }

    e = employees
    return [
        rel("1", e[1], e[0], "ACTIVE", "2024-01-15", None, "2024-01-15", "2024-01-15"),
        rel("2", e[2], e[1], "ACTIVE", "2024-02-01", None, "2024-02-01", "2024-02-01"),
        rel("3", e[1], e[2], "COMPLETED", "2023-06-01", "2023-12-31", "2023-06-01", "2023-12-31"),
    ]


def seed_data() -> Dict[str, List[dict]]:
    now = now_iso()
    employees = _employees()
    return {
        "employees": employees,
        "departments": [
            {"id": "1", "name": "Tecnologia da Informação", "description": "Departamento de TI", "managerId": "2", "createdAt": "2020-01-01", "updatedAt": "2024-01-01"},
            {"id": "2", "name": "Recursos Humanos", "description": "Departamento de RH", "managerId": None, "createdAt": "2020-01-01", "updatedAt": "2024-01-01"},
        ],
        "projects": [
            {
                "id": "1",
                "name": "Sistema de People Analytics",
                "description": "Plataforma de analytics para gestão de pessoas",
                "status": "IN_PROGRESS",
                "startDate": "2024-01-01",
                "endDate": "2024-12-31",
                "createdAt": "2024-01-01",
                "updatedAt": "2024-01-01",
            },
        ],
        "positions": [
            {"id": "1", "title": "Desenvolvedor Full Stack", "description": "Desenvolvedor", "level": "PLENO", "departmentId": "1", "createdAt": "2024-01-01", "updatedAt": "2024-01-01"},
            {"id": "2", "title": "Analista de RH", "description": "Analista", "level": "JUNIOR", "departmentId": "2", "createdAt": "2024-01-01", "updatedAt": "2024-01-01"},
        ],
        "skills": [
            {"id": "1", "name": "React", "description": "Biblioteca JavaScript", "type": "HARD", "category": "TECHNICAL", "defaultLevel": "ADVANCED", "createdAt": "2024-01-01", "updatedAt": "2024-01-01"},
            {"id": "2", "name": "TypeScript", "description": "Superset do JavaScript", "type": "HARD", "category": "TECHNICAL", "defaultLevel": "ADVANCED", "createdAt": "2024-01-01", "updatedAt": "2024-01-01"},
        ],
        "leaveTypes": [
            {"id": "1", "name": "Férias", "code": "VACATION", "maxDays": 30, "carryForward": True, "requiresApproval": True, "isActive": True},
            {"id": "2", "name": "Licença Médica", "code": "SICK_LEAVE", "carryForward": False, "requiresApproval": True, "isActive": True},
        ],
        "leaveRequests": [
            {
                "id": "1",
                "employeeId": "1",
                "leaveTypeId": "1",
                "startDate": "2024-02-15",
                "endDate": "2024-02-20",
                "days": 5,
                "reason": "Férias planejadas",
                "status": "PENDING",
                "createdAt": "2024-01-15",
                "updatedAt": "2024-01-15",
            },
        ],
        "leaveBalances": [
            {"id": "1", "employeeId": "1", "leaveTypeId": "1", "balance": 25, "accrued": 30, "used": 5, "year": 2024},
        ],
        "attendance": [
            {
                "id": "1",
                "employeeId": "1",
                "date": date.today().isoformat(),
                "checkIn": "09:00:00",
                "checkOut": "18:00:00",
                "workHours": 8,
                "status": "PRESENT",
                "createdAt": now,
                "updatedAt": now,
            },
        ],
        "trainings": [
            {
                "id": "1",
                "name": "React Avançado",
                "description": "Curso de React avançado",
                "provider": "Udemy",
                "type": "ONLINE_COURSE",
                "status": "IN_PROGRESS",
                "startDate": "2024-01-15",
                "endDate": "2024-03-15",
                "difficulty": "ADVANCED",
                "createdAt": "2024-01-01",
                "updatedAt": "2024-01-01",
            },
            {
                "id": "2",
                "name": "TypeScript Fundamentals",
                "description": "Curso completo de TypeScript",
                "provider": "Pluralsight",
                "type": "ONLINE_COURSE",
                "status": "COMPLETED",
                "startDate": "2023-11-01",
                "endDate": "2023-12-15",
                "difficulty": "INTERMEDIATE",
                "createdAt": "2023-11-01",
                "updatedAt": "2023-12-15",
            },
        ],
        "goals": [
            {
                "id": "1",
                "employeeId": "1",
                "title": "Completar projeto X",
                "description": "Finalizar projeto até junho",
                "type": "PROJECT",
                "priority": "HIGH",
                "status": "IN_PROGRESS",
                "startDate": "2024-01-01",
                "targetDate": "2024-06-30",
                "progress": 0.45,
                "createdAt": "2024-01-01",
                "updatedAt": "2024-01-01",
            },
            {
                "id": "2",
                "employeeId": "1",
                "title": "Curso de React Avançado",
                "description": "Completar curso de React avançado na plataforma Udemy",
                "type": "DEVELOPMENT",
                "priority": "MEDIUM",
                "status": "IN_PROGRESS",
                "startDate": "2024-01-15",
                "targetDate": "2024-03-15",
                "progress": 0.75,
                "createdAt": "2024-01-15",
                "updatedAt": "2024-01-15",
            },
        ],
        "performanceReviews": [
            {
                "id": "1",
                "employeeId": "1",
                "reviewerId": "2",
                "periodStart": "2024-01-01",
                "periodEnd": "2024-03-31",
                "status": "COMPLETED",
                "overallRating": 4.5,
                "strengths": ["Bom trabalho em equipe", "Proativo"],
                "improvements": ["Melhorar comunicação"],
                "createdAt": "2024-04-01",
                "updatedAt": "2024-04-01",
            },
        ],
        "feedback": [],
        "notifications": [
            {
                "id": "1",
                "userId": "1",
                "title": "Nova solicitação de férias",
                "message": "Sua solicitação de férias foi aprovada",
                "type": "LEAVE",
                "read": False,
                "createdAt": now,
            },
        ],
        "achievements": [
            {
                "id": "1",
                "employeeId": "1",
                "title": "Certificação TypeScript",
                "description": "Certificação oficial em TypeScript pela Microsoft",
                "type": "CERTIFICATION",
                "icon": "🏆",
                "earnedAt": "2023-12-15",
                "issuer": "Microsoft",
                "certificateUrl": "https://example.com/certificate-ts",
                "createdAt": "2023-12-15",
                "updatedAt": "2023-12-15",
            },
            {
                "id": "2",
                "employeeId": "1",
                "title": "Badge de React Expert",
                "description": "Conquistado por completar 10 projetos em React",
                "type": "BADGE",
                "icon": "🎖️",
                "earnedAt": "2024-01-10",
                "issuer": "Empresa",
                "createdAt": "2024-01-10",
                "updatedAt": "2024-01-10",
            },
            {
                "id": "3",
                "employeeId": "1",
                "title": "Funcionário do Mês",
                "description": "Reconhecimento por excelente desempenho em janeiro",
                "type": "AWARD",
                "icon": "⭐",
                "earnedAt": "2024-02-01",
                "issuer": "Empresa",
                "createdAt": "2024-02-01",
                "updatedAt": "2024-02-01",
            },
        ],
        "projectAllocations": [],
        "mentoringRelationships": _mentoring(employees),
        "policies": [
            {
                "id": "1",
                "title": "Política de Código de Conduta",
                "description": "Diretrizes de comportamento profissional",
                "content": "Conteúdo da política...",
                "category": "HR",
                "version": "1.0",
                "status": "ACTIVE",
                "requiresAcknowledgment": True,
                "effectiveDate": "2024-01-01",
                "createdBy": "1",
                "createdAt": "2024-01-01",
                "updatedAt": "2024-01-01",
            },
            {
                "id": "2",
                "title": "Política de Segurança da Informação",
                "description": "Diretrizes de segurança de dados",
                "content": "Conteúdo da política...",
                "category": "IT",
                "version": "2.0",
                "status": "ACTIVE",
                "requiresAcknowledgment": True,
                "effectiveDate": "2024-02-01",
                "createdBy": "1",
                "createdAt": "2024-02-01",
                "updatedAt": "2024-02-01",
            },
        ],
        "policyAcknowledgments": [],
        "separations": [],
        "expenses": [],
        "expenseReports": [],
        "payrolls": [],
        "conferenceRooms": [
            {
                "id": "1",
                "name": "Sala de Reunião A",
                "capacity": 10,
                "location": "1º Andar",
                "amenities": ["Projetor", "Wi-Fi", "Ar condicionado"],
                "isActive": True,
                "createdAt": "2024-01-01",
                "updatedAt": "2024-01-01",
            },
            {
                "id": "2",
                "name": "Sala de Reunião B",
                "capacity": 20,
                "location": "2º Andar",
                "amenities": ["Projetor", "Wi-Fi", "Ar condicionado", "Videoconferência"],
                "isActive": True,
                "createdAt": "2024-01-01",
                "updatedAt": "2024-01-01",
            },
        ],
        "roomBookings": [],
        "travelRequests": [],
        "surveys": [],
        "surveyResponses": [],
        "contractors": [],
        "contractLabor": [],
        "contractLaborAttendance": [],
        "taskAllocations": [],
        "workSchedules": [
            {
                "id": "1",
                "name": "Horário Padrão",
                "startTime": "09:00",
                "endTime": "18:00",
                "breakDuration": 60,
                "workDays": [1, 2, 3, 4, 5],
                "isDefault": True,
                "createdAt": "2024-01-01",
                "updatedAt": "2024-01-01",
            },
        ],
        "knowledgeArticles": [],
        "skillProficiencies": [],
    }
