"""考勤：签到/签退、考勤记录 CRUD、个人汇总、工作班次。"""
from __future__ import annotations

from datetime import datetime, time
from typing import Iterable, Optional

from flask import Blueprint, jsonify

from ..crud import register_crud
from ..dependencies import current_store, current_user_id, human_audit, json_body
from ..errors import bad_request
from ..validators import as_number, validate_check_out

bp = Blueprint("attendance", __name__)

MS_PER_HOUR = 1000 * 60 * 60
_TIME_FORMAT = "%H:%M:%S"

register_crud(bp, "/attendance", "attendance", "Attendance")
register_crud(bp, "/attendance/work-schedules", "workSchedules", "Work schedule")


def _now() -> datetime:
    return datetime.now()


def _clock(value) -> Optional[time]:
    # 接受 HH:MM、HH:MM:SS、HH:MM:SS.fff
    if not isinstance(value, str):
        return None
    try:
        return time.fromisoformat(value.strip())
    except ValueError:
        return None


def work_hours(day: str, check_in: str, check_out: str) -> Optional[float]:
    """签退时长（小时）= 毫秒差 / 3,600,000；任一时刻无法解析时返回 None。"""
    start_clock, end_clock = _clock(check_in), _clock(check_out)
    if start_clock is None or end_clock is None:
        return None
    base = datetime.fromisoformat(day)
    start = datetime.combine(base.date(), start_clock)
    end = datetime.combine(base.date(), end_clock)
    delta_ms = round((end - start).total_seconds() * 1000)
    return delta_ms / MS_PER_HOUR


def _today_record(employee_id: str, day: str) -> Optional[dict]:
    for r in current_store().collection("attendance"):
        if r.get("date") == day and r.get("employeeId") == employee_id:
            return r
    return None


def _employee_for_action() -> str:
    return json_body().get("employeeId") or current_user_id()


@bp.route("/attendance/check-in", methods=["POST"])
def check_in():
    now = _now()
    day, clock = now.date().isoformat(), now.strftime(_TIME_FORMAT)
    employee_id = _employee_for_action()
    existing = _today_record(employee_id, day)
    store = current_store()
    if existing:
        record = store.update("attendance", existing["id"], {"checkIn": clock, "status": "PRESENT"})
        human_audit(f"checked in again at {clock} (attendance={record['id']})")
        return jsonify(record), 200
    record = store.insert("attendance", employeeId=employee_id, date=day, checkIn=clock, status="PRESENT")
    human_audit(f"checked in at {clock} (attendance={record['id']})")
    return jsonify(record), 201


@bp.route("/attendance/check-out", methods=["POST"])
def check_out():
    now = _now()
    day, clock = now.date().isoformat(), now.strftime(_TIME_FORMAT)
    existing = _today_record(_employee_for_action(), day)
    err = validate_check_out(existing)
    if err:
        raise bad_request(err)
    changes = {"checkOut": clock}
    hours = work_hours(day, existing.get("checkIn"), clock) if existing.get("checkIn") else None
    if hours is not None:
        changes["workHours"] = hours
    record = current_store().update("attendance", existing["id"], changes)
    human_audit(f"checked out at {clock} (attendance={record['id']})")
    return jsonify(record), 200


def summarize(records: Iterable[dict]) -> dict:
    records = list(records)
    total = len(records)

    def count(status: str) -> int:
        return sum(1 for r in records if r.get("status") == status)

    total_hours = sum(as_number(r.get("workHours")) for r in records)
    return {
        "totalDays": total,
        "present": count("PRESENT"),
        "absent": count("ABSENT"),
        "late": count("LATE"),
        "onLeave": count("ON_LEAVE"),
        "totalWorkHours": total_hours,
        "totalOvertimeHours": sum(as_number(r.get("overtimeHours")) for r in records),
        "averageWorkHours": total_hours / total if total else 0,
    }


@bp.route("/attendance/summary/<employee_id>", methods=["GET"])
def attendance_summary(employee_id: str):
    return jsonify(summarize(current_store().filter("attendance", employeeId=employee_id))), 200
