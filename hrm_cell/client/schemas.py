# 客户端类型：字段与服务端 JSON 一致（camelCase），未声明字段原样保留
from __future__ import annotations

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict


class _Record(BaseModel):
    model_config = ConfigDict(extra="allow")

    id: str
    createdAt: Optional[str] = None
    updatedAt: Optional[str] = None


class LeaveStatus(str, Enum):
    PENDING = "PENDING"
    APPROVED = "APPROVED"
    REJECTED = "REJECTED"
    CANCELLED = "CANCELLED"


class AttendanceStatus(str, Enum):
    PRESENT = "PRESENT"
    ABSENT = "ABSENT"
    LATE = "LATE"
    HALF_DAY = "HALF_DAY"
    ON_LEAVE = "ON_LEAVE"
    HOLIDAY = "HOLIDAY"


class PayrollCycleStatus(str, Enum):
    DRAFT = "DRAFT"
    CALCULATING = "CALCULATING"
    CALCULATED = "CALCULATED"
    PENDING_APPROVAL = "PENDING_APPROVAL"
    APPROVED = "APPROVED"
    PROCESSING = "PROCESSING"
    PROCESSED = "PROCESSED"
    PAID = "PAID"
    CLOSED = "CLOSED"


# ---------- Employee ----------
class Employee(_Record):
    name: Optional[str] = None
    email: Optional[str] = None
    position: Optional[str] = None
    department: Optional[str] = None
    hireDate: Optional[str] = None
    status: Optional[str] = None
    salary: Optional[float] = None
    skills: list = []


# ---------- Leave ----------
class LeaveRequest(_Record):
    employeeId: Optional[str] = None
    leaveTypeId: Optional[str] = None
    startDate: Optional[str] = None
    endDate: Optional[str] = None
    days: Optional[float] = None
    status: Optional[str] = None
    rejectedReason: Optional[str] = None


class LeaveBalance(_Record):
    employeeId: Optional[str] = None
    leaveTypeId: Optional[str] = None
    year: Optional[int] = None
    balance: float = 0
    accrued: float = 0
    used: float = 0


# ---------- Attendance ----------
class Attendance(_Record):
    employeeId: Optional[str] = None
    date: Optional[str] = None
    checkIn: Optional[str] = None
    checkOut: Optional[str] = None
    workHours: Optional[float] = None
    lateMinutes: Optional[float] = None
    status: Optional[str] = None


# ---------- Payroll ----------
class Payroll(_Record):
    employeeId: Optional[str] = None
    period: Optional[str] = None
    baseSalary: float = 0
    grossSalary: float = 0
    totalDeductions: float = 0
    netSalary: float = 0
    items: list = []
    status: Optional[str] = None


class PayrollCycle(BaseModel):
    """按参考月份汇总的工资周期（客户端聚合，不落库）。"""
    model_config = ConfigDict(extra="allow")

    id: str
    referenceMonth: str
    status: PayrollCycleStatus = PayrollCycleStatus.DRAFT
    totalEmployees: int = 0
    totalGross: float = 0
    totalDeductions: float = 0
    totalNet: float = 0
    calculatedAt: Optional[str] = None
    approvedAt: Optional[str] = None
    approvedBy: Optional[str] = None
    processedAt: Optional[str] = None
    paidAt: Optional[str] = None
    createdAt: Optional[str] = None
    updatedAt: Optional[str] = None
