"""
请求校验单元测试：状态流转表、登录必填项、签退前置条件。
"""
from __future__ import annotations

from hrm_cell.validators import as_number, validate_check_out, validate_login, validate_transition


def test_payroll_cycle_transitions():
    assert validate_transition("payrollCycles", "DRAFT", "CALCULATING") is None
    assert validate_transition("payrollCycles", "CALCULATED", "PENDING_APPROVAL") is None
    assert validate_transition("payrollCycles", "PAID", "CLOSED") is None
    assert "DRAFT -> PAID" in validate_transition("payrollCycles", "DRAFT", "PAID")
    assert validate_transition("payrollCycles", "CLOSED", "DRAFT") is not None


def test_unlisted_entity_and_same_status_pass():
    assert validate_transition("projects", "DONE", "PLANNED") is None
    assert validate_transition("expenses", "APPROVED", "APPROVED") is None
    assert validate_transition("expenses", None, "REIMBURSED") is None


def test_login_and_check_out():
    assert validate_login({"email": "a", "password": "b"}) is None
    assert validate_login({"email": "a"}) == "Invalid credentials"
    assert validate_check_out(None) == "No check-in found for today"
    assert validate_check_out({"id": "1"}) is None


def test_as_number_reads_free_form_fields():
    assert as_number(8000) == 8000
    assert as_number("9000") == 9000 and isinstance(as_number("9000"), int)
    assert as_number(" 4.5 ") == 4.5
    assert as_number("n/d") == 0
    assert as_number(None, default=5000) == 5000
    assert as_number(True) == 0
