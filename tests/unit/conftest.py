"""
HRM 细胞单元测试公共 fixture：每个测试独立的 JSON 文件 store 与 Flask 应用。
"""
from __future__ import annotations

import os
import sys

import pytest

ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", ".."))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

from hrm_cell.app import create_app
from hrm_cell.config import Settings
from hrm_cell.store import JsonStore


@pytest.fixture
def db_path(tmp_path):
    return tmp_path / "mock-db.json"


@pytest.fixture
def store(db_path):
    """按种子数据初始化的 store（文件不存在时 load 会写出种子）。"""
    s = JsonStore(str(db_path))
    s.load()
    return s


@pytest.fixture
def settings():
    cfg = Settings()
    cfg.AUTH_STRICT = False
    cfg.STRICT_TRANSITIONS = False
    cfg.CURRENT_USER_ID = "1"
    cfg.PAYROLL_DEDUCTION_RATE = 0.0
    cfg.DEFAULT_SALARY = 5000.0
    return cfg


@pytest.fixture
def app(store, settings):
    application = create_app(store=store, settings=settings)
    application.config["TESTING"] = True
    return application


@pytest.fixture
def client(app):
    with app.test_client() as c:
        yield c


def h(user_id=None, request_id=None, token=None):
    headers = {"Content-Type": "application/json"}
    if user_id:
        headers["X-User-Id"] = user_id
    if request_id:
        headers["X-Request-ID"] = request_id
    if token:
        headers["Authorization"] = f"Bearer {token}"
    return headers
