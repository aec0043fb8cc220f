# 请求级依赖：store、配置、当前用户、request_id、审计日志，供 app 与 routes 使用，避免循环导入
from __future__ import annotations

import logging
import uuid
from datetime import datetime, timezone
from typing import Any, Dict

from flask import current_app, request

from .config import Settings
from .store import JsonStore, get_store

audit_logger = logging.getLogger("hrm.audit")


def current_store() -> JsonStore:
    store = current_app.extensions.get("hrm_store")
    return store if store is not None else get_store()


def current_settings() -> Settings:
    return current_app.extensions["hrm_settings"]


def current_user_id() -> str:
    return (request.headers.get("X-User-Id") or "").strip() or current_settings().CURRENT_USER_ID


def request_id() -> str:
    return (request.headers.get("X-Request-ID") or "").strip() or str(uuid.uuid4())


def json_body() -> Dict[str, Any]:
    """请求体按 JSON 解析；缺失、非法或非对象一律视为空对象。"""
    body = request.get_json(silent=True)
    return body if isinstance(body, dict) else {}


def human_audit(operation_desc: str) -> None:
    """人性化审计：谁在何时对何资源做了何操作，与 trace_id 关联。"""
    user_id = current_user_id()
    ts = datetime.now(timezone.utc).strftime("%Y-%m-%d %H:%M:%S UTC")
    trace_id = request.headers.get("X-Trace-Id") or request.headers.get("X-Request-ID") or ""
    audit_logger.info("user %s at %s %s, trace_id=%s", user_id, ts, operation_desc, trace_id)
