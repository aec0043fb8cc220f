"""
HRM 细胞 Flask 应用：按 method+path 分发到资源 handler，JSON 进出。
宽松 CORS、X-Response-Time 响应头、未匹配路由 404、可选 Bearer 鉴权桩。
"""
from __future__ import annotations

import logging
import time
from typing import Optional

from flask import Flask, jsonify, request
from werkzeug.exceptions import HTTPException

from .config import Settings, settings as default_settings
from .dependencies import request_id
from .errors import ApiError
from .routes import BLUEPRINTS
from .store import JsonStore

logger = logging.getLogger("hrm.app")

_OPEN_PATHS = ("/health", "/auth/login")


def _error_body(code: str, message: str, details: str = "") -> dict:
    # error 字段保留给旧前端读取
    return {"code": code, "message": message, "details": details, "requestId": request_id(), "error": message}


def create_app(store: Optional[JsonStore] = None, settings: Optional[Settings] = None) -> Flask:
    """创建应用。store 为空时首次请求懒加载全局 store（settings.DB_PATH）。"""
    app = Flask(__name__)
    app.json.ensure_ascii = False
    app.json.sort_keys = False
    app.url_map.strict_slashes = False
    app.extensions["hrm_store"] = store
    app.extensions["hrm_settings"] = settings or default_settings

    @app.before_request
    def _start_timer():
        request._start_time = time.time()

    @app.before_request
    def _preflight():
        if request.method == "OPTIONS":
            return "", 204

    @app.before_request
    def _require_bearer():
        cfg = app.extensions["hrm_settings"]
        if not cfg.AUTH_STRICT or request.path in _OPEN_PATHS:
            return None
        auth = (request.headers.get("Authorization") or "").strip()
        if auth != f"Bearer {cfg.MOCK_TOKEN}":
            return jsonify(_error_body("UNAUTHORIZED", "Missing or invalid bearer token")), 401
        return None

    @app.after_request
    def _cors_and_timing(resp):
        resp.headers["Access-Control-Allow-Origin"] = request.headers.get("Origin") or "*"
        resp.headers["Access-Control-Allow-Methods"] = "GET,HEAD,PUT,PATCH,POST,DELETE,OPTIONS"
        resp.headers["Access-Control-Allow-Headers"] = (
            request.headers.get("Access-Control-Request-Headers") or "Content-Type,Authorization"
        )
        if "X-Response-Time" not in resp.headers:
            elapsed = time.time() - getattr(request, "_start_time", time.time())
            resp.headers["X-Response-Time"] = f"{elapsed:.3f}"
        return resp

    @app.errorhandler(ApiError)
    def _api_error(exc: ApiError):
        return jsonify(_error_body(exc.code, exc.message, exc.details)), exc.status

    @app.errorhandler(404)
    def _route_not_found(exc):
        return jsonify(_error_body("NOT_FOUND", f"Route not found: {request.path}")), 404

    @app.errorhandler(405)
    def _method_not_allowed(exc):
        return jsonify(_error_body("METHOD_NOT_ALLOWED", f"Method {request.method} not allowed for {request.path}")), 405

    @app.errorhandler(Exception)
    def _unhandled(exc: Exception):
        if isinstance(exc, HTTPException):
            return jsonify(_error_body("ERROR", exc.description or exc.name)), exc.code or 500
        logger.exception("unhandled error on %s %s", request.method, request.path)
        return jsonify(_error_body("INTERNAL_ERROR", "Internal server error")), 500

    @app.route("/health")
    def health():
        return jsonify({"status": "ok", "database": "connected", "cell": "hrm"}), 200

    for bp in BLUEPRINTS:
        app.register_blueprint(bp)

    return app


app = create_app()
