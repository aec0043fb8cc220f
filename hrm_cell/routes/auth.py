# 登录桩：任意 email+password 均返回固定 mock token
from __future__ import annotations

import logging

from flask import Blueprint, jsonify

from ..dependencies import current_settings, json_body
from ..errors import unauthorized
from ..validators import validate_login

logger = logging.getLogger("hrm.auth")

bp = Blueprint("auth", __name__, url_prefix="/auth")


@bp.route("/login", methods=["POST"])
def login():
    body = json_body()
    err = validate_login(body)
    if err:
        raise unauthorized(err)
    cfg = current_settings()
    logger.info("mock login for %s", body["email"])
    return jsonify({
        "accessToken": cfg.MOCK_TOKEN,
        "token": cfg.MOCK_TOKEN,
        "user": {"id": cfg.CURRENT_USER_ID, "email": body["email"], "name": "Mock User"},
    }), 200
