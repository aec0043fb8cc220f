# 通知：CRUD、用户未读列表、标记已读
from __future__ import annotations

from flask import Blueprint, jsonify

from ..crud import get_or_404, register_crud
from ..dependencies import current_store, human_audit
from ..store import now_iso

bp = Blueprint("notifications", __name__)

NOTIFICATION_UNREAD = "UNREAD"
NOTIFICATION_READ = "READ"


def _create_fields(body: dict) -> dict:
    return {"status": NOTIFICATION_UNREAD, "read": bool(body.get("read", False))}


register_crud(bp, "/notifications", "notifications", "Notification", overrides=_create_fields)


def is_unread(notification: dict) -> bool:
    return not notification.get("read") and notification.get("status") != NOTIFICATION_READ


@bp.route("/notifications/user/<user_id>/unread", methods=["GET"])
def unread_for_user(user_id: str):
    items = current_store().filter("notifications", userId=user_id)
    return jsonify([n for n in items if is_unread(n)]), 200


@bp.route("/notifications/<notification_id>/read", methods=["PATCH"])
def mark_as_read(notification_id: str):
    get_or_404("notifications", notification_id, "Notification")
    record = current_store().update(
        "notifications", notification_id, {"status": NOTIFICATION_READ, "read": True, "readAt": now_iso()}
    )
    human_audit(f"marked notification {notification_id} as read")
    return jsonify(record), 200
