"""设施与差旅：会议室、会议室预订（创建时内嵌会议室快照）、差旅申请。"""
from __future__ import annotations

from flask import Blueprint, jsonify

from ..crud import approve, register_crud
from ..dependencies import current_store, current_user_id

bp = Blueprint("facilities", __name__)

BOOKING_PENDING = "PENDING"
TRAVEL_DRAFT = "DRAFT"

register_crud(bp, "/facilities/rooms", "conferenceRooms", "Room", overrides=lambda body: {"isActive": True})


def _booking_fields(body: dict) -> dict:
    return {
        "employeeId": current_user_id(),
        "status": BOOKING_PENDING,
        "room": current_store().find("conferenceRooms", body.get("roomId")),
    }


register_crud(bp, "/facilities/bookings", "roomBookings", "Booking", overrides=_booking_fields)


@bp.route("/facilities/my/bookings", methods=["GET"])
def my_bookings():
    return jsonify(current_store().filter("roomBookings", employeeId=current_user_id())), 200


@bp.route("/facilities/bookings/<booking_id>/approve", methods=["POST"])
def booking_approve(booking_id: str):
    return jsonify(approve("roomBookings", booking_id, "Booking")), 200


# ---------- Travel ----------
register_crud(
    bp, "/travel", "travelRequests", "Travel request",
    overrides=lambda body: {"employeeId": current_user_id(), "status": TRAVEL_DRAFT},
)


@bp.route("/travel/my", methods=["GET"])
def my_travel():
    return jsonify(current_store().filter("travelRequests", employeeId=current_user_id())), 200


@bp.route("/travel/<travel_id>/approve", methods=["POST"])
def travel_approve(travel_id: str):
    return jsonify(approve("travelRequests", travel_id, "Travel request")), 200
