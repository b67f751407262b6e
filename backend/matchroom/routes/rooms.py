from __future__ import annotations

from flask import Blueprint, jsonify, request

from ..game import service
from ..game.errors import RoomError
from ..realtime.handlers import broadcast_room_state

bp = Blueprint("rooms", __name__)


def _error(exc: RoomError):
    return jsonify({"error": exc.code}), exc.status


def _text_field(key: str) -> str:
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        return ""
    value = data.get(key)
    return "" if value is None else str(value)


@bp.post("/rooms")
def create_room():
    host_name = _text_field("hostName")

    try:
        code, room = service.get_registry().create(host_name)
    except RoomError as exc:
        return _error(exc)

    return jsonify({"roomCode": code, "room": service.room_public_state(room)}), 201


@bp.post("/rooms/<code>/join")
def join_room(code: str):
    name = _text_field("name")

    try:
        room = service.get_registry().join(code, name)
    except RoomError as exc:
        return _error(exc)

    broadcast_room_state(room.code)
    return jsonify(service.room_public_state(room))


@bp.get("/rooms/<code>")
def get_room(code: str):
    room = service.get_registry().get(code)
    if not room:
        return jsonify({"error": "room_not_found"}), 404
    return jsonify(service.room_public_state(room))


@bp.post("/rooms/<code>/resolve")
def resolve_room(code: str):
    try:
        room = service.get_registry().resolve(code)
    except RoomError as exc:
        return _error(exc)

    broadcast_room_state(room.code)
    return jsonify(service.room_public_state(room))
