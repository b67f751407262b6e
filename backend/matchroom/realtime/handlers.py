from __future__ import annotations

import logging

from flask import current_app
from flask_socketio import SocketIO, emit, join_room, leave_room

from ..game import service
from ..game.codes import is_valid_code, normalize_code

logger = logging.getLogger(__name__)


def broadcast_room_state(room_code: str) -> None:
    """Push the current room state to every socket watching `room_code`.

    Called from HTTP handlers after a join or resolve so the host's page
    learns that the second player arrived.
    """
    socketio: SocketIO | None = current_app.extensions.get("socketio")
    if socketio is None:
        return

    room = service.get_registry().get(room_code)
    if room is None:
        return
    socketio.emit("room:state", service.room_public_state(room), to=room.code)


def register_socketio_handlers(socketio: SocketIO) -> None:
    @socketio.on("room:watch")
    def room_watch(data):
        payload = data or {}
        room_code = normalize_code(str(payload.get("roomCode", "")))

        if not is_valid_code(room_code):
            emit("room:error", {"error": "invalid_payload"})
            return

        room = service.get_registry().get(room_code)
        if room is None:
            emit("room:error", {"error": "room_not_found"})
            return

        join_room(room.code)
        logger.debug("socket watching room %s", room.code)
        emit("room:state", service.room_public_state(room))

    @socketio.on("room:unwatch")
    def room_unwatch(data):
        room_code = normalize_code(str((data or {}).get("roomCode", "")))
        if room_code:
            leave_room(room_code)
