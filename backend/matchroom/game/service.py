from __future__ import annotations

from dataclasses import asdict

from flask import Flask, current_app

from .models import Room
from .registry import RoomRegistry
from .result import match_result

EXTENSION_KEY = "matchroom.registry"


def init_registry(app: Flask) -> RoomRegistry:
    """Build the process-wide registry and attach it to `app`."""
    timeout = app.config.get("REGISTRY_WRITE_TIMEOUT_SEC") or None
    registry = RoomRegistry(
        max_code_attempts=app.config.get("CODE_MAX_ATTEMPTS", 10),
        write_timeout=timeout,
    )
    app.extensions[EXTENSION_KEY] = registry
    return registry


def get_registry() -> RoomRegistry:
    return current_app.extensions[EXTENSION_KEY]


def room_public_state(room: Room) -> dict:
    payload = {
        "code": room.code,
        "state": room.state,
        "currentQuestionIndex": room.current_question_index,
        "players": [asdict(p) for p in room.players],
        "hostId": room.host.id if room.host else None,
        "createdAtMs": room.created_at_ms,
    }
    if room.state == "resolved":
        result = match_result(room)
        payload["result"] = {"score": result.score, "message": result.message}
    return payload
