from __future__ import annotations

from collections import Counter

from flask import Blueprint, jsonify

from ..game import service

bp = Blueprint("health", __name__)


@bp.get("/health")
def health():
    rooms = service.get_registry().list_rooms()
    by_state = Counter(r.state for r in rooms)
    return jsonify({"ok": True, "rooms": len(rooms), "byState": dict(by_state)})
