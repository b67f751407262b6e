from __future__ import annotations

import logging

from flask import Blueprint, redirect, render_template, request, url_for

from ..game import service
from ..game.codes import is_valid_code, normalize_code
from ..game.errors import RoomError, RoomFull, RoomNotFound, RoomNotReady
from ..game.result import match_result
from ..realtime.handlers import broadcast_room_state

logger = logging.getLogger(__name__)

bp = Blueprint("pages", __name__)

ROOM_NOT_FOUND_TEXT = "Room not found."
QUESTION_PLACEHOLDER = "Questions loading soon..."

_JOIN_ERROR_TEXT = {
    RoomNotFound.code: "That room code is not valid. Check it and try again.",
    RoomFull.code: "This room already has two players.",
}


def _error_text(exc: RoomError) -> str:
    return _JOIN_ERROR_TEXT.get(exc.code, "Something went wrong, please try again.")


@bp.get("/")
def index():
    return render_template(
        "index.html",
        title="Match Room",
        subtitle="Create a room, share the code, play together.",
    )


@bp.get("/create")
def create_room_form():
    return render_template("create.html", error="")


@bp.post("/create")
def create_room():
    host_name = request.form.get("host_name", "")
    try:
        code, _ = service.get_registry().create(host_name)
    except RoomError as exc:
        logger.error("create room failed: %s", exc)
        return render_template("create.html", error=_error_text(exc)), exc.status

    return redirect(url_for("pages.join_room_form", code=code))


@bp.get("/join")
def join_room_form():
    return render_template("join.html", code=request.args.get("code", ""), error="")


@bp.post("/join")
def join_room():
    code = request.form.get("code", "")
    name = request.form.get("name", "")
    if not is_valid_code(normalize_code(code)):
        return render_template("join.html", code=code, error=_error_text(RoomNotFound(code))), RoomNotFound.status

    try:
        room = service.get_registry().join(code, name)
    except RoomError as exc:
        return render_template("join.html", code=code, error=_error_text(exc)), exc.status

    broadcast_room_state(room.code)
    return redirect(url_for("pages.play", code=room.code))


@bp.get("/play/<code>")
def play(code: str):
    room = service.get_registry().get(code)
    if room is None:
        return render_template(
            "play.html",
            code=code,
            state=None,
            players=[],
            question_placeholder=ROOM_NOT_FOUND_TEXT,
        )

    return render_template(
        "play.html",
        code=room.code,
        state=room.state,
        players=[p.name for p in room.players],
        question_placeholder=QUESTION_PLACEHOLDER,
    )


@bp.post("/result/<code>")
def resolve(code: str):
    try:
        room = service.get_registry().resolve(code)
    except RoomNotReady:
        return redirect(url_for("pages.play", code=code))
    except RoomError:
        return redirect(url_for("pages.result", code=code))

    broadcast_room_state(room.code)
    return redirect(url_for("pages.result", code=room.code))


@bp.get("/result/<code>")
def result(code: str):
    room = service.get_registry().get(code)
    if room is None:
        return render_template("result.html", code=code, score=0, message=ROOM_NOT_FOUND_TEXT)

    outcome = match_result(room)
    return render_template("result.html", code=room.code, score=outcome.score, message=outcome.message)
