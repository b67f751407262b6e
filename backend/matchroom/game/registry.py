from __future__ import annotations

import copy
import logging
from typing import Callable

from .codes import generate_code, normalize_code
from .errors import CodeGenerationExhausted, RoomError, RoomFull, RoomNotFound, RoomNotReady
from .locks import RWLock
from .models import Player, Room, new_player_id

logger = logging.getLogger(__name__)

DEFAULT_MAX_CODE_ATTEMPTS = 10


class RoomRegistry:
    """In-memory code -> Room mapping shared by every request handler.

    `get`/`list_rooms` run under the shared side of the lock; `create`,
    `join` and `resolve` take the exclusive side for their whole
    check-then-mutate sequence. Callers only ever see deep copies.
    """

    def __init__(
        self,
        code_factory: Callable[[], str] = generate_code,
        max_code_attempts: int = DEFAULT_MAX_CODE_ATTEMPTS,
        write_timeout: float | None = None,
    ) -> None:
        if max_code_attempts < 1:
            raise ValueError("max_code_attempts must be >= 1")
        self._rooms: dict[str, Room] = {}
        self._lock = RWLock()
        self._code_factory = code_factory
        self._max_code_attempts = max_code_attempts
        self._write_timeout = write_timeout

    def create(self, host_name: str) -> tuple[str, Room]:
        with self._lock.write(self._write_timeout):
            code, collisions = self._fresh_code_locked()
            if code is not None:
                room = Room(code=code, players=[Player(id=new_player_id(), name=host_name)])
                self._rooms[code] = room
                snapshot = copy.deepcopy(room)

        for attempt, taken in enumerate(collisions, start=1):
            logger.warning("room code collision on %s (attempt %d)", taken, attempt)
        if code is None:
            logger.error("no free room code after %d attempts", self._max_code_attempts)
            raise CodeGenerationExhausted(
                message=f"no free room code after {self._max_code_attempts} attempts"
            )

        logger.info("room %s created by %r", code, host_name)
        return code, snapshot

    def join(self, code: str, name: str) -> Room:
        code = normalize_code(code)
        error: RoomError | None = None
        with self._lock.write(self._write_timeout):
            room = self._rooms.get(code)
            if room is None:
                error = RoomNotFound(code)
            elif room.is_full:
                error = RoomFull(code)
            else:
                room.players.append(Player(id=new_player_id(), name=name))
                room.state = "active"
                snapshot = copy.deepcopy(room)

        if error is not None:
            logger.info("join rejected: %s", error)
            raise error

        logger.info("%r joined room %s", name, code)
        return snapshot

    def get(self, code: str) -> Room | None:
        code = normalize_code(code)
        with self._lock.read():
            room = self._rooms.get(code)
            return copy.deepcopy(room) if room is not None else None

    def list_rooms(self) -> list[Room]:
        with self._lock.read():
            return [copy.deepcopy(r) for r in self._rooms.values()]

    def resolve(self, code: str) -> Room:
        """Move an active room to "resolved". Resolving twice is a no-op."""
        code = normalize_code(code)
        error: RoomError | None = None
        changed = False
        with self._lock.write(self._write_timeout):
            room = self._rooms.get(code)
            if room is None:
                error = RoomNotFound(code)
            elif room.state == "lobby":
                error = RoomNotReady(code)
            else:
                changed = room.state != "resolved"
                room.state = "resolved"
                snapshot = copy.deepcopy(room)

        if error is not None:
            logger.info("resolve rejected: %s", error)
            raise error
        if changed:
            logger.info("room %s resolved", code)
        return snapshot

    def _fresh_code_locked(self) -> tuple[str | None, list[str]]:
        """Draw codes until one is free. Returns (code or None, collided codes)."""
        collisions: list[str] = []
        for _ in range(self._max_code_attempts):
            code = self._code_factory()
            if code not in self._rooms:
                return code, collisions
            collisions.append(code)
        return None, collisions
