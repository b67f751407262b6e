from __future__ import annotations

import time
import uuid
from dataclasses import dataclass, field
from typing import Literal


RoomState = Literal["lobby", "active", "resolved"]

ROOM_CAPACITY = 2


def now_ms() -> int:
    return int(time.time() * 1000)


def new_player_id() -> str:
    return str(uuid.uuid4())


@dataclass
class Player:
    id: str
    name: str
    score: int = 0


@dataclass
class Room:
    code: str
    players: list[Player] = field(default_factory=list)
    state: RoomState = "lobby"
    # Reserved for the quiz engine.
    current_question_index: int = 0
    created_at_ms: int = field(default_factory=now_ms)

    @property
    def host(self) -> Player | None:
        return self.players[0] if self.players else None

    @property
    def is_full(self) -> bool:
        return len(self.players) >= ROOM_CAPACITY
