from __future__ import annotations

from typing import NamedTuple

from .models import Room


class MatchResult(NamedTuple):
    score: int
    message: str


def match_result(room: Room) -> MatchResult:
    # Placeholder until the quiz engine scores real answers.
    score = (len(room.players) * 42) % 100
    if score >= 85:
        message = "Perfect Match"
    elif score >= 60:
        message = "Good Match"
    else:
        message = "Nice Try"
    return MatchResult(score=score, message=message)
