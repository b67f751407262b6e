from matchroom.game.models import Player, Room
from matchroom.game.result import match_result


def _room(n: int) -> Room:
    return Room(code="AB12CD", players=[Player(id=str(i), name=f"p{i}") for i in range(n)])


def test_two_players_is_a_good_match():
    assert match_result(_room(2)) == (84, "Good Match")


def test_single_player_is_nice_try():
    assert match_result(_room(1)) == (42, "Nice Try")


def test_empty_room():
    assert match_result(_room(0)) == (0, "Nice Try")
