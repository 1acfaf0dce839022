"""Tests for snapshot serialization."""

import json

from boxes.engine.board_setup import new_game
from boxes.models.player import Player
from boxes.utils.serialization import state_to_dict
from conftest import play


def test_new_game_dict():
    data = state_to_dict(new_game(1, 1))

    assert data == {
        "width": 1,
        "height": 1,
        "walls": [[False], [False, False], [False]],
        "squares": [None],
        "currentPlayer": "p1",
        "turn": 0,
        "lastMove": None,
        "scores": {"p1": 0, "p2": 0},
        "finished": False,
        "winner": None,
    }


def test_finished_game_dict():
    state = play(new_game(1, 1), [(0, 0), (1, 0), (1, 1), (2, 0)])
    data = state_to_dict(state)

    assert data["squares"] == ["p2"]
    assert data["lastMove"] == [2, 0]
    assert data["scores"] == {"p1": 0, "p2": 1}
    assert data["finished"] is True
    assert data["winner"] == Player.P2.value


def test_dict_is_json_serializable():
    state = play(new_game(3, 2), [(0, 0), (1, 3)])
    text = json.dumps(state_to_dict(state))
    assert json.loads(text)["turn"] == 2
