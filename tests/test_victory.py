"""Tests for winner determination."""

from boxes.engine.board_setup import new_game
from boxes.engine.victory import is_finished, scores, winner
from boxes.models.game import GameState
from boxes.models.player import UNOWNED, Player
from conftest import TWO_BY_ONE_SPLIT_GAME, TWO_BY_ONE_WITHOUT_SHARED_WALL, play


def _finished_state(squares, width):
    """Build a finished snapshot directly from square owners."""
    height = len(squares) // width
    walls = tuple(
        (True,) * (width if row % 2 == 0 else width + 1) for row in range(2 * height + 1)
    )
    return GameState(
        width=width,
        height=height,
        walls=walls,
        squares=tuple(squares),
        current_player=Player.P1,
        turn=sum(len(row) for row in walls),
    )


def test_no_winner_while_unfinished(board_3x3):
    assert winner(board_3x3) is None
    assert not is_finished(board_3x3)


def test_no_winner_with_one_square_left():
    state = GameState(
        width=2,
        height=1,
        walls=((True, True), (True, True, False), (True, True)),
        squares=(Player.P1, UNOWNED),
        current_player=Player.P2,
    )
    assert winner(state) is None


def test_majority_wins():
    state = _finished_state([Player.P2, Player.P1, Player.P2, Player.P2], width=2)
    assert winner(state) is Player.P2


def test_single_owner_wins():
    state = _finished_state([Player.P1] * 6, width=3)
    assert winner(state) is Player.P1


def test_tie_goes_to_player_first_seen_later_in_scan():
    """On equal tallies the player whose first square appears later wins."""
    state = _finished_state([Player.P1, Player.P2], width=2)
    assert winner(state) is Player.P2

    state = _finished_state([Player.P2, Player.P1], width=2)
    assert winner(state) is Player.P1

    # First appearance decides, not the position of the last square
    state = _finished_state([Player.P2, Player.P1, Player.P1, Player.P2], width=2)
    assert winner(state) is Player.P1


def test_tie_scenario_from_play(board_2x1):
    state = play(board_2x1, TWO_BY_ONE_SPLIT_GAME)

    assert state.squares == (Player.P1, Player.P2)
    assert is_finished(state)
    assert winner(state) is Player.P2


def test_tie_scenario_mirrored_first_player():
    state = play(new_game(2, 1, first_player=Player.P2), TWO_BY_ONE_SPLIT_GAME)

    assert state.squares == (Player.P2, Player.P1)
    assert winner(state) is Player.P1


def test_winner_query_is_repeatable(board_2x1):
    state = play(board_2x1, TWO_BY_ONE_WITHOUT_SHARED_WALL + [(1, 1)])
    assert winner(state) is winner(state)
    assert winner(state) is Player.P1


def test_scores_zero_filled(board_3x3):
    assert scores(board_3x3) == {Player.P1: 0, Player.P2: 0}


def test_scores_count_owned_squares(board_2x1):
    state = play(board_2x1, [(0, 0), (1, 0), (2, 0), (0, 1), (1, 1)])
    assert scores(state) == {Player.P1: 1, Player.P2: 0}
