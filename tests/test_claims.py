"""Tests for the wall claim transition."""

from itertools import permutations

import pytest

from boxes.engine.board_setup import new_game
from boxes.engine.claims import apply_move, claim_wall, execute_move
from boxes.engine.errors import AlreadyClaimed, GameOver, InvalidCoordinate
from boxes.models.player import UNOWNED, Player
from conftest import TWO_BY_ONE_WITHOUT_SHARED_WALL, play


class TestClaimWall:
    """Test the basic effect of a claim."""

    def test_only_target_wall_changes(self, board_3x3):
        state = apply_move(board_3x3, 3, 2)

        for row_index, row in enumerate(state.walls):
            for cell_index, claimed in enumerate(row):
                assert claimed == ((row_index, cell_index) == (3, 2))

    def test_input_state_not_mutated(self, board_3x3):
        before_walls = board_3x3.walls
        before_squares = board_3x3.squares

        apply_move(board_3x3, 0, 0)

        assert board_3x3.walls is before_walls
        assert board_3x3.walls == new_game(3, 3).walls
        assert board_3x3.squares is before_squares
        assert board_3x3.current_player is Player.P1
        assert board_3x3.turn == 0

    def test_turn_counter_and_last_move(self, board_3x3):
        state = apply_move(board_3x3, 4, 1)
        assert state.turn == 1
        assert state.last_move == (4, 1)

        state = apply_move(state, 0, 2)
        assert state.turn == 2
        assert state.last_move == (0, 2)

    def test_claim_wall_shares_untouched_rows(self, board_3x3):
        walls = claim_wall(board_3x3.walls, 2, 1)
        assert walls[2] == (False, True, False)
        assert walls[0] is board_3x3.walls[0]
        assert walls[6] is board_3x3.walls[6]


class TestTurnAdvance:
    """Turn passes only when nothing was completed."""

    def test_turn_flips_without_completion(self, board_1x1):
        state = apply_move(board_1x1, 0, 0)
        assert state.current_player is Player.P2

        state = apply_move(state, 1, 0)
        assert state.current_player is Player.P1

    def test_mover_continues_after_completion(self, board_1x1):
        state = play(board_1x1, [(0, 0), (1, 0), (1, 1)])
        mover = state.current_player

        new_state, result = execute_move(state, 2, 0)

        assert new_state.current_player is mover
        assert result.completed == (0,)
        assert result.turn_passed is False

    def test_move_result_reports_pass(self, board_1x1):
        _, result = execute_move(board_1x1, 0, 0)
        assert result.mover is Player.P1
        assert result.next_player is Player.P2
        assert result.completed == ()
        assert result.turn_passed is True
        assert (result.row, result.cell) == (0, 0)


class TestSquareCompletion:
    """Squares are awarded exactly when their four walls are claimed."""

    @pytest.mark.parametrize("order", list(permutations([(0, 0), (1, 0), (1, 1), (2, 0)])))
    def test_1x1_all_claim_orders(self, order):
        state = new_game(1, 1)

        for wall in order[:3]:
            state = apply_move(state, *wall)
            assert state.squares == (UNOWNED,)

        mover = state.current_player
        state = apply_move(state, *order[3])

        assert state.squares == (mover,)
        # Three passes from P1 leave P2 to make the closing claim
        assert mover is Player.P2
        assert state.current_player is mover

    def test_shared_wall_completes_two_squares(self, board_2x1):
        state = play(board_2x1, TWO_BY_ONE_WITHOUT_SHARED_WALL)
        assert state.squares == (UNOWNED, UNOWNED)
        mover = state.current_player

        new_state, result = execute_move(state, 1, 1)

        assert result.completed == (0, 1)
        assert new_state.squares == (mover, mover)
        assert new_state.current_player is mover

    def test_owned_squares_keep_their_owner(self, board_2x1):
        # P1 closes the left square, then play continues on the right
        state = play(board_2x1, [(0, 0), (1, 0), (2, 0), (0, 1), (1, 1)])
        assert state.squares == (Player.P1, UNOWNED)

        state = play(state, [(1, 2), (2, 1)])
        assert state.squares[0] is Player.P1
        assert state.squares[1] is Player.P2

    def test_completion_uses_row_major_index_on_wide_board(self):
        state = new_game(3, 2)
        # Bottom-right square: row 1, col 2
        state = play(state, [(2, 2), (3, 2), (3, 3), (4, 2)])
        assert state.square(1, 2) is not UNOWNED
        assert state.squares[5] is not UNOWNED
        assert all(owner is UNOWNED for owner in state.squares[:5])


class TestInvalidMoves:
    """Invalid claims raise and leave state untouched."""

    @pytest.mark.parametrize(
        "row,cell",
        [(-1, 0), (3, 0), (0, -1), (0, 1), (1, 2), (2, 1), (100, 100)],
    )
    def test_out_of_range(self, board_1x1, row, cell):
        with pytest.raises(InvalidCoordinate) as exc_info:
            apply_move(board_1x1, row, cell)
        assert exc_info.value.row == row
        assert exc_info.value.cell == cell
        assert board_1x1 == new_game(1, 1)

    def test_vertical_rows_are_one_wider(self, board_2x1):
        # Cell 2 exists on vertical rows only
        apply_move(board_2x1, 1, 2)
        with pytest.raises(InvalidCoordinate, match="Invalid cell: 2 for row 0"):
            apply_move(board_2x1, 0, 2)

    @pytest.mark.parametrize("row,cell", [("0", 0), (0, 1.0), (True, 0), (None, 0)])
    def test_non_integer_coordinates(self, board_1x1, row, cell):
        with pytest.raises(InvalidCoordinate, match="must be an integer"):
            apply_move(board_1x1, row, cell)

    def test_already_claimed(self, board_1x1):
        state = apply_move(board_1x1, 1, 1)

        with pytest.raises(AlreadyClaimed, match="row 1, cell 1 is already claimed"):
            apply_move(state, 1, 1)

        # The rejected claim did not pass the turn
        assert state.current_player is Player.P2
        assert state.turn == 1

    def test_game_over(self, board_1x1):
        finished = play(board_1x1, [(0, 0), (1, 0), (1, 1), (2, 0)])
        assert finished.is_finished

        with pytest.raises(GameOver):
            apply_move(finished, 0, 0)
        # Out-of-range claims on a finished game are still reported as game over
        with pytest.raises(GameOver):
            apply_move(finished, 9, 9)
