"""Shared fixtures for Wall Squares tests."""

import pytest

from boxes.engine.board_setup import new_game
from boxes.engine.claims import apply_move


def play(state, moves):
    """Apply a sequence of (row, cell) claims and return the final state."""
    for row, cell in moves:
        state = apply_move(state, row, cell)
    return state


# 2x1 board: every wall except the shared vertical wall (1, 1)
TWO_BY_ONE_WITHOUT_SHARED_WALL = [(0, 0), (1, 0), (2, 0), (0, 1), (1, 2), (2, 1)]

# 2x1 board: P1 closes the left square, P2 closes the right one
TWO_BY_ONE_SPLIT_GAME = [(0, 0), (1, 0), (2, 0), (0, 1), (1, 1), (1, 2), (2, 1)]


@pytest.fixture
def board_1x1():
    """Fresh 1x1 game."""
    return new_game(1, 1)


@pytest.fixture
def board_2x1():
    """Fresh 2x1 game (two squares side by side)."""
    return new_game(2, 1)


@pytest.fixture
def board_3x3():
    """Fresh 3x3 game."""
    return new_game(3, 3)
