"""Wall grid geometry.

Walls live in ``2 * height + 1`` rows. Even rows hold the ``width``
horizontal walls above/below a row of squares; odd rows hold the
``width + 1`` vertical walls to the left/right of each square.
"""

from typing import List, Tuple

Wall = Tuple[int, int]  # (row, cell)


def is_horizontal_row(row: int) -> bool:
    """Return True for horizontal wall rows (even indices)."""
    return row % 2 == 0


def wall_row_count(height: int) -> int:
    """Number of wall rows on a board ``height`` squares tall."""
    return 2 * height + 1


def wall_row_length(width: int, row: int) -> int:
    """Number of wall cells in ``row`` on a board ``width`` squares wide."""
    return width if is_horizontal_row(row) else width + 1


def square_index(width: int, row: int, col: int) -> int:
    """Row-major index of the square at (row, col)."""
    return row * width + col


def square_walls(row: int, col: int) -> Tuple[Wall, Wall, Wall, Wall]:
    """Return the four walls bounding the square at (row, col).

    Args:
        row: Square row (0-based)
        col: Square column (0-based)

    Returns:
        Tuple of (top, left, right, bottom) walls as (row, cell) pairs

    Examples:
        >>> square_walls(0, 0)
        ((0, 0), (1, 0), (1, 1), (2, 0))
        >>> square_walls(1, 2)
        ((2, 2), (3, 2), (3, 3), (4, 2))
    """
    return (
        (2 * row, col),
        (2 * row + 1, col),
        (2 * row + 1, col + 1),
        (2 * row + 2, col),
    )


def available_walls(state) -> List[Wall]:
    """List every unclaimed wall of a game state in row-major order.

    Args:
        state: GameState to inspect

    Returns:
        List of (row, cell) pairs whose wall is still unclaimed
    """
    return [
        (row_index, cell_index)
        for row_index, row in enumerate(state.walls)
        for cell_index, claimed in enumerate(row)
        if not claimed
    ]
