"""Game state snapshot."""

from dataclasses import dataclass
from typing import Optional, Tuple

from ..utils.grid import square_index, wall_row_count, wall_row_length
from .player import UNOWNED, Owner, Player, Unowned

WallGrid = Tuple[Tuple[bool, ...], ...]
SquareGrid = Tuple[Owner, ...]


@dataclass(frozen=True)
class GameState:
    """Immutable snapshot of one game.

    Every transition builds a new GameState; a snapshot handed to the
    presentation layer is never modified afterwards. Walls are stored as
    alternating rows (even rows horizontal with ``width`` cells, odd rows
    vertical with ``width + 1`` cells). Squares are stored row-major.
    """

    width: int  # Squares per row
    height: int  # Squares per column
    walls: WallGrid  # 2 * height + 1 rows of claimed flags
    squares: SquareGrid  # height * width owners
    current_player: Player  # Player to move
    turn: int = 0  # Wall claims applied so far
    last_move: Optional[Tuple[int, int]] = None  # (row, cell) of the latest claim

    def __post_init__(self):
        """Validate snapshot shape after initialization."""
        if self.width < 1 or self.height < 1:
            raise ValueError(
                f"Invalid board size: {self.width}x{self.height} (must be >= 1x1)"
            )
        if len(self.walls) != wall_row_count(self.height):
            raise ValueError(
                f"Invalid wall grid: {len(self.walls)} rows "
                f"(expected {wall_row_count(self.height)})"
            )
        for row_index, row in enumerate(self.walls):
            expected = wall_row_length(self.width, row_index)
            if len(row) != expected:
                raise ValueError(
                    f"Invalid wall row {row_index}: {len(row)} cells (expected {expected})"
                )
        if len(self.squares) != self.width * self.height:
            raise ValueError(
                f"Invalid square grid: {len(self.squares)} cells "
                f"(expected {self.width * self.height})"
            )
        for owner in self.squares:
            if not isinstance(owner, (Player, Unowned)):
                raise ValueError(f"Invalid square owner: {owner!r}")
        if not isinstance(self.current_player, Player):
            raise ValueError(f"Invalid current player: {self.current_player!r}")
        if self.turn < 0:
            raise ValueError(f"Invalid turn: {self.turn} (must be >= 0)")

    @property
    def is_finished(self) -> bool:
        """True once every square has an owner."""
        return all(owner is not UNOWNED for owner in self.squares)

    def wall(self, row: int, cell: int) -> bool:
        """Return whether the wall at (row, cell) is claimed."""
        return self.walls[row][cell]

    def square(self, row: int, col: int) -> Owner:
        """Return the owner of the square at (row, col)."""
        return self.squares[square_index(self.width, row, col)]
