"""Wall claim transition.

A claim runs in three steps against the incoming snapshot:
1. Claim the wall (new wall grid with one cell flipped to True)
2. Award every UNOWNED square whose four walls are now claimed to the mover
3. Advance the turn, unless step 2 awarded at least one square

The incoming GameState is never modified; a new one is returned.
"""

import logging
from dataclasses import dataclass

from ..models.game import GameState, SquareGrid, WallGrid
from ..models.player import UNOWNED, Player
from ..utils.grid import square_walls, wall_row_length
from .errors import AlreadyClaimed, GameOver, InvalidCoordinate

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MoveResult:
    """What a single wall claim did.

    Returned next to the new state so callers can report completed squares
    without diffing snapshots.
    """

    mover: Player
    row: int
    cell: int
    completed: tuple[int, ...]  # Square indices awarded to the mover
    next_player: Player

    @property
    def turn_passed(self) -> bool:
        """True when the move completed nothing and play moved to the opponent."""
        return self.next_player is not self.mover


def validate_move(state: GameState, row: int, cell: int) -> None:
    """Check that (row, cell) is a legal claim on ``state``.

    Args:
        state: Current game state
        row: Wall row index
        cell: Wall cell index within the row

    Raises:
        GameOver: If every square is already owned
        InvalidCoordinate: If (row, cell) is outside the wall grid
        AlreadyClaimed: If the wall is already claimed
    """
    if state.is_finished:
        raise GameOver("Game is over: every square is owned")

    for name, value in (("row", row), ("cell", cell)):
        if not isinstance(value, int) or isinstance(value, bool):
            raise InvalidCoordinate(row, cell, f"Invalid {name}: {value!r} (must be an integer)")

    if not 0 <= row < len(state.walls):
        raise InvalidCoordinate(
            row, cell, f"Invalid row: {row} (must be 0-{len(state.walls) - 1})"
        )

    row_length = wall_row_length(state.width, row)
    if not 0 <= cell < row_length:
        raise InvalidCoordinate(
            row, cell, f"Invalid cell: {cell} for row {row} (must be 0-{row_length - 1})"
        )

    if state.wall(row, cell):
        raise AlreadyClaimed(row, cell)


def claim_wall(walls: WallGrid, row: int, cell: int) -> WallGrid:
    """Return a copy of ``walls`` with (row, cell) claimed.

    Untouched rows are shared with the input; tuples are immutable.
    """
    target = walls[row]
    claimed_row = target[:cell] + (True,) + target[cell + 1 :]
    return walls[:row] + (claimed_row,) + walls[row + 1 :]


def award_squares(
    squares: SquareGrid, walls: WallGrid, width: int, mover: Player
) -> tuple[SquareGrid, tuple[int, ...]]:
    """Assign every newly enclosed square to ``mover``.

    Scans all UNOWNED squares against ``walls``. Owned squares are never
    reassigned.

    Args:
        squares: Square owners before the claim
        walls: Wall grid after the claim
        width: Board width in squares
        mover: Player credited with completed squares

    Returns:
        Tuple of (new square grid, indices of squares completed)
    """
    completed = []
    new_squares = list(squares)

    for index, owner in enumerate(squares):
        if owner is not UNOWNED:
            continue
        row, col = divmod(index, width)
        if all(walls[r][c] for r, c in square_walls(row, col)):
            new_squares[index] = mover
            completed.append(index)

    return tuple(new_squares), tuple(completed)


def execute_move(state: GameState, row: int, cell: int) -> tuple[GameState, MoveResult]:
    """Apply one wall claim and describe its effect.

    Args:
        state: Current game state
        row: Wall row index
        cell: Wall cell index within the row

    Returns:
        Tuple of (new game state, move result)

    Raises:
        GameOver: If the game is already finished
        InvalidCoordinate: If (row, cell) is outside the wall grid
        AlreadyClaimed: If the wall is already claimed
    """
    try:
        validate_move(state, row, cell)
    except (GameOver, InvalidCoordinate, AlreadyClaimed) as e:
        logger.debug(f"Rejected claim ({row!r}, {cell!r}) on turn {state.turn}: {e}")
        raise

    mover = state.current_player
    walls = claim_wall(state.walls, row, cell)
    squares, completed = award_squares(state.squares, walls, state.width, mover)

    # Completing a square earns another move
    next_player = mover if completed else mover.opponent

    new_state = GameState(
        width=state.width,
        height=state.height,
        walls=walls,
        squares=squares,
        current_player=next_player,
        turn=state.turn + 1,
        last_move=(row, cell),
    )

    if completed:
        logger.info(
            f"Turn {new_state.turn}: {mover.value} claimed ({row}, {cell}) "
            f"and completed square(s) {list(completed)}"
        )
    else:
        logger.debug(f"Turn {new_state.turn}: {mover.value} claimed ({row}, {cell})")

    result = MoveResult(
        mover=mover, row=row, cell=cell, completed=completed, next_player=next_player
    )
    return new_state, result


def apply_move(state: GameState, row: int, cell: int) -> GameState:
    """Apply one wall claim and return the resulting state.

    See execute_move for the errors raised.
    """
    new_state, _ = execute_move(state, row, cell)
    return new_state
