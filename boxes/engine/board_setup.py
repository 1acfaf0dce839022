"""New game creation."""

import logging

from ..models.game import GameState
from ..models.player import UNOWNED, Player
from ..utils.grid import wall_row_count, wall_row_length
from .errors import InvalidConfiguration

logger = logging.getLogger(__name__)


def _check_dimension(name: str, value) -> None:
    # bool is an int subclass but never a meaningful board size
    if not isinstance(value, int) or isinstance(value, bool):
        raise InvalidConfiguration(f"Invalid {name}: {value!r} (must be an integer)")
    if value < 1:
        raise InvalidConfiguration(f"Invalid {name}: {value} (must be >= 1)")


def new_game(width: int, height: int, first_player: Player = Player.P1) -> GameState:
    """Create the initial state of a game.

    All walls start unclaimed, every square starts UNOWNED and
    ``first_player`` is to move.

    Args:
        width: Squares per row (>= 1)
        height: Squares per column (>= 1)
        first_player: Player who makes the first claim

    Returns:
        Fresh GameState at turn 0

    Raises:
        InvalidConfiguration: If width or height is not a positive integer
    """
    _check_dimension("width", width)
    _check_dimension("height", height)
    if not isinstance(first_player, Player):
        raise InvalidConfiguration(f"Invalid first player: {first_player!r}")

    walls = tuple(
        (False,) * wall_row_length(width, row) for row in range(wall_row_count(height))
    )
    squares = (UNOWNED,) * (width * height)

    logger.debug(f"New {width}x{height} game, {first_player.value} to move")

    return GameState(
        width=width,
        height=height,
        walls=walls,
        squares=squares,
        current_player=first_player,
    )
