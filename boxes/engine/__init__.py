"""Game engine components."""

from .board_setup import new_game
from .claims import MoveResult, apply_move, execute_move, validate_move
from .errors import AlreadyClaimed, GameError, GameOver, InvalidConfiguration, InvalidCoordinate
from .session import GameSession, GameSessionManager, StaleStateError
from .victory import is_finished, scores, winner

__all__ = [
    "new_game",
    "MoveResult",
    "apply_move",
    "execute_move",
    "validate_move",
    "AlreadyClaimed",
    "GameError",
    "GameOver",
    "InvalidConfiguration",
    "InvalidCoordinate",
    "GameSession",
    "GameSessionManager",
    "StaleStateError",
    "is_finished",
    "scores",
    "winner",
]
