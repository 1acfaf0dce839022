"""Game state conversion to JSON-compatible dictionaries.

The presentation layer reads snapshots through these dictionaries; the
engine never reads them back.
"""

from typing import Any

from ..engine.victory import scores, winner
from ..models.game import GameState
from ..models.player import UNOWNED, Owner


def _serialize_owner(owner: Owner) -> str | None:
    return None if owner is UNOWNED else owner.value


def state_to_dict(state: GameState) -> dict[str, Any]:
    """Convert a GameState to a JSON-compatible dictionary.

    Args:
        state: Snapshot to serialize

    Returns:
        Dictionary with board shape, walls, square owners (None for
        unowned), current player, turn, last move, scores and winner
    """
    won_by = winner(state)
    return {
        "width": state.width,
        "height": state.height,
        "walls": [list(row) for row in state.walls],
        "squares": [_serialize_owner(owner) for owner in state.squares],
        "currentPlayer": state.current_player.value,
        "turn": state.turn,
        "lastMove": list(state.last_move) if state.last_move is not None else None,
        "scores": {player.value: count for player, count in scores(state).items()},
        "finished": state.is_finished,
        "winner": won_by.value if won_by is not None else None,
    }
