"""Winner determination.

This module handles:
1. Checking whether every square is owned
2. Tallying squares per player
3. Determining the winner (a Player, or None while the game is unfinished)
"""

from typing import Optional

from ..models.game import GameState
from ..models.player import UNOWNED, Player


def is_finished(state: GameState) -> bool:
    """Return True once no square is UNOWNED."""
    return state.is_finished


def scores(state: GameState) -> dict[Player, int]:
    """Count owned squares per player.

    Both players are always present in the result, with 0 for a player
    that owns nothing yet.
    """
    tally = {Player.P1: 0, Player.P2: 0}
    for owner in state.squares:
        if owner is not UNOWNED:
            tally[owner] += 1
    return tally


def winner(state: GameState) -> Optional[Player]:
    """Determine the winner of a finished game.

    Squares are scanned in row-major order and each player's tally is
    recorded in the order that player is first seen. The leader is then
    picked by walking those tallies in the same order, letting an equal
    tally replace the current leader. On a tie the player whose first
    square appears later in the scan wins. This is a deterministic
    tie-break, not a draw: a finished game always has a winner.

    Args:
        state: Game state to evaluate

    Returns:
        Winning Player, or None if any square is still UNOWNED
    """
    if not state.is_finished:
        return None

    tally: dict[Player, int] = {}
    for owner in state.squares:
        tally[owner] = tally.get(owner, 0) + 1

    leader = None
    best = -1
    for player, count in tally.items():
        if count >= best:
            leader = player
            best = count
    return leader
