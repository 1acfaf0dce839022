"""Authoritative game state holders.

A GameSession owns the single current GameState of one game. Every claim
is computed from the latest snapshot and committed under a lock, so two
callers racing on the same stale snapshot cannot both apply a move.
"""

import logging
import threading
import uuid
from typing import Optional

from ..models.game import GameState
from ..models.player import Player
from .board_setup import new_game
from .claims import MoveResult, execute_move
from .errors import GameError

logger = logging.getLogger(__name__)


class StaleStateError(GameError):
    """A commit was based on a snapshot that is no longer current."""

    def __init__(self, expected_turn: int, actual_turn: int):
        self.expected_turn = expected_turn
        self.actual_turn = actual_turn
        super().__init__(
            f"Stale state: move was based on turn {expected_turn}, "
            f"current turn is {actual_turn}"
        )


class GameSession:
    """Holds the authoritative state of one game.

    Readers get the current snapshot via ``state``; snapshots are
    immutable so they can be shared freely. Writers go through
    ``claim_wall`` and ``reset``.
    """

    def __init__(self, game_id: str, state: GameState):
        self.id = game_id
        self._state = state
        self._first_player = state.current_player
        self._lock = threading.Lock()

    @property
    def state(self) -> GameState:
        """Latest committed snapshot."""
        return self._state

    def claim_wall(
        self, row: int, cell: int, expected_turn: Optional[int] = None
    ) -> tuple[GameState, MoveResult]:
        """Apply a wall claim to the latest snapshot and commit it.

        Args:
            row: Wall row index
            cell: Wall cell index within the row
            expected_turn: If given, the turn of the snapshot the caller
                based this move on; the commit fails if it is not current

        Returns:
            Tuple of (committed state, move result)

        Raises:
            StaleStateError: If expected_turn does not match the current turn
            GameError: Any rule violation from the engine (state unchanged)
        """
        with self._lock:
            current = self._state
            if expected_turn is not None and expected_turn != current.turn:
                logger.warning(
                    f"Game {self.id}: rejected stale claim ({row}, {cell}) "
                    f"based on turn {expected_turn}, current turn {current.turn}"
                )
                raise StaleStateError(expected_turn, current.turn)

            new_state, result = execute_move(current, row, cell)
            self._state = new_state

        return new_state, result

    def reset(self, width: Optional[int] = None, height: Optional[int] = None) -> GameState:
        """Start over with the same or new dimensions.

        Args:
            width: New width, or None to keep the current one
            height: New height, or None to keep the current one

        Returns:
            The fresh state

        Raises:
            InvalidConfiguration: If the new dimensions are invalid
        """
        with self._lock:
            current = self._state
            fresh = new_game(
                width if width is not None else current.width,
                height if height is not None else current.height,
                first_player=self._first_player,
            )
            self._state = fresh

        logger.info(f"Game {self.id}: reset to {fresh.width}x{fresh.height}")
        return fresh


class GameSessionManager:
    """Manages all active game sessions.

    In-memory storage only; sessions live for the process lifetime.
    """

    def __init__(self):
        self.sessions: dict[str, GameSession] = {}

    def create_session(
        self, width: int, height: int, first_player: Player = Player.P1
    ) -> GameSession:
        """Create a new game session.

        Args:
            width: Board width in squares
            height: Board height in squares
            first_player: Player who moves first

        Returns:
            Newly created GameSession

        Raises:
            InvalidConfiguration: If the dimensions are invalid
        """
        state = new_game(width, height, first_player=first_player)
        game_id = f"game-{uuid.uuid4().hex[:8]}"
        session = GameSession(game_id, state)
        self.sessions[game_id] = session

        logger.info(
            f"Created game {game_id}: {width}x{height}, {first_player.value} moves first"
        )
        return session

    def get(self, game_id: str) -> GameSession | None:
        """Get a game session by ID, or None if unknown."""
        return self.sessions.get(game_id)

    def delete(self, game_id: str) -> bool:
        """Delete a game session.

        Returns:
            True if deleted, False if not found
        """
        if game_id in self.sessions:
            del self.sessions[game_id]
            logger.info(f"Deleted game {game_id}")
            return True
        return False

    async def cleanup_all(self):
        """Clean up all sessions (called on shutdown)."""
        logger.info(f"Cleaning up {len(self.sessions)} game sessions")
        self.sessions.clear()
