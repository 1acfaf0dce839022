#!/usr/bin/env python3
"""Wall Squares - Main entry point.

A two-player game on a grid of walls: claim walls one at a time, close
all four walls of a square to own it and move again. The player owning
the most squares when the board is full wins.
"""

import argparse
import logging
import sys

from boxes.engine.errors import GameError
from boxes.engine.session import GameSession, GameSessionManager
from boxes.engine.victory import scores, winner
from boxes.interface.command_parser import ClaimCommand, ResetCommand, SpecialCommand
from boxes.interface.human_player import HumanPlayer
from boxes.models.player import Player
from boxes.utils.constants import DEFAULT_HEIGHT, DEFAULT_WIDTH, MAX_DIMENSION


class GameOrchestrator:
    """Runs the hot-seat turn loop against one game session."""

    def __init__(self, session: GameSession, controller: HumanPlayer):
        """Initialize game orchestrator.

        Args:
            session: Session holding the authoritative game state
            controller: Terminal controller shared by both players
        """
        self.session = session
        self.controller = controller

    def run(self) -> GameSession:
        """Main game loop. Returns when the players quit."""
        out = self.controller.output
        out("=" * 40)
        out("Wall Squares")
        out("=" * 40)
        out("Close all four walls of a square to own it and move again.")
        out("Type 'help' for commands.")

        while True:
            state = self.session.state
            self.controller.show_board(state)
            self._show_score()

            command = self.controller.get_command(state)

            if command is SpecialCommand.QUIT:
                out("Goodbye!")
                return self.session

            if isinstance(command, ResetCommand):
                self._reset(command)
                continue

            if isinstance(command, ClaimCommand):
                self._claim(command)

    def _claim(self, command: ClaimCommand) -> None:
        try:
            state, result = self.session.claim_wall(command.row, command.cell)
        except GameError as e:
            self.controller.show_error(str(e))
            return

        if result.completed:
            count = len(result.completed)
            self.controller.output(
                f"Player {result.mover.number} completed {count} square"
                f"{'s' if count > 1 else ''} and moves again."
            )

        if state.is_finished:
            self._show_victory()

    def _reset(self, command: ResetCommand) -> None:
        try:
            state = self.session.reset(command.width, command.height)
        except GameError as e:
            self.controller.show_error(str(e))
            return
        self.controller.output(f"New {state.width}x{state.height} game.")

    def _show_score(self) -> None:
        state = self.session.state
        tally = scores(state)
        self.controller.output(
            f"Score: Player 1 = {tally[Player.P1]}, Player 2 = {tally[Player.P2]}"
            + ("" if state.is_finished else f" | Player {state.current_player.number} to move")
        )

    def _show_victory(self) -> None:
        won_by = winner(self.session.state)
        self.controller.output("")
        self.controller.output("=" * 40)
        self.controller.output(f"Congratulations player {won_by.number}!")
        self.controller.output("=" * 40)


def _dimension(value: str) -> int:
    """argparse type for board dimensions."""
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"not an integer: {value!r}") from None
    if not 1 <= number <= MAX_DIMENSION:
        raise argparse.ArgumentTypeError(f"must be between 1 and {MAX_DIMENSION}, got {number}")
    return number


def parse_args(argv=None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(description="Wall Squares - hot-seat wall claiming game")
    parser.add_argument(
        "--width", type=_dimension, default=DEFAULT_WIDTH, help="Squares per row (default: 3)"
    )
    parser.add_argument(
        "--height", type=_dimension, default=DEFAULT_HEIGHT, help="Squares per column (default: 3)"
    )
    parser.add_argument(
        "--first",
        choices=[p.value for p in Player],
        default=Player.P1.value,
        help="Player who moves first (default: p1)",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level (default: WARNING)",
    )
    return parser.parse_args(argv)


def main(argv=None) -> int:
    """Main entry point."""
    args = parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    manager = GameSessionManager()
    session = manager.create_session(args.width, args.height, first_player=Player(args.first))

    try:
        GameOrchestrator(session, HumanPlayer()).run()
    except KeyboardInterrupt:
        print("\n\nGame interrupted by user. Exiting...")
    return 0


if __name__ == "__main__":
    sys.exit(main())
