"""Human player controller for CLI interaction.

This module provides the HumanPlayer class which reads commands from the
terminal for whichever player is to move. Both players share the same
keyboard (hot-seat).
"""

from typing import Callable

from ..models.game import GameState
from ..utils.grid import available_walls
from .command_parser import (
    Command,
    CommandParseError,
    CommandParser,
    ErrorType,
    SpecialCommand,
)
from .renderer import BoardRenderer

HELP_TEXT = """Commands:
  claim <row> <cell>   Claim a wall (shorthand: <row> <cell> or <row>,<cell>)
  reset [WxH]          Start a new game, optionally with a new board size
  walls                List unclaimed walls
  help                 Show this help
  quit                 Leave the game

Even rows are horizontal walls, odd rows are vertical walls."""


class HumanPlayer:
    """Terminal controller shared by both players.

    Handles showing the board, prompting the player to move and turning
    typed input into commands.
    """

    def __init__(
        self,
        input_func: Callable[[str], str] = input,
        output_func: Callable[[str], None] = print,
    ):
        """Initialize the controller.

        Args:
            input_func: Prompt-and-read function (defaults to input)
            output_func: Line writer (defaults to print)
        """
        self.input = input_func
        self.output = output_func
        self.renderer = BoardRenderer()
        self.parser = CommandParser()

    def _format_error_message(self, error_type: ErrorType, message: str) -> str:
        """Format error message with optional help.

        Args:
            error_type: Classification of the error
            message: Error message content

        Returns:
            Formatted error message string
        """
        formatted = f"❌ {message}"

        # Only Unknown Command errors show help hint
        if error_type == ErrorType.UNKNOWN_COMMAND:
            formatted += "\n\nAvailable commands: claim, reset, walls, help, quit"
            formatted += "\nExample: claim 0 1"

        return formatted

    def show_error(self, message: str) -> None:
        """Print an engine error in the same style as parse errors."""
        self.output(self._format_error_message(ErrorType.VALIDATION_ERROR, message))

    def show_board(self, state: GameState) -> None:
        """Print the board with coordinates and whose turn it is."""
        self.output("")
        self.output(self.renderer.render_with_coords(state))
        self.output("")

    def get_command(self, state: GameState) -> Command:
        """Prompt until the player enters a claim, reset or quit.

        Help and wall listings are answered here and the prompt repeats.
        End of input is treated as quit.

        Args:
            state: Current game state (used for the prompt and wall listing)

        Returns:
            ClaimCommand, ResetCommand or SpecialCommand.QUIT
        """
        if state.is_finished:
            prompt = "Game over. Type 'reset' to play again or 'quit'> "
        else:
            prompt = f"Player {state.current_player.number}> "

        while True:
            try:
                line = self.input(prompt)
            except EOFError:
                return SpecialCommand.QUIT

            if not line.strip():
                continue

            try:
                command = self.parser.parse(line)
            except CommandParseError as e:
                self.output(self._format_error_message(e.error_type, e.message))
                continue

            if command is SpecialCommand.HELP:
                self.output(HELP_TEXT)
                continue
            if command is SpecialCommand.WALLS:
                walls = available_walls(state)
                listing = ", ".join(f"{row},{cell}" for row, cell in walls)
                self.output(f"Unclaimed walls: {listing or 'none'}")
                continue
            return command
