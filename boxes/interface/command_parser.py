"""Command parser for hot-seat players.

This module parses typed commands like "claim 2 1" or "reset 4x3" into
command objects the hot-seat loop can act on.
"""

import re
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union

from ..utils.constants import MAX_DIMENSION


class ErrorType(Enum):
    """Classification of command input errors."""
    UNKNOWN_COMMAND = "unknown_command"
    SYNTAX_ERROR = "syntax_error"
    VALIDATION_ERROR = "validation_error"


class CommandParseError(Exception):
    """Raised when command parsing fails with classification."""

    def __init__(self, error_type: ErrorType, message: str):
        """Initialize parse error.

        Args:
            error_type: Classification of the error
            message: Human-readable error message
        """
        self.error_type = error_type
        self.message = message
        super().__init__(message)


@dataclass(frozen=True)
class ClaimCommand:
    """Claim the wall at (row, cell)."""

    row: int
    cell: int


@dataclass(frozen=True)
class ResetCommand:
    """Start a new game, optionally with new dimensions."""

    width: Optional[int] = None
    height: Optional[int] = None


class SpecialCommand(Enum):
    """Commands handled by the loop itself rather than the engine."""
    HELP = "help"
    QUIT = "quit"
    WALLS = "walls"


Command = Union[ClaimCommand, ResetCommand, SpecialCommand]

_SPECIAL_ALIASES = {
    "help": SpecialCommand.HELP,
    "h": SpecialCommand.HELP,
    "?": SpecialCommand.HELP,
    "quit": SpecialCommand.QUIT,
    "exit": SpecialCommand.QUIT,
    "q": SpecialCommand.QUIT,
    "walls": SpecialCommand.WALLS,
    "ls": SpecialCommand.WALLS,
}

KNOWN_COMMANDS = ["claim", "c", "reset"] + list(_SPECIAL_ALIASES)

_COORDS = r"(\d+)\s*(?:,\s*|\s+)(\d+)"


class CommandParser:
    """Parse typed commands into command objects."""

    def parse(self, command: str) -> Command:
        """Parse a command string.

        Supported formats:
        - "claim <row> <cell>" (or "c <row> <cell>")
        - "<row> <cell>" or "<row>,<cell>"
        - "reset" or "reset <width>x<height>"
        - "help", "walls", "quit"

        Args:
            command: Command string to parse

        Returns:
            ClaimCommand, ResetCommand or SpecialCommand

        Raises:
            CommandParseError: If the command is unknown or malformed
        """
        cmd = command.strip().lower()

        if cmd in _SPECIAL_ALIASES:
            return _SPECIAL_ALIASES[cmd]

        parsed = self._parse_claim_pattern(cmd) or self._parse_reset_pattern(cmd)
        if parsed is not None:
            return parsed

        first_word = cmd.split()[0] if cmd.split() else ""
        if first_word not in KNOWN_COMMANDS and not first_word[:1].isdigit():
            raise CommandParseError(
                ErrorType.UNKNOWN_COMMAND,
                f"Unknown command: '{first_word}'"
            )
        raise CommandParseError(
            ErrorType.SYNTAX_ERROR,
            "Syntax error: invalid command format\n"
            "Correct format: claim <row> <cell>  or  reset <width>x<height>"
        )

    def _parse_claim_pattern(self, cmd: str) -> Optional[ClaimCommand]:
        """Parse 'claim <row> <cell>' and the bare '<row> <cell>' shorthand."""
        match = re.fullmatch(r"(?:(?:claim|c)\s+)?" + _COORDS, cmd)
        if not match:
            return None
        return ClaimCommand(row=int(match.group(1)), cell=int(match.group(2)))

    def _parse_reset_pattern(self, cmd: str) -> Optional[ResetCommand]:
        """Parse 'reset' and 'reset <width>x<height>'.

        Raises:
            CommandParseError: If a requested dimension exceeds MAX_DIMENSION
        """
        if cmd == "reset":
            return ResetCommand()

        match = re.fullmatch(r"reset\s+(\d+)\s*x\s*(\d+)", cmd)
        if not match:
            return None

        width = int(match.group(1))
        height = int(match.group(2))
        if width > MAX_DIMENSION or height > MAX_DIMENSION:
            raise CommandParseError(
                ErrorType.VALIDATION_ERROR,
                f"Board too large: {width}x{height} (max {MAX_DIMENSION}x{MAX_DIMENSION})"
            )
        return ResetCommand(width=width, height=height)
