"""ASCII board rendering.

This module renders a GameState as text: ``+`` marks the dots between
walls, ``---`` and ``|`` mark claimed walls and each owned square shows
its owner's seat number.
"""

from ..models.game import GameState
from ..models.player import UNOWNED, Owner
from ..utils.grid import is_horizontal_row

# Width of one square's interior in characters
CELL_WIDTH = 3
LABEL_WIDTH = 4


class BoardRenderer:
    """Renders a wall grid with square ownership as ASCII art."""

    def render(self, state: GameState) -> str:
        """Render the board.

        Output format for a 2x1 board with every wall claimed, left square
        owned by player 1 and right square by player 2::

            +---+---+
            | 1 | 2 |
            +---+---+

        Unclaimed walls are drawn as blanks.

        Args:
            state: Game state to render

        Returns:
            Multi-line string, one line per wall row
        """
        lines = []
        for row_index, row in enumerate(state.walls):
            if is_horizontal_row(row_index):
                lines.append(self._render_horizontal_row(row))
            else:
                square_row = (row_index - 1) // 2
                owners = [state.square(square_row, col) for col in range(state.width)]
                lines.append(self._render_vertical_row(row, owners))
        return "\n".join(lines)

    def _render_horizontal_row(self, row: tuple[bool, ...]) -> str:
        segments = ["-" * CELL_WIDTH if claimed else " " * CELL_WIDTH for claimed in row]
        return "+" + "+".join(segments) + "+"

    def _render_vertical_row(self, row: tuple[bool, ...], owners: list[Owner]) -> str:
        parts = []
        for cell_index, claimed in enumerate(row):
            parts.append("|" if claimed else " ")
            if cell_index < len(owners):
                parts.append(self._render_square(owners[cell_index]))
        return "".join(parts)

    def _render_square(self, owner: Owner) -> str:
        if owner is UNOWNED:
            return " " * CELL_WIDTH
        return f" {owner.number} "

    def render_with_coords(self, state: GameState) -> str:
        """Render the board with wall coordinate labels.

        Each line is prefixed with its wall row index. Two header lines
        give cell indices: the first for horizontal wall rows (even), the
        second for vertical wall rows (odd).

        Args:
            state: Game state to render

        Returns:
            Labelled multi-line string
        """
        board_width = state.width * (CELL_WIDTH + 1) + 1
        horizontal_header = self._header(
            board_width, [(c * (CELL_WIDTH + 1) + 2, c) for c in range(state.width)]
        )
        vertical_header = self._header(
            board_width, [(c * (CELL_WIDTH + 1), c) for c in range(state.width + 1)]
        )

        board_lines = self.render(state).split("\n")
        numbered = [
            f"{i:>{LABEL_WIDTH - 1}} {line}" for i, line in enumerate(board_lines)
        ]
        return "\n".join([horizontal_header, vertical_header] + numbered)

    def _header(self, board_width: int, positions: list[tuple[int, int]]) -> str:
        chars = [" "] * (board_width + 2)
        for offset, index in positions:
            label = str(index)
            for i, ch in enumerate(label):
                if offset + i < len(chars):
                    chars[offset + i] = ch
        return (" " * LABEL_WIDTH + "".join(chars)).rstrip()
