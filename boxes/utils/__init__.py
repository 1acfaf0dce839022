"""Utility functions and constants for Wall Squares."""

from .constants import DEFAULT_HEIGHT, DEFAULT_WIDTH, MAX_DIMENSION
from .grid import (
    available_walls,
    is_horizontal_row,
    square_index,
    square_walls,
    wall_row_count,
    wall_row_length,
)

__all__ = [
    "DEFAULT_HEIGHT",
    "DEFAULT_WIDTH",
    "MAX_DIMENSION",
    "available_walls",
    "is_horizontal_row",
    "square_index",
    "square_walls",
    "wall_row_count",
    "wall_row_length",
]
