"""Data models for Wall Squares."""

from .game import GameState
from .player import UNOWNED, Owner, Player, Unowned

__all__ = [
    "Player",
    "Unowned",
    "UNOWNED",
    "Owner",
    "GameState",
]
