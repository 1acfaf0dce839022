"""Player identifiers and square ownership values."""

from enum import Enum
from typing import Union


class Player(str, Enum):
    """The two players. Values double as wire identifiers ("p1", "p2")."""

    P1 = "p1"
    P2 = "p2"

    @property
    def opponent(self) -> "Player":
        """The other player."""
        return Player.P2 if self is Player.P1 else Player.P1

    @property
    def number(self) -> int:
        """1-based seat number used in display text."""
        return 1 if self is Player.P1 else 2


class Unowned(Enum):
    """Ownership variant for a square nobody has completed yet.

    Kept as its own type so it can never compare equal to a Player.
    """

    UNOWNED = "unowned"

    def __bool__(self) -> bool:
        return False


UNOWNED = Unowned.UNOWNED

# A square holds either a Player or UNOWNED
Owner = Union[Player, Unowned]
