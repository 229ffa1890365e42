"""The two sides of a checkers game."""

from __future__ import annotations

from dataclasses import dataclass

from checkie.core.enums import Color
from checkie.core.types import Direction


@dataclass(frozen=True, eq=False, slots=True)
class Player:
    """One side of the board.

    Players are compared by identity: exactly one instance per color
    exists for the whole process (:data:`WHITE` and :data:`BLACK`), and
    piece ownership is decided with ``is``.

    Args:
        color: Side color.
        name: Display name.
        forward: Row delta of a pawn step (``+1`` or ``-1``).
        promotion_row: Row on which this side's pawns are crowned.
    """

    color: Color
    name: str
    forward: int
    promotion_row: int

    @property
    def pawn_directions(self) -> tuple[Direction, Direction]:
        return ((-1, self.forward), (1, self.forward))

    def __repr__(self) -> str:
        return f"Player({self.name})"

    def __str__(self) -> str:
        return self.name


WHITE = Player(Color.WHITE, "White", forward=1, promotion_row=7)
BLACK = Player(Color.BLACK, "Black", forward=-1, promotion_row=0)

_BY_COLOR: dict[Color, Player] = {Color.WHITE: WHITE, Color.BLACK: BLACK}


def player_for(color: Color) -> Player:
    """The singleton :class:`Player` for *color*."""
    return _BY_COLOR[color]


def opponent_of(player: Player) -> Player:
    return _BY_COLOR[player.color.opposite]
