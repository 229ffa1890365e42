"""Checker piece."""

from __future__ import annotations

from dataclasses import dataclass

from checkie.core.enums import Color, SquareContents
from checkie.core.player import Player

_CONTENTS: dict[tuple[Color, bool], SquareContents] = {
    (Color.WHITE, False): SquareContents.WHITE_PAWN,
    (Color.WHITE, True): SquareContents.WHITE_KING,
    (Color.BLACK, False): SquareContents.BLACK_PAWN,
    (Color.BLACK, True): SquareContents.BLACK_KING,
}

# Diagram character ↔ (Color, is_king)
_SYMBOLS: dict[tuple[Color, bool], str] = {
    (Color.WHITE, False): "w",
    (Color.WHITE, True): "W",
    (Color.BLACK, False): "b",
    (Color.BLACK, True): "B",
}


@dataclass(slots=True)
class Piece:
    """A checker on the board.

    The owner never changes; ``is_king`` flips on promotion and is reset
    by undo.  A piece lives in exactly one board cell at a time, so move
    records keep copies rather than references to it.
    """

    owner: Player
    is_king: bool = False

    def promote(self) -> None:
        self.is_king = True

    def copy(self) -> Piece:
        return Piece(self.owner, self.is_king)

    @property
    def contents(self) -> SquareContents:
        return _CONTENTS[(self.owner.color, self.is_king)]

    @property
    def symbol(self) -> str:
        """Diagram character: ``w``/``W`` white, ``b``/``B`` black, upper = king."""
        return _SYMBOLS[(self.owner.color, self.is_king)]

    def __str__(self) -> str:
        return self.symbol
