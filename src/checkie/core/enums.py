"""Core enumerations for the checkers domain."""

from __future__ import annotations

from enum import IntEnum


class Color(IntEnum):
    """Side color."""

    WHITE = 0
    BLACK = 1

    @property
    def opposite(self) -> Color:
        return Color(1 - self.value)

    def __str__(self) -> str:
        return self.name.lower()


class SquareContents(IntEnum):
    """Classification of a single square, as read by the view layer."""

    NONE = 0
    INVALID = 1
    WHITE_PAWN = 2
    WHITE_KING = 3
    BLACK_PAWN = 4
    BLACK_KING = 5

    @property
    def is_piece(self) -> bool:
        return self not in (SquareContents.NONE, SquareContents.INVALID)

    @property
    def is_white(self) -> bool:
        return self in (SquareContents.WHITE_PAWN, SquareContents.WHITE_KING)

    @property
    def is_black(self) -> bool:
        return self in (SquareContents.BLACK_PAWN, SquareContents.BLACK_KING)

    @property
    def is_king(self) -> bool:
        return self in (SquareContents.WHITE_KING, SquareContents.BLACK_KING)


class GameResult(IntEnum):
    """Outcome of a game."""

    IN_PROGRESS = 0
    WHITE_WINS = 1
    BLACK_WINS = 2
