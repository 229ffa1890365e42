"""Square type alias and coordinate helpers.

Board layout: ``(x, y)`` with both coordinates in ``0..7``.  Row ``y = 0``
is White's back row, row ``y = 7`` is Black's.  Dark squares are the ones
where ``x + y`` is odd.
"""

from __future__ import annotations

from typing import TypeAlias

Square: TypeAlias = tuple[int, int]
Direction: TypeAlias = tuple[int, int]

BOARD_SIZE = 8

# Fixed order used for king moves and for move enumeration.
ALL_DIRECTIONS: tuple[Direction, ...] = ((-1, -1), (-1, 1), (1, -1), (1, 1))


def make_square(x: int, y: int) -> Square:
    """Create a square from column *x* and row *y*."""
    return (x, y)


def is_valid_square(sq: object) -> bool:
    """Whether *sq* is an ``(x, y)`` pair of ints inside the board."""
    if not isinstance(sq, tuple) or len(sq) != 2:
        return False
    x, y = sq
    if not isinstance(x, int) or not isinstance(y, int):
        return False
    if isinstance(x, bool) or isinstance(y, bool):
        return False
    return 0 <= x < BOARD_SIZE and 0 <= y < BOARD_SIZE


def is_dark_square(sq: Square) -> bool:
    x, y = sq
    return (x + y) % 2 == 1


def offset(sq: Square, direction: Direction, steps: int = 1) -> Square:
    """Square *steps* away from *sq* along *direction* (may leave the board)."""
    return (sq[0] + steps * direction[0], sq[1] + steps * direction[1])


def square_name(sq: Square) -> str:
    """Short label, e.g. ``(2, 5)`` → ``'2,5'``."""
    return f"{sq[0]},{sq[1]}"
