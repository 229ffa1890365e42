"""Board - piece placement on an 8x8 checkers board."""

from __future__ import annotations

from collections.abc import Iterator, Sequence

from checkie.core.enums import Color
from checkie.core.piece import Piece
from checkie.core.player import BLACK, WHITE, Player, player_for
from checkie.core.types import BOARD_SIZE, Square, is_dark_square, is_valid_square

_FROM_SYMBOL: dict[str, tuple[Color, bool]] = {
    "w": (Color.WHITE, False),
    "W": (Color.WHITE, True),
    "b": (Color.BLACK, False),
    "B": (Color.BLACK, True),
}


class Board:
    """Mutable 8x8 grid of optional pieces, addressed by ``(x, y)``."""

    __slots__ = ("_cells",)

    def __init__(self) -> None:
        # [y][x] -> piece or None
        self._cells: list[list[Piece | None]] = [
            [None] * BOARD_SIZE for _ in range(BOARD_SIZE)
        ]

    # -- Element access -----------------------------------------------------

    def __getitem__(self, sq: Square) -> Piece | None:
        """Piece on *sq*; ``None`` for empty or off-board squares."""
        if not is_valid_square(sq):
            return None
        return self._cells[sq[1]][sq[0]]

    def __setitem__(self, sq: Square, piece: Piece | None) -> None:
        if not is_valid_square(sq):
            raise ValueError(f"Square off the board: {sq!r}")
        self._cells[sq[1]][sq[0]] = piece

    @staticmethod
    def in_bounds(sq: Square) -> bool:
        return is_valid_square(sq)

    def is_empty(self, sq: Square) -> bool:
        """Whether *sq* is on the board and holds no piece."""
        return is_valid_square(sq) and self._cells[sq[1]][sq[0]] is None

    def move_piece(self, from_sq: Square, to_sq: Square) -> Piece:
        """Relocate the piece on *from_sq* to *to_sq* and return it."""
        piece = self[from_sq]
        if piece is None:
            raise ValueError(f"No piece on {from_sq!r}")
        self[to_sq] = piece
        self[from_sq] = None
        return piece

    # -- Query helpers ------------------------------------------------------

    @staticmethod
    def squares() -> Iterator[Square]:
        """All squares in row-major order (y outer, x inner)."""
        for y in range(BOARD_SIZE):
            for x in range(BOARD_SIZE):
                yield (x, y)

    def pieces(self, player: Player) -> list[Square]:
        """Squares occupied by *player*, in row-major order."""
        return [
            (x, y)
            for y, row in enumerate(self._cells)
            for x, piece in enumerate(row)
            if piece is not None and piece.owner is player
        ]

    def count(self, player: Player) -> int:
        return len(self.pieces(player))

    # -- Mutation / copying -------------------------------------------------

    def copy(self) -> Board:
        """Deep copy: pieces are duplicated, not shared."""
        b = Board()
        b._cells = [
            [piece.copy() if piece is not None else None for piece in row]
            for row in self._cells
        ]
        return b

    def clear(self) -> None:
        self._cells = [[None] * BOARD_SIZE for _ in range(BOARD_SIZE)]

    # -- Factory ------------------------------------------------------------

    @classmethod
    def initial(cls) -> Board:
        """Standard starting position: White on rows 0-2, Black on rows 5-7."""
        b = cls()
        for sq in cls.squares():
            if not is_dark_square(sq):
                continue
            if sq[1] < 3:
                b[sq] = Piece(WHITE)
            elif sq[1] > 4:
                b[sq] = Piece(BLACK)
        return b

    @classmethod
    def from_diagram(cls, rows: Sequence[str]) -> Board:
        """Build a board from eight 8-character rows, row ``y = 0`` first.

        ``.`` is empty, ``w``/``W`` a white pawn/king, ``b``/``B`` a black
        pawn/king.  Whitespace inside a row is ignored.
        """
        if len(rows) != BOARD_SIZE:
            raise ValueError(f"Expected {BOARD_SIZE} rows, got {len(rows)}")
        b = cls()
        for y, raw in enumerate(rows):
            row = "".join(raw.split())
            if len(row) != BOARD_SIZE:
                raise ValueError(f"Row {y} must have {BOARD_SIZE} squares: {raw!r}")
            for x, char in enumerate(row):
                if char == ".":
                    continue
                try:
                    color, is_king = _FROM_SYMBOL[char]
                except KeyError:
                    raise ValueError(f"Invalid piece character: {char!r}") from None
                b[(x, y)] = Piece(player_for(color), is_king)
        return b

    # -- Dunder helpers -----------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._cells == other._cells

    def __repr__(self) -> str:
        rows: list[str] = []
        for y, row in enumerate(self._cells):
            cells = [piece.symbol if piece else "." for piece in row]
            rows.append(f"{y} {' '.join(cells)}")
        rows.append("  0 1 2 3 4 5 6 7")
        return "\n".join(rows)
