"""Move generation: single steps and single jumps for the side to move."""

from __future__ import annotations

from typing import TYPE_CHECKING

from checkie.core.move import Move
from checkie.core.types import ALL_DIRECTIONS, Direction, Square, offset

if TYPE_CHECKING:
    from checkie.core.board import Board
    from checkie.core.player import Player


class MoveGenerator:
    """Enumerates moves for *current* on *board*; never mutates the board.

    Squares are visited row-major (y outer, x inner) and each piece's
    directions in a fixed order, so the output order is deterministic.
    """

    __slots__ = ("_board", "_current", "_other")

    def __init__(self, board: Board, current: Player, other: Player) -> None:
        self._board = board
        self._current = current
        self._other = other

    # -- Public API ---------------------------------------------------------

    def generate_legal_moves(self) -> tuple[Move, ...]:
        """Jumps if any exist (mandatory capture), otherwise steps."""
        jumps = self.generate_moves(require_jumps=True)
        if jumps:
            return jumps
        return self.generate_moves(require_jumps=False)

    def generate_moves(self, require_jumps: bool) -> tuple[Move, ...]:
        """All jumps (``require_jumps``) or all steps for the side to move."""
        moves: list[Move] = []
        from_square = self.jumps_from if require_jumps else self.non_jumps_from
        for sq in self._board.pieces(self._current):
            moves.extend(from_square(sq))
        return tuple(moves)

    def non_jumps_from(self, sq: Square) -> list[Move]:
        piece = self._board[sq]
        if piece is None or piece.owner is not self._current:
            return []
        moves: list[Move] = []
        for d in self._directions(piece.is_king):
            target = offset(sq, d)
            if self._board.is_empty(target):
                moves.append(
                    Move.step(sq, target, self._current, self._other, piece.is_king)
                )
        return moves

    def jumps_from(self, sq: Square) -> list[Move]:
        piece = self._board[sq]
        if piece is None or piece.owner is not self._current:
            return []
        moves: list[Move] = []
        for d in self._directions(piece.is_king):
            if not self.can_jump(sq, d):
                continue
            cap_sq = offset(sq, d)
            captured = self._board[cap_sq]
            assert captured is not None
            moves.append(
                Move.jump(
                    sq,
                    offset(sq, d, 2),
                    self._current,
                    self._other,
                    piece.is_king,
                    captured,
                    cap_sq,
                )
            )
        return moves

    def can_jump(self, sq: Square, direction: Direction) -> bool:
        """Whether the adjacent square holds an enemy and the next one is free.

        Direction legality for the moving piece is not checked here.
        """
        if not self._board.is_empty(offset(sq, direction, 2)):
            return False
        enemy = self._board[offset(sq, direction)]
        return enemy is not None and enemy.owner is self._other

    # -- Internal helpers ---------------------------------------------------

    def _directions(self, is_king: bool) -> tuple[Direction, ...]:
        if is_king:
            return ALL_DIRECTIONS
        return self._current.pawn_directions


def generate_moves(
    board: Board, current: Player, other: Player, require_jumps: bool
) -> tuple[Move, ...]:
    """All jumps or all steps for *current*; see :class:`MoveGenerator`."""
    return MoveGenerator(board, current, other).generate_moves(require_jumps)


def legal_moves(board: Board, current: Player, other: Player) -> tuple[Move, ...]:
    """Legal-move set for *current* with mandatory capture applied."""
    return MoveGenerator(board, current, other).generate_legal_moves()
