"""Turn state machine — selection, move application, chained jumps, undo."""

from __future__ import annotations

import logging

from checkie.core.board import Board
from checkie.core.enums import GameResult, SquareContents
from checkie.core.move import Move
from checkie.core.move_generator import MoveGenerator
from checkie.core.player import Player, opponent_of, player_for
from checkie.core.rules import RuleOptions, Rules
from checkie.core.types import Square, is_valid_square, square_name
from checkie.game.interfaces import IGame, TurnPhase

_LOGGER = logging.getLogger(__name__)


class GameState(IGame):
    """Owns the board, both players, the legal-move set and the history.

    Driven by one call per user interaction; every operation is total over
    arbitrary input and reports rejection with ``False`` instead of raising.

    Args:
        board: Starting position (default: the standard layout).  The
            state takes ownership of it.
        options: Rule variations.
        current: Side to move first (default: ``options.first_player``).
    """

    __slots__ = (
        "_board",
        "_options",
        "_current",
        "_other",
        "_legal_moves",
        "_selected",
        "_history",
    )

    def __init__(
        self,
        board: Board | None = None,
        options: RuleOptions | None = None,
        current: Player | None = None,
    ) -> None:
        self._options = options if options is not None else RuleOptions()
        self._board = board if board is not None else Board.initial()
        self._current = (
            current if current is not None else player_for(self._options.first_player)
        )
        self._other = opponent_of(self._current)
        self._selected: Square | None = None
        self._history: list[Move] = []
        self._legal_moves = self._generator().generate_legal_moves()

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def board(self) -> Board:
        return self._board

    @property
    def options(self) -> RuleOptions:
        return self._options

    @property
    def current_player(self) -> Player:
        return self._current

    @property
    def other_player(self) -> Player:
        return self._other

    @property
    def current_name(self) -> str:
        return self._current.name

    @property
    def other_name(self) -> str:
        return self._other.name

    @property
    def legal_moves(self) -> tuple[Move, ...]:
        return self._legal_moves

    @property
    def move_history(self) -> tuple[Move, ...]:
        return tuple(self._history)

    @property
    def ply_count(self) -> int:
        return len(self._history)

    @property
    def selected_square(self) -> Square | None:
        return self._selected

    @property
    def is_over(self) -> bool:
        return not self._legal_moves

    @property
    def result(self) -> GameResult:
        return Rules.result_for(self._legal_moves, self._current)

    @property
    def phase(self) -> TurnPhase:
        if self.is_over:
            return TurnPhase.GAME_OVER
        if self._selected is not None:
            return TurnPhase.PIECE_SELECTED
        return TurnPhase.AWAITING_SELECTION

    # ── Queries ──────────────────────────────────────────────────────────

    def contents(self, square: Square) -> SquareContents:
        if not is_valid_square(square):
            return SquareContents.INVALID
        piece = self._board[square]
        if piece is None:
            return SquareContents.NONE
        return piece.contents

    def is_selected(self, square: Square) -> bool:
        return self._selected is not None and self._selected == square

    def legal_sources(self) -> list[Square]:
        """Distinct start squares of the legal moves, in generation order."""
        return list(dict.fromkeys(m.from_sq for m in self._legal_moves))

    def legal_targets(self) -> list[Square]:
        """Destinations reachable from the selected square."""
        if self._selected is None:
            return []
        return [m.to_sq for m in self._legal_moves if m.from_sq == self._selected]

    # ── Selection / moves ────────────────────────────────────────────────

    def select_or_move(self, target: Square) -> bool:
        """Clicking another legal source while one is selected re-selects it."""
        if not is_valid_square(target):
            _LOGGER.debug("Rejected off-board target %r", target)
            return False
        if self._try_select(target):
            return True
        if self._selected is None:
            _LOGGER.debug("Rejected selection of %r", target)
            return False
        move = self._find_move(self._selected, target)
        if move is None:
            _LOGGER.debug(
                "Rejected move %s -> %r", square_name(self._selected), target
            )
            return False
        self._do_move(move)
        return True

    def undo(self) -> bool:
        if not self._history:
            return False

        last = self._history.pop()
        self._current = last.mover
        self._other = last.opponent
        self._legal_moves = last.legal_moves

        piece = self._board.move_piece(last.to_sq, last.from_sq)
        piece.is_king = last.was_king
        if last.captured is not None and last.captured_sq is not None:
            self._board[last.captured_sq] = last.captured.copy()

        self._selected = None
        self._try_select(last.from_sq)
        _LOGGER.debug("Undid %s", last)
        return True

    # ── Internal helpers ─────────────────────────────────────────────────

    def _generator(self) -> MoveGenerator:
        return MoveGenerator(self._board, self._current, self._other)

    def _try_select(self, square: Square) -> bool:
        for move in self._legal_moves:
            if move.from_sq == square:
                self._selected = move.from_sq
                return True
        return False

    def _find_move(self, from_sq: Square, to_sq: Square) -> Move | None:
        for move in self._legal_moves:
            if move.from_sq == from_sq and move.to_sq == to_sq:
                return move
        return None

    def _do_move(self, move: Move) -> None:
        self._history.append(move.with_snapshot(self._legal_moves))
        piece = self._board.move_piece(move.from_sq, move.to_sq)
        if move.to_sq[1] == self._current.promotion_row:
            piece.promote()
        _LOGGER.debug("Played %s", move)

        if move.captured_sq is not None:
            self._board[move.captured_sq] = None
            if Rules.should_continue_chain(move, piece.is_king, self._options):
                jumps = tuple(self._generator().jumps_from(move.to_sq))
                if jumps:
                    self._legal_moves = jumps
                    self._selected = move.to_sq
                    _LOGGER.debug(
                        "%s continues jumping from %s",
                        self._current.name,
                        square_name(move.to_sq),
                    )
                    return
        self._end_turn()

    def _end_turn(self) -> None:
        self._current, self._other = self._other, self._current
        self._legal_moves = self._generator().generate_legal_moves()
        self._selected = None
        if self.is_over:
            _LOGGER.info(
                "Game over: %s has no legal move (%s)",
                self._current.name,
                self.result.name,
            )
