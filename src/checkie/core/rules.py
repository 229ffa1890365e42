"""High-level rules: game-over detection, result, and rule options."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from checkie.core.enums import Color, GameResult
from checkie.core.move_generator import MoveGenerator

if TYPE_CHECKING:
    from checkie.core.board import Board
    from checkie.core.move import Move
    from checkie.core.player import Player


@dataclass(frozen=True, slots=True)
class RuleOptions:
    """Tunable rule variations; the defaults are the standard game.

    Args:
        continue_after_promotion: When False, a pawn crowned by a jump ends
            the turn.  When True, further jumps from the landing square
            are always looked for.
        first_player: Side that moves first.
    """

    continue_after_promotion: bool = False
    first_player: Color = Color.BLACK


class Rules:
    """Static rule-checker over a board and the side to move."""

    @staticmethod
    def legal_moves(board: Board, current: Player, other: Player) -> tuple[Move, ...]:
        return MoveGenerator(board, current, other).generate_legal_moves()

    @staticmethod
    def has_jump(board: Board, current: Player, other: Player) -> bool:
        gen = MoveGenerator(board, current, other)
        return len(gen.generate_moves(require_jumps=True)) > 0

    @staticmethod
    def is_game_over(board: Board, current: Player, other: Player) -> bool:
        return len(Rules.legal_moves(board, current, other)) == 0

    @staticmethod
    def result_for(legal_moves: tuple[Move, ...], current: Player) -> GameResult:
        """Result given the legal-move set of the side to move.

        A side with no legal move loses.
        """
        if legal_moves:
            return GameResult.IN_PROGRESS
        if current.color == Color.WHITE:
            return GameResult.BLACK_WINS
        return GameResult.WHITE_WINS

    @staticmethod
    def game_result(board: Board, current: Player, other: Player) -> GameResult:
        """Determine the current game result."""
        return Rules.result_for(Rules.legal_moves(board, current, other), current)

    @staticmethod
    def should_continue_chain(
        move: Move, is_king_now: bool, options: RuleOptions
    ) -> bool:
        """Whether to look for further jumps after *move* in the same turn."""
        if not move.is_jump:
            return False
        if options.continue_after_promotion:
            return True
        return move.was_king or not is_king_now
