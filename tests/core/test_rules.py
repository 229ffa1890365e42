"""Tests for Rules and RuleOptions."""

import pytest

from checkie.core.board import Board
from checkie.core.enums import Color, GameResult
from checkie.core.move import Move
from checkie.core.piece import Piece
from checkie.core.player import BLACK, WHITE
from checkie.core.rules import RuleOptions, Rules


class TestGameOver:
    def test_initial_not_over(self) -> None:
        board = Board.initial()
        assert not Rules.is_game_over(board, BLACK, WHITE)
        assert Rules.game_result(board, BLACK, WHITE) == GameResult.IN_PROGRESS

    def test_no_pieces_loses(self, board_with) -> None:
        board = board_with({(3, 3): "w"})
        assert Rules.is_game_over(board, BLACK, WHITE)
        assert Rules.game_result(board, BLACK, WHITE) == GameResult.WHITE_WINS

    def test_blocked_loses(self, board_with) -> None:
        # White pawn on (0, 6) is walled in by black pieces it cannot jump.
        board = board_with({(0, 6): "w", (1, 7): "b"})
        assert Rules.game_result(board, WHITE, BLACK) == GameResult.BLACK_WINS

    def test_has_jump(self, board_with) -> None:
        board = board_with({(2, 5): "b", (3, 4): "w", (1, 6): "b"})
        assert Rules.has_jump(board, BLACK, WHITE)
        assert not Rules.has_jump(board, WHITE, BLACK)

    def test_white_pawn_jumps_towards_higher_rows(self, board_with) -> None:
        board = board_with({(2, 5): "b", (3, 4): "w"})
        jumps = Rules.legal_moves(board, WHITE, BLACK)
        assert [(m.from_sq, m.to_sq) for m in jumps] == [((3, 4), (1, 6))]


class TestChainContinuation:
    def _jump(self, was_king: bool) -> Move:
        return Move.jump((2, 2), (0, 0), BLACK, WHITE, was_king, Piece(WHITE), (1, 1))

    def test_step_never_continues(self) -> None:
        step = Move.step((2, 5), (3, 4), BLACK, WHITE)
        assert not Rules.should_continue_chain(step, False, RuleOptions())

    def test_pawn_jump_continues(self) -> None:
        assert Rules.should_continue_chain(self._jump(False), False, RuleOptions())

    def test_king_jump_continues(self) -> None:
        assert Rules.should_continue_chain(self._jump(True), True, RuleOptions())

    def test_crowning_jump_ends_chain_by_default(self) -> None:
        assert not Rules.should_continue_chain(self._jump(False), True, RuleOptions())

    def test_crowning_jump_continues_when_enabled(self) -> None:
        options = RuleOptions(continue_after_promotion=True)
        assert Rules.should_continue_chain(self._jump(False), True, options)


class TestRuleOptions:
    def test_defaults(self) -> None:
        options = RuleOptions()
        assert options.first_player == Color.BLACK
        assert not options.continue_after_promotion

    def test_frozen(self) -> None:
        options = RuleOptions()
        with pytest.raises(AttributeError):
            options.first_player = Color.WHITE  # type: ignore[misc]
