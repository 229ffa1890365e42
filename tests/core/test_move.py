"""Tests for Player, Piece and Move value semantics."""

import pytest

from checkie.core.enums import Color, SquareContents
from checkie.core.move import Move
from checkie.core.piece import Piece
from checkie.core.player import BLACK, WHITE, Player, opponent_of, player_for


class TestPlayer:
    def test_directions(self) -> None:
        assert WHITE.pawn_directions == ((-1, 1), (1, 1))
        assert BLACK.pawn_directions == ((-1, -1), (1, -1))

    def test_promotion_rows(self) -> None:
        assert WHITE.promotion_row == 7
        assert BLACK.promotion_row == 0

    def test_identity_equality(self) -> None:
        lookalike = Player(Color.WHITE, "White", forward=1, promotion_row=7)
        assert lookalike != WHITE
        assert WHITE == WHITE

    def test_lookups(self) -> None:
        assert player_for(Color.BLACK) is BLACK
        assert opponent_of(BLACK) is WHITE
        assert opponent_of(WHITE) is BLACK


class TestPiece:
    def test_contents(self) -> None:
        assert Piece(WHITE).contents == SquareContents.WHITE_PAWN
        assert Piece(WHITE, True).contents == SquareContents.WHITE_KING
        assert Piece(BLACK).contents == SquareContents.BLACK_PAWN
        assert Piece(BLACK, True).contents == SquareContents.BLACK_KING

    def test_promote(self) -> None:
        piece = Piece(BLACK)
        piece.promote()
        assert piece.is_king
        assert piece.symbol == "B"

    def test_copy_is_detached(self) -> None:
        piece = Piece(WHITE)
        clone = piece.copy()
        assert clone == piece
        clone.promote()
        assert not piece.is_king

    def test_owner_identity_in_equality(self) -> None:
        lookalike = Player(Color.WHITE, "White", forward=1, promotion_row=7)
        assert Piece(lookalike) != Piece(WHITE)


class TestMove:
    def test_step(self) -> None:
        move = Move.step((0, 5), (1, 4), BLACK, WHITE)
        assert not move.is_jump
        assert move.captured is None
        assert str(move) == "Black 0,5 to 1,4"

    def test_jump(self) -> None:
        move = Move.jump((0, 6), (2, 4), BLACK, WHITE, False, Piece(WHITE), (1, 5))
        assert move.is_jump
        assert str(move) == "Black jump 0,6 to 2,4 (captures 1,5)"

    def test_half_jump_rejected(self) -> None:
        with pytest.raises(ValueError):
            Move((0, 6), (2, 4), BLACK, WHITE, captured_sq=(1, 5))

    def test_frozen(self) -> None:
        move = Move.step((0, 5), (1, 4), BLACK, WHITE)
        with pytest.raises(AttributeError):
            move.to_sq = (3, 3)  # type: ignore[misc]

    def test_snapshot_ignored_by_equality(self) -> None:
        move = Move.step((0, 5), (1, 4), BLACK, WHITE)
        stamped = move.with_snapshot((move,))
        assert stamped == move
        assert stamped.legal_moves == (move,)
        assert move.legal_moves == ()

    def test_jump_is_hashable(self) -> None:
        move = Move.jump((0, 6), (2, 4), BLACK, WHITE, False, Piece(WHITE), (1, 5))
        same = Move.jump((0, 6), (2, 4), BLACK, WHITE, False, Piece(WHITE), (1, 5))
        assert hash(move) == hash(same)
        assert len({move, same}) == 1
