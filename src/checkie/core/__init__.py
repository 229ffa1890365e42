"""Core domain layer — pure checkers rules with zero external dependencies.

Quick start::

    from checkie.core import BLACK, WHITE, Board, MoveGenerator

    board = Board.initial()
    gen = MoveGenerator(board, BLACK, WHITE)
    for move in gen.generate_legal_moves():
        print(move)
"""

from checkie.core.board import Board
from checkie.core.enums import Color, GameResult, SquareContents
from checkie.core.move import Move
from checkie.core.move_generator import MoveGenerator, generate_moves, legal_moves
from checkie.core.piece import Piece
from checkie.core.player import BLACK, WHITE, Player, opponent_of, player_for
from checkie.core.rules import RuleOptions, Rules
from checkie.core.types import (
    ALL_DIRECTIONS,
    BOARD_SIZE,
    Square,
    is_dark_square,
    is_valid_square,
    make_square,
    square_name,
)

__all__ = [
    # Enums
    "Color",
    "GameResult",
    "SquareContents",
    # Types / helpers
    "ALL_DIRECTIONS",
    "BOARD_SIZE",
    "Square",
    "is_dark_square",
    "is_valid_square",
    "make_square",
    "square_name",
    # Players
    "BLACK",
    "WHITE",
    "Player",
    "opponent_of",
    "player_for",
    # Domain objects
    "Board",
    "Move",
    "MoveGenerator",
    "Piece",
    "RuleOptions",
    "Rules",
    "generate_moves",
    "legal_moves",
]
