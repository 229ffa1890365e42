"""Abstract interfaces for the game layer.

The controller and the Qt bridge depend on :class:`IGame`, not on the
concrete turn machine.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import IntEnum, auto
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from checkie.core.enums import SquareContents
    from checkie.core.types import Square


# ── Turn FSM states ──────────────────────────────────────────────────────────


class TurnPhase(IntEnum):
    """Finite-state-machine states of a turn."""

    AWAITING_SELECTION = auto()
    PIECE_SELECTED = auto()
    GAME_OVER = auto()


# ── Abstract interfaces ─────────────────────────────────────────────────────


class IGame(ABC):
    """Boundary contract between the rules core and a board view."""

    @abstractmethod
    def select_or_move(self, target: Square) -> bool:
        """Select *target* or move the selected piece to it.

        Returns True if either a selection or a move was made.
        """

    @abstractmethod
    def undo(self) -> bool:
        """Undo the last (sub-)move. Returns True on success."""

    @abstractmethod
    def contents(self, square: Square) -> SquareContents:
        """Classification of *square*; ``INVALID`` when off the board."""

    @abstractmethod
    def is_selected(self, square: Square) -> bool:
        """Whether *square* is the current selection."""

    @property
    @abstractmethod
    def current_name(self) -> str:
        """Display name of the side to move."""

    @property
    @abstractmethod
    def other_name(self) -> str:
        """Display name of the side not to move."""

    @property
    @abstractmethod
    def is_over(self) -> bool:
        """Whether the side to move has no legal move."""
