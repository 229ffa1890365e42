"""GameController — the session facade a board view talks to.

Coordinates: GameState and the listeners of the view layer.
Emits events via simple callbacks so the UI / tests can subscribe.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field

from checkie.core.board import Board
from checkie.core.enums import GameResult
from checkie.core.move import Move
from checkie.core.rules import RuleOptions
from checkie.core.types import Square
from checkie.game.state import GameState

_LOGGER = logging.getLogger(__name__)

# ── Event definitions ────────────────────────────────────────────────────────

MoveCallback = Callable[[Move, GameState], None]
SelectionCallback = Callable[[Square | None], None]
UndoCallback = Callable[[Move], None]
GameOverCallback = Callable[[GameResult], None]


@dataclass
class GameEvents:
    """Observable callbacks. Multiple handlers per event."""

    on_move: list[MoveCallback] = field(default_factory=list)
    on_selection_changed: list[SelectionCallback] = field(default_factory=list)
    on_undo: list[UndoCallback] = field(default_factory=list)
    on_game_over: list[GameOverCallback] = field(default_factory=list)


# ── Controller ───────────────────────────────────────────────────────────────


class GameController:
    """Forwards square clicks and undo requests to a :class:`GameState`
    and notifies listeners of what changed.

    Thread-safety: methods are designed to be called from a single thread
    (the main/UI thread).
    """

    __slots__ = ("_state", "_options", "events")

    def __init__(self, options: RuleOptions | None = None) -> None:
        self._options = options if options is not None else RuleOptions()
        self._state = GameState(options=self._options)
        self.events = GameEvents()

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def state(self) -> GameState:
        return self._state

    # ── Commands ─────────────────────────────────────────────────────────

    def new_game(
        self,
        options: RuleOptions | None = None,
        board: Board | None = None,
    ) -> None:
        """Start over from the standard layout or from *board*."""
        if options is not None:
            self._options = options
        self._state = GameState(board=board, options=self._options)
        _LOGGER.debug("New game, %s to move", self._state.current_name)
        self._emit_selection(None)

    def select_or_move(self, square: Square) -> bool:
        state = self._state
        history_before = state.ply_count
        selected_before = state.selected_square

        if not state.select_or_move(square):
            return False

        if state.ply_count > history_before:
            self._emit_move(state.move_history[-1])
            if state.is_over:
                self._emit_game_over(state.result)
        if state.selected_square != selected_before:
            self._emit_selection(state.selected_square)
        return True

    def undo(self) -> bool:
        state = self._state
        if not state.move_history:
            return False
        undone = state.move_history[-1]
        if not state.undo():
            return False
        for cb in self.events.on_undo:
            cb(undone)
        self._emit_selection(state.selected_square)
        return True

    # ── Internal helpers ─────────────────────────────────────────────────

    def _emit_move(self, move: Move) -> None:
        for cb in self.events.on_move:
            cb(move, self._state)

    def _emit_selection(self, square: Square | None) -> None:
        for cb in self.events.on_selection_changed:
            cb(square)

    def _emit_game_over(self, result: GameResult) -> None:
        for cb in self.events.on_game_over:
            cb(result)
