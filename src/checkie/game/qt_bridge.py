"""Qt bridge exposing a :class:`GameController` to board widgets."""

from __future__ import annotations

from PyQt6.QtCore import QObject, pyqtSignal, pyqtSlot

from checkie.core.enums import GameResult
from checkie.core.move import Move
from checkie.core.rules import RuleOptions
from checkie.core.types import Square
from checkie.game.controller import GameController
from checkie.game.state import GameState

_WINNER_NAMES: dict[GameResult, str] = {
    GameResult.WHITE_WINS: "White",
    GameResult.BLACK_WINS: "Black",
}


class GameBridge(QObject):
    """GUI-thread adapter: slots take clicks, signals tell the view to redraw.

    The view re-reads squares through :attr:`state` after ``board_changed``.
    """

    board_changed = pyqtSignal()
    selection_changed = pyqtSignal(object)
    move_played = pyqtSignal(str)
    move_rejected = pyqtSignal(int, int)
    game_over = pyqtSignal(str)

    __slots__ = ("_controller",)

    def __init__(self, options: RuleOptions | None = None) -> None:
        super().__init__()
        self._controller = GameController(options)
        self._connect_events()

    @property
    def controller(self) -> GameController:
        return self._controller

    @property
    def state(self) -> GameState:
        return self._controller.state

    @pyqtSlot(int, int)
    def select_square(self, x: int, y: int) -> None:
        """Handle a click on square ``(x, y)``."""
        if not self._controller.select_or_move((x, y)):
            self.move_rejected.emit(x, y)

    @pyqtSlot()
    def undo(self) -> None:
        if self._controller.undo():
            self.board_changed.emit()

    @pyqtSlot()
    def new_game(self) -> None:
        self._controller.new_game()
        self.board_changed.emit()

    # ── Controller callbacks ─────────────────────────────────────────────

    def _connect_events(self) -> None:
        events = self._controller.events
        events.on_move.append(self._on_move)
        events.on_selection_changed.append(self._on_selection_changed)
        events.on_game_over.append(self._on_game_over)

    def _on_move(self, move: Move, _state: GameState) -> None:
        self.move_played.emit(str(move))
        self.board_changed.emit()

    def _on_selection_changed(self, square: Square | None) -> None:
        self.selection_changed.emit(square)

    def _on_game_over(self, result: GameResult) -> None:
        self.game_over.emit(_WINNER_NAMES.get(result, ""))
