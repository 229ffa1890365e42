"""Game management layer — turn state machine and controller.

Quick start::

    from checkie.game import GameController

    ctrl = GameController()
    ctrl.select_or_move((0, 5))
    ctrl.select_or_move((1, 4))

:class:`GameBridge` (PyQt6) lives in :mod:`checkie.game.qt_bridge` and is
imported from there so that the rules stay usable without Qt.
"""

from checkie.game.controller import GameController, GameEvents
from checkie.game.interfaces import IGame, TurnPhase
from checkie.game.state import GameState

__all__ = [
    # Interfaces
    "IGame",
    "TurnPhase",
    # Concrete
    "GameController",
    "GameEvents",
    "GameState",
]
