"""Shared pytest fixtures used across the test suite."""

from __future__ import annotations

import os
import sys
from collections.abc import Callable, Iterator

import pytest

from checkie.core.board import Board

# Linux CI runners are often headless. Force an offscreen backend only there.
if (
    sys.platform.startswith("linux")
    and "QT_QPA_PLATFORM" not in os.environ
    and "DISPLAY" not in os.environ
    and "WAYLAND_DISPLAY" not in os.environ
):
    os.environ["QT_QPA_PLATFORM"] = "offscreen"


BoardFactory = Callable[[dict[tuple[int, int], str]], Board]


@pytest.fixture
def board_with() -> BoardFactory:
    """Factory for a board holding only the given pieces.

    Keys are squares, values diagram characters (`w`, `W`, `b`, `B`).
    """

    def _make(pieces: dict[tuple[int, int], str]) -> Board:
        rows = [["."] * 8 for _ in range(8)]
        for (x, y), char in pieces.items():
            rows[y][x] = char
        return Board.from_diagram(["".join(r) for r in rows])

    return _make


@pytest.fixture(scope="session")
def qapp() -> Iterator[object]:
    """Provide a singleton QCoreApplication for bridge tests."""
    from PyQt6.QtCore import QCoreApplication

    app = QCoreApplication.instance()
    if app is None:
        app = QCoreApplication([])
    yield app
