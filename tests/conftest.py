"""Shared pytest fixtures used across the test suite."""

from __future__ import annotations

import os
import sys
from collections.abc import Callable, Iterator

import pytest

from chessai.core.board import Board
from chessai.core.enums import Color

# Linux CI runners are often headless. Force an offscreen backend only there.
if (
    sys.platform.startswith("linux")
    and "QT_QPA_PLATFORM" not in os.environ
    and "DISPLAY" not in os.environ
    and "WAYLAND_DISPLAY" not in os.environ
):
    os.environ["QT_QPA_PLATFORM"] = "offscreen"


@pytest.fixture(scope="session")
def qapp() -> Iterator[object]:
    """Provide a singleton QCoreApplication for worker tests."""
    from PyQt6.QtCore import QCoreApplication

    app = QCoreApplication.instance()
    if app is None:
        app = QCoreApplication([])
    yield app


def color_mirror(board: Board) -> Board:
    """Swap every piece's owner and flip the board top to bottom."""
    mirrored = Board()
    for (row, col), piece in board.occupied():
        mirrored[(7 - row, col)] = piece.with_owner(piece.owner.opposite)
    return mirrored


@pytest.fixture
def mirror() -> Callable[[Board], Board]:
    """Colour-mirror transform: owners swapped, rows flipped."""
    return color_mirror


@pytest.fixture(params=[Color.WHITE, Color.BLACK], ids=str)
def any_color(request: pytest.FixtureRequest) -> Color:
    return request.param
