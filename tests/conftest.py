"""Shared pytest fixtures: headless Qt and controller factories."""

from __future__ import annotations

import os
import sys
from collections.abc import Callable, Iterator

import pytest

# Headless Linux (CI) has no display server; use Qt's offscreen platform there.
_HEADLESS = sys.platform.startswith("linux") and not (
    os.environ.get("DISPLAY") or os.environ.get("WAYLAND_DISPLAY")
)
if _HEADLESS:
    os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")


@pytest.fixture(scope="session")
def qapp() -> Iterator[object]:
    """The one QApplication every UI test shares."""
    from PyQt6.QtWidgets import QApplication

    yield QApplication.instance() or QApplication([])


@pytest.fixture
def controller_from_fen() -> Callable[[str], object]:
    """Build a TurnController positioned from a FEN string."""
    from gambit.core.notation import parse_fen
    from gambit.game.controller import TurnController

    def build(fen: str) -> TurnController:
        board, side = parse_fen(fen)
        return TurnController(board, side)

    return build


@pytest.fixture(autouse=True)
def _close_top_level_widgets(request: pytest.FixtureRequest) -> Iterator[None]:
    """Close windows a UI test left open so they don't leak into the next."""
    if "ui" not in request.path.parts:
        yield
        return

    app = request.getfixturevalue("qapp")
    yield
    for widget in app.topLevelWidgets():
        widget.close()
    app.processEvents()
