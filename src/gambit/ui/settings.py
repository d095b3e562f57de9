"""User-configurable settings and how they reach the widgets."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from gambit.ui.styles.theme import BoardTheme

if TYPE_CHECKING:
    from gambit.ui.board.board_scene import BoardScene


@dataclass
class AppSettings:
    """All user-configurable settings."""

    # Board
    board_theme: str = "Classic"
    flipped: bool = False
    show_coordinates: bool = True
    show_selection: bool = True
    highlight_check: bool = True

    # Diagnostics
    log_level: str = "WARNING"


def apply_settings(scene: BoardScene, settings: AppSettings) -> None:
    """Push *settings* into the board scene."""
    scene.set_theme(BoardTheme.by_name(settings.board_theme))
    scene.set_flipped(settings.flipped)
    scene.set_show_coordinates(settings.show_coordinates)
    scene.set_show_selection(settings.show_selection)
    scene.set_highlight_check(settings.highlight_check)
