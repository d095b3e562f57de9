"""Tests for applying app settings to the board scene."""

from __future__ import annotations

from gambit.core.types import E2
from gambit.game.controller import TurnController
from gambit.ui.board.board_scene import BoardScene
from gambit.ui.settings import AppSettings, apply_settings
from gambit.ui.styles.theme import THEME_NAMES, BoardTheme


def test_defaults() -> None:
    settings = AppSettings()
    assert settings.board_theme == "Classic"
    assert not settings.flipped
    assert settings.log_level == "WARNING"


def test_apply_theme_by_name() -> None:
    scene = BoardScene(TurnController())
    apply_settings(scene, AppSettings(board_theme="Blue"))
    assert scene._theme == BoardTheme.blue()


def test_unknown_theme_falls_back_to_default() -> None:
    assert BoardTheme.by_name("Neon") == BoardTheme.default()


def test_every_listed_theme_resolves() -> None:
    assert BoardTheme.by_name(THEME_NAMES[0]) == BoardTheme.default()
    assert BoardTheme.by_name("Green") == BoardTheme.green()


def test_apply_hides_selection() -> None:
    scene = BoardScene(TurnController())
    apply_settings(scene, AppSettings(show_selection=False))
    scene.click_square(E2)
    assert scene._selection_items == []


def test_apply_disables_check_highlight() -> None:
    scene = BoardScene(TurnController())
    apply_settings(scene, AppSettings(highlight_check=False))
    assert not scene._highlight_check
