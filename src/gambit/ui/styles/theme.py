"""Board palettes and the application stylesheet."""

from __future__ import annotations

from dataclasses import dataclass

from PyQt6.QtGui import QColor


@dataclass(frozen=True)
class BoardTheme:
    """Colours used by :class:`~gambit.ui.board.board_scene.BoardScene`."""

    light_square: QColor
    dark_square: QColor
    highlight_selected: QColor
    highlight_check: QColor
    last_move: QColor
    coord_light: QColor  # labels drawn on dark squares
    coord_dark: QColor  # labels drawn on light squares
    white_piece: QColor
    black_piece: QColor

    @classmethod
    def _from_squares(cls, light: QColor, dark: QColor) -> BoardTheme:
        # Coordinates take the colour of the opposite square.
        return cls(
            light_square=light,
            dark_square=dark,
            highlight_selected=QColor(246, 246, 105, 110),
            highlight_check=QColor(220, 40, 40, 130),
            last_move=QColor(170, 162, 58, 100),
            coord_light=dark,
            coord_dark=light,
            white_piece=QColor(250, 250, 250),
            black_piece=QColor(24, 24, 24),
        )

    @classmethod
    def default(cls) -> BoardTheme:
        return cls._from_squares(QColor(238, 216, 178), QColor(174, 129, 94))

    @classmethod
    def blue(cls) -> BoardTheme:
        return cls._from_squares(QColor(220, 228, 235), QColor(122, 150, 176))

    @classmethod
    def green(cls) -> BoardTheme:
        return cls._from_squares(QColor(235, 236, 208), QColor(119, 153, 84))

    @classmethod
    def by_name(cls, name: str) -> BoardTheme:
        """Preset for *name*; unknown names get the classic palette."""
        factory = _PRESETS.get(name, BoardTheme.default)
        return factory()


_PRESETS = {
    "Classic": BoardTheme.default,
    "Blue": BoardTheme.blue,
    "Green": BoardTheme.green,
}
THEME_NAMES: tuple[str, ...] = tuple(_PRESETS)


# ── Application-wide QSS ────────────────────────────────────────────────────

APP_STYLE = """
QMainWindow, QMenuBar, QMenu {
    background: #262626;
    color: #dcdcdc;
}
QMenuBar::item:selected, QMenu::item:selected {
    background: #35506b;
}
QStatusBar, QLabel {
    color: #dcdcdc;
}
QDialog {
    background: #303030;
}
QPushButton {
    background: #3a3a3a;
    border: 1px solid #4d4d4d;
    border-radius: 6px;
}
QPushButton:hover {
    background: #4a4a4a;
}
"""
