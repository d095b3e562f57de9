"""MainWindow — top-level window assembling the board and status bar."""

from __future__ import annotations

from PyQt6.QtGui import QAction
from PyQt6.QtWidgets import QLabel, QMainWindow, QStatusBar, QVBoxLayout, QWidget

from gambit.game.controller import TurnController
from gambit.game.interfaces import AwaitingPromotionChoice
from gambit.ui.board.board_scene import BoardScene
from gambit.ui.board.board_view import BoardView
from gambit.ui.settings import AppSettings, apply_settings


class MainWindow(QMainWindow):
    """Main application window for Gambit."""

    def __init__(
        self,
        settings: AppSettings | None = None,
        controller: TurnController | None = None,
    ) -> None:
        super().__init__()
        self.setWindowTitle("Gambit")
        self.setMinimumSize(480, 520)
        self.resize(720, 760)

        self._settings = settings or AppSettings()
        self._controller = controller or TurnController()
        self._scene = BoardScene(self._controller, self)

        self._setup_ui()
        self._setup_menu()
        self._scene.state_changed.connect(self._update_status)

        apply_settings(self._scene, self._settings)
        self._update_status()

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def controller(self) -> TurnController:
        return self._controller

    @property
    def board_scene(self) -> BoardScene:
        return self._scene

    @property
    def status_text(self) -> str:
        return self._status_label.text()

    # ── UI setup ─────────────────────────────────────────────────────────

    def _setup_ui(self) -> None:
        central = QWidget()
        self.setCentralWidget(central)
        root = QVBoxLayout(central)
        root.setContentsMargins(6, 6, 6, 6)

        self._board_view = BoardView(self._scene)
        root.addWidget(self._board_view)

        self._status = QStatusBar()
        self.setStatusBar(self._status)
        self._status_label = QLabel()
        self._status.addWidget(self._status_label)

    def _setup_menu(self) -> None:
        menu_bar = self.menuBar()
        assert menu_bar is not None
        menu_game = menu_bar.addMenu("&Game")
        assert menu_game is not None

        self._act_new_game = QAction("New game", self)
        self._act_new_game.setShortcut("Ctrl+N")
        self._act_new_game.triggered.connect(self.new_game)
        menu_game.addAction(self._act_new_game)

        self._act_flip = QAction("Flip board", self)
        self._act_flip.setShortcut("Ctrl+F")
        self._act_flip.triggered.connect(self.flip_board)
        menu_game.addAction(self._act_flip)

    # ── Actions ──────────────────────────────────────────────────────────

    def new_game(self) -> None:
        self._controller.new_game()
        self._scene.sync()
        self._update_status()

    def flip_board(self) -> None:
        self._settings.flipped = not self._scene.is_flipped()
        self._scene.set_flipped(self._settings.flipped)

    def _update_status(self) -> None:
        ctrl = self._controller
        side = str(ctrl.active_color).capitalize()
        if isinstance(ctrl.phase, AwaitingPromotionChoice):
            text = "Choose a promotion piece"
        elif ctrl.is_in_check():
            text = f"{side} to move (check)"
        else:
            text = f"{side} to move"
        self._status_label.setText(text)
