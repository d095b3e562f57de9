"""Modal chooser for the piece a promoting pawn becomes."""

from __future__ import annotations

from PyQt6.QtCore import Qt
from PyQt6.QtGui import QFont
from PyQt6.QtWidgets import (
    QButtonGroup,
    QDialog,
    QGridLayout,
    QLabel,
    QPushButton,
    QWidget,
)

from gambit.core.enums import PROMOTION_TYPES, Color, PieceType
from gambit.core.piece import Piece

_BUTTON_SIZE = 64


class PromotionDialog(QDialog):
    """One glyph button per promotion type, drawn in the pawn's colour.

    Closing the dialog without a click counts as a cancel.
    """

    def __init__(self, color: Color, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.setModal(True)
        self.setWindowTitle("Promotion")
        self.setWindowFlag(Qt.WindowType.WindowContextHelpButtonHint, False)

        self._selected = PieceType.QUEEN
        self._group = QButtonGroup(self)
        self._buttons: dict[PieceType, QPushButton] = {}

        grid = QGridLayout(self)
        prompt = QLabel(f"Promote {color} pawn to:")
        prompt.setAlignment(Qt.AlignmentFlag.AlignCenter)
        grid.addWidget(prompt, 0, 0, 1, len(PROMOTION_TYPES))

        glyph_font = QFont("DejaVu Sans", _BUTTON_SIZE // 2)
        for column, kind in enumerate(PROMOTION_TYPES):
            btn = QPushButton(Piece(color, kind).symbol)
            btn.setFont(glyph_font)
            btn.setFixedSize(_BUTTON_SIZE, _BUTTON_SIZE)
            btn.setToolTip(kind.name.capitalize())
            self._group.addButton(btn, int(kind))
            grid.addWidget(btn, 1, column)
            self._buttons[kind] = btn

        self._group.idClicked.connect(self._on_clicked)

    def _on_clicked(self, button_id: int) -> None:
        self._selected = PieceType(button_id)
        self.accept()

    @property
    def selected(self) -> PieceType:
        return self._selected

    @staticmethod
    def ask(color: Color, parent: QWidget | None = None) -> PieceType | None:
        """Run the dialog; ``None`` when the user closes it."""
        dlg = PromotionDialog(color, parent)
        if dlg.exec() != QDialog.DialogCode.Accepted:
            return None
        return dlg.selected
