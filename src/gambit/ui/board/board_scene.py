"""BoardScene — QGraphicsScene that draws the chessboard and pieces.

The scene holds no game logic: clicks become squares handed to the
:class:`~gambit.game.controller.TurnController`, and controller events
drive every visual update.
"""

from __future__ import annotations

import logging
from collections.abc import Callable

from PyQt6.QtCore import QObject, QPointF, Qt, pyqtSignal
from PyQt6.QtGui import QBrush, QColor, QFont, QPen
from PyQt6.QtWidgets import (
    QGraphicsRectItem,
    QGraphicsScene,
    QGraphicsSceneMouseEvent,
    QGraphicsSimpleTextItem,
    QWidget,
)

from gambit.core.enums import Color, PieceType
from gambit.core.types import ALL_SQUARES, Square
from gambit.game.controller import TurnController
from gambit.game.events import (
    CastlePerformed,
    Deselected,
    GameEvent,
    MoveCommitted,
    MoveRejected,
    PromotionResolved,
    Selected,
)
from gambit.game.interfaces import AwaitingPromotionChoice
from gambit.ui.dialogs.promotion_dialog import PromotionDialog
from gambit.ui.styles.theme import BoardTheme

_LOGGER = logging.getLogger(__name__)

PromotionChooser = Callable[[Color, "QWidget | None"], "PieceType | None"]


class BoardScene(QGraphicsScene):
    """Renders the board, coordinates, highlights, and pieces.

    Signals:
        state_changed(): Emitted after a click changed the game state.
    """

    state_changed = pyqtSignal()

    TILE = 80  # scene units per square

    def __init__(
        self,
        controller: TurnController,
        parent: QObject | None = None,
        *,
        promotion_chooser: PromotionChooser | None = None,
    ) -> None:
        super().__init__(parent)
        self._controller = controller
        self._promotion_chooser = promotion_chooser or PromotionDialog.ask
        self._theme = BoardTheme.default()
        self._flipped = False
        self._show_coordinates = True
        self._show_selection = True
        self._highlight_check = True

        # Visual layers
        self._square_items: dict[Square, QGraphicsRectItem] = {}
        self._coord_items: list[QGraphicsSimpleTextItem] = []
        self._piece_items: dict[Square, QGraphicsSimpleTextItem] = {}
        self._selection_items: list[QGraphicsRectItem] = []
        self._check_items: list[QGraphicsRectItem] = []
        self._last_move_items: list[QGraphicsRectItem] = []

        controller.events.on_any.append(self._on_game_event)
        self._draw_board()
        self._sync_pieces()

    # ── Display options ──────────────────────────────────────────────────

    @property
    def controller(self) -> TurnController:
        return self._controller

    def sync(self) -> None:
        """Redraw pieces and highlights from the controller's state."""
        self._clear_items(self._selection_items)
        self._clear_items(self._last_move_items)
        self._sync_pieces()
        selected = self._controller.state.selected_square
        if selected is not None:
            self._highlight_selection(selected)
        self._highlight_last_move()
        self._refresh_check()

    def set_flipped(self, flipped: bool) -> None:
        """Show black at the bottom when *flipped*."""
        self._flipped = flipped
        self._draw_board()
        self.sync()

    def is_flipped(self) -> bool:
        return self._flipped

    def set_theme(self, theme: BoardTheme) -> None:
        self._theme = theme
        self._draw_board()
        self.sync()

    def set_show_coordinates(self, visible: bool) -> None:
        """Toggle the file letters and rank numbers."""
        self._show_coordinates = visible
        for item in self._coord_items:
            item.setVisible(visible)

    def set_show_selection(self, visible: bool) -> None:
        self._show_selection = visible
        if not visible:
            self._clear_items(self._selection_items)

    def set_highlight_check(self, enabled: bool) -> None:
        self._highlight_check = enabled
        self._refresh_check()

    def click_square(self, sq: Square) -> None:
        """Feed a click on *sq* to the controller, then settle any promotion."""
        changed = self._controller.indicate(sq)
        phase = self._controller.phase
        if isinstance(phase, AwaitingPromotionChoice):
            parent = self.views()[0] if self.views() else None
            kind = self._promotion_chooser(phase.color, parent)
            self._controller.choose_promotion(kind or PieceType.QUEEN)
            changed = True
        if changed:
            self.state_changed.emit()

    # ── Mouse interaction ────────────────────────────────────────────────

    def mousePressEvent(self, event: QGraphicsSceneMouseEvent | None) -> None:
        if event is None:
            return super().mousePressEvent(event)
        if event.button() == Qt.MouseButton.RightButton:
            if self._controller.deselect():
                self.state_changed.emit()
            return
        sq = self._pos_to_square(event.scenePos())
        if sq is not None:
            self.click_square(sq)
        super().mousePressEvent(event)

    # ── Game events ──────────────────────────────────────────────────────

    def _on_game_event(self, event: GameEvent) -> None:
        if isinstance(event, Selected):
            self._highlight_selection(event.square)
        elif isinstance(event, Deselected):
            self._clear_items(self._selection_items)
        elif isinstance(event, (MoveCommitted, CastlePerformed, PromotionResolved)):
            self._sync_pieces()
            self._highlight_last_move()
            self._refresh_check()
        elif isinstance(event, MoveRejected):
            _LOGGER.debug("Move %s -> %s not allowed", event.from_sq, event.to_sq)

    # ── Board drawing ────────────────────────────────────────────────────

    def _draw_board(self) -> None:
        """Rebuild the square tiles and edge labels for the current theme."""
        for sq_item in self._square_items.values():
            self.removeItem(sq_item)
        self._square_items.clear()
        self._clear_items(self._coord_items)

        t = self.TILE
        font = QFont("Helvetica Neue", max(9, t // 8))

        for sq in ALL_SQUARES:
            vf, vr = self._visual_coords(sq)
            is_light = (sq.file + sq.rank) % 2 == 1
            color = self._theme.light_square if is_light else self._theme.dark_square
            rect = QGraphicsRectItem(vf * t, vr * t, t, t)
            rect.setBrush(QBrush(color))
            rect.setPen(QPen(Qt.PenStyle.NoPen))
            rect.setZValue(0)
            self.addItem(rect)
            self._square_items[sq] = rect

            text_color = self._theme.coord_dark if is_light else self._theme.coord_light
            # Rank numbers (left edge), file letters (bottom edge)
            if vf == 0:
                self._add_coord(str(sq.rank + 1), font, text_color, vf * t + 2, vr * t + 1)
            if vr == 7:
                self._add_coord(
                    "abcdefgh"[sq.file], font, text_color, vf * t + t - 12, vr * t + t - 16
                )

        self.setSceneRect(0, 0, 8 * t, 8 * t)

    def _add_coord(
        self, label: str, font: QFont, color: QColor, x: float, y: float
    ) -> None:
        txt = QGraphicsSimpleTextItem(label)
        txt.setFont(font)
        txt.setBrush(QBrush(color))
        txt.setPos(x, y)
        txt.setZValue(0.3)
        txt.setVisible(self._show_coordinates)
        self.addItem(txt)
        self._coord_items.append(txt)

    # ── Pieces ───────────────────────────────────────────────────────────

    def _sync_pieces(self) -> None:
        """Re-create all piece items from the current board."""
        for item in self._piece_items.values():
            self.removeItem(item)
        self._piece_items.clear()

        t = self.TILE
        font = QFont("DejaVu Sans", int(t * 0.6))
        for sq, piece in self._controller.board.occupied():
            item = QGraphicsSimpleTextItem(piece.symbol)
            item.setFont(font)
            fill = (
                self._theme.white_piece
                if piece.color == Color.WHITE
                else self._theme.black_piece
            )
            item.setBrush(QBrush(fill))
            item.setPen(QPen(QColor(0, 0, 0)))
            bounds = item.boundingRect()
            vf, vr = self._visual_coords(sq)
            item.setPos(
                vf * t + (t - bounds.width()) / 2, vr * t + (t - bounds.height()) / 2
            )
            item.setZValue(1)
            self.addItem(item)
            self._piece_items[sq] = item

    # ── Highlights ───────────────────────────────────────────────────────

    def _highlight_selection(self, sq: Square) -> None:
        self._clear_items(self._selection_items)
        if self._show_selection:
            self._selection_items.append(
                self._make_highlight(sq, self._theme.highlight_selected)
            )

    def _highlight_last_move(self) -> None:
        self._clear_items(self._last_move_items)
        record = self._controller.state.last_move
        if record is None:
            return
        for sq in (record.from_sq, record.to_sq):
            rect = self._make_highlight(sq, self._theme.last_move)
            rect.setZValue(0.5)
            self._last_move_items.append(rect)

    def _refresh_check(self) -> None:
        """Highlight the side to move's king when it is in check."""
        self._clear_items(self._check_items)
        if not self._highlight_check or not self._controller.is_in_check():
            return
        king_sq = self._controller.board.king_square(self._controller.active_color)
        if king_sq is not None:
            rect = self._make_highlight(king_sq, self._theme.highlight_check)
            rect.setZValue(0.6)
            self._check_items.append(rect)

    def _clear_items(self, items: list) -> None:
        for item in items:
            self.removeItem(item)
        items.clear()

    # ── Coordinate helpers ───────────────────────────────────────────────

    def _visual_coords(self, sq: Square) -> tuple[int, int]:
        """Convert a board square to visual column/row."""
        if self._flipped:
            return 7 - sq.file, sq.rank
        return sq.file, 7 - sq.rank

    def _pos_to_square(self, pos: QPointF) -> Square | None:
        """Scene position → board square, ``None`` off the board."""
        t = self.TILE
        col = int(pos.x() // t)
        row = int(pos.y() // t)
        if not (0 <= col < 8 and 0 <= row < 8):
            return None
        if self._flipped:
            return Square(7 - col, row)
        return Square(col, 7 - row)

    def _make_highlight(self, sq: Square, color: QColor) -> QGraphicsRectItem:
        """Translucent overlay covering *sq*."""
        t = self.TILE
        vf, vr = self._visual_coords(sq)
        rect = QGraphicsRectItem(vf * t, vr * t, t, t)
        rect.setBrush(QBrush(color))
        rect.setPen(QPen(Qt.PenStyle.NoPen))
        rect.setZValue(0.8)
        self.addItem(rect)
        return rect
