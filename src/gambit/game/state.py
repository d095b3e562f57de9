"""Game state aggregate — board, side to move, phase and move history."""

from __future__ import annotations

from dataclasses import dataclass, field

from gambit.core.board import BoardState
from gambit.core.castling import CastleSquares
from gambit.core.enums import Color, PieceType
from gambit.core.piece import Piece
from gambit.core.types import Square
from gambit.game.interfaces import AwaitingSelection, GamePhase, PieceSelected


@dataclass
class MoveRecord:
    """A single entry in the move history."""

    piece: Piece
    from_sq: Square
    to_sq: Square
    captured: Piece | None = None
    castle: CastleSquares | None = None
    promotion: PieceType | None = None
    gives_check: bool = False

    @property
    def was_capture(self) -> bool:
        return self.captured is not None


@dataclass
class GameState:
    """Everything the turn controller owns.

    This is a pure data class — no validation, no UI.
    """

    board: BoardState = field(default_factory=BoardState.initial)
    active_color: Color = Color.WHITE
    phase: GamePhase = field(default_factory=AwaitingSelection)
    move_history: list[MoveRecord] = field(default_factory=list)

    def toggle_active_color(self) -> None:
        self.active_color = self.active_color.opposite

    # ── Query helpers ────────────────────────────────────────────────────

    @property
    def selected_square(self) -> Square | None:
        if isinstance(self.phase, PieceSelected):
            return self.phase.square
        return None

    @property
    def ply_count(self) -> int:
        """Number of half-moves played."""
        return len(self.move_history)

    @property
    def last_move(self) -> MoveRecord | None:
        return self.move_history[-1] if self.move_history else None
