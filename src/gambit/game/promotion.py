"""Pawn promotion — the suspended state between a pawn landing on its last
rank and the player naming its replacement.
"""

from __future__ import annotations

import logging

from gambit.core.enums import PROMOTION_TYPES, PieceType
from gambit.core.piece import Piece
from gambit.core.threats import is_in_check
from gambit.core.types import Square
from gambit.game.events import GameEvents, PromotionResolved
from gambit.game.interfaces import AwaitingPromotionChoice, AwaitingSelection
from gambit.game.state import GameState

_LOGGER = logging.getLogger(__name__)


def needs_promotion(piece: Piece, sq: Square) -> bool:
    """Whether *piece* standing on *sq* must be promoted."""
    return piece.piece_type == PieceType.PAWN and sq.rank == piece.color.promotion_rank


class PromotionResolver:
    """Replaces a promoted pawn once a piece type has been chosen."""

    __slots__ = ("_events",)

    def __init__(self, events: GameEvents) -> None:
        self._events = events

    def resolve(self, state: GameState, kind: PieceType) -> bool:
        """Swap the waiting pawn for *kind*.

        Returns ``False`` when no promotion is pending. Raises
        ``ValueError`` for a kind a pawn cannot become.
        """
        phase = state.phase
        if not isinstance(phase, AwaitingPromotionChoice):
            return False
        if kind not in PROMOTION_TYPES:
            raise ValueError(f"Cannot promote to {kind.name}")

        board = state.board
        pawn = board[phase.square]
        assert pawn is not None, "promotion square must hold the pawn"
        board[phase.square] = pawn.promoted_to(kind)
        board.clear_moved(phase.square)
        state.phase = AwaitingSelection()

        record = state.last_move
        if record is not None and record.to_sq == phase.square:
            record.promotion = kind
            # The new piece may itself give check.
            record.gives_check = is_in_check(board, phase.color.opposite)

        _LOGGER.info("Promoted %s pawn on %s to %s", phase.color, phase.square, kind.name)
        self._events.emit(PromotionResolved(phase.square, kind))
        return True
