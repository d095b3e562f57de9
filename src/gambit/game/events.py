"""Effect notifications emitted toward the presentation layer.

The engine never reads these back; they exist so a renderer can mirror
state changes without polling.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from enum import Enum

from gambit.core.enums import Color, PieceType
from gambit.core.types import Square


class RejectReason(Enum):
    """Why a proposed target was declined."""

    BAD_SHAPE = "bad_shape"
    PATH_BLOCKED = "path_blocked"
    OWN_PIECE = "own_piece"
    CASTLING_DENIED = "castling_denied"
    LEAVES_KING_IN_CHECK = "leaves_king_in_check"


@dataclass(frozen=True, slots=True)
class Selected:
    square: Square


@dataclass(frozen=True, slots=True)
class Deselected:
    pass


@dataclass(frozen=True, slots=True)
class MoveCommitted:
    from_sq: Square
    to_sq: Square
    captured: Square | None = None


@dataclass(frozen=True, slots=True)
class CastlePerformed:
    king_from: Square
    king_to: Square
    rook_from: Square
    rook_to: Square


@dataclass(frozen=True, slots=True)
class PromotionPending:
    square: Square
    color: Color


@dataclass(frozen=True, slots=True)
class PromotionResolved:
    square: Square
    new_kind: PieceType


@dataclass(frozen=True, slots=True)
class MoveRejected:
    from_sq: Square
    to_sq: Square
    reason: RejectReason


GameEvent = (
    Selected
    | Deselected
    | MoveCommitted
    | CastlePerformed
    | PromotionPending
    | PromotionResolved
    | MoveRejected
)


@dataclass
class GameEvents:
    """Observable callbacks. Multiple handlers per event."""

    on_selected: list[Callable[[Selected], None]] = field(default_factory=list)
    on_deselected: list[Callable[[Deselected], None]] = field(default_factory=list)
    on_move_committed: list[Callable[[MoveCommitted], None]] = field(
        default_factory=list
    )
    on_castle_performed: list[Callable[[CastlePerformed], None]] = field(
        default_factory=list
    )
    on_promotion_pending: list[Callable[[PromotionPending], None]] = field(
        default_factory=list
    )
    on_promotion_resolved: list[Callable[[PromotionResolved], None]] = field(
        default_factory=list
    )
    on_move_rejected: list[Callable[[MoveRejected], None]] = field(
        default_factory=list
    )
    # Catch-all, called after the specific handlers for every event.
    on_any: list[Callable[[GameEvent], None]] = field(default_factory=list)

    def emit(self, event: GameEvent) -> None:
        for cb in self._handlers_for(event):
            cb(event)
        for cb in self.on_any:
            cb(event)

    def _handlers_for(self, event: GameEvent) -> list:
        if isinstance(event, Selected):
            return self.on_selected
        if isinstance(event, Deselected):
            return self.on_deselected
        if isinstance(event, MoveCommitted):
            return self.on_move_committed
        if isinstance(event, CastlePerformed):
            return self.on_castle_performed
        if isinstance(event, PromotionPending):
            return self.on_promotion_pending
        if isinstance(event, PromotionResolved):
            return self.on_promotion_resolved
        if isinstance(event, MoveRejected):
            return self.on_move_rejected
        raise TypeError(f"Unknown game event: {event!r}")
