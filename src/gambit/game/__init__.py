"""Game management layer — turn state machine, phases, events.

Quick start::

    from gambit.core import parse_square
    from gambit.game import TurnController

    ctrl = TurnController()
    ctrl.select(parse_square("e2"))
    ctrl.propose_target(parse_square("e4"))
"""

from gambit.game.controller import TurnController
from gambit.game.events import (
    CastlePerformed,
    Deselected,
    GameEvent,
    GameEvents,
    MoveCommitted,
    MoveRejected,
    PromotionPending,
    PromotionResolved,
    RejectReason,
    Selected,
)
from gambit.game.interfaces import (
    AwaitingPromotionChoice,
    AwaitingSelection,
    GamePhase,
    MoveAttempt,
    PieceSelected,
)
from gambit.game.promotion import PromotionResolver, needs_promotion
from gambit.game.state import GameState, MoveRecord

__all__ = [
    # Phases
    "AwaitingPromotionChoice",
    "AwaitingSelection",
    "GamePhase",
    "MoveAttempt",
    "PieceSelected",
    # Events
    "CastlePerformed",
    "Deselected",
    "GameEvent",
    "GameEvents",
    "MoveCommitted",
    "MoveRejected",
    "PromotionPending",
    "PromotionResolved",
    "RejectReason",
    "Selected",
    # Concrete
    "GameState",
    "MoveRecord",
    "PromotionResolver",
    "TurnController",
    "needs_promotion",
]
