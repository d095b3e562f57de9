"""Game-phase states and transient move values.

``GamePhase`` is a closed union: exactly one of the three states below is
active at any time, and the selected square lives only inside it.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TypeAlias

from gambit.core.enums import Color
from gambit.core.patterns import Displacement
from gambit.core.types import Square

# ── Game phase FSM states ────────────────────────────────────────────────────


@dataclass(frozen=True, slots=True)
class AwaitingSelection:
    """No piece is selected; the active side must pick one."""


@dataclass(frozen=True, slots=True)
class PieceSelected:
    """The piece on *square* is selected and waits for a target."""

    square: Square


@dataclass(frozen=True, slots=True)
class AwaitingPromotionChoice:
    """A pawn of *color* reached *square* and waits for its new type."""

    square: Square
    color: Color


GamePhase: TypeAlias = AwaitingSelection | PieceSelected | AwaitingPromotionChoice


# ── Move attempt ─────────────────────────────────────────────────────────────


@dataclass(frozen=True, slots=True)
class MoveAttempt:
    """A (source, destination) pair built per target event; never stored."""

    source: Square
    destination: Square

    @property
    def displacement(self) -> Displacement:
        return Displacement.between(self.source, self.destination)
