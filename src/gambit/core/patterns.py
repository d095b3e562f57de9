"""Movement and capture geometry per piece type.

These predicates look at a displacement only; occupancy of the squares in
between is :mod:`gambit.core.paths`' concern.
"""

from __future__ import annotations

from dataclasses import dataclass

from gambit.core.enums import Color, PieceType
from gambit.core.types import Square


@dataclass(frozen=True, slots=True)
class Displacement:
    """Destination minus source, per axis."""

    dx: int
    dy: int

    @classmethod
    def between(cls, from_sq: Square, to_sq: Square) -> Displacement:
        return cls(to_sq.file - from_sq.file, to_sq.rank - from_sq.rank)

    def oriented(self, color: Color) -> Displacement:
        """Mirror vertically for black so that +dy always means "forward"."""
        return Displacement(self.dx, self.dy * color.forward)

    @property
    def is_zero(self) -> bool:
        return self.dx == 0 and self.dy == 0


def is_legal_shape(
    kind: PieceType,
    color: Color,
    displacement: Displacement,
    from_initial_square: bool,
) -> bool:
    """Does a non-capturing move of *kind* fit its movement geometry?

    *from_initial_square* unlocks the pawn double step.
    """
    if displacement.is_zero:
        return False
    if kind == PieceType.PAWN:
        d = displacement.oriented(color)
        return d.dx == 0 and (d.dy == 1 or (from_initial_square and d.dy == 2))
    return _matches_piece_geometry(kind, displacement)


def is_legal_capture_shape(
    kind: PieceType,
    color: Color,
    displacement: Displacement,
) -> bool:
    """Does a capture by *kind* fit its capture geometry?

    Pawns capture one square diagonally forward and never straight ahead;
    every other piece captures the way it moves.
    """
    if displacement.is_zero:
        return False
    if kind == PieceType.PAWN:
        d = displacement.oriented(color)
        return abs(d.dx) == 1 and d.dy == 1
    return _matches_piece_geometry(kind, displacement)


def _matches_piece_geometry(kind: PieceType, displacement: Displacement) -> bool:
    adx, ady = abs(displacement.dx), abs(displacement.dy)
    if kind == PieceType.KING:
        return adx <= 1 and ady <= 1
    if kind == PieceType.QUEEN:
        return adx == 0 or ady == 0 or adx == ady
    if kind == PieceType.ROOK:
        return adx == 0 or ady == 0
    if kind == PieceType.BISHOP:
        return adx == ady
    if kind == PieceType.KNIGHT:
        return (adx, ady) in ((1, 2), (2, 1))
    raise ValueError(f"No movement geometry for {kind!r}")
