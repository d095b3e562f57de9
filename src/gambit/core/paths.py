"""Path obstruction between two squares on a straight or diagonal line."""

from __future__ import annotations

from gambit.core.board import BoardState
from gambit.core.types import Square


def _sign(value: int) -> int:
    return (value > 0) - (value < 0)


def squares_between(from_sq: Square, to_sq: Square) -> list[Square]:
    """Squares strictly between the endpoints of a straight or diagonal line.

    The caller guarantees the line shape; knight jumps never get here.
    """
    df = _sign(to_sq.file - from_sq.file)
    dr = _sign(to_sq.rank - from_sq.rank)
    between: list[Square] = []
    if df == 0 and dr == 0:
        return between
    file, rank = from_sq.file + df, from_sq.rank + dr
    while (file, rank) != (to_sq.file, to_sq.rank):
        between.append(Square(file, rank))
        file += df
        rank += dr
    return between


def is_blocked(board: BoardState, from_sq: Square, to_sq: Square) -> bool:
    """Is any square strictly between *from_sq* and *to_sq* occupied?"""
    return any(not board.is_empty(sq) for sq in squares_between(from_sq, to_sq))
