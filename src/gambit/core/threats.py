"""Check detection by ray casting from the king."""

from __future__ import annotations

from gambit.core.board import BoardState
from gambit.core.enums import Color, PieceType
from gambit.core.patterns import Displacement, is_legal_capture_shape
from gambit.core.types import Square

ROOK_DIRS: tuple[tuple[int, int], ...] = ((-1, 0), (1, 0), (0, -1), (0, 1))
BISHOP_DIRS: tuple[tuple[int, int], ...] = ((-1, -1), (-1, 1), (1, -1), (1, 1))
RAY_DIRS: tuple[tuple[int, int], ...] = ROOK_DIRS + BISHOP_DIRS


def _first_occupied(board: BoardState, start: Square, df: int, dr: int) -> Square | None:
    """Walk from *start* (exclusive) until a piece or the edge."""
    sq = start.offset(df, dr)
    while sq is not None:
        if not board.is_empty(sq):
            return sq
        sq = sq.offset(df, dr)
    return None


def _scan(board: BoardState, color: Color) -> tuple[Square | None, list[Square]]:
    """One pass over the board: *color*'s king and every enemy knight."""
    king_sq: Square | None = None
    knights: list[Square] = []
    for sq, piece in board.occupied():
        if piece.piece_type == PieceType.KING and piece.color == color:
            if king_sq is None:
                king_sq = sq
        elif piece.piece_type == PieceType.KNIGHT and piece.color != color:
            knights.append(sq)
    return king_sq, knights


def _ray_candidates(board: BoardState, king_sq: Square, enemy: Color) -> list[Square]:
    candidates: list[Square] = []
    for df, dr in RAY_DIRS:
        hit = _first_occupied(board, king_sq, df, dr)
        if hit is None:
            continue
        piece = board[hit]
        if piece is not None and piece.color == enemy:
            candidates.append(hit)
    return candidates


def attackers_of_king(board: BoardState, color: Color) -> list[Square]:
    """Squares of enemy pieces currently giving check to *color*'s king."""
    king_sq, knights = _scan(board, color)
    if king_sq is None:
        return []
    enemy = color.opposite
    attackers: list[Square] = []
    # A knight can also be the first piece on a ray; its geometry never
    # matches a ray displacement, so it is only ever counted once.
    for sq in knights + _ray_candidates(board, king_sq, enemy):
        piece = board[sq]
        assert piece is not None
        if is_legal_capture_shape(
            piece.piece_type, enemy, Displacement.between(sq, king_sq)
        ):
            attackers.append(sq)
    return attackers


def is_in_check(board: BoardState, color: Color) -> bool:
    """Is *color*'s king attacked? A board without that king never is.

    Sliding attackers need no separate path test: a ray stops at the first
    piece it meets, so any candidate found on a ray has a clear line.
    """
    return bool(attackers_of_king(board, color))
