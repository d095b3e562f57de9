"""Castling preconditions and the king-rook relocation."""

from __future__ import annotations

from dataclasses import dataclass

from gambit.core.board import BoardState
from gambit.core.enums import PieceType
from gambit.core.paths import is_blocked
from gambit.core.threats import is_in_check
from gambit.core.types import Square

KING_FILE = 4
_KINGSIDE_FILES = (6, 5)  # king, rook destination files
_QUEENSIDE_FILES = (2, 3)


@dataclass(frozen=True, slots=True)
class CastleSquares:
    """Origin and destination of both pieces in one castling move."""

    king_from: Square
    king_to: Square
    rook_from: Square
    rook_to: Square

    @property
    def is_kingside(self) -> bool:
        return self.rook_from.file > self.king_from.file


def castle_squares(king_sq: Square, rook_sq: Square) -> CastleSquares:
    """Where king and rook land when castling toward *rook_sq*."""
    king_file, rook_file = (
        _KINGSIDE_FILES if rook_sq.file > king_sq.file else _QUEENSIDE_FILES
    )
    rank = king_sq.rank
    return CastleSquares(king_sq, Square(king_file, rank), rook_sq, Square(rook_file, rank))


def corner_rook_square(king_sq: Square, king_to: Square) -> Square:
    """Corner rook a two-file king step is castling with."""
    return Square(7 if king_to.file > king_sq.file else 0, king_sq.rank)


def can_castle(board: BoardState, king_sq: Square, rook_sq: Square) -> bool:
    """Approve castling the king on *king_sq* with the rook on *rook_sq*.

    All of the following must hold:

    * an unmoved king on its home e-square and an unmoved rook of the
      same color in a corner of that rank;
    * every square strictly between them is empty (on the queenside that
      includes the b-file square only the rook crosses);
    * the king is not in check now, nor on any square it steps onto on
      the way to its destination.
    """
    king = board[king_sq]
    rook = board[rook_sq]
    if king is None or king.piece_type != PieceType.KING:
        return False
    if rook is None or rook.piece_type != PieceType.ROOK or rook.color != king.color:
        return False

    home = king.color.home_rank
    if king_sq != Square(KING_FILE, home):
        return False
    if rook_sq.rank != home or rook_sq.file not in (0, 7):
        return False
    if board.moved_flag(king_sq) or board.moved_flag(rook_sq):
        return False
    if is_blocked(board, king_sq, rook_sq):
        return False
    if is_in_check(board, king.color):
        return False

    squares = castle_squares(king_sq, rook_sq)
    step = 1 if squares.is_kingside else -1
    for file in range(king_sq.file + step, squares.king_to.file + step, step):
        hypothetical = board.snapshot()
        hypothetical[king_sq] = None
        hypothetical[Square(file, home)] = king
        if is_in_check(hypothetical, king.color):
            return False
    return True


def apply_castle(board: BoardState, squares: CastleSquares) -> None:
    """Relocate king and rook together and flag both as moved."""
    king = board[squares.king_from]
    rook = board[squares.rook_from]
    for sq in (squares.king_from, squares.rook_from):
        board[sq] = None
        board.clear_moved(sq)
    board[squares.king_to] = king
    board[squares.rook_to] = rook
    board.mark_moved(squares.king_to)
    board.mark_moved(squares.rook_to)
