"""FEN piece-placement parsing and serialization.

Only the first three FEN fields are meaningful here: placement, side to
move and castling availability. Castling availability has no storage of its
own; it is folded into the board's moved-flags. The en-passant and clock
fields are accepted and ignored.
"""

from __future__ import annotations

from gambit.core.board import BoardState
from gambit.core.enums import Color, PieceType
from gambit.core.piece import Piece
from gambit.core.types import Square

STARTING_FEN = "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w KQkq - 0 1"

_KING_FILE = 4
# castling letter → (color, corner rook file)
_CASTLING_LETTERS: dict[str, tuple[Color, int]] = {
    "K": (Color.WHITE, 7),
    "Q": (Color.WHITE, 0),
    "k": (Color.BLACK, 7),
    "q": (Color.BLACK, 0),
}


def parse_fen(fen: str) -> tuple[BoardState, Color]:
    """Parse a FEN string into a board and the side to move.

    The side-to-move and castling fields are optional; when castling is
    omitted, rights are inferred from the placement alone.
    """
    parts = fen.split()
    if not 1 <= len(parts) <= 6:
        raise ValueError(f"Invalid FEN (need 1-6 fields): {fen!r}")

    board = board_from_placement(parts[0])

    side = Color.WHITE
    if len(parts) > 1:
        if parts[1] == "w":
            side = Color.WHITE
        elif parts[1] == "b":
            side = Color.BLACK
        else:
            raise ValueError(f"Invalid FEN side-to-move field: {parts[1]!r}")

    if len(parts) > 2:
        _apply_castling_field(board, parts[2])

    return board, side


def board_from_placement(placement: str) -> BoardState:
    """Build a board from the FEN placement field.

    Pieces standing off their starting squares get their moved-flag set, so
    pawns off their start rank cannot double-step and displaced kings or
    rooks cannot castle.
    """
    ranks = placement.split("/")
    if len(ranks) != 8:
        raise ValueError(f"Invalid FEN board (must contain 8 ranks): {placement!r}")
    board = BoardState()
    for rank_idx, rank_text in enumerate(ranks):
        rank = 7 - rank_idx
        file = 0
        for ch in rank_text:
            if ch.isdigit():
                step = int(ch)
                if not (1 <= step <= 8):
                    raise ValueError(f"Invalid FEN digit {ch!r}: {placement!r}")
                file += step
            else:
                if file >= 8:
                    raise ValueError(f"Invalid FEN rank width: {placement!r}")
                sq = Square(file, rank)
                piece = Piece.from_char(ch)
                board[sq] = piece
                if not _on_starting_square(piece, sq):
                    board.mark_moved(sq)
                file += 1
            if file > 8:
                raise ValueError(f"Invalid FEN rank width: {placement!r}")
        if file != 8:
            raise ValueError(f"Invalid FEN rank width: {placement!r}")
    return board


def board_to_placement(board: BoardState) -> str:
    """Serialize the board to the FEN placement field."""
    rows: list[str] = []
    for rank in range(7, -1, -1):
        row = ""
        empty = 0
        for file in range(8):
            piece = board[Square(file, rank)]
            if piece is None:
                empty += 1
                continue
            if empty:
                row += str(empty)
                empty = 0
            row += str(piece)
        if empty:
            row += str(empty)
        rows.append(row)
    return "/".join(rows)


def _on_starting_square(piece: Piece, sq: Square) -> bool:
    color = piece.color
    if piece.piece_type == PieceType.PAWN:
        return sq.rank == color.pawn_rank
    if piece.piece_type == PieceType.KING:
        return sq == Square(_KING_FILE, color.home_rank)
    if piece.piece_type == PieceType.ROOK:
        return sq.rank == color.home_rank and sq.file in (0, 7)
    return True


def _apply_castling_field(board: BoardState, field: str) -> None:
    if field != "-" and any(ch not in _CASTLING_LETTERS for ch in field):
        raise ValueError(f"Invalid FEN castling field: {field!r}")
    available = set() if field == "-" else set(field)
    for letter, (color, rook_file) in _CASTLING_LETTERS.items():
        if letter not in available:
            board.mark_moved(Square(rook_file, color.home_rank))
    for color, letters in ((Color.WHITE, "KQ"), (Color.BLACK, "kq")):
        if not available.intersection(letters):
            board.mark_moved(Square(_KING_FILE, color.home_rank))
