"""Tests for castling preconditions and relocation."""

from gambit.core.board import BoardState
from gambit.core.castling import (
    CastleSquares,
    apply_castle,
    can_castle,
    castle_squares,
    corner_rook_square,
)
from gambit.core.enums import Color, PieceType
from gambit.core.notation import parse_fen
from gambit.core.piece import Piece
from gambit.core.types import A1, A8, C1, C8, D1, D8, E1, E8, F1, F8, G1, G8, H1, H8

_OPEN = "r3k2r/8/8/8/8/8/8/R3K2R w KQkq - 0 1"


def _board(fen: str) -> BoardState:
    return parse_fen(fen)[0]


class TestCastleSquares:
    def test_kingside(self) -> None:
        assert castle_squares(E1, H1) == CastleSquares(E1, G1, H1, F1)

    def test_queenside(self) -> None:
        squares = castle_squares(E8, A8)
        assert squares == CastleSquares(E8, C8, A8, D8)
        assert not squares.is_kingside

    def test_corner_rook_for_two_file_step(self) -> None:
        assert corner_rook_square(E1, G1) == H1
        assert corner_rook_square(E1, C1) == A1


class TestCanCastle:
    def test_both_sides_open(self) -> None:
        board = _board(_OPEN)
        assert can_castle(board, E1, H1)
        assert can_castle(board, E1, A1)
        assert can_castle(board, E8, H8)
        assert can_castle(board, E8, A8)

    def test_king_moved(self) -> None:
        board = _board(_OPEN)
        board.mark_moved(E1)
        assert not can_castle(board, E1, H1)
        assert not can_castle(board, E1, A1)

    def test_rook_moved(self) -> None:
        board = _board(_OPEN)
        board.mark_moved(H1)
        assert not can_castle(board, E1, H1)
        assert can_castle(board, E1, A1)

    def test_castling_field_sets_flags(self) -> None:
        board = _board("r3k2r/8/8/8/8/8/8/R3K2R w Qkq - 0 1")
        assert not can_castle(board, E1, H1)
        assert can_castle(board, E1, A1)

    def test_kingside_transit_occupied(self) -> None:
        board = _board("r3k2r/8/8/8/8/8/8/R3KB1R w KQkq - 0 1")
        assert not can_castle(board, E1, H1)

    def test_queenside_b_file_occupied(self) -> None:
        board = _board("r3k2r/8/8/8/8/8/8/RN2K2R w KQkq - 0 1")
        assert not can_castle(board, E1, A1)
        assert can_castle(board, E1, H1)

    def test_king_in_check(self) -> None:
        board = _board("4k3/4r3/8/8/8/8/8/R3K2R w KQ - 0 1")
        assert not can_castle(board, E1, H1)
        assert not can_castle(board, E1, A1)

    def test_king_passes_attacked_square(self) -> None:
        board = _board("5r2/4k3/8/8/8/8/8/R3K2R w KQ - 0 1")
        assert not can_castle(board, E1, H1)
        assert can_castle(board, E1, A1)

    def test_destination_attacked(self) -> None:
        board = _board("4k1r1/8/8/8/8/8/8/R3K2R w KQ - 0 1")
        assert not can_castle(board, E1, H1)

    def test_queenside_d_file_attacked(self) -> None:
        board = _board("3rk3/8/8/8/8/8/8/R3K2R w KQ - 0 1")
        assert not can_castle(board, E1, A1)

    def test_attacked_b_file_does_not_matter(self) -> None:
        board = _board("1r2k3/8/8/8/8/8/8/R3K2R w KQ - 0 1")
        assert can_castle(board, E1, A1)

    def test_rook_of_other_color(self) -> None:
        board = _board(_OPEN)
        board[H1] = Piece(Color.BLACK, PieceType.ROOK)
        assert not can_castle(board, E1, H1)

    def test_not_a_rook(self) -> None:
        board = _board(_OPEN)
        board[H1] = Piece(Color.WHITE, PieceType.QUEEN)
        assert not can_castle(board, E1, H1)

    def test_king_off_home_square(self) -> None:
        board = BoardState()
        board[D1] = Piece(Color.WHITE, PieceType.KING)
        board[H1] = Piece(Color.WHITE, PieceType.ROOK)
        assert not can_castle(board, D1, H1)


class TestApplyCastle:
    def test_kingside_relocates_both(self) -> None:
        board = _board(_OPEN)
        apply_castle(board, castle_squares(E1, H1))
        assert board[G1] == Piece(Color.WHITE, PieceType.KING)
        assert board[F1] == Piece(Color.WHITE, PieceType.ROOK)
        assert board[E1] is None and board[H1] is None
        assert board.moved_flag(G1) and board.moved_flag(F1)
        assert not board.moved_flag(E1) and not board.moved_flag(H1)

    def test_black_queenside(self) -> None:
        board = _board(_OPEN)
        apply_castle(board, castle_squares(E8, A8))
        assert board[C8] == Piece(Color.BLACK, PieceType.KING)
        assert board[D8] == Piece(Color.BLACK, PieceType.ROOK)
        assert board[A8] is None and board[E8] is None
        assert board[F8] is None
