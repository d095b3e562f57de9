"""Tests for piece movement and capture geometry."""

import pytest

from gambit.core.enums import Color, PieceType
from gambit.core.patterns import Displacement, is_legal_capture_shape, is_legal_shape
from gambit.core.types import ALL_SQUARES, Square


def _textbook_quiet(
    kind: PieceType, color: Color, src: Square, dst: Square, first_move: bool
) -> bool:
    """Independent restatement of how each piece moves, square by square."""
    df = dst.file - src.file
    dr = dst.rank - src.rank
    if df == 0 and dr == 0:
        return False
    if kind == PieceType.PAWN:
        step = 1 if color == Color.WHITE else -1
        return df == 0 and (dr == step or (first_move and dr == 2 * step))
    if kind == PieceType.KNIGHT:
        return {abs(df), abs(dr)} == {1, 2}
    if kind == PieceType.KING:
        return max(abs(df), abs(dr)) == 1
    straight = df == 0 or dr == 0
    diagonal = abs(df) == abs(dr)
    if kind == PieceType.ROOK:
        return straight
    if kind == PieceType.BISHOP:
        return diagonal
    return straight or diagonal


def _textbook_capture(kind: PieceType, color: Color, src: Square, dst: Square) -> bool:
    if kind == PieceType.PAWN:
        step = 1 if color == Color.WHITE else -1
        return abs(dst.file - src.file) == 1 and dst.rank - src.rank == step
    return _textbook_quiet(kind, color, src, dst, False)


class TestExhaustive:
    @pytest.mark.parametrize("kind", list(PieceType))
    @pytest.mark.parametrize("color", list(Color))
    def test_quiet_shapes_match_textbook(self, kind: PieceType, color: Color) -> None:
        for src in ALL_SQUARES:
            for dst in ALL_SQUARES:
                d = Displacement.between(src, dst)
                for first in (True, False):
                    assert is_legal_shape(kind, color, d, first) == _textbook_quiet(
                        kind, color, src, dst, first
                    ), f"{color} {kind.name} {src}->{dst} first={first}"

    @pytest.mark.parametrize("kind", list(PieceType))
    @pytest.mark.parametrize("color", list(Color))
    def test_capture_shapes_match_textbook(self, kind: PieceType, color: Color) -> None:
        for src in ALL_SQUARES:
            for dst in ALL_SQUARES:
                d = Displacement.between(src, dst)
                assert is_legal_capture_shape(kind, color, d) == _textbook_capture(
                    kind, color, src, dst
                ), f"{color} {kind.name} {src}->{dst}"


class TestPawn:
    def test_white_single_step(self) -> None:
        assert is_legal_shape(PieceType.PAWN, Color.WHITE, Displacement(0, 1), False)

    def test_double_step_needs_initial_square(self) -> None:
        d = Displacement(0, 2)
        assert is_legal_shape(PieceType.PAWN, Color.WHITE, d, True)
        assert not is_legal_shape(PieceType.PAWN, Color.WHITE, d, False)

    def test_black_moves_down(self) -> None:
        assert is_legal_shape(PieceType.PAWN, Color.BLACK, Displacement(0, -1), False)
        assert not is_legal_shape(PieceType.PAWN, Color.BLACK, Displacement(0, 1), False)

    def test_no_backward_move(self) -> None:
        assert not is_legal_shape(PieceType.PAWN, Color.WHITE, Displacement(0, -1), True)

    def test_no_straight_capture(self) -> None:
        assert not is_legal_capture_shape(PieceType.PAWN, Color.WHITE, Displacement(0, 1))

    def test_diagonal_capture(self) -> None:
        assert is_legal_capture_shape(PieceType.PAWN, Color.WHITE, Displacement(1, 1))
        assert is_legal_capture_shape(PieceType.PAWN, Color.BLACK, Displacement(-1, -1))
        assert not is_legal_capture_shape(PieceType.PAWN, Color.BLACK, Displacement(1, 1))

    def test_no_diagonal_quiet_move(self) -> None:
        assert not is_legal_shape(PieceType.PAWN, Color.WHITE, Displacement(1, 1), True)


class TestZeroDisplacement:
    @pytest.mark.parametrize("kind", list(PieceType))
    def test_always_illegal(self, kind: PieceType) -> None:
        zero = Displacement(0, 0)
        assert not is_legal_shape(kind, Color.WHITE, zero, True)
        assert not is_legal_capture_shape(kind, Color.BLACK, zero)


class TestDisplacement:
    def test_between(self) -> None:
        assert Displacement.between(Square(4, 1), Square(4, 3)) == Displacement(0, 2)

    def test_oriented_mirrors_black_only(self) -> None:
        d = Displacement(1, -1)
        assert d.oriented(Color.WHITE) == d
        assert d.oriented(Color.BLACK) == Displacement(1, 1)

    def test_forward_step_is_positive_for_both_colors(self) -> None:
        for color in Color:
            step = Displacement.between(Square(3, 3), Square(3, 3 + color.forward))
            assert step.oriented(color) == Displacement(0, 1)
