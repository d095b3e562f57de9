"""Core domain layer — pure chess rules with zero external dependencies.

Quick start::

    from gambit.core import BoardState, Color, is_in_check

    board = BoardState.initial()
    assert not is_in_check(board, Color.WHITE)
"""

from gambit.core.board import BoardState
from gambit.core.castling import CastleSquares, apply_castle, can_castle, castle_squares
from gambit.core.enums import PROMOTION_TYPES, Color, PieceType
from gambit.core.notation import (
    STARTING_FEN,
    board_from_placement,
    board_to_placement,
    parse_fen,
)
from gambit.core.paths import is_blocked, squares_between
from gambit.core.patterns import Displacement, is_legal_capture_shape, is_legal_shape
from gambit.core.piece import Piece
from gambit.core.threats import attackers_of_king, is_in_check
from gambit.core.types import (
    Square,
    board_to_world,
    parse_square,
    square_at,
    square_name,
)

__all__ = [
    # Enums
    "Color",
    "PROMOTION_TYPES",
    "PieceType",
    # Types / helpers
    "Displacement",
    "Square",
    "board_to_world",
    "parse_square",
    "square_at",
    "square_name",
    # Domain objects
    "BoardState",
    "CastleSquares",
    "Piece",
    # Rules
    "apply_castle",
    "attackers_of_king",
    "can_castle",
    "castle_squares",
    "is_blocked",
    "is_in_check",
    "is_legal_capture_shape",
    "is_legal_shape",
    "squares_between",
    # Notation
    "STARTING_FEN",
    "board_from_placement",
    "board_to_placement",
    "parse_fen",
]
