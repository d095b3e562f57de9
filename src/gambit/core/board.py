"""BoardState - piece placement and moved-flags on an 8x8 board."""

from __future__ import annotations

from collections.abc import Iterator

from gambit.core.enums import Color, PieceType
from gambit.core.piece import Piece
from gambit.core.types import ALL_SQUARES, Square

_BACK_RANK: tuple[PieceType, ...] = (
    PieceType.ROOK,
    PieceType.KNIGHT,
    PieceType.BISHOP,
    PieceType.QUEEN,
    PieceType.KING,
    PieceType.BISHOP,
    PieceType.KNIGHT,
    PieceType.ROOK,
)


class BoardState:
    """Mutable 64-square storage with a per-square moved-flag.

    The moved-flag of a square is set once the piece standing there has
    relocated to it, and governs pawn double steps and castling rights.
    Nothing here checks chess legality.
    """

    __slots__ = ("_squares", "_moved")

    def __init__(self) -> None:
        self._squares: list[Piece | None] = [None] * 64
        self._moved: list[bool] = [False] * 64

    # -- Element access -----------------------------------------------------

    def get(self, sq: Square) -> Piece | None:
        return self._squares[sq.index]

    def set(self, sq: Square, piece: Piece | None) -> None:
        self._squares[sq.index] = piece

    __getitem__ = get
    __setitem__ = set

    def is_empty(self, sq: Square) -> bool:
        return self._squares[sq.index] is None

    # -- Moved-flags --------------------------------------------------------

    def moved_flag(self, sq: Square) -> bool:
        """Whether the occupant of *sq* has moved at least once."""
        return self._moved[sq.index]

    def mark_moved(self, sq: Square) -> None:
        self._moved[sq.index] = True

    def clear_moved(self, sq: Square) -> None:
        self._moved[sq.index] = False

    # -- Query helpers ------------------------------------------------------

    def occupied(self) -> Iterator[tuple[Square, Piece]]:
        """Yield every (square, piece) pair, a1 first."""
        for sq, piece in zip(ALL_SQUARES, self._squares):
            if piece is not None:
                yield sq, piece

    def pieces(self, color: Color, piece_type: PieceType) -> list[Square]:
        """Squares occupied by *color*'s *piece_type*."""
        target = Piece(color, piece_type)
        return [sq for sq, piece in self.occupied() if piece == target]

    def king_square(self, color: Color) -> Square | None:
        """First square holding *color*'s king, ``None`` if there is none."""
        kings = self.pieces(color, PieceType.KING)
        return kings[0] if kings else None

    # -- Mutation / copying -------------------------------------------------

    def snapshot(self) -> BoardState:
        """Independent copy for hypothetical-move testing."""
        b = BoardState()
        b._squares = self._squares.copy()
        b._moved = self._moved.copy()
        return b

    copy = snapshot

    def clear(self) -> None:
        self._squares = [None] * 64
        self._moved = [False] * 64

    # -- Factory ------------------------------------------------------------

    @classmethod
    def initial(cls) -> BoardState:
        """Standard starting position, nothing moved yet."""
        b = cls()
        for color in (Color.WHITE, Color.BLACK):
            for f, pt in enumerate(_BACK_RANK):
                b[Square(f, color.home_rank)] = Piece(color, pt)
                b[Square(f, color.pawn_rank)] = Piece(color, PieceType.PAWN)
        return b

    # -- Dunder helpers -----------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BoardState):
            return NotImplemented
        return self._squares == other._squares and self._moved == other._moved

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        rows: list[str] = []
        for rank in range(7, -1, -1):
            row = []
            for file in range(8):
                p = self[Square(file, rank)]
                row.append(str(p) if p else ".")
            rows.append(f"{rank + 1} {' '.join(row)}")
        rows.append("  a b c d e f g h")
        return "\n".join(rows)
