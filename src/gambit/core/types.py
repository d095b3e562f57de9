"""Square value type and coordinate helpers.

Board layout (file, rank), both zero-indexed:
    a1=(0, 0), b1=(1, 0), ..., h1=(7, 0)
    ...
    a8=(0, 7), b8=(1, 7), ..., h8=(7, 7)

White starts on ranks 0-1 and advances toward increasing rank.
"""

from __future__ import annotations

from dataclasses import dataclass

_FILES = "abcdefgh"
_RANKS = "12345678"


@dataclass(frozen=True, slots=True)
class Square:
    """One of the 64 board cells.

    Coordinates outside ``0..7`` never describe a game state; they signal a
    bad coordinate translation upstream and are rejected immediately.
    """

    file: int
    rank: int

    def __post_init__(self) -> None:
        if not is_valid_coords(self.file, self.rank):
            raise ValueError(f"Square out of range: ({self.file}, {self.rank})")

    @property
    def index(self) -> int:
        """Linear index 0-63 (a1=0, h8=63)."""
        return self.rank * 8 + self.file

    def offset(self, df: int, dr: int) -> Square | None:
        """Square shifted by (*df*, *dr*), or ``None`` past the board edge."""
        file, rank = self.file + df, self.rank + dr
        if not is_valid_coords(file, rank):
            return None
        return Square(file, rank)

    def __str__(self) -> str:
        return square_name(self)


def is_valid_coords(file: int, rank: int) -> bool:
    """Check whether (*file*, *rank*) lies on the board."""
    return 0 <= file < 8 and 0 <= rank < 8


def square_at(index: int) -> Square:
    """Square for a linear index, e.g. 28 → e4."""
    if not 0 <= index < 64:
        raise ValueError(f"Square index out of range: {index}")
    return Square(index & 7, index >> 3)


def square_name(sq: Square) -> str:
    """Human-readable name, e.g. (4, 3) → 'e4'."""
    return _FILES[sq.file] + _RANKS[sq.rank]


def parse_square(name: str) -> Square:
    """Parse square name, e.g. 'e4' → Square(4, 3)."""
    if len(name) != 2 or name[0] not in _FILES or name[1] not in _RANKS:
        raise ValueError(f"Invalid square name: {name!r}")
    return Square(_FILES.index(name[0]), _RANKS.index(name[1]))


def board_to_world(sq: Square) -> tuple[float, float, float]:
    """World-space centre of *sq* for a renderer with the board at the origin."""
    return (sq.file - 3.5, 0.0, -(sq.rank - 3.5))


ALL_SQUARES: tuple[Square, ...] = tuple(square_at(i) for i in range(64))

# ── Named square constants ──────────────────────────────────────────────────

A1, B1, C1, D1, E1, F1, G1, H1 = ALL_SQUARES[0:8]
A2, B2, C2, D2, E2, F2, G2, H2 = ALL_SQUARES[8:16]
A3, B3, C3, D3, E3, F3, G3, H3 = ALL_SQUARES[16:24]
A4, B4, C4, D4, E4, F4, G4, H4 = ALL_SQUARES[24:32]
A5, B5, C5, D5, E5, F5, G5, H5 = ALL_SQUARES[32:40]
A6, B6, C6, D6, E6, F6, G6, H6 = ALL_SQUARES[40:48]
A7, B7, C7, D7, E7, F7, G7, H7 = ALL_SQUARES[48:56]
A8, B8, C8, D8, E8, F8, G8, H8 = ALL_SQUARES[56:64]
