"""Square type alias and coordinate helpers.

Board layout (row, col), row 0 at the top:
    row 0 = rank 8 (Black's back rank), row 7 = rank 1 (White's back rank)
    col 0 = file a, col 7 = file h

So a8=(0, 0), h8=(0, 7), a1=(7, 0), e1=(7, 4).
"""

from __future__ import annotations

from typing import TypeAlias

Square: TypeAlias = tuple[int, int]  # (row, col), each 0–7

_FILES = "abcdefgh"
_RANKS = "12345678"


def row_of(sq: Square) -> int:
    """Row index 0–7 (0 = rank 8)."""
    return sq[0]


def col_of(sq: Square) -> int:
    """Column index 0–7 (a–h)."""
    return sq[1]


def make_square(row: int, col: int) -> Square:
    return (row, col)


def is_valid_square(sq: Square) -> bool:
    """Check whether both coordinates are on the board."""
    row, col = sq
    return 0 <= row < 8 and 0 <= col < 8


def square_name(sq: Square) -> str:
    """Human-readable name, e.g. (6, 4) → 'e2', (0, 0) → 'a8'."""
    row, col = sq
    return _FILES[col] + str(8 - row)


def parse_square(name: str) -> Square:
    """Parse square name, e.g. 'e4' → (4, 4)."""
    if len(name) != 2 or name[0] not in _FILES or name[1] not in _RANKS:
        raise ValueError(f"Invalid square name: {name!r}")
    return (8 - int(name[1]), _FILES.index(name[0]))
