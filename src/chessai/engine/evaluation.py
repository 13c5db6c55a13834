"""Static evaluation: material plus piece-square tables.

Scores are from Black's point of view: positive favours Black, negative
favours White.
"""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType
from typing import TypeAlias

from chessai.core.board import Board
from chessai.core.enums import Color, PieceType
from chessai.core.types import Square

PieceSquareTable: TypeAlias = tuple[tuple[int, ...], ...]

# The king value dwarfs any material swing; it is not a mate detector.
PIECE_VALUES: Mapping[PieceType, int] = MappingProxyType(
    {
        PieceType.PAWN: 100,
        PieceType.KNIGHT: 320,
        PieceType.BISHOP: 330,
        PieceType.ROOK: 500,
        PieceType.QUEEN: 900,
        PieceType.KING: 20_000,
    }
)

# Tables are laid out for Black (row 0 = Black's back rank) and read at
# ``7 - row`` for White.
PIECE_SQUARE_TABLES: Mapping[PieceType, PieceSquareTable] = MappingProxyType(
    {
        PieceType.PAWN: (
            (0, 0, 0, 0, 0, 0, 0, 0),
            (50, 50, 50, 50, 50, 50, 50, 50),
            (10, 10, 20, 30, 30, 20, 10, 10),
            (5, 5, 10, 25, 25, 10, 5, 5),
            (0, 0, 0, 20, 20, 0, 0, 0),
            (5, -5, -10, 0, 0, -10, -5, 5),
            (5, 10, 10, -20, -20, 10, 10, 5),
            (0, 0, 0, 0, 0, 0, 0, 0),
        ),
        PieceType.KNIGHT: (
            (-50, -40, -30, -30, -30, -30, -40, -50),
            (-40, -20, 0, 5, 5, 0, -20, -40),
            (-30, 5, 10, 15, 15, 10, 5, -30),
            (-30, 0, 15, 20, 20, 15, 0, -30),
            (-30, 5, 15, 20, 20, 15, 5, -30),
            (-30, 0, 10, 15, 15, 10, 0, -30),
            (-40, -20, 0, 0, 0, 0, -20, -40),
            (-50, -40, -30, -30, -30, -30, -40, -50),
        ),
        PieceType.BISHOP: (
            (-20, -10, -10, -10, -10, -10, -10, -20),
            (-10, 5, 0, 0, 0, 0, 5, -10),
            (-10, 10, 10, 10, 10, 10, 10, -10),
            (-10, 0, 10, 10, 10, 10, 0, -10),
            (-10, 5, 5, 10, 10, 5, 5, -10),
            (-10, 0, 5, 10, 10, 5, 0, -10),
            (-10, 0, 0, 0, 0, 0, 0, -10),
            (-20, -10, -10, -10, -10, -10, -10, -20),
        ),
        PieceType.ROOK: (
            (0, 0, 0, 5, 5, 0, 0, 0),
            (-5, 0, 0, 0, 0, 0, 0, -5),
            (-5, 0, 0, 0, 0, 0, 0, -5),
            (-5, 0, 0, 0, 0, 0, 0, -5),
            (-5, 0, 0, 0, 0, 0, 0, -5),
            (-5, 0, 0, 0, 0, 0, 0, -5),
            (5, 10, 10, 10, 10, 10, 10, 5),
            (0, 0, 0, 0, 0, 0, 0, 0),
        ),
        PieceType.QUEEN: (
            (-20, -10, -10, -5, -5, -10, -10, -20),
            (-10, 0, 5, 0, 0, 0, 0, -10),
            (-10, 5, 5, 5, 5, 5, 0, -10),
            (0, 0, 5, 5, 5, 5, 0, -5),
            (-5, 0, 5, 5, 5, 5, 0, -5),
            (-10, 0, 5, 5, 5, 5, 0, -10),
            (-10, 0, 0, 0, 0, 0, 0, -10),
            (-20, -10, -10, -5, -5, -10, -10, -20),
        ),
        PieceType.KING: (
            (20, 30, 10, 0, 0, 10, 30, 20),
            (20, 20, 0, 0, 0, 0, 20, 20),
            (-10, -20, -20, -20, -20, -20, -20, -10),
            (-20, -30, -30, -40, -40, -30, -30, -20),
            (-30, -40, -40, -50, -50, -40, -40, -30),
            (-30, -40, -40, -50, -50, -40, -40, -30),
            (-30, -40, -40, -50, -50, -40, -40, -30),
            (-30, -40, -40, -50, -50, -40, -40, -30),
        ),
    }
)


def material_value(piece_type: PieceType) -> int:
    return PIECE_VALUES[piece_type]


def positional_value(piece_type: PieceType, sq: Square, owner: Color) -> int:
    """Piece-square bonus, mirrored vertically for White."""
    row, col = sq
    table_row = row if owner == Color.BLACK else 7 - row
    return PIECE_SQUARE_TABLES[piece_type][table_row][col]


def evaluate(board: Board) -> int:
    """Score *board* from Black's perspective."""
    total = 0
    for sq, piece in board.occupied():
        score = material_value(piece.piece_type) + positional_value(
            piece.piece_type, sq, piece.owner
        )
        total += score if piece.owner == Color.BLACK else -score
    return total


def perspective(player: Color) -> int:
    """Sign that turns an :func:`evaluate` score into *player*'s view."""
    return 1 if player == Color.BLACK else -1
