"""Core domain layer: board model and notation with zero external dependencies.

Quick start::

    from chessai.core import position_from_fen, STARTING_FEN

    pos = position_from_fen(STARTING_FEN)
    print(pos.board)
"""

from chessai.core.board import Board
from chessai.core.enums import CastlingRights, Color, GameStatus, PieceType
from chessai.core.fen import (
    STARTING_FEN,
    board_from_fen,
    board_to_fen,
    position_from_fen,
    position_to_fen,
)
from chessai.core.move import Move
from chessai.core.piece import Piece
from chessai.core.position import Position
from chessai.core.types import (
    Square,
    col_of,
    is_valid_square,
    make_square,
    parse_square,
    row_of,
    square_name,
)

__all__ = [
    # Enums / flags
    "CastlingRights",
    "Color",
    "GameStatus",
    "PieceType",
    # Types / helpers
    "Square",
    "col_of",
    "is_valid_square",
    "make_square",
    "parse_square",
    "row_of",
    "square_name",
    # Domain objects
    "Board",
    "Move",
    "Piece",
    "Position",
    # Notation
    "STARTING_FEN",
    "board_from_fen",
    "board_to_fen",
    "position_from_fen",
    "position_to_fen",
]
