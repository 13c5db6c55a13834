"""Position record handed between the game layer and the engine."""

from __future__ import annotations

from dataclasses import dataclass

from chessai.core.board import Board
from chessai.core.enums import CastlingRights, Color
from chessai.core.types import Square


@dataclass(slots=True, frozen=True)
class Position:
    """Everything the engine needs to know about the current turn.

    The game layer owns the authoritative position; the engine only ever
    reads it and works on copies of ``board``.
    """

    board: Board
    side_to_move: Color = Color.WHITE
    castling: CastlingRights = CastlingRights.ALL
    en_passant: Square | None = None

    @classmethod
    def initial(cls) -> Position:
        return cls(Board.initial())
