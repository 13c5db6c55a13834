"""Game layer: the reference rules engine that feeds the search."""

from chessai.game.rules import (
    game_status,
    is_in_check,
    is_square_attacked,
    legal_moves,
    pseudo_legal_moves,
    winner,
)

__all__ = [
    "game_status",
    "is_in_check",
    "is_square_attacked",
    "legal_moves",
    "pseudo_legal_moves",
    "winner",
]
