"""Shared engine search models and protocol."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass
from typing import Protocol, TypeAlias

from chessai.core.board import Board
from chessai.core.enums import CastlingRights, Color
from chessai.core.move import Move
from chessai.core.position import Position
from chessai.core.types import Square

# (player, board, castling, en_passant) -> fully legal moves for player
LegalMoveSource: TypeAlias = Callable[
    [Color, Board, CastlingRights, Square | None], Sequence[Move]
]


@dataclass(slots=True, frozen=True)
class SearchLimits:
    """Search constraints for a single move computation."""

    max_depth: int = 3

    def __post_init__(self) -> None:
        if self.max_depth < 1:
            raise ValueError(f"Search depth must be >= 1: {self.max_depth!r}")


@dataclass(slots=True, frozen=True)
class ScoredMove:
    """A root move and its score from the root mover's perspective."""

    move: Move
    score: int


@dataclass(slots=True, frozen=True)
class SearchResult:
    """Result produced by the engine search."""

    best_move: Move | None
    analysis: tuple[ScoredMove, ...]
    score: int
    depth: int


class IEngine(Protocol):
    """Protocol for chess engines used by the game layer."""

    def search(self, position: Position, limits: SearchLimits) -> SearchResult: ...
