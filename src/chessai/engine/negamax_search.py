"""Fixed-depth negamax search with alpha-beta pruning."""

from __future__ import annotations

import logging

from chessai.core.board import Board
from chessai.core.enums import CastlingRights, Color
from chessai.core.position import Position
from chessai.core.types import Square
from chessai.engine.evaluation import evaluate, perspective
from chessai.engine.search import (
    IEngine,
    LegalMoveSource,
    ScoredMove,
    SearchLimits,
    SearchResult,
)
from chessai.engine.simulation import apply_move

_LOGGER = logging.getLogger(__name__)

INF_SCORE = 1_000_000
MATE_SCORE = 100_000


def negamax(
    board: Board,
    depth: int,
    alpha: int,
    beta: int,
    player: Color,
    castling: CastlingRights,
    en_passant: Square | None,
    legal_moves: LegalMoveSource,
) -> int:
    """Score *board* for *player*, the side to move, searching *depth* plies.

    The value is always from the point of view of *player*, so a parent node
    negates what its children return. Running out of moves scores
    ``-MATE_SCORE`` whether or not the side to move is in check.
    """
    if depth <= 0:
        return evaluate(board) * perspective(player)

    moves = legal_moves(player, board, castling, en_passant)
    if not moves:
        return -MATE_SCORE

    opponent = player.opposite
    best_value = -INF_SCORE
    for move in moves:
        child = apply_move(board, move, player, castling)
        value = -negamax(
            child.board,
            depth - 1,
            -beta,
            -alpha,
            opponent,
            child.castling,
            child.en_passant,
            legal_moves,
        )
        if value > best_value:
            best_value = value
        if value > alpha:
            alpha = value
        if alpha >= beta:
            break
    return best_value


def find_best_move(
    board: Board,
    depth: int,
    castling: CastlingRights,
    en_passant: Square | None,
    legal_moves: LegalMoveSource,
    player: Color = Color.BLACK,
) -> SearchResult:
    """Pick *player*'s move by scoring every root move to *depth* plies.

    Each root move gets a full window, so every entry of ``analysis`` is an
    exact score. Ties go to the move listed first by *legal_moves*.
    """
    if depth < 1:
        _LOGGER.warning("Search depth %d selects no move, evaluating only", depth)
        return SearchResult(
            best_move=None,
            analysis=(),
            score=evaluate(board) * perspective(player),
            depth=0,
        )

    root_moves = legal_moves(player, board, castling, en_passant)
    scored: list[ScoredMove] = []
    best: ScoredMove | None = None

    for move in root_moves:
        child = apply_move(board, move, player, castling)
        score = -negamax(
            child.board,
            depth - 1,
            -INF_SCORE,
            INF_SCORE,
            player.opposite,
            child.castling,
            child.en_passant,
            legal_moves,
        )
        _LOGGER.debug("Root move %s scored %d", move, score)
        entry = ScoredMove(move, score)
        scored.append(entry)
        if best is None or score > best.score:
            best = entry

    if best is None:
        _LOGGER.debug("No legal moves for %s", player)
        return SearchResult(None, (), -MATE_SCORE, depth)

    _LOGGER.debug("Best move for %s: %s (%d)", player, best.move, best.score)
    analysis = tuple(sorted(scored, key=lambda entry: entry.score, reverse=True))
    return SearchResult(best.move, analysis, best.score, depth)


class NegamaxEngine(IEngine):
    """Engine adapter over :func:`find_best_move` for the side to move."""

    __slots__ = ("_legal_moves",)

    def __init__(self, legal_moves: LegalMoveSource | None = None) -> None:
        if legal_moves is None:
            from chessai.game.rules import legal_moves as rules_legal_moves

            legal_moves = rules_legal_moves
        self._legal_moves = legal_moves

    def search(self, position: Position, limits: SearchLimits) -> SearchResult:
        return find_best_move(
            position.board,
            limits.max_depth,
            position.castling,
            position.en_passant,
            self._legal_moves,
            player=position.side_to_move,
        )
