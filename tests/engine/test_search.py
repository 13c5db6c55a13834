"""Tests for the negamax searcher and root move selection."""

from collections.abc import Sequence

import pytest

from chessai.core.board import Board
from chessai.core.enums import CastlingRights, Color, GameStatus, PieceType
from chessai.core.fen import position_from_fen
from chessai.core.move import Move
from chessai.core.piece import Piece
from chessai.core.position import Position
from chessai.core.types import Square, parse_square
from chessai.engine import negamax_search
from chessai.engine.evaluation import evaluate
from chessai.engine.negamax_search import (
    INF_SCORE,
    MATE_SCORE,
    NegamaxEngine,
    find_best_move,
    negamax,
)
from chessai.engine.search import SearchLimits
from chessai.engine.simulation import apply_move
from chessai.game.rules import game_status, legal_moves

SMALL_POSITIONS = [
    "4k3/8/8/3q4/8/2N5/8/4K3 w - - 0 1",
    "4k3/8/8/3q4/8/2N5/8/4K3 b - - 0 1",
    "6k1/5ppp/8/8/8/8/5PPP/3R2K1 w - - 0 1",
    "4k3/4p3/8/3P4/8/8/8/R3K3 b Q - 0 1",
]


def _no_moves(
    player: Color,
    board: Board,
    castling: CastlingRights,
    en_passant: Square | None,
) -> list[Move]:
    return []


def _scripted(moves: Sequence[Move]):
    """Legal-move source that offers *moves* to Black and nothing to White."""

    def source(
        player: Color,
        board: Board,
        castling: CastlingRights,
        en_passant: Square | None,
    ) -> list[Move]:
        return list(moves) if player == Color.BLACK else []

    return source


def _reference_negamax(
    board: Board,
    depth: int,
    player: Color,
    castling: CastlingRights,
    en_passant: Square | None,
) -> int:
    """Exhaustive negamax without pruning."""
    if depth == 0:
        return evaluate(board) * (1 if player == Color.BLACK else -1)
    moves = legal_moves(player, board, castling, en_passant)
    if not moves:
        return -MATE_SCORE
    return max(
        -_reference_negamax(
            child.board, depth - 1, player.opposite, child.castling, child.en_passant
        )
        for child in (apply_move(board, m, player, castling) for m in moves)
    )


def _queen_fixture() -> Board:
    return Board.from_pieces(
        {
            (0, 3): Piece(PieceType.QUEEN, Color.BLACK),
            (7, 4): Piece(PieceType.KING, Color.WHITE),
        }
    )


class TestNegamax:
    @pytest.mark.parametrize("depth", [1, 2, 3])
    def test_no_moves_returns_mate_sentinel(self, depth: int, any_color: Color) -> None:
        board = Board.initial()
        score = negamax(
            board, depth, -INF_SCORE, INF_SCORE, any_color,
            CastlingRights.ALL, None, _no_moves,
        )
        assert score == -MATE_SCORE

    def test_depth_zero_is_evaluation_for_side_to_move(self) -> None:
        board = _queen_fixture()
        black = negamax(
            board, 0, -INF_SCORE, INF_SCORE, Color.BLACK,
            CastlingRights.NONE, None, _no_moves,
        )
        white = negamax(
            board, 0, -INF_SCORE, INF_SCORE, Color.WHITE,
            CastlingRights.NONE, None, _no_moves,
        )
        assert black == evaluate(board)
        assert white == -evaluate(board)

    def test_stalemate_is_scored_as_loss(self) -> None:
        pos = position_from_fen("7k/8/5KQ1/8/8/8/8/8 b - - 0 1")
        assert game_status(
            pos.board, pos.side_to_move, pos.castling, pos.en_passant
        ) == GameStatus.STALEMATE

        score = negamax(
            pos.board, 2, -INF_SCORE, INF_SCORE, pos.side_to_move,
            pos.castling, pos.en_passant, legal_moves,
        )
        assert score == -MATE_SCORE

    @pytest.mark.parametrize("fen", SMALL_POSITIONS)
    @pytest.mark.parametrize("depth", [2, 3])
    def test_pruning_matches_exhaustive_search(self, fen: str, depth: int) -> None:
        pos = position_from_fen(fen)
        pruned = negamax(
            pos.board, depth, -INF_SCORE, INF_SCORE, pos.side_to_move,
            pos.castling, pos.en_passant, legal_moves,
        )
        exhaustive = _reference_negamax(
            pos.board, depth, pos.side_to_move, pos.castling, pos.en_passant
        )
        assert pruned == exhaustive

    def test_pruning_skips_leaves(self, monkeypatch: pytest.MonkeyPatch) -> None:
        pos = position_from_fen(SMALL_POSITIONS[0])
        calls = 0

        def counting_evaluate(board: Board) -> int:
            nonlocal calls
            calls += 1
            return evaluate(board)

        monkeypatch.setattr(negamax_search, "evaluate", counting_evaluate)
        negamax(
            pos.board, 2, -INF_SCORE, INF_SCORE, pos.side_to_move,
            pos.castling, pos.en_passant, legal_moves,
        )

        leaves = sum(
            len(legal_moves(Color.BLACK, child.board, child.castling, child.en_passant))
            for child in (
                apply_move(pos.board, m, Color.WHITE, pos.castling)
                for m in legal_moves(Color.WHITE, pos.board, pos.castling, None)
            )
        )
        assert 0 < calls < leaves

    def test_does_not_mutate_inputs(self) -> None:
        pos = position_from_fen(SMALL_POSITIONS[3])
        snapshot = pos.board.copy()
        negamax(
            pos.board, 2, -INF_SCORE, INF_SCORE, pos.side_to_move,
            pos.castling, pos.en_passant, legal_moves,
        )
        assert pos.board == snapshot
        assert pos.castling == CastlingRights.WHITE_QUEENSIDE


class TestFindBestMove:
    def test_queen_fixture_picks_highest_evaluation(self) -> None:
        stay = Move((0, 3), (1, 3))
        centre = Move((0, 3), (2, 3))
        corner = Move((0, 3), (0, 0))
        board = _queen_fixture()

        result = find_best_move(
            board, 1, CastlingRights.NONE, None, _scripted([stay, centre, corner])
        )

        assert result.best_move == centre
        assert result.score == 905 - 20_000
        assert [entry.move for entry in result.analysis] == [centre, stay, corner]
        assert [entry.score for entry in result.analysis] == [
            905 - 20_000,
            900 - 20_000,
            880 - 20_000,
        ]

    def test_ties_go_to_first_move_listed(self) -> None:
        left = Move((0, 3), (2, 2))
        right = Move((0, 3), (2, 3))
        board = _queen_fixture()

        first = find_best_move(board, 1, CastlingRights.NONE, None, _scripted([left, right]))
        second = find_best_move(board, 1, CastlingRights.NONE, None, _scripted([right, left]))

        assert first.best_move == left
        assert second.best_move == right
        assert [entry.move for entry in first.analysis] == [left, right]

    @pytest.mark.parametrize("fen", SMALL_POSITIONS)
    def test_depth_one_maximises_immediate_evaluation(self, fen: str) -> None:
        pos = position_from_fen(fen)
        mover = pos.side_to_move
        sign = 1 if mover == Color.BLACK else -1

        result = find_best_move(
            pos.board, 1, pos.castling, pos.en_passant, legal_moves, player=mover
        )

        expected_best: Move | None = None
        expected_score = -INF_SCORE
        for move in legal_moves(mover, pos.board, pos.castling, pos.en_passant):
            child = apply_move(pos.board, move, mover, pos.castling)
            score = evaluate(child.board) * sign
            if score > expected_score:
                expected_best, expected_score = move, score
        assert result.best_move == expected_best
        assert result.score == expected_score

    def test_analysis_is_sorted_and_complete(self) -> None:
        pos = position_from_fen(SMALL_POSITIONS[2])
        result = find_best_move(
            pos.board, 2, pos.castling, pos.en_passant, legal_moves, player=Color.WHITE
        )
        scores = [entry.score for entry in result.analysis]
        assert scores == sorted(scores, reverse=True)
        assert len(result.analysis) == len(
            legal_moves(Color.WHITE, pos.board, pos.castling, pos.en_passant)
        )
        assert result.analysis[0].move == result.best_move

    def test_white_finds_back_rank_mate(self) -> None:
        pos = position_from_fen("7k/6pp/8/8/8/8/8/R5K1 w - - 0 1")
        result = find_best_move(
            pos.board, 2, pos.castling, pos.en_passant, legal_moves, player=Color.WHITE
        )
        assert result.best_move == Move(parse_square("a1"), parse_square("a8"))
        assert result.score == MATE_SCORE

    def test_black_finds_back_rank_mate_by_default(self) -> None:
        pos = position_from_fen("r5k1/8/8/8/8/8/6PP/7K b - - 0 1")
        result = find_best_move(pos.board, 2, pos.castling, pos.en_passant, legal_moves)
        assert result.best_move == Move(parse_square("a8"), parse_square("a1"))
        assert result.score == MATE_SCORE

    def test_no_legal_moves(self) -> None:
        result = find_best_move(Board.initial(), 2, CastlingRights.ALL, None, _no_moves)
        assert result.best_move is None
        assert result.analysis == ()
        assert result.score == -MATE_SCORE

    def test_depth_zero_only_evaluates(self) -> None:
        board = _queen_fixture()
        result = find_best_move(
            board, 0, CastlingRights.NONE, None, _scripted([Move((0, 3), (2, 3))])
        )
        assert result.best_move is None
        assert result.analysis == ()
        assert result.score == evaluate(board)
        assert result.depth == 0

    def test_root_board_is_untouched(self) -> None:
        pos = position_from_fen(SMALL_POSITIONS[1])
        snapshot = pos.board.copy()
        find_best_move(pos.board, 2, pos.castling, pos.en_passant, legal_moves)
        assert pos.board == snapshot


class TestNegamaxEngine:
    def test_searches_for_side_to_move(self) -> None:
        pos = position_from_fen("7k/6pp/8/8/8/8/8/R5K1 w - - 0 1")
        result = NegamaxEngine().search(pos, SearchLimits(max_depth=2))
        assert result.best_move == Move(parse_square("a1"), parse_square("a8"))
        assert result.depth == 2

    def test_uses_injected_move_source(self) -> None:
        centre = Move((0, 3), (2, 3))
        engine = NegamaxEngine(_scripted([centre]))
        pos = Position(_queen_fixture(), Color.BLACK, CastlingRights.NONE)

        result = engine.search(pos, SearchLimits(max_depth=1))

        assert result.best_move == centre

    @pytest.mark.parametrize("depth", [0, -1])
    def test_limits_reject_non_positive_depth(self, depth: int) -> None:
        with pytest.raises(ValueError, match="Search depth must be >= 1"):
            SearchLimits(max_depth=depth)
