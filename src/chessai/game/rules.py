"""Reference rules engine: legal moves, check and game status.

:func:`legal_moves` matches the ``LegalMoveSource`` signature, so it can be
handed straight to :func:`chessai.engine.negamax_search.find_best_move`.
"""

from __future__ import annotations

from chessai.core.board import Board
from chessai.core.enums import CastlingRights, Color, GameStatus, PieceType
from chessai.core.move import Move
from chessai.core.piece import Piece
from chessai.core.types import Square, is_valid_square
from chessai.engine.simulation import apply_move

KNIGHT_OFFSETS: tuple[tuple[int, int], ...] = (
    (-2, -1),
    (-2, 1),
    (-1, -2),
    (-1, 2),
    (1, -2),
    (1, 2),
    (2, -1),
    (2, 1),
)

KING_OFFSETS: tuple[tuple[int, int], ...] = (
    (-1, -1),
    (-1, 0),
    (-1, 1),
    (0, -1),
    (0, 1),
    (1, -1),
    (1, 0),
    (1, 1),
)

BISHOP_DIRS: tuple[tuple[int, int], ...] = ((-1, -1), (-1, 1), (1, -1), (1, 1))
ROOK_DIRS: tuple[tuple[int, int], ...] = ((-1, 0), (1, 0), (0, -1), (0, 1))
QUEEN_DIRS: tuple[tuple[int, int], ...] = BISHOP_DIRS + ROOK_DIRS

_SLIDER_DIRS: dict[PieceType, tuple[tuple[int, int], ...]] = {
    PieceType.BISHOP: BISHOP_DIRS,
    PieceType.ROOK: ROOK_DIRS,
    PieceType.QUEEN: QUEEN_DIRS,
}

_PROMOTION_TYPES: tuple[PieceType, ...] = (
    PieceType.QUEEN,
    PieceType.ROOK,
    PieceType.BISHOP,
    PieceType.KNIGHT,
)

_KING_START_COL = 4


def pawn_direction(color: Color) -> int:
    """Row step of a pawn advance: White moves up the grid, Black down."""
    return -1 if color == Color.WHITE else 1


def home_row(color: Color) -> int:
    return 7 if color == Color.WHITE else 0


# -- Attack detection -------------------------------------------------------


def is_square_attacked(board: Board, sq: Square, attacker: Color) -> bool:
    """Whether any piece of *attacker* attacks *sq*."""
    row, col = sq

    # A pawn attacks diagonally forward, so look one row behind *sq*.
    pawn_row = row - pawn_direction(attacker)
    for dc in (-1, 1):
        origin = (pawn_row, col + dc)
        if not is_valid_square(origin):
            continue
        if board[origin] == Piece(PieceType.PAWN, attacker):
            return True

    for offsets, piece_type in (
        (KNIGHT_OFFSETS, PieceType.KNIGHT),
        (KING_OFFSETS, PieceType.KING),
    ):
        for dr, dc in offsets:
            origin = (row + dr, col + dc)
            if not is_valid_square(origin):
                continue
            if board[origin] == Piece(piece_type, attacker):
                return True

    for dirs, sliders in (
        (BISHOP_DIRS, (PieceType.BISHOP, PieceType.QUEEN)),
        (ROOK_DIRS, (PieceType.ROOK, PieceType.QUEEN)),
    ):
        for dr, dc in dirs:
            r, c = row + dr, col + dc
            while 0 <= r < 8 and 0 <= c < 8:
                piece = board[(r, c)]
                if piece is not None:
                    if piece.owner == attacker and piece.piece_type in sliders:
                        return True
                    break
                r += dr
                c += dc
    return False


def is_in_check(board: Board, player: Color) -> bool:
    """Whether *player*'s king is attacked.

    A board without that king is never in check.
    """
    kings = board.pieces(player, PieceType.KING)
    if not kings:
        return False
    return is_square_attacked(board, kings[0], player.opposite)


# -- Move generation --------------------------------------------------------


def pseudo_legal_moves(
    player: Color,
    board: Board,
    castling: CastlingRights,
    en_passant: Square | None,
) -> list[Move]:
    """All moves for *player* that obey piece movement, ignoring king safety.

    Castling is the exception: it is only produced when the king neither
    starts on, passes over nor lands on an attacked square.
    """
    moves: list[Move] = []
    for sq, piece in board.occupied():
        if piece.owner != player:
            continue
        if piece.piece_type == PieceType.PAWN:
            _gen_pawn(board, sq, player, en_passant, moves)
        elif piece.piece_type == PieceType.KNIGHT:
            _gen_steps(board, sq, player, KNIGHT_OFFSETS, moves)
        elif piece.piece_type == PieceType.KING:
            _gen_steps(board, sq, player, KING_OFFSETS, moves)
            _gen_castling(board, sq, player, castling, moves)
        else:
            _gen_sliding(board, sq, player, _SLIDER_DIRS[piece.piece_type], moves)
    return moves


def legal_moves(
    player: Color,
    board: Board,
    castling: CastlingRights,
    en_passant: Square | None,
) -> list[Move]:
    """All strictly legal moves for *player*."""
    legal: list[Move] = []
    for move in pseudo_legal_moves(player, board, castling, en_passant):
        result = apply_move(board, move, player, castling)
        if not is_in_check(result.board, player):
            legal.append(move)
    return legal


def game_status(
    board: Board,
    player: Color,
    castling: CastlingRights,
    en_passant: Square | None,
) -> GameStatus:
    """Classify the position for *player*, the side to move."""
    in_check = is_in_check(board, player)
    if not legal_moves(player, board, castling, en_passant):
        return GameStatus.CHECKMATE if in_check else GameStatus.STALEMATE
    return GameStatus.CHECK if in_check else GameStatus.PLAYING


def winner(status: GameStatus, player: Color) -> Color | None:
    """The side that won when *player* to move is in *status*."""
    if status == GameStatus.CHECKMATE:
        return player.opposite
    return None


# -- Generators -------------------------------------------------------------


def _add_target(
    board: Board,
    from_sq: Square,
    to_sq: Square,
    player: Color,
    moves: list[Move],
) -> None:
    if not is_valid_square(to_sq):
        return
    target = board[to_sq]
    if target is None or target.owner != player:
        moves.append(Move(from_sq, to_sq))


def _add_pawn_move(
    from_sq: Square,
    to_sq: Square,
    player: Color,
    moves: list[Move],
) -> None:
    if to_sq[0] == home_row(player.opposite):
        moves.extend(Move(from_sq, to_sq, promo) for promo in _PROMOTION_TYPES)
    else:
        moves.append(Move(from_sq, to_sq))


def _gen_pawn(
    board: Board,
    sq: Square,
    player: Color,
    en_passant: Square | None,
    moves: list[Move],
) -> None:
    row, col = sq
    step = pawn_direction(player)
    start_row = home_row(player) + step

    one = (row + step, col)
    if is_valid_square(one) and board.is_empty(one):
        _add_pawn_move(sq, one, player, moves)
        two = (row + 2 * step, col)
        if row == start_row and board.is_empty(two):
            moves.append(Move(sq, two))

    for dc in (-1, 1):
        target_sq = (row + step, col + dc)
        if not is_valid_square(target_sq):
            continue
        target = board[target_sq]
        if target is not None and target.owner != player:
            _add_pawn_move(sq, target_sq, player, moves)
        elif target is None and target_sq == en_passant:
            victim = board[(row, col + dc)]
            if victim == Piece(PieceType.PAWN, player.opposite):
                moves.append(Move(sq, target_sq))


def _gen_steps(
    board: Board,
    sq: Square,
    player: Color,
    offsets: tuple[tuple[int, int], ...],
    moves: list[Move],
) -> None:
    row, col = sq
    for dr, dc in offsets:
        _add_target(board, sq, (row + dr, col + dc), player, moves)


def _gen_sliding(
    board: Board,
    sq: Square,
    player: Color,
    directions: tuple[tuple[int, int], ...],
    moves: list[Move],
) -> None:
    row, col = sq
    for dr, dc in directions:
        r, c = row + dr, col + dc
        while 0 <= r < 8 and 0 <= c < 8:
            target = board[(r, c)]
            if target is None:
                moves.append(Move(sq, (r, c)))
            else:
                if target.owner != player:
                    moves.append(Move(sq, (r, c)))
                break
            r += dr
            c += dc


def _gen_castling(
    board: Board,
    sq: Square,
    player: Color,
    castling: CastlingRights,
    moves: list[Move],
) -> None:
    row = home_row(player)
    if sq != (row, _KING_START_COL):
        return
    enemy = player.opposite
    rook = Piece(PieceType.ROOK, player)

    sides = (
        (CastlingRights.kingside(player), 7, (5, 6), (5, 6)),
        (CastlingRights.queenside(player), 0, (1, 2, 3), (3, 2)),
    )
    in_check: bool | None = None
    for right, rook_col, between, king_path in sides:
        if not castling & right or board[(row, rook_col)] != rook:
            continue
        if any(not board.is_empty((row, c)) for c in between):
            continue
        if in_check is None:
            in_check = is_square_attacked(board, sq, enemy)
        if in_check:
            return
        if any(is_square_attacked(board, (row, c), enemy) for c in king_path):
            continue
        moves.append(Move(sq, (row, king_path[-1])))
