"""Pure move application used by the search."""

from __future__ import annotations

from typing import NamedTuple

from chessai.core.board import Board
from chessai.core.enums import CastlingRights, Color, PieceType
from chessai.core.move import Move
from chessai.core.piece import Piece
from chessai.core.types import Square


class SimulatedMove(NamedTuple):
    """State after a hypothetical move."""

    board: Board
    castling: CastlingRights
    en_passant: Square | None


def apply_move(
    board: Board,
    move: Move,
    mover: Color,
    castling: CastlingRights,
) -> SimulatedMove:
    """Play *move* for *mover* on a copy of *board*.

    *move* must come from a legal-move source; an empty origin square is not
    checked for. Castling rights only ever lose bits here. Taking an
    opponent's rook on its corner leaves the opponent's rights alone.
    """
    from_row, from_col = move.from_sq
    to_row, to_col = move.to_sq
    captured = board[move.to_sq]

    piece = board[move.from_sq]
    assert piece is not None, f"No piece on origin square of {move}"
    if move.promotion is not None:
        piece = Piece(move.promotion, piece.owner)

    new_board = board.copy()
    new_board[move.to_sq] = piece
    new_board[move.from_sq] = None

    if piece.piece_type == PieceType.PAWN and from_col != to_col and captured is None:
        # En passant: the taken pawn sits beside the origin, on the mover's side.
        taken_row = to_row - 1 if mover == Color.BLACK else to_row + 1
        new_board[(taken_row, to_col)] = None

    if piece.piece_type == PieceType.KING and abs(to_col - from_col) == 2:
        rook_from, rook_to = (7, 5) if to_col > from_col else (0, 3)
        new_board[(from_row, rook_to)] = new_board[(from_row, rook_from)]
        new_board[(from_row, rook_from)] = None

    new_castling = castling
    if piece.piece_type == PieceType.KING:
        new_castling &= ~CastlingRights.both(mover)
    elif piece.piece_type == PieceType.ROOK:
        if from_col == 0:
            new_castling &= ~CastlingRights.queenside(mover)
        elif from_col == 7:
            new_castling &= ~CastlingRights.kingside(mover)

    en_passant: Square | None = None
    if piece.piece_type == PieceType.PAWN and abs(to_row - from_row) == 2:
        en_passant = ((from_row + to_row) // 2, from_col)

    return SimulatedMove(new_board, new_castling, en_passant)
