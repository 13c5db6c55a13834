"""Piece value object."""

from __future__ import annotations

from dataclasses import dataclass

from chessai.core.enums import Color, PieceType

# FEN character ↔ (PieceType, Color)
_CHAR_MAP: dict[str, tuple[PieceType, Color]] = {
    "P": (PieceType.PAWN, Color.WHITE),
    "N": (PieceType.KNIGHT, Color.WHITE),
    "B": (PieceType.BISHOP, Color.WHITE),
    "R": (PieceType.ROOK, Color.WHITE),
    "Q": (PieceType.QUEEN, Color.WHITE),
    "K": (PieceType.KING, Color.WHITE),
    "p": (PieceType.PAWN, Color.BLACK),
    "n": (PieceType.KNIGHT, Color.BLACK),
    "b": (PieceType.BISHOP, Color.BLACK),
    "r": (PieceType.ROOK, Color.BLACK),
    "q": (PieceType.QUEEN, Color.BLACK),
    "k": (PieceType.KING, Color.BLACK),
}

_SYMBOLS = "♙♘♗♖♕♔♟♞♝♜♛♚"

_FEN_CHARS: dict[tuple[PieceType, Color], str] = {v: k for k, v in _CHAR_MAP.items()}


@dataclass(frozen=True, slots=True)
class Piece:
    """Immutable value object representing a chess piece."""

    piece_type: PieceType
    owner: Color

    def __str__(self) -> str:
        """FEN character (uppercase = white, lowercase = black)."""
        return _FEN_CHARS[(self.piece_type, self.owner)]

    @classmethod
    def from_char(cls, char: str) -> Piece:
        """Create piece from FEN character, e.g. 'N' → white knight."""
        try:
            ptype, owner = _CHAR_MAP[char]
        except KeyError:
            raise ValueError(f"Invalid piece character: {char!r}") from None
        return cls(ptype, owner)

    @property
    def symbol(self) -> str:
        """Unicode chess symbol, e.g. ♞."""
        return _SYMBOLS[int(self.owner) * 6 + int(self.piece_type) - 1]

    def with_owner(self, owner: Color) -> Piece:
        return Piece(self.piece_type, owner)
