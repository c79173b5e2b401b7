"""
Type definitions for the chess board core.

Pieces are identified by a colour and a kind, both closed enumerations.
Square content is ``Optional[Piece]`` where ``None`` is an empty square.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple

# Basic type aliases
Position = Tuple[int, int]  # (row, col), row 0 is Black's back rank

BOARD_SIZE = 8


class Color(str, Enum):
    WHITE = "W"
    BLACK = "B"

    @property
    def opponent(self) -> "Color":
        return Color.BLACK if self is Color.WHITE else Color.WHITE

    @property
    def display_name(self) -> str:
        return "White" if self is Color.WHITE else "Black"

    @property
    def pawn_direction(self) -> int:
        """Row delta of a pawn step; White advances toward row 0."""
        return -1 if self is Color.WHITE else 1


class PieceKind(str, Enum):
    PAWN = "P"
    KNIGHT = "N"
    BISHOP = "B"
    ROOK = "R"
    QUEEN = "Q"
    KING = "K"


_UNICODE_GLYPHS = {
    (Color.WHITE, PieceKind.KING): "♔",
    (Color.WHITE, PieceKind.QUEEN): "♕",
    (Color.WHITE, PieceKind.ROOK): "♖",
    (Color.WHITE, PieceKind.BISHOP): "♗",
    (Color.WHITE, PieceKind.KNIGHT): "♘",
    (Color.WHITE, PieceKind.PAWN): "♙",
    (Color.BLACK, PieceKind.KING): "♚",
    (Color.BLACK, PieceKind.QUEEN): "♛",
    (Color.BLACK, PieceKind.ROOK): "♜",
    (Color.BLACK, PieceKind.BISHOP): "♝",
    (Color.BLACK, PieceKind.KNIGHT): "♞",
    (Color.BLACK, PieceKind.PAWN): "♟",
}


@dataclass(frozen=True)
class Piece:
    """A piece of a given colour and kind."""
    color: Color
    kind: PieceKind

    @property
    def code(self) -> str:
        """Two-letter code, e.g. ``"WP"`` or ``"BK"``."""
        return self.color.value + self.kind.value

    @property
    def glyph(self) -> str:
        return _UNICODE_GLYPHS[(self.color, self.kind)]

    @classmethod
    def from_code(cls, code: str) -> "Piece":
        if not isinstance(code, str) or len(code) != 2:
            raise ValueError(f"piece code must be two characters, got {code!r}")
        try:
            return cls(Color(code[0]), PieceKind(code[1]))
        except ValueError:
            raise ValueError(f"unknown piece code {code!r}") from None

    def __str__(self) -> str:
        return self.code


Square = Optional[Piece]


@dataclass(frozen=True)
class Move:
    """
    A move as recorded in the history.

    ``captured`` is whatever stood on ``to_sq`` before the move and is what
    undo puts back.
    """
    from_sq: Position
    to_sq: Position
    captured: Square = None
    piece: Square = None

    @property
    def is_capture(self) -> bool:
        return self.captured is not None

    def __str__(self) -> str:
        mover = self.piece.code if self.piece else "??"
        sep = "x" if self.is_capture else "-"
        return f"{mover} {self.from_sq[0]},{self.from_sq[1]}{sep}{self.to_sq[0]},{self.to_sq[1]}"


def in_bounds(row: int, col: int) -> bool:
    return 0 <= row < BOARD_SIZE and 0 <= col < BOARD_SIZE
