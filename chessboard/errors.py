"""
Exception types raised by the chess board core.
"""
from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from chessboard.types import Color


class ChessBoardError(Exception):
    """Base class for errors raised by the chessboard package."""


class OutOfBoundsError(ChessBoardError, IndexError):
    """A row or column outside 0..7 was passed to the board."""

    def __init__(self, row: int, col: int) -> None:
        super().__init__(f"square ({row}, {col}) is off the board")
        self.row = row
        self.col = col


class KingNotFoundError(ChessBoardError, LookupError):
    """The king of the requested side is no longer on the board."""

    def __init__(self, color: "Color") -> None:
        super().__init__(f"no {color.display_name} king on the board")
        self.color = color
