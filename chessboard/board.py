"""
Board state: the 8x8 grid of occupants and the side to move.

The board knows nothing about legality. ``apply_move`` relocates whatever is
on the source square unconditionally; the rules module decides whether a
move may be applied.
"""
from __future__ import annotations

from typing import Iterator, List, Optional, Sequence, Tuple

from chessboard.errors import OutOfBoundsError
from chessboard.types import BOARD_SIZE, Color, Move, Piece, PieceKind, Position, Square, in_bounds

Grid = List[List[Square]]

_BACK_RANK = (
    PieceKind.ROOK, PieceKind.KNIGHT, PieceKind.BISHOP, PieceKind.QUEEN,
    PieceKind.KING, PieceKind.BISHOP, PieceKind.KNIGHT, PieceKind.ROOK,
)


def _check(row: int, col: int) -> None:
    if not in_bounds(row, col):
        raise OutOfBoundsError(row, col)


class BoardState:
    """Authoritative board contents and turn tracking."""

    def __init__(self, grid: Optional[Grid] = None, side_to_move: Color = Color.WHITE):
        if grid is None:
            grid = [[None] * BOARD_SIZE for _ in range(BOARD_SIZE)]
        if len(grid) != BOARD_SIZE or any(len(row) != BOARD_SIZE for row in grid):
            raise ValueError("Board must be 8 rows of 8 squares")
        self.grid: Grid = [list(row) for row in grid]
        self.side_to_move: Color = Color(side_to_move)

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------
    @classmethod
    def empty(cls, side_to_move: Color = Color.WHITE) -> "BoardState":
        return cls(side_to_move=side_to_move)

    @classmethod
    def from_codes(cls, rows: Sequence[Sequence[str]],
                   side_to_move: Color = Color.WHITE) -> "BoardState":
        """Build a board from rows of two-letter codes ("" for empty)."""
        if len(rows) != BOARD_SIZE:
            raise ValueError("Board must be 8 rows of 8 squares")
        grid: Grid = []
        for row in rows:
            if len(row) != BOARD_SIZE:
                raise ValueError("Board must be 8 rows of 8 squares")
            grid.append([Piece.from_code(code) if code else None for code in row])
        return cls(grid, side_to_move)

    def to_codes(self) -> List[List[str]]:
        return [[p.code if p else "" for p in row] for row in self.grid]

    def copy(self) -> "BoardState":
        return BoardState(self.grid, self.side_to_move)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------
    def occupant(self, row: int, col: int) -> Square:
        _check(row, col)
        return self.grid[row][col]

    def is_empty(self, row: int, col: int) -> bool:
        return self.occupant(row, col) is None

    def pieces(self, color: Optional[Color] = None) -> Iterator[Tuple[Position, Piece]]:
        """Yield ``((row, col), piece)`` in row-major order, optionally for one colour."""
        for r in range(BOARD_SIZE):
            for c in range(BOARD_SIZE):
                piece = self.grid[r][c]
                if piece is not None and (color is None or piece.color == color):
                    yield (r, c), piece

    def find_king(self, color: Color) -> Optional[Position]:
        king = Piece(color, PieceKind.KING)
        found: Optional[Position] = None
        # Last match wins when scanning row-major.
        for pos, piece in self.pieces(color):
            if piece == king:
                found = pos
        return found

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------
    def set_occupant(self, row: int, col: int, piece: Square) -> None:
        _check(row, col)
        self.grid[row][col] = piece

    def apply_move(self, from_sq: Position, to_sq: Position) -> Square:
        """Move the occupant of ``from_sq`` onto ``to_sq`` and return what was there."""
        sr, sc = from_sq
        tr, tc = to_sq
        _check(sr, sc)
        _check(tr, tc)
        captured = self.grid[tr][tc]
        self.grid[tr][tc] = self.grid[sr][sc]
        self.grid[sr][sc] = None
        return captured

    def toggle_turn(self) -> None:
        self.side_to_move = self.side_to_move.opponent

    def reverse(self, move: Move, captured_at_target: Square) -> None:
        """Undo ``move``: put the piece back and restore ``captured_at_target``."""
        sr, sc = move.from_sq
        tr, tc = move.to_sq
        _check(sr, sc)
        _check(tr, tc)
        self.grid[sr][sc] = self.grid[tr][tc]
        self.grid[tr][tc] = captured_at_target

    # ------------------------------------------------------------------
    # Display
    # ------------------------------------------------------------------
    def render(self, use_unicode: bool = False, show_coordinates: bool = True) -> str:
        lines: List[str] = []
        if show_coordinates:
            lines.append("    " + "  ".join(str(c) for c in range(BOARD_SIZE)))
        for r, row in enumerate(self.grid):
            cells = []
            for piece in row:
                if piece is None:
                    cells.append(" ." if not use_unicode else " ·")
                elif use_unicode:
                    cells.append(" " + piece.glyph)
                else:
                    cells.append(piece.code)
            prefix = f"{r}  " if show_coordinates else ""
            lines.append(prefix + " ".join(cells))
        return "\n".join(lines)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BoardState):
            return NotImplemented
        return self.grid == other.grid and self.side_to_move == other.side_to_move

    def __repr__(self) -> str:
        return f"BoardState(side_to_move={self.side_to_move.name})"

    def __str__(self) -> str:
        return self.render()


def initial_position() -> BoardState:
    """Standard starting layout: Black on rows 0-1, White on rows 6-7, White to move."""
    board = BoardState.empty(Color.WHITE)
    for c, kind in enumerate(_BACK_RANK):
        board.grid[0][c] = Piece(Color.BLACK, kind)
        board.grid[1][c] = Piece(Color.BLACK, PieceKind.PAWN)
        board.grid[6][c] = Piece(Color.WHITE, PieceKind.PAWN)
        board.grid[7][c] = Piece(Color.WHITE, kind)
    return board
