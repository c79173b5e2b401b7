"""
Move legality and the checkmate probe.

Every function here is stateless and only reads the board it is given.
Legality is purely geometric plus occupancy: moves that leave the mover's
own king attacked are still legal.
"""
from __future__ import annotations

from typing import List

from chessboard.board import BoardState
from chessboard.errors import KingNotFoundError
from chessboard.types import BOARD_SIZE, Color, Piece, PieceKind, Position


def _sign(x: int) -> int:
    return (x > 0) - (x < 0)


def _path_clear(board: BoardState, from_sq: Position, to_sq: Position) -> bool:
    """True if every square strictly between the two positions is empty."""
    sr, sc = from_sq
    tr, tc = to_sq
    dr = _sign(tr - sr)
    dc = _sign(tc - sc)
    r, c = sr + dr, sc + dc
    while (r, c) != (tr, tc):
        if not board.is_empty(r, c):
            return False
        r += dr
        c += dc
    return True


def _pawn_move(board: BoardState, piece: Piece, from_sq: Position, to_sq: Position) -> bool:
    direction = piece.color.pawn_direction
    dr = to_sq[0] - from_sq[0]
    dc = to_sq[1] - from_sq[1]
    if dr != direction:
        return False
    target_empty = board.is_empty(*to_sq)
    if dc == 0:
        return target_empty
    if abs(dc) == 1:
        return not target_empty
    return False


def _knight_move(dr: int, dc: int) -> bool:
    return abs(dr * dc) == 2


def _diagonal_move(board: BoardState, from_sq: Position, to_sq: Position) -> bool:
    dr = to_sq[0] - from_sq[0]
    dc = to_sq[1] - from_sq[1]
    if dr == 0 or abs(dr) != abs(dc):
        return False
    return _path_clear(board, from_sq, to_sq)


def _straight_move(board: BoardState, from_sq: Position, to_sq: Position) -> bool:
    dr = to_sq[0] - from_sq[0]
    dc = to_sq[1] - from_sq[1]
    if (dr == 0) == (dc == 0):
        return False
    return _path_clear(board, from_sq, to_sq)


def _king_move(dr: int, dc: int) -> bool:
    return max(abs(dr), abs(dc)) == 1


def is_legal_move(board: BoardState, from_sq: Position, to_sq: Position) -> bool:
    """
    Decide whether the piece on ``from_sq`` may move to ``to_sq``.

    Turn ownership is not checked here; callers verify that ``from_sq`` holds
    a piece of the side to move (see ``belongs_to_side_to_move``).

    Raises:
        OutOfBoundsError: if either position is off the board.
    """
    piece = board.occupant(*from_sq)
    target = board.occupant(*to_sq)
    if piece is None:
        return False
    if target is not None and target.color == piece.color:
        return False

    dr = to_sq[0] - from_sq[0]
    dc = to_sq[1] - from_sq[1]
    kind = piece.kind

    if kind is PieceKind.PAWN:
        return _pawn_move(board, piece, from_sq, to_sq)
    elif kind is PieceKind.KNIGHT:
        return _knight_move(dr, dc)
    elif kind is PieceKind.BISHOP:
        return _diagonal_move(board, from_sq, to_sq)
    elif kind is PieceKind.ROOK:
        return _straight_move(board, from_sq, to_sq)
    elif kind is PieceKind.QUEEN:
        return _straight_move(board, from_sq, to_sq) or _diagonal_move(board, from_sq, to_sq)
    elif kind is PieceKind.KING:
        return _king_move(dr, dc)
    raise ValueError(f"No movement rule for piece kind {kind!r}")


def legal_destinations(board: BoardState, from_sq: Position) -> List[Position]:
    """All squares the piece on ``from_sq`` may move to, in row-major order."""
    return [
        (r, c)
        for r in range(BOARD_SIZE)
        for c in range(BOARD_SIZE)
        if is_legal_move(board, from_sq, (r, c))
    ]


def belongs_to_side_to_move(board: BoardState, pos: Position) -> bool:
    piece = board.occupant(*pos)
    return piece is not None and piece.color == board.side_to_move


def attackers_of(board: BoardState, target: Position, color: Color) -> List[Position]:
    """Squares of ``color`` pieces that could legally move onto ``target``."""
    return [pos for pos, _ in board.pieces(color) if is_legal_move(board, pos, target)]


def is_checkmate(board: BoardState, side: Color) -> bool:
    """
    One-ply checkmate probe: can any enemy piece capture ``side``'s king
    on the next move?

    Escapes, blocks and captures of the attacker are not considered, so this
    is really a "king is attacked" test.

    Raises:
        KingNotFoundError: if ``side`` has no king on the board.
    """
    king_sq = board.find_king(side)
    if king_sq is None:
        raise KingNotFoundError(side)
    return bool(attackers_of(board, king_sq, side.opponent))
