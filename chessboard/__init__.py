"""Chessboard package: board state, move rules, history and the click controller.

Usage examples:
    from chessboard import initial_position, is_legal_move
    from chessboard import GameController
"""
from __future__ import annotations

from .types import Color, PieceKind, Piece, Move, Position, Square
from .errors import ChessBoardError, OutOfBoundsError, KingNotFoundError
from .board import BoardState, initial_position
from .rules import (
    is_legal_move,
    is_checkmate,
    legal_destinations,
    attackers_of,
    belongs_to_side_to_move,
)
from .history import MoveHistory
from .controller import (
    GameController,
    TurnPhase,
    SelectionResult,
    MoveStatus,
    MoveOutcome,
    ClickAction,
    ClickOutcome,
)

__all__ = [
    "Color", "PieceKind", "Piece", "Move", "Position", "Square",
    "ChessBoardError", "OutOfBoundsError", "KingNotFoundError",
    "BoardState", "initial_position",
    "is_legal_move", "is_checkmate", "legal_destinations", "attackers_of",
    "belongs_to_side_to_move",
    "MoveHistory",
    "GameController", "TurnPhase", "SelectionResult", "MoveStatus",
    "MoveOutcome", "ClickAction", "ClickOutcome",
]
