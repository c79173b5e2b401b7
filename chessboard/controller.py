"""
Interaction controller: turns board clicks into selections, moves and undos.

A presentation layer calls ``click`` (or ``select_square``/``attempt_move``
directly) with board coordinates and re-reads ``board`` afterwards.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Callable, List, Optional

from config import GameRulesSettings, get_game_rules
from chessboard.board import BoardState, initial_position
from chessboard.errors import KingNotFoundError
from chessboard.history import MoveHistory
from chessboard.rules import belongs_to_side_to_move, is_checkmate, is_legal_move, legal_destinations
from chessboard.types import Color, Move, Position, Square

logger = logging.getLogger(__name__)

CheckmateListener = Callable[[Color], None]


class TurnPhase(str, Enum):
    WAITING_FOR_SELECTION = "WAITING_FOR_SELECTION"
    PIECE_SELECTED = "PIECE_SELECTED"


class SelectionResult(str, Enum):
    ACCEPTED = "ACCEPTED"
    REJECTED_WRONG_TURN = "REJECTED_WRONG_TURN"
    REJECTED_EMPTY = "REJECTED_EMPTY"
    # A piece is already selected; clear it or move it first.
    REJECTED_ALREADY_SELECTED = "REJECTED_ALREADY_SELECTED"


class MoveStatus(str, Enum):
    APPLIED = "APPLIED"
    REJECTED = "REJECTED"


class ClickAction(str, Enum):
    SELECTED = "SELECTED"
    IGNORED = "IGNORED"
    CLEARED = "CLEARED"
    MOVED = "MOVED"
    REJECTED = "REJECTED"


@dataclass(frozen=True)
class MoveOutcome:
    """Result of ``attempt_move``."""
    status: MoveStatus
    captured: Square = None
    checkmate: bool = False
    king_captured: bool = False

    @property
    def applied(self) -> bool:
        return self.status is MoveStatus.APPLIED


@dataclass(frozen=True)
class ClickOutcome:
    action: ClickAction
    move: Optional[MoveOutcome] = None


REJECTED = MoveOutcome(MoveStatus.REJECTED)


class GameController:
    """Owns the board, the history and the selection state of one game."""

    def __init__(self, rules: Optional[GameRulesSettings] = None,
                 board: Optional[BoardState] = None):
        self.rules = rules if rules is not None else get_game_rules()
        self.board: BoardState = board if board is not None else initial_position()
        self.history = MoveHistory()
        self.selected: Optional[Position] = None
        self.checkmated: Optional[Color] = None
        self._listeners: List[CheckmateListener] = []

    @property
    def phase(self) -> TurnPhase:
        if self.selected is None:
            return TurnPhase.WAITING_FOR_SELECTION
        return TurnPhase.PIECE_SELECTED

    @property
    def side_to_move(self) -> Color:
        return self.board.side_to_move

    def new_game(self) -> None:
        """Reset to the initial position with an empty history."""
        self.board = initial_position()
        self.history.clear()
        self.selected = None
        self.checkmated = None
        logger.info("New game started")

    def add_checkmate_listener(self, listener: CheckmateListener) -> None:
        self._listeners.append(listener)

    # ------------------------------------------------------------------
    # Selection and moves
    # ------------------------------------------------------------------
    def select_square(self, row: int, col: int) -> SelectionResult:
        """
        Select the piece on (row, col) if it belongs to the side to move.

        Only acts while waiting for a selection; an existing selection is
        left untouched.
        """
        if self.selected is not None:
            return SelectionResult.REJECTED_ALREADY_SELECTED
        piece = self.board.occupant(row, col)
        if piece is None:
            return SelectionResult.REJECTED_EMPTY
        if piece.color != self.board.side_to_move:
            return SelectionResult.REJECTED_WRONG_TURN
        self.selected = (row, col)
        return SelectionResult.ACCEPTED

    def clear_selection(self) -> None:
        self.selected = None

    def selected_destinations(self) -> List[Position]:
        """Legal targets of the selected piece, for highlighting."""
        if self.selected is None:
            return []
        return legal_destinations(self.board, self.selected)

    def attempt_move(self, selected: Position, target: Position) -> MoveOutcome:
        """
        Apply ``selected -> target`` if it is legal for the side to move.

        On success the turn passes to the other side and the checkmate probe
        runs against it. Listeners are notified when the probe succeeds.
        """
        self.selected = None
        if not belongs_to_side_to_move(self.board, selected):
            return REJECTED
        piece = self.board.occupant(*selected)
        if not is_legal_move(self.board, selected, target):
            logger.debug("Rejected %s %s -> %s", piece.code, selected, target)
            return REJECTED

        captured = self.board.apply_move(selected, target)
        move = Move(selected, target, captured, piece)
        self.history.push(move)
        self.board.toggle_turn()
        logger.debug("Applied %s", move)

        defender = self.board.side_to_move
        try:
            mate = self.is_checkmate(defender)
        except KingNotFoundError:
            logger.warning("%s king is no longer on the board", defender.display_name)
            return MoveOutcome(MoveStatus.APPLIED, captured, king_captured=True)

        if mate:
            self.checkmated = defender
            logger.info("%s is CHECKMATED!", defender.display_name)
            if self.rules.notify_checkmate:
                for listener in list(self._listeners):
                    listener(defender)
        else:
            self.checkmated = None
        return MoveOutcome(MoveStatus.APPLIED, captured, checkmate=mate)

    def click(self, row: int, col: int) -> ClickOutcome:
        """Feed one board click through the selection state machine."""
        if self.selected is None:
            if self.select_square(row, col) is SelectionResult.ACCEPTED:
                return ClickOutcome(ClickAction.SELECTED)
            return ClickOutcome(ClickAction.IGNORED)

        if self.selected == (row, col):
            self.clear_selection()
            return ClickOutcome(ClickAction.CLEARED)

        outcome = self.attempt_move(self.selected, (row, col))
        if outcome.applied:
            return ClickOutcome(ClickAction.MOVED, outcome)
        return ClickOutcome(ClickAction.REJECTED, outcome)

    # ------------------------------------------------------------------
    # Undo and probes
    # ------------------------------------------------------------------
    def undo(self) -> bool:
        """Revert the most recent move. Returns False if nothing was reverted."""
        if not self.rules.allow_undo:
            return False
        move = self.history.pop()
        if move is None:
            return False
        self.board.reverse(move, move.captured)
        self.board.toggle_turn()
        self.selected = None
        self.checkmated = None
        logger.debug("Undid %s", move)
        return True

    def is_checkmate(self, side: Color) -> bool:
        return is_checkmate(self.board, side)

    def status_text(self) -> str:
        text = f"{self.board.side_to_move.display_name} to move"
        if self.checkmated is not None:
            text += f" - {self.checkmated.display_name} is CHECKMATED!"
        return text
