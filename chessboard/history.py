"""
Move history: a last-in-first-out stack of applied moves.
"""
from __future__ import annotations

from typing import Iterator, List, Optional

from chessboard.types import Move


class MoveHistory:
    """Stack of applied moves with their captured pieces, for undo."""

    def __init__(self) -> None:
        self._entries: List[Move] = []

    def push(self, move: Move) -> None:
        self._entries.append(move)

    def pop(self) -> Optional[Move]:
        """Remove and return the most recent move, or None if there is none."""
        if not self._entries:
            return None
        return self._entries.pop()

    def peek(self) -> Optional[Move]:
        return self._entries[-1] if self._entries else None

    def clear(self) -> None:
        self._entries.clear()

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[Move]:
        return iter(list(self._entries))

    def __bool__(self) -> bool:
        return bool(self._entries)
