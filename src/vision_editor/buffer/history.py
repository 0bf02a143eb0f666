"""Undo/redo log shared by content edits and cursor positions."""

from __future__ import annotations

from collections import deque
from enum import Enum
from typing import Deque, Generic, Optional, TypeVar

T = TypeVar("T")


class Action(str, Enum):
    """How a mutation reached the document."""

    DO = "do"
    UNDO = "undo"
    REDO = "redo"


class History(Generic[T]):
    """Two-stack edit log.

    ``done`` holds applied entries and ``undone`` holds entries removed by
    undo, most recent last in both. With ``clear_redo_on_edit`` disabled a
    fresh edit leaves ``undone`` untouched, so a later redo can replay a stale
    entry.
    """

    def __init__(
        self,
        *,
        limit: Optional[int] = None,
        clear_redo_on_edit: bool = True,
    ) -> None:
        if limit is not None and limit <= 0:
            raise ValueError("limit must be positive")
        self.limit = limit
        self.clear_redo_on_edit = clear_redo_on_edit
        self._done: Deque[T] = deque(maxlen=limit)
        self._undone: Deque[T] = deque(maxlen=limit)

    @property
    def done(self) -> tuple[T, ...]:
        return tuple(self._done)

    @property
    def undone(self) -> tuple[T, ...]:
        return tuple(self._undone)

    def __len__(self) -> int:
        return len(self._done)

    def update(self, entry: T, action: Action) -> None:
        if action is Action.DO:
            self._done.append(entry)
            if self.clear_redo_on_edit:
                self._undone.clear()
        elif action is Action.UNDO:
            if self._done:
                self._undone.append(self._done.pop())
        elif action is Action.REDO:
            if self._undone:
                self._done.append(self._undone.pop())

    def last_from(self, action: Action) -> Optional[T]:
        """Entry the next ``action`` would replay, if any."""

        if action is Action.UNDO:
            return self._done[-1] if self._done else None
        return self._undone[-1] if self._undone else None

    def can_undo(self) -> bool:
        return bool(self._done)

    def can_redo(self) -> bool:
        return bool(self._undone)

    def clear(self) -> None:
        self._done.clear()
        self._undone.clear()


__all__ = ["Action", "History"]
