"""Screen cursor tracking and viewport scrolling."""

from __future__ import annotations

from contextlib import contextmanager
from dataclasses import dataclass
from typing import Iterator, Optional, Tuple

from .document import Document
from .history import Action, History

Cursor = Tuple[int, int]  # (row, column), viewport-relative


@dataclass(frozen=True, slots=True)
class CursorPosition:
    """Screen cursor before and after one edit, with the scroll offsets in effect."""

    old: Cursor
    new: Cursor
    old_scroll: int = 0
    new_scroll: int = 0


class CursorCoordinator:
    """Owns the screen cursor and maps it onto the document.

    Movement that would leave the document is ignored and reported as
    ``False``. Vertical movement at the viewport edge scrolls the document
    one line and shifts the screen row back by one before resolving the
    target line, so the document position does not jump.
    """

    def __init__(
        self,
        document: Document,
        *,
        history: Optional[History[CursorPosition]] = None,
        position: Cursor = (0, 0),
    ) -> None:
        self.document = document
        self.history: History[CursorPosition] = (
            history if history is not None else History()
        )
        self.position: Cursor = position
        self.sticky_column: Optional[int] = None

    @property
    def row(self) -> int:
        return self.position[0]

    @property
    def col(self) -> int:
        return self.position[1]

    @property
    def viewport_height(self) -> int:
        return self.document.viewport_height

    @property
    def document_position(self) -> Cursor:
        row, col = self.position
        return (row + self.document.scroll_offset, col)

    def move_left(self) -> bool:
        row, col = self.position
        if col <= 0 or self.document.get_line(row) is None:
            return False
        self.position = (row, col - 1)
        self.sticky_column = None
        return True

    def move_right(self) -> bool:
        row, col = self.position
        line = self.document.get_line(row)
        if line is None or col + 1 > len(line):
            return False
        self.position = (row, col + 1)
        self.sticky_column = None
        return True

    def move_up(self) -> bool:
        row, col = self.position
        if row <= 0:
            if not self.document.move_up():
                return False
            row += 1
        target = row - 1
        line = self.document.get_line(target)
        if line is None:
            return False
        self._land(target, col, line)
        return True

    def move_down(self) -> bool:
        row, col = self.position
        if row >= self.viewport_height - 1 and self.document.move_down(row):
            row -= 1
        target = row + 1
        line = self.document.get_line(target)
        if line is None:
            return False
        self._land(target, col, line)
        return True

    def _land(self, row: int, col: int, line: str) -> None:
        desired = self.sticky_column if self.sticky_column is not None else col
        if desired <= len(line):
            self.position = (row, desired)
            self.sticky_column = None
        else:
            self.position = (row, len(line))
            self.sticky_column = desired

    def reveal(self, row: int, col: int) -> None:
        """Place the cursor at a viewport row, scrolling until it is visible."""

        height = self.viewport_height
        while row >= height and self.document.move_down(height - 1):
            row -= 1
        while row < 0 and self.document.move_up():
            row += 1
        row = max(0, min(row, height - 1))
        last_row = self.document.length - 1 - self.document.scroll_offset
        row = max(0, min(row, last_row))
        line = self.document.get_line(row) or ""
        self.position = (row, max(0, min(col, len(line))))
        self.sticky_column = None

    def home(self) -> None:
        """Park the cursor at the end of the last visible line."""

        visible = self.document.visible_lines()
        row = max(0, len(visible) - 1)
        self.position = (row, len(visible[row]) if visible else 0)
        self.sticky_column = None

    def resize(self, height: int) -> None:
        self.document.viewport_height = max(1, height)
        self.reveal(*self.position)

    @contextmanager
    def tracking(self) -> Iterator[None]:
        """Record one cursor entry per document edit made inside the block."""

        before = self.position
        before_scroll = self.document.scroll_offset
        edits_before = self.document.edit_count
        try:
            yield
        finally:
            added = self.document.edit_count - edits_before
            entry = CursorPosition(
                old=before,
                new=self.position,
                old_scroll=before_scroll,
                new_scroll=self.document.scroll_offset,
            )
            for _ in range(added):
                self.history.update(entry, Action.DO)

    def undo(self) -> bool:
        entry = self.history.last_from(Action.UNDO)
        if entry is None:
            return False
        self.history.update(entry, Action.UNDO)
        self._restore(entry.old, entry.old_scroll)
        return True

    def redo(self) -> bool:
        entry = self.history.last_from(Action.REDO)
        if entry is None:
            return False
        self.history.update(entry, Action.REDO)
        self._restore(entry.new, entry.new_scroll)
        return True

    def _restore(self, position: Cursor, scroll: int) -> None:
        row, col = position
        self.reveal(row + scroll - self.document.scroll_offset, col)


__all__ = ["Cursor", "CursorPosition", "CursorCoordinator"]
