"""Insert-mode editing verbs: typing, Backspace, Enter and Tab."""

from __future__ import annotations

from vision_editor.buffer.pairing import closeable, is_brace_pair, is_pair, openeable
from vision_editor.keymaps import ResolutionMatch
from vision_editor.modes.base_mode import ModeContext, ModeResult


def _edited(status: str) -> ModeResult:
    return ModeResult(consumed=True, status=status, render=True)


def insert_text(context: ModeContext, char: str) -> ModeResult:
    """Type ``char`` at the cursor, consulting the pairing rules."""

    document, cursor = context.document, context.cursor
    row, col = cursor.position
    if document.get_line(row) is None:
        return _edited("blocked")

    with cursor.tracking():
        auto_pair = context.config.auto_pair
        if auto_pair and openeable(char) is not None and document.get_char(row, col) == char:
            cursor.reveal(row, col + 1)
            return _edited("step_over")

        document.insert_char(row, col, char)
        closer = closeable(char) if auto_pair else None
        if closer is not None:
            document.insert_char(row, col + 1, closer)
        cursor.reveal(row, col + 1)
    return _edited("insert")


def backspace(context: ModeContext, match: ResolutionMatch) -> ModeResult:
    del match
    document, cursor = context.document, context.cursor
    row, col = cursor.position
    line = document.get_line(row)
    if line is None:
        return _edited("blocked")

    with cursor.tracking():
        if col == 0:
            if row == 0:
                if not document.move_up():
                    return _edited("blocked")
                row += 1
            previous = document.get_line(row - 1) or ""
            document.set_line(row - 1, previous + line)
            document.delete_line(row)
            cursor.reveal(row - 1, len(previous))
            return _edited("join")

        left = line[col - 1]
        right = line[col] if col < len(line) else None
        if context.config.auto_pair and is_pair(left, right):
            document.delete_char(row, col)
        document.delete_char(row, col - 1)
        cursor.reveal(row, col - 1)
    return _edited("delete")


def newline(context: ModeContext, match: ResolutionMatch) -> ModeResult:
    del match
    document, cursor = context.document, context.cursor
    row, col = cursor.position
    line = document.get_line(row)
    if line is None:
        return _edited("blocked")

    first, second = line[:col], line[col:]
    indent = first[: len(first) - len(first.lstrip())]
    with cursor.tracking():
        if second:
            document.set_line(row, first)
        if is_brace_pair(first[-1:] or None, second[:1] or None):
            document.insert_line(row + 1, indent)
            document.insert_line(row + 2, indent + second)
            cursor.reveal(row + 1, len(indent))
            _soft_tab(context)
            return _edited("open_block")

        document.insert_line(row + 1, indent + second)
        cursor.reveal(row + 1, len(indent))
    return _edited("newline")


def tab(context: ModeContext, match: ResolutionMatch) -> ModeResult:
    del match
    if context.document.get_line(context.cursor.row) is None:
        return _edited("blocked")
    with context.cursor.tracking():
        _soft_tab(context)
    return _edited("tab")


def _soft_tab(context: ModeContext) -> None:
    """Insert spaces one at a time up to the next tab stop."""

    width = context.config.tab_width
    for step in range(width):
        row, col = context.cursor.position
        if step != 0 and col % width == 0:
            return
        context.document.insert_char(row, col, " ")
        context.cursor.reveal(row, col + 1)


__all__ = ["insert_text", "backspace", "newline", "tab"]
