"""Cursor movement actions shared by Normal and Insert mode."""

from __future__ import annotations

from typing import Callable

from vision_editor.buffer import CursorCoordinator
from vision_editor.keymaps import ResolutionMatch
from vision_editor.modes.base_mode import ModeContext, ModeResult


def _move(context: ModeContext, step: Callable[[CursorCoordinator], bool]) -> ModeResult:
    scroll_before = context.document.scroll_offset
    moved = step(context.cursor)
    scrolled = context.document.scroll_offset != scroll_before
    return ModeResult(
        consumed=True,
        status="moved" if moved else "blocked",
        render=scrolled,
    )


def move_left(context: ModeContext, match: ResolutionMatch) -> ModeResult:
    del match
    return _move(context, CursorCoordinator.move_left)


def move_right(context: ModeContext, match: ResolutionMatch) -> ModeResult:
    del match
    return _move(context, CursorCoordinator.move_right)


def move_up(context: ModeContext, match: ResolutionMatch) -> ModeResult:
    del match
    return _move(context, CursorCoordinator.move_up)


def move_down(context: ModeContext, match: ResolutionMatch) -> ModeResult:
    del match
    return _move(context, CursorCoordinator.move_down)


__all__ = ["move_left", "move_right", "move_up", "move_down"]
