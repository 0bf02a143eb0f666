"""Core action implementations shared across modes."""

from __future__ import annotations

from vision_editor.keymaps import ResolutionMatch
from vision_editor.modes.base_mode import Mode, ModeContext, ModeResult


def enter_insert_mode(context: ModeContext, match: ResolutionMatch) -> ModeResult:
    del context, match
    return ModeResult(consumed=True, switch_to=Mode.INSERT, message="enter_insert")


def exit_to_normal_mode(context: ModeContext, match: ResolutionMatch) -> ModeResult:
    del context, match
    return ModeResult(consumed=True, switch_to=Mode.NORMAL, message="exit_insert")


def enter_command_mode(context: ModeContext, match: ResolutionMatch) -> ModeResult:
    del context, match
    return ModeResult(consumed=True, switch_to=Mode.COMMAND, message="enter_command")


def undo(context: ModeContext, match: ResolutionMatch) -> ModeResult:
    del match
    if not context.document.undo():
        return ModeResult(consumed=True, status="undo_empty")
    context.cursor.undo()
    context.bus.emit("document.undo", context.cursor.position)
    return ModeResult(consumed=True, status="undo", render=True)


def redo(context: ModeContext, match: ResolutionMatch) -> ModeResult:
    del match
    if not context.document.redo():
        return ModeResult(consumed=True, status="redo_empty")
    context.cursor.redo()
    context.bus.emit("document.redo", context.cursor.position)
    return ModeResult(consumed=True, status="redo", render=True)


__all__ = [
    "enter_insert_mode",
    "exit_to_normal_mode",
    "enter_command_mode",
    "undo",
    "redo",
]
