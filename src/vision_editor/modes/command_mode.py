"""Command-line mode: edit the text after ``:`` and run it on Enter."""

from __future__ import annotations

from vision_editor.actions import command as command_actions

from .base_mode import KeyInput, Mode, ModeContext, ModeResult
from .keymap_helpers import execute_match, pending_result, resolve_key


def handle_key(context: ModeContext, key: KeyInput) -> ModeResult:
    if context.command_line.error is not None:
        return command_actions.acknowledge_error(context)

    result = resolve_key(context, Mode.COMMAND, key)
    if result.status == "match" and result.match:
        return execute_match(context, result.match)
    if result.status == "pending":
        return pending_result()

    char = key.printable
    if char is not None:
        return command_actions.append_command_text(context, char)
    return ModeResult(consumed=False, status="miss", message="unhandled")


def on_enter(context: ModeContext, previous: Mode | None) -> None:
    del previous
    context.command_line.clear()
    context.pending.clear()
    context.bus.emit("command.start", None)


def on_exit(context: ModeContext, next_mode: Mode | None) -> None:
    del next_mode
    context.bus.emit("command.end", context.command_line.text)
    context.command_line.clear()
    context.pending.clear()
