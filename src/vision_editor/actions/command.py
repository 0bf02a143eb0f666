"""Actions that edit and evaluate the ``:`` command line."""

from __future__ import annotations

from vision_editor import commands
from vision_editor.errors import VisionError
from vision_editor.keymaps import ResolutionMatch
from vision_editor.modes.base_mode import Mode, ModeContext, ModeResult

ACKNOWLEDGE_SUFFIX = " - PRESS ANY KEY TO CONTINUE"


def append_command_text(context: ModeContext, char: str) -> ModeResult:
    context.command_line.text += char
    return ModeResult(consumed=True, status="editing")


def command_backspace(context: ModeContext, match: ResolutionMatch) -> ModeResult:
    del match
    line = context.command_line
    if not line.text:
        return ModeResult(consumed=True, switch_to=Mode.NORMAL, status="command_cancel")
    line.text = line.text[:-1]
    return ModeResult(consumed=True, status="editing")


def cancel_command_line(context: ModeContext, match: ResolutionMatch) -> ModeResult:
    del match
    context.command_line.clear()
    return ModeResult(consumed=True, switch_to=Mode.NORMAL, status="command_cancel")


def submit_command_line(context: ModeContext, match: ResolutionMatch) -> ModeResult:
    del match
    line = context.command_line
    text = line.text.strip()
    line.text = ""
    context.bus.emit("command.submit", text)
    if not text:
        return ModeResult(consumed=True, switch_to=Mode.NORMAL, status="command_empty")

    try:
        outcome = commands.execute(text, context.document)
    except VisionError as exc:
        line.error = f"{exc}{ACKNOWLEDGE_SUFFIX}"
        context.bus.emit("command.error", {"command": text, "error": exc})
        return ModeResult(
            consumed=True,
            status="command_error",
            message=line.error,
            render=True,
            error=True,
        )

    if outcome.saved:
        context.bus.emit("command.write", {"path": str(context.document.path)})
    if outcome.quit:
        context.bus.emit("command.quit", {"command": text})
        return ModeResult(
            consumed=True,
            switch_to=Mode.NORMAL,
            status="command_quit",
            message=text,
            quit=True,
        )
    return ModeResult(
        consumed=True,
        switch_to=Mode.NORMAL,
        status="command_ok",
        message=text,
        render=True,
    )


def acknowledge_error(context: ModeContext) -> ModeResult:
    """Dismiss a displayed command error; any key does it."""

    context.command_line.clear()
    return ModeResult(
        consumed=True, switch_to=Mode.NORMAL, status="command_acknowledged", render=True
    )


__all__ = [
    "append_command_text",
    "command_backspace",
    "cancel_command_line",
    "submit_command_line",
    "acknowledge_error",
    "ACKNOWLEDGE_SUFFIX",
]
