"""Insert mode: character-level editing until Esc."""

from __future__ import annotations

from vision_editor.actions import insert as insert_actions

from .base_mode import KeyInput, Mode, ModeContext, ModeResult
from .keymap_helpers import execute_match, pending_result, resolve_key


def handle_key(context: ModeContext, key: KeyInput) -> ModeResult:
    result = resolve_key(context, Mode.INSERT, key)
    if result.status == "match" and result.match:
        outcome = execute_match(context, result.match)
        outcome.render = True
        return outcome
    if result.status == "pending":
        return pending_result()

    char = key.printable
    if char is not None:
        return insert_actions.insert_text(context, char)
    return ModeResult(consumed=False, status="miss", message="unhandled")


def on_exit(context: ModeContext, next_mode: Mode | None) -> None:
    del next_mode
    context.pending.clear()
