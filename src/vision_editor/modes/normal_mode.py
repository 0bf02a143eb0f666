"""Normal mode: navigation, undo/redo and mode switches."""

from __future__ import annotations

from .base_mode import KeyInput, Mode, ModeContext, ModeResult
from .keymap_helpers import execute_match, pending_result, resolve_key


def handle_key(context: ModeContext, key: KeyInput) -> ModeResult:
    result = resolve_key(context, Mode.NORMAL, key)
    if result.status == "match" and result.match:
        return execute_match(context, result.match)
    if result.status == "pending":
        return pending_result()
    return ModeResult(consumed=False, status="miss", message="unhandled")


def on_enter(context: ModeContext, previous: Mode | None) -> None:
    del previous
    context.pending.clear()
