"""Helper utilities for keymap-driven modes."""

from __future__ import annotations

from vision_editor.keymaps import KeymapResolver, ResolutionMatch, ResolutionResult
from vision_editor.runtime import telemetry

from .base_mode import KeyInput, Mode, ModeContext, ModeResult


def require_keymap_resolver(context: ModeContext) -> KeymapResolver:
    resolver = context.extras.get("keymap_resolver")
    if not isinstance(resolver, KeymapResolver):
        raise RuntimeError("ModeContext.extras missing 'keymap_resolver'")
    return resolver


def resolve_key(context: ModeContext, mode: Mode, key: KeyInput) -> ResolutionResult:
    """Feed ``key`` into the pending sequence and resolve it for ``mode``.

    The pending buffer is cleared on a match or a miss.
    """

    context.pending.append(key.token)
    result = require_keymap_resolver(context).resolve(mode, tuple(context.pending))
    if result.status != "pending":
        context.pending.clear()
    return result


def execute_match(context: ModeContext, match: ResolutionMatch) -> ModeResult:
    with telemetry.span(
        "keymaps::execute",
        component="keymaps",
        metadata={"binding_id": match.binding.id, "action": match.action.id},
    ):
        outcome = match.action(context, match)

    if isinstance(outcome, ModeResult):
        return outcome
    return ModeResult(consumed=True)


def pending_result() -> ModeResult:
    return ModeResult(consumed=True, status="pending", message="awaiting_sequence")


__all__ = [
    "require_keymap_resolver",
    "resolve_key",
    "execute_match",
    "pending_result",
]
