"""Built-in keymaps that seed each mode with vi-like defaults."""

from __future__ import annotations

from typing import Iterable, Mapping, Sequence

from vision_editor.actions import command as command_actions
from vision_editor.actions import core as core_actions
from vision_editor.actions import insert as insert_actions
from vision_editor.actions import motion as motion_actions

from .models import ActionRef, Binding, KeySequence
from .registry import KeymapRegistry

DEFAULT_ACTIONS: tuple[ActionRef, ...] = (
    ActionRef(
        id="core.enter_insert",
        handler=core_actions.enter_insert_mode,
        description="Enter insert mode",
    ),
    ActionRef(
        id="core.exit_to_normal",
        handler=core_actions.exit_to_normal_mode,
        description="Return to normal mode",
    ),
    ActionRef(
        id="core.enter_command",
        handler=core_actions.enter_command_mode,
        description="Enter command-line mode",
    ),
    ActionRef(id="core.undo", handler=core_actions.undo, description="Undo last edit"),
    ActionRef(id="core.redo", handler=core_actions.redo, description="Redo last undo"),
    ActionRef(id="motion.left", handler=motion_actions.move_left, description="Cursor left"),
    ActionRef(id="motion.right", handler=motion_actions.move_right, description="Cursor right"),
    ActionRef(id="motion.up", handler=motion_actions.move_up, description="Cursor up"),
    ActionRef(id="motion.down", handler=motion_actions.move_down, description="Cursor down"),
    ActionRef(
        id="insert.backspace",
        handler=insert_actions.backspace,
        description="Delete left of the cursor or join lines",
    ),
    ActionRef(
        id="insert.newline",
        handler=insert_actions.newline,
        description="Split the line at the cursor",
    ),
    ActionRef(
        id="insert.tab",
        handler=insert_actions.tab,
        description="Indent to the next tab stop",
    ),
    ActionRef(
        id="command.submit_line",
        handler=command_actions.submit_command_line,
        description="Evaluate the active command line",
    ),
    ActionRef(
        id="command.backspace",
        handler=command_actions.command_backspace,
        description="Erase the last command character or abort",
    ),
    ActionRef(
        id="command.cancel",
        handler=command_actions.cancel_command_line,
        description="Abort the command line",
    ),
)


def _bind(mode: str, key: str, action_id: str, description: str) -> Binding:
    return Binding(
        id=f"{mode}.{action_id.split('.', 1)[1]}.{key.lower()}",
        mode=mode,
        sequence=KeySequence.from_strings(key),
        action_id=action_id,
        description=description,
    )


_MOTIONS: tuple[tuple[str, str], ...] = (
    ("LEFT", "motion.left"),
    ("RIGHT", "motion.right"),
    ("UP", "motion.up"),
    ("DOWN", "motion.down"),
)

DEFAULT_BINDINGS: tuple[Binding, ...] = (
    Binding(
        id="normal.enter_insert",
        mode="normal",
        sequence=KeySequence.from_strings("i"),
        action_id="core.enter_insert",
        description="Enter insert mode",
    ),
    Binding(
        id="normal.enter_command",
        mode="normal",
        sequence=KeySequence.from_strings(":"),
        action_id="core.enter_command",
        description="Enter command-line mode",
    ),
    Binding(
        id="normal.undo",
        mode="normal",
        sequence=KeySequence.from_strings("u"),
        action_id="core.undo",
        description="Undo last edit",
    ),
    Binding(
        id="normal.redo",
        mode="normal",
        sequence=KeySequence.from_strings("ctrl+r"),
        action_id="core.redo",
        description="Redo last undone edit",
    ),
    _bind("normal", "h", "motion.left", "Cursor left"),
    _bind("normal", "j", "motion.down", "Cursor down"),
    _bind("normal", "k", "motion.up", "Cursor up"),
    _bind("normal", "l", "motion.right", "Cursor right"),
    *(_bind("normal", key, action, f"Cursor {key.lower()}") for key, action in _MOTIONS),
    Binding(
        id="insert.exit_escape",
        mode="insert",
        sequence=KeySequence.from_strings("ESC"),
        action_id="core.exit_to_normal",
        description="Leave insert mode",
    ),
    Binding(
        id="insert.backspace",
        mode="insert",
        sequence=KeySequence.from_strings("BACKSPACE"),
        action_id="insert.backspace",
        description="Delete left of the cursor",
    ),
    Binding(
        id="insert.newline",
        mode="insert",
        sequence=KeySequence.from_strings("ENTER"),
        action_id="insert.newline",
        description="Split the line",
    ),
    Binding(
        id="insert.tab",
        mode="insert",
        sequence=KeySequence.from_strings("TAB"),
        action_id="insert.tab",
        description="Soft tab",
    ),
    *(_bind("insert", key, action, f"Cursor {key.lower()}") for key, action in _MOTIONS),
    Binding(
        id="command.exit_escape",
        mode="command",
        sequence=KeySequence.from_strings("ESC"),
        action_id="command.cancel",
        description="Cancel command line",
    ),
    Binding(
        id="command.backspace",
        mode="command",
        sequence=KeySequence.from_strings("BACKSPACE"),
        action_id="command.backspace",
        description="Erase the last character",
    ),
    Binding(
        id="command.submit_enter",
        mode="command",
        sequence=KeySequence.from_strings("ENTER"),
        action_id="command.submit_line",
        description="Submit the command line",
    ),
)


def load_default_keymaps(
    registry: KeymapRegistry,
    *,
    replace: bool = False,
    extra_bindings: Iterable[Binding] | None = None,
    include_actions: Sequence[str] | None = None,
    exclude_actions: Sequence[str] | None = None,
    include_bindings: Sequence[str] | None = None,
    exclude_bindings: Sequence[str] | None = None,
    per_mode_overrides: Mapping[str, Iterable[Binding]] | None = None,
) -> None:
    """Register built-in actions and bindings for every mode."""

    allowed_actions = _build_filters(include_actions, exclude_actions)
    allowed_bindings = _build_filters(include_bindings, exclude_bindings)

    for action in DEFAULT_ACTIONS:
        if not _selected(action.id, allowed_actions):
            continue
        registry.register_action(action, replace=replace)

    for binding in DEFAULT_BINDINGS:
        if not _selected(binding.id, allowed_bindings):
            continue
        registry.register_binding(binding, replace=replace)

    if extra_bindings:
        for binding in extra_bindings:
            registry.register_binding(binding, replace=replace)

    if per_mode_overrides:
        for mode, bindings in per_mode_overrides.items():
            for binding in bindings:
                if binding.mode != mode:
                    raise ValueError(
                        f"Override binding '{binding.id}' must target mode '{mode}'"
                    )
                registry.register_binding(binding, replace=True)


def _build_filters(
    include: Sequence[str] | None, exclude: Sequence[str] | None
) -> tuple[set[str] | None, set[str]]:
    include_set = set(include) if include else None
    exclude_set = set(exclude or ())
    return include_set, exclude_set


def _selected(item_id: str, filters: tuple[set[str] | None, set[str]]) -> bool:
    include, exclude = filters
    if include is not None and item_id not in include:
        return False
    if item_id in exclude:
        return False
    return True


__all__ = ["load_default_keymaps", "DEFAULT_ACTIONS", "DEFAULT_BINDINGS"]
