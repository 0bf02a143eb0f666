"""Editing verbs bound to keys by the default keymaps."""

from .core import enter_command_mode, enter_insert_mode, exit_to_normal_mode, redo, undo
from .motion import move_down, move_left, move_right, move_up
from .insert import backspace, insert_text, newline, tab
from .command import (
    acknowledge_error,
    append_command_text,
    cancel_command_line,
    command_backspace,
    submit_command_line,
)

__all__ = [
    "enter_insert_mode",
    "exit_to_normal_mode",
    "enter_command_mode",
    "undo",
    "redo",
    "move_left",
    "move_right",
    "move_up",
    "move_down",
    "insert_text",
    "backspace",
    "newline",
    "tab",
    "append_command_text",
    "command_backspace",
    "cancel_command_line",
    "submit_command_line",
    "acknowledge_error",
]
