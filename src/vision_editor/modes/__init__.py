"""Mode state machine: shared types plus per-mode key handlers."""

from .base_mode import CommandLine, KeyInput, Mode, ModeBus, ModeContext, ModeResult
from . import command_mode, insert_mode, normal_mode

__all__ = [
    "CommandLine",
    "KeyInput",
    "Mode",
    "ModeBus",
    "ModeContext",
    "ModeResult",
    "normal_mode",
    "insert_mode",
    "command_mode",
]
